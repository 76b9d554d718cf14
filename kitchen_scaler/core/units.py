from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple


class UnitClass(str, Enum):
    WEIGHT = "weight"
    VOLUME = "volume"
    COUNT = "count"


@dataclass(frozen=True)
class UnitEntry:
    alias: str
    canonical: str
    unit_class: UnitClass
    to_base: float


# --- Canonical Units ---
# to_base is grams for weight, milliliters for volume
CANONICAL_UNITS: Dict[str, Tuple[UnitClass, float]] = {
    "gram": (UnitClass.WEIGHT, 1.0),
    "kilogram": (UnitClass.WEIGHT, 1000.0),
    "ounce": (UnitClass.WEIGHT, 28.35),
    "pound": (UnitClass.WEIGHT, 453.6),
    "milliliter": (UnitClass.VOLUME, 1.0),
    "liter": (UnitClass.VOLUME, 1000.0),
    "teaspoon": (UnitClass.VOLUME, 4.93),
    "tablespoon": (UnitClass.VOLUME, 14.79),
    "cup": (UnitClass.VOLUME, 236.59),
    "fluid ounce": (UnitClass.VOLUME, 29.57),
    "pint": (UnitClass.VOLUME, 473.18),
    "quart": (UnitClass.VOLUME, 946.35),
    "gallon": (UnitClass.VOLUME, 3785.41),
    # Informal count words, only meaningful to the count-style patterns
    "large": (UnitClass.COUNT, 1.0),
    "medium": (UnitClass.COUNT, 1.0),
    "small": (UnitClass.COUNT, 1.0),
    "whole": (UnitClass.COUNT, 1.0),
}

# --- Aliases ---
# Case matters for single letters: "T" is a tablespoon, "t" a teaspoon.
UNIT_ALIASES: Dict[str, str] = {
    "g": "gram", "gr": "gram", "grams": "gram", "gramme": "gram", "grammes": "gram",
    "kg": "kilogram", "kgs": "kilogram", "kilo": "kilogram", "kilos": "kilogram",
    "kilograms": "kilogram",
    "oz": "ounce", "ozs": "ounce", "ounces": "ounce",
    "lb": "pound", "lbs": "pound", "pounds": "pound",
    "ml": "milliliter", "mls": "milliliter", "milliliters": "milliliter",
    "millilitre": "milliliter", "millilitres": "milliliter",
    "l": "liter", "L": "liter", "liters": "liter", "litre": "liter", "litres": "liter",
    "t": "teaspoon", "tsp": "teaspoon", "tsps": "teaspoon", "teaspoons": "teaspoon",
    "T": "tablespoon", "tbsp": "tablespoon", "Tbsp": "tablespoon", "tbsps": "tablespoon",
    "tbs": "tablespoon", "tbl": "tablespoon", "tblsp": "tablespoon",
    "tablespoons": "tablespoon",
    "c": "cup", "C": "cup", "cups": "cup",
    "floz": "fluid ounce", "fl oz": "fluid ounce", "fl. oz": "fluid ounce",
    "fl. oz.": "fluid ounce", "fluid ounces": "fluid ounce",
    "pt": "pint", "pts": "pint", "pints": "pint",
    "qt": "quart", "qts": "quart", "quarts": "quart",
    "gal": "gallon", "gals": "gallon", "gallons": "gallon",
}

# Singular -> plural, used for display only
PLURAL_UNITS: Dict[str, str] = {
    "cup": "cups",
    "tablespoon": "tablespoons",
    "teaspoon": "teaspoons",
    "ounce": "ounces",
    "pound": "pounds",
    "gram": "grams",
    "kilogram": "kilograms",
    "milliliter": "milliliters",
    "liter": "liters",
    "fluid ounce": "fluid ounces",
    "pint": "pints",
    "quart": "quarts",
    "gallon": "gallons",
}


class UnitTable:
    """Immutable alias -> canonical unit registry."""

    def __init__(
        self,
        canonical_units: Mapping[str, Tuple[UnitClass, float]] = CANONICAL_UNITS,
        aliases: Mapping[str, str] = UNIT_ALIASES,
        plurals: Mapping[str, str] = PLURAL_UNITS,
    ):
        entries: Dict[str, UnitEntry] = {}
        for canonical, (unit_class, to_base) in canonical_units.items():
            entries[canonical] = UnitEntry(canonical, canonical, unit_class, to_base)
        for plural in plurals.values():
            canonical = _singular_of(plural, plurals)
            unit_class, to_base = canonical_units[canonical]
            entries[plural] = UnitEntry(plural, canonical, unit_class, to_base)
        for alias, canonical in aliases.items():
            unit_class, to_base = canonical_units[canonical]
            entries[alias] = UnitEntry(alias, canonical, unit_class, to_base)

        self._entries: Mapping[str, UnitEntry] = MappingProxyType(entries)
        self._plurals: Mapping[str, str] = MappingProxyType(dict(plurals))

    def resolve(self, token: Optional[str]) -> Optional[UnitEntry]:
        """Look a unit token up by exact alias first, then lowercased."""
        if not token:
            return None
        token = token.strip()
        entry = self._entries.get(token)
        if entry is None:
            entry = self._entries.get(token.lower())
        return entry

    def is_unit(self, token: Optional[str]) -> bool:
        return self.resolve(token) is not None

    def canonical(self, token: Optional[str]) -> Optional[str]:
        entry = self.resolve(token)
        return entry.canonical if entry else None

    def plural_of(self, canonical: str) -> str:
        return self._plurals.get(canonical, canonical)

    def entries(self) -> List[UnitEntry]:
        return sorted(self._entries.values(), key=lambda e: (e.unit_class.value, e.canonical, e.alias))

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.is_unit(token)


def _singular_of(plural: str, plurals: Mapping[str, str]) -> str:
    for singular, candidate in plurals.items():
        if candidate == plural:
            return singular
    raise KeyError(plural)


UNIT_TABLE = UnitTable()


def get_singular_plural_unit(quantity: float, unit: str, units: UnitTable = UNIT_TABLE) -> str:
    """Pick the display form of a unit: singular only when quantity is exactly 1."""
    if not unit:
        return ""
    canonical = units.canonical(unit) or unit
    if quantity == 1:
        return canonical
    return units.plural_of(canonical)
