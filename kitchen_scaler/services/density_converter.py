from dataclasses import dataclass
from typing import Dict, Mapping, Optional
from kitchen_scaler.core.densities import BUILTIN_DENSITIES, lookup_density
from kitchen_scaler.core.units import UNIT_TABLE, UnitClass, UnitTable
from kitchen_scaler.utils.numbers import round_half_up

CONVERTIBLE_CLASSES = (UnitClass.WEIGHT, UnitClass.VOLUME)

# One-tap calculator conversion cycle
QUICK_CONVERT_TARGETS: Dict[str, str] = {
    "gram": "ounce", "ounce": "pound", "pound": "kilogram", "kilogram": "gram",
    "cup": "milliliter", "milliliter": "liter", "liter": "tablespoon",
    "tablespoon": "teaspoon", "teaspoon": "cup",
}
RESULT_PRECISION = 6


@dataclass(frozen=True)
class Conversion:
    result: float
    to_unit: str
    density: Optional[float] = None


def convert_detailed(
    value: float,
    from_unit: str,
    to_unit: str,
    ingredient_name: str = "water",
    custom_densities: Optional[Mapping[str, float]] = None,
    units: UnitTable = UNIT_TABLE,
    builtin_densities: Mapping[str, float] = BUILTIN_DENSITIES,
) -> Conversion:
    """Convert between units, bridging weight and volume with a density.

    Unknown or count units leave the value unchanged. The density table is
    rebuilt from ``builtin_densities`` + ``custom_densities`` on every call,
    custom entries winning, and falls back to water (1.0 g/ml).
    """
    source = units.resolve(from_unit)
    target = units.resolve(to_unit)
    if (
        source is None or target is None
        or source.unit_class not in CONVERTIBLE_CLASSES
        or target.unit_class not in CONVERTIBLE_CLASSES
    ):
        return Conversion(value, to_unit)

    base_value = value * source.to_base
    if source.unit_class == target.unit_class:
        return Conversion(base_value / target.to_base, target.canonical)

    density = lookup_density(ingredient_name, custom_densities, builtin_densities)
    if source.unit_class == UnitClass.WEIGHT:
        # grams -> milliliters
        return Conversion((base_value / density) / target.to_base, target.canonical, density)
    # milliliters -> grams
    return Conversion((base_value * density) / target.to_base, target.canonical, density)


def convert_with_density(
    value: float,
    from_unit: str,
    to_unit: str,
    ingredient_name: str = "water",
    custom_densities: Optional[Mapping[str, float]] = None,
    units: UnitTable = UNIT_TABLE,
) -> float:
    return convert_detailed(value, from_unit, to_unit, ingredient_name, custom_densities, units).result


def quick_convert(value: float, unit: str, units: UnitTable = UNIT_TABLE) -> Optional[Conversion]:
    """Calculator 'conv' key: convert to the next unit in the cycle.

    Units outside the cycle go volume -> grams or weight -> cups using water.
    Returns None when the unit is not a weight or volume unit.
    """
    entry = units.resolve(unit)
    if entry is None or entry.unit_class not in CONVERTIBLE_CLASSES:
        return None

    target = QUICK_CONVERT_TARGETS.get(entry.canonical)
    if target is None:
        target = "gram" if entry.unit_class == UnitClass.VOLUME else "cup"

    conversion = convert_detailed(value, entry.canonical, target, "water", None, units)
    return Conversion(round_half_up(conversion.result, RESULT_PRECISION), target, conversion.density)


def convert_ingredient_amount(
    value: float,
    unit: str,
    ingredient: str,
    custom_densities: Optional[Mapping[str, float]] = None,
    units: UnitTable = UNIT_TABLE,
) -> Optional[Conversion]:
    """Calculator 'of' key: volume of an ingredient -> grams, weight -> cups."""
    entry = units.resolve(unit)
    if entry is None or entry.unit_class not in CONVERTIBLE_CLASSES:
        return None

    target = "gram" if entry.unit_class == UnitClass.VOLUME else "cup"
    conversion = convert_detailed(value, entry.canonical, target, ingredient, custom_densities, units)
    return Conversion(round_half_up(conversion.result, RESULT_PRECISION), target, conversion.density)
