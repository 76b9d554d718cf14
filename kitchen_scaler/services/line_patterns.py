"""
Structural patterns for a single normalized ingredient segment.

Each pattern exposes ``try_match(segment)`` and returns a ``RawMatch`` holding
the name pieces and the raw quantity/unit tokens, or ``None``. The parser walks
``build_default_patterns()`` in priority order and keeps the first match that
also yields a positive quantity.
"""
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Pattern

from kitchen_scaler.core.units import UNIT_TABLE, UnitTable
from kitchen_scaler.utils.name_cleaner import clean_ingredient_name
from kitchen_scaler.utils.quantity_parser import FRACTION_GLYPHS

# Leading quantity: digits and glyphs, with "/", "." or "," allowed between digits
QTY_START = rf"[\d{FRACTION_GLYPHS}](?:[\d{FRACTION_GLYPHS}]|[/.,]\d)*"
# Quantity followed by space-separated numbers/fractions: "2 1/2", "1 ½"
QTY_SPACED = rf"{QTY_START}(?:\s+[\d/{FRACTION_GLYPHS}]+)*"
# Quantity whose trailing numbers may be glued or spaced: "2½", "1 1/2", "1 ½"
QTY_LOOSE = rf"{QTY_START}(?:[\s\d/{FRACTION_GLYPHS}]*[\d/{FRACTION_GLYPHS}])?"
# "fl oz" / "fl. oz" is the only multi-word unit
UNIT_TOKEN = r"(?:(?i:fl\.?\s+oz)|[a-zA-Z]+)"


@dataclass(frozen=True)
class RawMatch:
    name: str
    qty_token: str
    unit_token: Optional[str] = None
    pattern: str = ""


class LinePattern(ABC):
    name: str = "unknown"

    def __init__(self, units: UnitTable = UNIT_TABLE):
        self.units = units

    @abstractmethod
    def try_match(self, segment: str) -> Optional[RawMatch]:
        """
        Match one normalized segment.
        Must return None when the structure or the unit token does not fit.
        """
        pass


class RegexUnitPattern(LinePattern):
    """A regex pattern whose unit token must resolve in the unit table."""
    regex: Pattern

    def try_match(self, segment: str) -> Optional[RawMatch]:
        match = self.regex.match(segment)
        if not match:
            return None
        raw = self._extract(match)
        if not self.units.is_unit(raw.unit_token):
            return None
        return raw

    @abstractmethod
    def _extract(self, match: re.Match) -> RawMatch:
        pass


class SuffixGluedPattern(RegexUnitPattern):
    """'Baking powder 2½tsp'"""
    name = "suffix_glued"
    regex = re.compile(rf"^(.+?)\s+({QTY_LOOSE})\s*({UNIT_TOKEN})$")

    def _extract(self, match: re.Match) -> RawMatch:
        name, qty, unit = match.groups()
        return RawMatch(name, qty, unit, self.name)


class ParentheticalPattern(RegexUnitPattern):
    """'Butter (2 tbsp, softened) for the pan'"""
    name = "parenthetical"
    regex = re.compile(
        rf"^([^(]+)\(([^)]*?({QTY_START}[\d/\s{FRACTION_GLYPHS}]*)\s*({UNIT_TOKEN})[^)]*)\)(.*)$"
    )

    def _extract(self, match: re.Match) -> RawMatch:
        before, _, qty, unit, after = match.groups()
        name = f"{before.strip()} {after.strip()}".strip()
        return RawMatch(name, qty, unit, self.name)


class StandardPrefixPattern(RegexUnitPattern):
    """'2 cups flour'"""
    name = "standard_prefix"
    regex = re.compile(rf"^({QTY_SPACED})\s+({UNIT_TOKEN})\s+(.+)$")

    def _extract(self, match: re.Match) -> RawMatch:
        qty, unit, name = match.groups()
        return RawMatch(name, qty, unit, self.name)


class SeparatorPattern(RegexUnitPattern):
    """'Sugar = 200 g sifted', 'Milk: 1 cup', 'Salt ~ 1 tsp'"""
    name = "separator"
    regex = re.compile(rf"^(.+?)\s*[=:–>~]+\s*({QTY_LOOSE})\s*({UNIT_TOKEN})(.*)$")

    def _extract(self, match: re.Match) -> RawMatch:
        name, qty, unit, extras = match.groups()
        extras = extras.strip()
        full_name = f"{name.strip()} {extras}" if extras else name.strip()
        return RawMatch(full_name, qty, unit, self.name)


class BracketedPattern(RegexUnitPattern):
    """'2 cups flour [sifted]'"""
    name = "bracketed"
    regex = re.compile(rf"^({QTY_SPACED})\s+({UNIT_TOKEN})\s+([^\[]+)(?:\[([^\]]+)\])?$")

    def _extract(self, match: re.Match) -> RawMatch:
        qty, unit, name, extras = match.groups()
        full_name = f"{name.strip()} {extras.strip()}" if extras else name.strip()
        return RawMatch(full_name, qty, unit, self.name)


class CountQuantityFirstPattern(LinePattern):
    """'2 eggs'"""
    name = "count_quantity_first"
    regex = re.compile(rf"^({QTY_SPACED})\s+(.+)$")

    def try_match(self, segment: str) -> Optional[RawMatch]:
        match = self.regex.match(segment)
        if not match:
            return None
        qty, name = match.groups()
        return RawMatch(name, qty, None, self.name)


class CountNameFirstPattern(LinePattern):
    """'eggs 2', rejected when the name ends in a unit word ('flour cup 2')."""
    name = "count_name_first"
    regex = re.compile(rf"^(.+?)\s+({QTY_LOOSE})$")

    def try_match(self, segment: str) -> Optional[RawMatch]:
        match = self.regex.match(segment)
        if not match:
            return None
        name, qty = match.groups()
        words = clean_ingredient_name(name).lower().split()
        if words and self.units.is_unit(words[-1]):
            return None
        return RawMatch(name, qty, None, self.name)


PATTERN_ORDER = (
    SuffixGluedPattern,
    ParentheticalPattern,
    StandardPrefixPattern,
    SeparatorPattern,
    BracketedPattern,
    CountQuantityFirstPattern,
    CountNameFirstPattern,
)


def build_default_patterns(units: UnitTable = UNIT_TABLE) -> List[LinePattern]:
    return [pattern_cls(units) for pattern_cls in PATTERN_ORDER]
