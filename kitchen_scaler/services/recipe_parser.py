import math
from typing import List, Optional, Sequence
from kitchen_scaler.models import Ingredient
from kitchen_scaler.core.units import UNIT_TABLE, UnitTable, get_singular_plural_unit
from kitchen_scaler.core.logging_config import get_logger
from kitchen_scaler.services.line_patterns import LinePattern, RawMatch, build_default_patterns
from kitchen_scaler.utils.line_normalizer import normalize_segment
from kitchen_scaler.utils.name_cleaner import clean_ingredient_name
from kitchen_scaler.utils.quantity_parser import parse_quantity
from kitchen_scaler.utils.segmenter import split_segments

logger = get_logger(__name__)


class RecipeParser:
    def __init__(self, units: UnitTable = UNIT_TABLE, patterns: Optional[Sequence[LinePattern]] = None):
        self.units = units
        self.patterns: List[LinePattern] = list(patterns) if patterns is not None else build_default_patterns(units)

    def parse(self, text: str) -> List[Ingredient]:
        """Parse pasted recipe text into ingredients, best effort.

        Args:
            text: Raw multi-line recipe text.

        Returns:
            Ingredients in input order. Lines that cannot be parsed are skipped,
            so unparseable input gives an empty list rather than an error.
        """
        ingredients = []
        segments = split_segments(text)
        for segment in segments:
            ingredient = self.parse_segment(segment)
            if ingredient is not None:
                ingredients.append(ingredient)

        logger.debug(f"Parsed {len(ingredients)} of {len(segments)} segments")
        return ingredients

    def parse_segment(self, segment: str) -> Optional[Ingredient]:
        """Run the pattern cascade over one segment; first valid match wins."""
        normalized = normalize_segment(segment)
        if not normalized:
            return None

        for pattern in self.patterns:
            raw = pattern.try_match(normalized)
            if raw is None:
                continue
            ingredient = self._build_ingredient(raw)
            if ingredient is not None:
                return ingredient

        logger.debug(f"Dropped unparseable segment: '{segment}'")
        return None

    def _build_ingredient(self, raw: RawMatch) -> Optional[Ingredient]:
        quantity = parse_quantity(raw.qty_token)
        if math.isnan(quantity) or math.isinf(quantity) or quantity <= 0:
            return None

        unit = ""
        if raw.unit_token:
            canonical = self.units.canonical(raw.unit_token)
            if canonical is None:
                return None
            unit = get_singular_plural_unit(quantity, canonical, self.units)

        return Ingredient(
            quantity=quantity,
            unit=unit,
            name=clean_ingredient_name(raw.name),
            raw_qty=raw.qty_token.strip()
        )


recipe_parser = RecipeParser()


def parse_recipe(text: str, units: UnitTable = UNIT_TABLE) -> List[Ingredient]:
    """Primary entry point: raw recipe text -> ingredients. Never raises."""
    parser = recipe_parser if units is UNIT_TABLE else RecipeParser(units)
    return parser.parse(text)
