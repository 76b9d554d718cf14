import math
from typing import Dict, List, Tuple
from kitchen_scaler.core.units import UNIT_TABLE, UnitClass, UnitTable
from kitchen_scaler.utils.numbers import format_decimal, round_half_up

# canonical unit -> ordered (threshold, larger unit, divisor) steps.
# Order matters for cups: the gallon check runs before the quart check.
PRACTICAL_CONVERSIONS: Dict[str, List[Tuple[float, str, float]]] = {
    "teaspoon": [(3, "tablespoon", 3)],
    "tablespoon": [(16, "cup", 16)],
    "cup": [(16, "gallon", 16), (4, "quart", 4)],
    "quart": [(4, "gallon", 4)],
    "milliliter": [(1000, "liter", 1000)],
    "gram": [(1000, "kilogram", 1000)],
    "ounce": [(16, "pound", 16)],
}

KITCHEN_FRACTIONS: List[Tuple[float, str]] = [
    (0.125, "⅛"),
    (0.25, "¼"),
    (0.333, "⅓"),
    (0.5, "½"),
    (0.667, "⅔"),
    (0.75, "¾"),
]
FRACTION_TOLERANCE = 0.01

# canonical -> (singular, plural) shown to the cook
DISPLAY_UNITS: Dict[str, Tuple[str, str]] = {
    "gram": ("g", "g"),
    "kilogram": ("kg", "kg"),
    "milliliter": ("ml", "ml"),
    "liter": ("l", "l"),
    "ounce": ("oz", "oz"),
    "pound": ("lb", "lbs"),
    "fluid ounce": ("fl oz", "fl oz"),
}


def convert_to_practical_unit(qty: float, canonical: str) -> Tuple[float, str]:
    """Step a quantity up to larger units while it crosses a threshold."""
    while True:
        for threshold, larger, divisor in PRACTICAL_CONVERSIONS.get(canonical, []):
            if qty >= threshold:
                qty, canonical = qty / divisor, larger
                break
        else:
            return qty, canonical


def format_kitchen_quantity(qty: float, unit: str, units: UnitTable = UNIT_TABLE) -> str:
    """Render a scaled quantity for a cook: '¾ cup', '1.5 kg', '2,500 ml'.

    Args:
        qty: Scaled quantity.
        unit: Any unit alias or canonical name; unknown or count units pass through.
        units: Unit table used to resolve the unit.

    Returns:
        The display string. Identical inputs always give identical output.
    """
    if not qty > 0:
        return "a dash"
    if math.isinf(qty):
        return _render("∞", (unit or "").strip())

    entry = units.resolve(unit)
    if entry is None or entry.unit_class == UnitClass.COUNT:
        canonical = None
        converted = qty
    else:
        converted, canonical = convert_to_practical_unit(qty, entry.canonical)

    if converted < 1:
        for decimal, glyph in KITCHEN_FRACTIONS:
            if abs(converted - decimal) < FRACTION_TOLERANCE:
                return _render(glyph, _display_unit(canonical, unit, converted, units))

    if converted >= 1000:
        rounded = round_half_up(converted)
        number = f"{int(rounded):,}"
    elif converted >= 10:
        rounded = round_half_up(converted, 1)
        number = format_decimal(converted, 1)
    elif converted >= 1:
        rounded = round_half_up(converted, 2)
        number = format_decimal(converted, 2)
    else:
        rounded = round_half_up(converted, 3)
        number = format_decimal(converted, 3)

    return _render(number, _display_unit(canonical, unit, rounded, units))


def _display_unit(canonical, original_unit: str, value: float, units: UnitTable) -> str:
    if canonical is None:
        return (original_unit or "").strip()
    singular, plural = DISPLAY_UNITS.get(canonical, (canonical, units.plural_of(canonical)))
    return singular if value <= 1 else plural


def _render(number: str, unit: str) -> str:
    return f"{number} {unit}" if unit else number
