import re
from typing import Dict, Optional

from kitchen_scaler.utils.numbers import parse_leading_float

WORD_NUMBERS: Dict[str, str] = {
    "one": "1", "two": "2", "three": "3", "four": "4", "five": "5",
    "six": "6", "seven": "7", "eight": "8", "nine": "9", "ten": "10",
}

VULGAR_FRACTIONS: Dict[str, str] = {
    "½": "0.5", "⅓": "0.333", "⅔": "0.667", "¼": "0.25", "¾": "0.75",
    "⅕": "0.2", "⅖": "0.4", "⅗": "0.6", "⅘": "0.8", "⅙": "0.167",
    "⅚": "0.833", "⅛": "0.125", "⅜": "0.375", "⅝": "0.625", "⅞": "0.875",
}

FRACTION_GLYPHS = "".join(VULGAR_FRACTIONS)

_WORD_NUMBER_PATTERNS = [
    (re.compile(rf"\b{word}\b", re.IGNORECASE), digit) for word, digit in WORD_NUMBERS.items()
]
_GLUED_ASCII_FRACTION = re.compile(r"(\d+)\+(\d+)/(\d+)")
_GLUED_GLYPH_FRACTION = re.compile(rf"(\d+)\+([{FRACTION_GLYPHS}])")


def parse_quantity(qty_str: Optional[str]) -> float:
    """Convert a quantity token into a single number.

    Every space-separated token is read on its own and the values are summed,
    which is what turns "2 1/2" into 2.5. Unreadable tokens and fractions with
    a zero denominator contribute nothing, so garbage input yields 0.

    Args:
        qty_str: Quantity as typed, e.g. "2", "1/2", "2 1/2", "2½", "two", "1,5".

    Returns:
        The summed value, 0.0 when nothing numeric was found.
    """
    if not qty_str or not isinstance(qty_str, str):
        return 0.0

    working = qty_str.strip()

    # 1. Spelled-out numbers
    for pattern, digit in _WORD_NUMBER_PATTERNS:
        working = pattern.sub(digit, working)

    # 2. "2+1/2" and "2+½" must be split before the glyphs are substituted
    working = _GLUED_ASCII_FRACTION.sub(r"\1 \2/\3", working)
    working = _GLUED_GLYPH_FRACTION.sub(r"\1 \2", working)

    # 3. Glyphs become their own decimal token
    for glyph, decimal in VULGAR_FRACTIONS.items():
        working = working.replace(glyph, f" {decimal} ")

    total = 0.0
    for part in working.split():
        if "/" in part:
            total += _parse_fraction(part)
        else:
            value = parse_leading_float(part.replace(",", ".", 1))
            if value is not None:
                total += value
    return total


def _parse_fraction(part: str) -> float:
    pieces = part.split("/")
    numerator = parse_leading_float(pieces[0])
    denominator = parse_leading_float(pieces[1]) if len(pieces) > 1 else None
    if numerator is None or not denominator:
        return 0.0
    return numerator / denominator
