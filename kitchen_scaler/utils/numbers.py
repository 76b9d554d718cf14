import math
import re
from typing import Optional

_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_leading_float(text: str) -> Optional[float]:
    """Read the numeric prefix of a string: "2abc" -> 2.0, "abc" -> None."""
    match = _LEADING_FLOAT.match(text or "")
    if not match:
        return None
    return float(match.group(1))


def round_half_up(value: float, places: int = 0) -> float:
    """Round with .5 going up, unlike Python's round() which rounds half to even."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def format_decimal(value: float, places: int) -> str:
    """Render a rounded value with at most `places` decimals and no trailing zeros."""
    text = f"{round_half_up(value, places):.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
