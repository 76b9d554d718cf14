import re
from typing import List

# "Baki-\nng powder" -> "Baking powder"
_HYPHEN_LINE_BREAK = re.compile(r"([a-z])-\s*\n\s*([a-z])", re.IGNORECASE)
# A parenthetical group holding at least one digit, e.g. "(2 cups)"
_NUMERIC_PARENTHETICAL = re.compile(r"\([^)]*\d[^)]*\)")
# A comma that is not inside "(...)"
_TOP_LEVEL_COMMA = re.compile(r",(?![^()]*\))")


def split_segments(text: str) -> List[str]:
    """Split a pasted recipe block into candidate ingredient segments.

    One segment per non-empty line, except that a line listing several
    ingredients inline ("Flour (2 cups), Sugar (1 cup)") is split on the
    commas that sit outside parentheses.
    """
    if not text or not isinstance(text, str):
        return []

    text = _HYPHEN_LINE_BREAK.sub(r"\1\2", text)

    segments: List[str] = []
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue
        if _is_inline_enumeration(line):
            parts = _TOP_LEVEL_COMMA.split(line)
            segments.extend(p.strip() for p in parts if p.strip())
        else:
            segments.append(line)
    return segments


def _is_inline_enumeration(line: str) -> bool:
    return "," in line and len(_NUMERIC_PARENTHETICAL.findall(line)) > 1
