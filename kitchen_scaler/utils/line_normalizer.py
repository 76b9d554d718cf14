import re
from typing import List, Pattern, Tuple

# Ordered rewrite passes; each entry is (pattern, replacement).
_NORMALIZATION_PASSES: List[Tuple[Pattern, str]] = [
    # Residual word breaks: "bak- ing" -> "baking"
    (re.compile(r"([a-z])-\s+([a-z])"), r"\1\2"),
    # Leading bullets
    (re.compile(r"^[•·\-\*\+]+\s*"), ""),
    # Repeated separators and ellipses
    (re.compile(r"::+"), ":"),
    (re.compile(r">>>+"), ">"),
    (re.compile(r"\.\.\.|…"), " "),
    # Shorthand and filler
    (re.compile(r"\bx(\d+)", re.IGNORECASE), r"\1"),
    (re.compile(r"\s*@\s*"), " "),
    (re.compile(r"\?"), ""),
    (re.compile(r"\byep:?\s*", re.IGNORECASE), ""),
    # Only "one"; the other number words are left for the quantity parser
    (re.compile(r"\bone\b", re.IGNORECASE), "1"),
    # Glued words: "milk.whole" -> "milk whole"
    (re.compile(r"(?<=[a-z])\.(?=[a-z])", re.IGNORECASE), " "),
    # Abbreviations
    (re.compile(r"\bext\.\s*", re.IGNORECASE), "extract "),
    (re.compile(r"\bgran\.\s*", re.IGNORECASE), "granulated "),
]

_WHITESPACE = re.compile(r"\s+")


def normalize_segment(segment: str) -> str:
    """Repair and simplify one ingredient segment before pattern matching."""
    normalized = segment or ""
    for pattern, replacement in _NORMALIZATION_PASSES:
        normalized = pattern.sub(replacement, normalized)
    return _WHITESPACE.sub(" ", normalized).strip()
