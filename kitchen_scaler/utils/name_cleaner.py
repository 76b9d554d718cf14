import re
from typing import Tuple

# Parenthetical notes worth keeping, e.g. "(room temperature)", "(softened)"
KEEP_PARENTHETICAL_WORDS: Tuple[str, ...] = ("room", "soft", "unsalt")

_SEPARATORS = re.compile(r"[=:~>]+")
_BRACKETS = re.compile(r"[\[\]]")
_PARENTHETICAL = re.compile(r"\(([^)]+)\)")
_EDGE_DASHES = re.compile(r"^[\s–—]+|[\s–—]+$")
_WHITESPACE = re.compile(r"\s+")


def clean_ingredient_name(name: str) -> str:
    """Tidy an extracted ingredient name for display.

    Drops separator glyphs and brackets, removes leftover quantity/unit
    parentheticals while keeping descriptive ones, and capitalizes the first
    letter. Cleaning an already-clean name returns it unchanged.
    """
    name = _SEPARATORS.sub("", name or "")
    name = _BRACKETS.sub("", name)
    name = _WHITESPACE.sub(" ", name)
    name = _PARENTHETICAL.sub(_keep_descriptive, name)
    name = _WHITESPACE.sub(" ", name)
    name = _EDGE_DASHES.sub("", name).strip()

    if name and name[0] != name[0].upper():
        name = name[0].upper() + name[1:]
    return name


def _keep_descriptive(match: re.Match) -> str:
    content = match.group(1)
    lowered = content.lower()
    if any(word in lowered for word in KEEP_PARENTHETICAL_WORDS):
        return f"({content.strip()})"
    return ""
