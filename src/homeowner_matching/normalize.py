from __future__ import annotations

import re
from typing import Dict, Optional

STREET_TYPE_ABBREVIATIONS: Dict[str, str] = {
    "street": "st",
    "avenue": "ave",
    "road": "rd",
    "drive": "dr",
    "court": "ct",
    "lane": "ln",
    "boulevard": "blvd",
    "way": "wy",
    "circle": "cir",
    "place": "pl",
    "terrace": "ter",
    "parkway": "pkwy",
    "highway": "hwy",
    "trail": "trl",
    "square": "sq",
}

DIRECTIONAL_ABBREVIATIONS: Dict[str, str] = {
    "north": "n",
    "south": "s",
    "east": "e",
    "west": "w",
    "northeast": "ne",
    "northwest": "nw",
    "southeast": "se",
    "southwest": "sw",
}

UNIT_DESIGNATOR_ABBREVIATIONS: Dict[str, str] = {
    "apartment": "apt",
    "suite": "ste",
}

ABBREVIATIONS: Dict[str, str] = {
    **STREET_TYPE_ABBREVIATIONS,
    **DIRECTIONAL_ABBREVIATIONS,
    **UNIT_DESIGNATOR_ABBREVIATIONS,
}

# Longest first so the alternation never settles on a shorter prefix.
ABBREVIATION_PATTERN = re.compile(
    r"\b(" + "|".join(sorted(ABBREVIATIONS, key=len, reverse=True)) + r")\b"
)
SEPARATOR_PATTERN = re.compile(r"[,;:#]")
DROPPED_PUNCTUATION_PATTERN = re.compile(r"\.")


def clean_address_text(address_text: Optional[str]) -> str:
    """Lowercase, drop punctuation and collapse whitespace.

    ``#`` turns into a separator so ``"St #5"`` and ``"St#5"`` both end in
    a bare ``5`` token.
    """
    if not address_text:
        return ""

    address = str(address_text).lower()
    address = SEPARATOR_PATTERN.sub(" ", address)
    address = DROPPED_PUNCTUATION_PATTERN.sub("", address)
    return " ".join(address.split())


def abbreviate(address_text: str) -> str:
    """Fold full street-type, directional and unit words to their abbreviations.

    Expects text already passed through :func:`clean_address_text`.
    """
    return ABBREVIATION_PATTERN.sub(lambda match: ABBREVIATIONS[match.group(1)], address_text)


def normalize_address(address_text: Optional[str]) -> str:
    """Return the canonical comparable form of an address.

    Cleanup runs before abbreviation so trailing punctuation
    (``"Street,"``) cannot hide a word from the boundary match.
    The result is a fixed point: normalizing it again returns it unchanged.
    """
    return abbreviate(clean_address_text(address_text))
