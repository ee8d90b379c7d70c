from __future__ import annotations

import re
from typing import Optional

from .normalize import normalize_address

STREET_NUMBER_PATTERN = re.compile(r"^[0-9]+")
LEADING_NUMBER_TOKEN_PATTERN = re.compile(r"^[0-9]+\s*")


def extract_street_number(address_text: Optional[str]) -> Optional[str]:
    """Return the leading run of digits of the raw address, if any.

    The raw text is not trimmed first: ``"  12 Elm St"`` has no street number.
    """
    if not address_text:
        return None
    match = STREET_NUMBER_PATTERN.match(str(address_text))
    if match:
        return match.group(0)
    return None


def extract_street_name(address_text: Optional[str]) -> str:
    """Return the normalized address without its leading street number."""
    normalized = normalize_address(address_text)
    return LEADING_NUMBER_TOKEN_PATTERN.sub("", normalized, count=1).strip()
