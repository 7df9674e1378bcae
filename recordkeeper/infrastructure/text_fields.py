"""Parsing helpers for numeric text fields."""

import re
from typing import Optional

# Optional sign and ASCII digits only; no underscores or other scripts' digits
INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_integer(text: str) -> Optional[int]:
    """Return the integer written in text, or None if it is not one."""
    text = text.strip()
    if not INTEGER.fullmatch(text):
        return None
    return int(text)
