"""
Utility helpers shared across routers/services.
"""

from __future__ import annotations

import html
from typing import Any, Optional


def sanitize_text(value: Any) -> str:
    """HTML-escape user supplied text before it is stored or echoed back."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def parse_record_id(raw: str | int | None) -> Optional[int]:
    """
    Coerce a path id into the integer form the store assigns.
    Returns None when the value is not numeric.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw or "").strip()
    if text.startswith(("+", "-")):
        sign, digits = text[0], text[1:]
    else:
        sign, digits = "", text
    if not digits.isdigit():
        return None
    return int(sign + digits)
