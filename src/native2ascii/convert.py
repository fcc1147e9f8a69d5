# Filename: src/native2ascii/convert.py
"""Chooses the conversion direction for native2ascii."""

import logging
from typing import Optional

from native2ascii.unicode.escape import escape
from native2ascii.unicode.unescape import unescape

log = logging.getLogger(__name__)


def native2ascii(text: Optional[str], reverse: bool = False) -> Optional[str]:
    """
    Converts non-ASCII characters in text to Unicode escapes ("\\uxxxx" notation).

    With reverse=True, converts Unicode escapes back into the characters they
    denote instead. None is passed straight through so callers can chain
    without checking.

    Args:
        text: The text to convert, or None.
        reverse: Unescape instead of escape.

    Returns:
        The converted copy of text, or None if text was None.

    Raises:
        MalformedEscapeError: If reverse is set and text holds a bad escape.
    """
    if text is None:
        return None
    if not text:
        return ""

    log.trace(f"Converting {len(text)} character(s), reverse={reverse}")
    if reverse:
        return unescape(text)
    return escape(text)
