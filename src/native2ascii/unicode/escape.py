# Filename: src/native2ascii/unicode/escape.py
"""
Forward conversion: replaces every non-ASCII UTF-16 code unit with a \\uxxxx escape.
"""

import logging
from collections.abc import Iterator

log = logging.getLogger(__name__)

HEX_DIGITS = "0123456789abcdef"

# Highest code unit copied through unchanged
ASCII_MAX = 0x7F
BMP_MAX = 0xFFFF


def code_units(text: str) -> Iterator[int]:
    """
    Yields the UTF-16 code units of text in order.

    Code points above U+FFFF are split into their high/low surrogate pair.
    Lone surrogates already present in the string are yielded as-is.
    """
    for ch in text:
        code = ord(ch)
        if code > BMP_MAX:
            code -= 0x10000
            yield 0xD800 + (code >> 10)
            yield 0xDC00 + (code & 0x3FF)
        else:
            yield code


def to_hex(code: int) -> str:
    """Formats a code unit as exactly four lowercase hex digits."""
    return (
        HEX_DIGITS[(code >> 12) & 15]
        + HEX_DIGITS[(code >> 8) & 15]
        + HEX_DIGITS[(code >> 4) & 15]
        + HEX_DIGITS[code & 15]
    )


def escape(text: str) -> str:
    """
    Converts text so that it can be encoded as ASCII.

    Every code unit above 0x7F is replaced with "\\u" followed by its four
    lowercase hex digits; everything else is copied unchanged. Characters
    outside the Basic Multilingual Plane produce two escapes, one for each
    surrogate.

    Examples:
        >>> escape("I \\u2665 Unicode!")
        'I \\\\u2665 Unicode!'
        >>> escape("\\U00020bb7")
        '\\\\ud842\\\\udfb7'
    """
    result: list[str] = []
    escaped = 0

    for code in code_units(text):
        if code > ASCII_MAX:
            result.append("\\u" + to_hex(code))
            escaped += 1
        else:
            result.append(chr(code))

    log.trace(f"Escaped {escaped} code unit(s) in {len(text)} character(s)")
    return "".join(result)
