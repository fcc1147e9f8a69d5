# Filename: src/native2ascii/unicode/unescape.py
"""
Reverse conversion: replaces every \\uxxxx escape with the code unit it denotes.
"""

import logging
from typing import Optional

log = logging.getLogger(__name__)

ESCAPE_DIGITS = 4


class MalformedEscapeError(ValueError):
    """
    Raised when a \\u escape is not followed by four hexadecimal digits.

    Attributes:
        text: The full input that was being unescaped.
        position: Index of the backslash starting the malformed escape.
        escape: The offending substring, from the backslash up to and including
            the bad character (or to the end of the input when truncated).
        character: The offending character, or None if the input ran out.
    """

    def __init__(
        self, text: str, position: int, escape: str, character: Optional[str] = None
    ):
        self.text = text
        self.position = position
        self.escape = escape
        self.character = character
        if character is None:
            message = (
                f"Insufficient input for \\uxxxx encoding at index {position}: "
                f"{escape!r}"
            )
        else:
            message = (
                f"Malformed character found in \\uxxxx encoding: {character!r} "
                f"at index {position}"
            )
        super().__init__(message)

    def __reduce__(self):
        return (
            self.__class__,
            (self.text, self.position, self.escape, self.character),
        )

    @property
    def truncated(self) -> bool:
        return self.character is None


def hex_value(ch: str) -> int:
    """Returns the value of a single hex digit, or -1 if ch is not one."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "f":
        return 10 + ord(ch) - ord("a")
    if "A" <= ch <= "F":
        return 10 + ord(ch) - ord("A")
    return -1


def read_code_unit(text: str, start: int) -> int:
    """
    Reads the four hex digits following the "\\u" that begins at start.

    Raises:
        MalformedEscapeError: If a digit is not hexadecimal or the input ends
            before four digits are available.
    """
    offset = start + 2
    code = 0
    for i in range(offset, offset + ESCAPE_DIGITS):
        if i >= len(text):
            raise MalformedEscapeError(text, start, text[start:])
        digit = hex_value(text[i])
        if digit < 0:
            raise MalformedEscapeError(text, start, text[start : i + 1], text[i])
        code = (code << 4) + digit
    return code


def join_surrogates(text: str) -> str:
    """Combines adjacent high/low surrogate code points into single characters."""
    return text.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )


def unescape(text: str) -> str:
    """
    Converts every \\uxxxx escape in text to the character it denotes.

    Only a lowercase "u" introduces an escape and hex digits may be in either
    case. A backslash followed by anything else is copied through together with
    that character, and a backslash at the very end of the input is copied
    through on its own. Escaped surrogate pairs decode to a single character.

    Examples:
        >>> unescape("I \\\\u2665 Unicode!")
        'I \\u2665 Unicode!'
        >>> unescape("a\\\\qb")
        'a\\\\qb'

    Raises:
        MalformedEscapeError: If an escape is truncated or has a non-hex digit.
    """
    result: list[str] = []
    surrogates = False
    length = len(text)
    i = 0

    while i < length:
        ch = text[i]
        if ch != "\\":
            result.append(ch)
            i += 1
            continue

        if i + 1 >= length:
            # Lone trailing backslash
            result.append(ch)
            break

        following = text[i + 1]
        if following == "u":
            code = read_code_unit(text, i)
            if 0xD800 <= code <= 0xDFFF:
                surrogates = True
            result.append(chr(code))
            i += 2 + ESCAPE_DIGITS
        else:
            result.append(ch + following)
            i += 2

    output = "".join(result)
    if surrogates:
        output = join_surrogates(output)
    log.trace(f"Unescaped {length} character(s) into {len(output)}")
    return output
