# Filename: src/native2ascii/unicode/scan.py
"""
Defines a pyparsing grammar over backslash sequences, used to locate every
malformed \\uxxxx escape in a text instead of stopping at the first one.

Tokens follow the same pairing rules as unescape():
- \\u + 4 hex digits -> valid escape
- \\u + 0-3 hex digits -> malformed escape (the next character, if any, is the culprit)
- \\ + any other character -> literal pair, skipped
"""

import logging
import re
from collections.abc import Iterator

import pyparsing as pp

from .unescape import MalformedEscapeError

log = logging.getLogger(__name__)

valid_escape = pp.Regex(r"\\u[0-9a-fA-F]{4}").setResultsName("valid")
malformed_escape = pp.Regex(r"\\u[0-9a-fA-F]{0,3}").setResultsName("malformed")
literal_pair = pp.Regex(r"\\[^u]", re.DOTALL).setResultsName("literal")

backslash_sequence = (
    valid_escape | malformed_escape | literal_pair
).leaveWhitespace()

# Positions must refer to the original text
backslash_sequence.parseWithTabs()


def find_malformed_escapes(text: str) -> Iterator[MalformedEscapeError]:
    """
    Yields a MalformedEscapeError for each malformed escape in text, in order.

    Nothing is raised; the first error yielded (if any) is the one unescape()
    would raise for the same text.
    """
    found = 0
    for tokens, start, end in backslash_sequence.scanString(text):
        if "malformed" not in tokens:
            continue
        found += 1
        if end < len(text):
            # The character that stopped the hex digits
            yield MalformedEscapeError(text, start, text[start : end + 1], text[end])
        else:
            yield MalformedEscapeError(text, start, text[start:end])
    log.debug(f"Scanned {len(text)} character(s), found {found} malformed escape(s)")


def describe_location(error: MalformedEscapeError) -> str:
    """Renders the 1-based line and column of error within its text."""
    line = pp.lineno(error.position, error.text)
    column = pp.col(error.position, error.text)
    return f"line {line}, column {column}"
