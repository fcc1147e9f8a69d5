"""
Converts text to and from ASCII using Unicode escapes ("\\uxxxx" notation).
"""

# Registers the TRACE level before any module logs with it
from native2ascii import log as _log  # noqa: F401
from native2ascii.convert import native2ascii
from native2ascii.unicode import (
    MalformedEscapeError,
    escape,
    find_malformed_escapes,
    unescape,
)

__version__ = "1.0.0"

__all__ = [
    "MalformedEscapeError",
    "__version__",
    "escape",
    "find_malformed_escapes",
    "native2ascii",
    "unescape",
]
