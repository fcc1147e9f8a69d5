"""Unicode escape and unescape algorithms."""

from .escape import escape
from .scan import describe_location, find_malformed_escapes
from .unescape import MalformedEscapeError, unescape

__all__ = [
    "MalformedEscapeError",
    "describe_location",
    "escape",
    "find_malformed_escapes",
    "unescape",
]
