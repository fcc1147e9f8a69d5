# Filename: src/native2ascii/streams.py
"""Reading input and writing output for the native2ascii command."""

import codecs
import logging
import os
from dataclasses import dataclass
from typing import BinaryIO, Literal, Optional

log = logging.getLogger(__name__)

# Escaped text is read and written as Latin-1 so every byte maps to one character
ASCII_ENCODING = "latin-1"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Encodings:
    """Character encodings used when reading input and writing output."""

    input: str
    output: str


@dataclass(frozen=True)
class Input:
    """Decoded input and where it was read from."""

    content: str
    source: Literal["file", "stdin"]


def resolve_encodings(encoding: Optional[str], reverse: bool = False) -> Encodings:
    """
    Picks the input and output encodings for a conversion.

    The native encoding is used for whichever side holds unescaped text.

    Raises:
        ValueError: If encoding is not a codec Python knows about.
    """
    native = encoding or DEFAULT_ENCODING
    try:
        native = codecs.lookup(native).name
    except LookupError:
        raise ValueError(f"Invalid encoding {encoding}")

    if reverse:
        return Encodings(input=ASCII_ENCODING, output=native)
    return Encodings(input=native, output=ASCII_ENCODING)


def _binary(stream) -> BinaryIO:
    """Returns the underlying binary buffer of a text stream, if it has one."""
    return getattr(stream, "buffer", stream)


def read_input(path: Optional[str], encoding: str, stdin) -> Input:
    """
    Reads and decodes path, or stdin if no path is given.

    A TTY stdin is not read at all and yields empty content.
    """
    if path:
        with open(path, "rb") as f:
            data = f.read()
        log.debug(f"Read {len(data)} byte(s) from {os.fsdecode(path)!r}")
        return Input(content=data.decode(encoding), source="file")

    isatty = getattr(stdin, "isatty", None)
    if isatty is not None and isatty():
        log.debug("Standard input is a TTY, not reading.")
        return Input(content="", source="stdin")

    data = _binary(stdin).read()
    log.debug(f"Read {len(data)} byte(s) from standard input")
    return Input(content=data.decode(encoding), source="stdin")


def write_output(content: str, path: Optional[str], encoding: str, stdout) -> None:
    """Encodes content and writes it to path, or stdout if no path is given."""
    data = content.encode(encoding)
    if path:
        with open(path, "wb") as f:
            f.write(data)
        log.debug(f"Wrote {len(data)} byte(s) to {os.fsdecode(path)!r}")
        return

    out = _binary(stdout)
    out.write(data)
    out.flush()
    log.debug(f"Wrote {len(data)} byte(s) to standard output")
