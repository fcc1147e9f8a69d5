#!/usr/bin/env python3
# Filename: src/native2ascii/cli.py
import argparse
import logging
import sys
from typing import Optional, TextIO

from native2ascii import __version__
from native2ascii.convert import native2ascii
from native2ascii.log import LOG_LEVELS, setup_logging
from native2ascii.streams import (
    DEFAULT_ENCODING,
    Input,
    read_input,
    resolve_encodings,
    write_output,
)
from native2ascii.unicode.scan import describe_location, find_malformed_escapes

PROG = "native2ascii"


def build_parser() -> argparse.ArgumentParser:
    """Builds the argument parser for native2ascii."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [options] [input-file] [output-file]",
        description="Converts non-ASCII characters to Unicode escapes "
        '("\\uxxxx" notation), or back with --reverse.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n"
        "  native2ascii messages.txt messages.properties\n"
        "  native2ascii -r messages.properties messages.txt\n"
        "  native2ascii -e latin-1 < native.txt > escaped.txt\n"
        "  native2ascii --check messages.properties",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        metavar="input-file",
        help="File to read (default: standard input)",
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        metavar="output-file",
        help="File to write (default: standard output)",
    )
    parser.add_argument(
        "-e",
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Encoding of the unescaped text (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Perform reverse conversion, from Unicode escapes to characters",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report every malformed Unicode escape in the input and exit",
    )
    parser.add_argument(
        "--log",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Set the logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        type=str,
        default=None,
        help="Write logs to the specified file as well as standard error.",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def check(source: Input, name: str, stderr: TextIO) -> int:
    """Prints every malformed escape in source. Returns 1 if there were any."""
    errors = list(find_malformed_escapes(source.content))
    for error in errors:
        print(f"{name}: {describe_location(error)}: {error}", file=stderr)
    return 1 if errors else 0


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Main entry point: parses args, sets up logging, reads the input, converts it
    and writes the result. Returns the process exit status.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log, args.log_file, stderr)
    log = logging.getLogger("native2ascii.cli")
    log.debug(f"Parsed arguments: {args}")

    try:
        # --check inspects escaped text, which is read like reverse input
        encodings = resolve_encodings(args.encoding, args.reverse or args.check)
        log.info(f"Reading as {encodings.input}, writing as {encodings.output}")

        source = read_input(args.input_file, encodings.input, stdin)
        if not source.content and source.source == "stdin":
            parser.print_help(file=stdout)
            return 0

        if args.check:
            return check(source, args.input_file or "<stdin>", stderr)

        output = native2ascii(source.content, reverse=args.reverse)
        write_output(output, args.output_file, encodings.output, stdout)
        log.info("Conversion finished.")
        return 0

    except (ValueError, LookupError, OSError) as e:
        # MalformedEscapeError and UnicodeError are both ValueErrors
        log.debug(f"Conversion failed: {e}", exc_info=True)
        print(f"{PROG} failed: {e}", file=stderr)
        return 1
    except Exception as e:
        log.critical(f"FATAL ERROR: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    sys.exit(main())
