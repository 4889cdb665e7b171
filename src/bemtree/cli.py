"""Command-line interface for bemtree.

Reads markup from a file or stdin and writes the generated SCSS skeleton.

Usage:
    bemtree [FILE] [-o OUTPUT] [--indent N] [--no-sort] [--strict] [--json] [-v]

    bemtree src/App.jsx              # SCSS to stdout
    pbpaste | bemtree | pbcopy       # selection in, clipboard out
    bemtree page.html --json         # inspect the selector tree

Exit status:
    0  success (markup without classes prints nothing)
    1  no input supplied, or input/output could not be read/written
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from bemtree import BemTree, __version__
from bemtree.errors import BemTreeError, InputError
from bemtree.serialization import to_json
from bemtree.utils.logger import ROOT_LOGGER_NAME, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bemtree",
        description="Generate a nested SCSS skeleton from the BEM classes in HTML/JSX markup.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="markup file to read ('-' or omitted reads stdin)",
    )
    parser.add_argument("-o", "--output", help="write to this file instead of stdout")
    parser.add_argument(
        "--indent",
        type=positive_int,
        metavar="N",
        help="indent with N spaces instead of a tab",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="keep classes in source order instead of modifiers-first",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="skip classes not shaped exactly like block__element--modifier",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the selector tree as JSON instead of SCSS",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_input(file: str, stdin: TextIO) -> str:
    """Read markup from file, or from stdin when file is '-'.

    Raises:
        InputError: If nothing was supplied or the file cannot be read.
    """
    if file == "-":
        if stdin.isatty():
            raise InputError("no input: pass a FILE or pipe markup on stdin")
        text = stdin.read()
        source = None
    else:
        try:
            text = Path(file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"cannot read input ({e})", source_file=file) from e
        source = file

    if not text.strip():
        raise InputError("no input: markup is empty", source_file=source)
    return text


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the CLI and return its exit status."""
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        indent = "\t" if args.indent is None else " " * args.indent
        tree = BemTree(indent=indent, sort_children=not args.no_sort, strict=args.strict)
        text = read_input(args.file, stdin)

        if args.json:
            output = to_json(tree.parse(text), indent=2) + "\n"
        else:
            output = tree(text)

        if args.output:
            try:
                Path(args.output).write_text(output, encoding="utf-8")
            except OSError as e:
                raise BemTreeError(f"cannot write {args.output} ({e})") from e
            logger.debug("Wrote %d characters to %s", len(output), args.output)
        else:
            stdout.write(output)
    except BemTreeError as e:
        print(f"bemtree: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK
