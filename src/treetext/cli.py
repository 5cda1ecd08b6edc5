"""Command-line front end for treetext.

Usage:
    treetext "(A (B C) D)"
    treetext -f tree.txt
    echo "(A B)" | treetext
    treetext --tokens "(A B)"

Prints the diagram to stdout. Rejected input prints ``Error: ...`` to
stderr and exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from treetext import __version__
from treetext.controller import TreeController
from treetext.lexer import tokenize
from treetext.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treetext",
        description="Render parenthesized tree notation as an ASCII diagram.",
    )
    parser.add_argument(
        "tree",
        nargs="?",
        help="tree notation, e.g. '(A (B C) D)'; read from stdin if omitted",
    )
    parser.add_argument("-f", "--file", type=Path, help="read tree notation from a file")
    parser.add_argument("--tokens", action="store_true", help="print tokens instead of the diagram")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_source(args: argparse.Namespace) -> str:
    if args.tree is not None:
        return args.tree
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.tree is not None and args.file is not None:
        parser.error("give either a tree argument or --file, not both")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = _read_source(args)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e.strerror}", file=sys.stderr)
        return 1
    logger.debug("Read %d characters of tree notation", len(source))

    if args.tokens:
        print(" ".join(tokenize(source)))
        return 0

    def show_output(text: str) -> None:
        if text:
            print(text)

    def show_error(message: str) -> None:
        print(message, file=sys.stderr)

    controller = TreeController(
        read_input=lambda: source,
        show_output=show_output,
        show_error=show_error,
    )
    return 0 if controller.render_from_input() is not None else 1


if __name__ == "__main__":
    sys.exit(main())
