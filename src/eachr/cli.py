"""``eachr`` command: walk the top-level container of a JSON document.

Prints one ``key<TAB>value`` line per visited entry, values JSON-encoded.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO, Sequence

from .dispatch import each
from .errors import EachrError
from .model import Continue, Stop

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eachr",
        description="Iterate the top-level array or object of a JSON document.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="JSON file to read (default: stdin)",
    )
    parser.add_argument(
        "--until",
        metavar="VALUE",
        help="stop before the first entry equal to the JSON value VALUE",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log dispatch decisions to stderr",
    )
    return parser


_NO_LIMIT = object()


def json_equal(left: object, right: object) -> bool:
    """Compare decoded JSON values; ``true`` never equals ``1``."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(
            json_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(
            json_equal(left[k], right[k]) for k in left
        )
    if isinstance(left, (list, dict)) or isinstance(right, (list, dict)):
        return False
    return left == right


def run(document: object, until: object = _NO_LIMIT, out: IO[str] | None = None) -> int:
    """Print the entries of *document*; return the number printed.

    *until* is a decoded JSON value; iteration stops before the first entry
    equal to it.
    """
    dest = out if out is not None else sys.stdout
    printed = 0

    def emit(value, key, container):
        nonlocal printed
        if until is not _NO_LIMIT and json_equal(value, until):
            return Stop
        print(f"{key}\t{json.dumps(value, ensure_ascii=False)}", file=dest)
        printed += 1
        return Continue

    each(document, emit)
    return printed


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for ``eachr`` / ``python -m eachr``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    with args.source as fh:
        try:
            document = json.load(fh)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            parser.error(f"invalid JSON in {getattr(fh, 'name', '<stdin>')}: {exc}")

    until = _NO_LIMIT
    if args.until is not None:
        try:
            until = json.loads(args.until)
        except json.JSONDecodeError as exc:
            parser.error(f"--until is not a JSON value: {exc}")

    try:
        count = run(document, until=until)
    except EachrError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.debug("printed %d entries", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
