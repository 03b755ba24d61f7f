"""Command that loads a Unihan directory and shows a few sample characters."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .loader import load

DEFAULT_PATH = "./data/Unihan"


def _show(han) -> str:
    return "null" if han is None else han.dump()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the database and print the records of three sample characters."""
    parser = argparse.ArgumentParser(
        prog="xuan", description="Load a Unihan database and show sample records."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_PATH,
        help="directory holding the Unihan_*.txt files",
    )
    args = parser.parse_args(argv)

    try:
        database = load(args.path)
    except OSError as err:
        print(err, file=sys.stderr)
        return 1

    print("Load unihan database success. Total character :", database.count())
    print(_show(database.get_by_value("我")))
    print(_show(database.get_by_code_point(40643)))
    print(_show(database.get_by_unicode("U+5988")))
    return 0


if __name__ == "__main__":
    sys.exit(main())