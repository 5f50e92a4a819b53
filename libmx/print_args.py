"""Command that prints each of its arguments on its own line."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from libmx.output import printchar, printstr


def main(argv: Sequence[str] | None = None) -> int:
    """Print every argument followed by a newline."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        printstr(arg)
        printchar("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())