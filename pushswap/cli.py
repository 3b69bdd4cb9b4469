"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_arguments
from .sorting import index_values, select_algorithm
from .stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the integers in ``argv`` and print each move; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except InputError as error:
        out.write("Error\n")
        return error.exit_status
    stacks = Stacks(index_values(values), out)
    if select_algorithm(stacks):
        out.write("Already sorted\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())