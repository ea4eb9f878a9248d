"""Command line: validate the integers given, then print the operations
that sort them."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from pushswap.sorting import sort_stacks
from pushswap.stacks import Element, Stacks, fill_stack, set_index
from pushswap.validation import check_valid_args, join_all_args


def format_stack(elements: Iterable[Element]) -> str:
    """One ``index: value`` line per element, top first."""
    return "".join(f"{element.index}: {element.value}\n" for element in elements)


def _error() -> int:
    sys.stderr.write("Error\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sorting operations for the arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    if not check_valid_args(args):
        return _error()
    elements = fill_stack(join_all_args(args))
    if not elements:
        return _error()
    set_index(elements)
    sort_stacks(Stacks(elements))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())