"""Sorting stack ``a`` with the stack operations: fixed moves for up to five
elements, chunked transfer through ``b`` for more."""

from __future__ import annotations

from pushswap.stacks import (
    Stacks,
    get_max_index,
    get_min_index,
    get_position,
    is_sorted,
)


def sort2(stacks: Stacks) -> None:
    """Order two elements."""
    a = stacks.a
    if a[0].value > a[1].value:
        stacks.sa()


def sort3(stacks: Stacks) -> None:
    """Order three elements in at most two operations."""
    a = stacks.a
    first, second, third = a[0].value, a[1].value, a[2].value
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first < second and second > third and first > third:
        stacks.rra()
    elif first > second and first > third and second < third:
        stacks.ra()
    elif second > third and third > first and second > first:
        stacks.rra()
        stacks.sa()


def _bring_min_to_top(stacks: Stacks, moves: dict[int, tuple[str, ...]]) -> None:
    position = get_position(stacks.a, get_min_index(stacks.a))
    for name in moves.get(position, ()):
        getattr(stacks, name)()


def sort4(stacks: Stacks) -> None:
    """Order four elements by parking the smallest on ``b``."""
    _bring_min_to_top(stacks, {1: ("ra",), 2: ("ra", "ra"), 3: ("rra",)})
    if is_sorted(stacks.a):
        return
    stacks.pb()
    sort3(stacks)
    stacks.pa()


def sort5(stacks: Stacks) -> None:
    """Order five elements by parking the two smallest on ``b``."""
    _bring_min_to_top(
        stacks, {1: ("ra",), 2: ("ra", "ra"), 3: ("rra", "rra"), 4: ("rra",)}
    )
    if is_sorted(stacks.a):
        return
    stacks.pb()
    sort4(stacks)
    stacks.pa()
    stacks.pa()


def chunk_width(size: int) -> int:
    """Width of the rank window used when moving ``size`` elements to ``b``.

    It is the integer square root (rounded up) plus the bit length, minus one.
    """
    root = 1
    while root < size // root:
        root += 1
    return root + size.bit_length() - 1


def butterfly(stacks: Stacks, size: int) -> None:
    """Move elements to ``b`` in rank order, small ranks sinking to its bottom."""
    width = chunk_width(size)
    counter = 0
    while counter < size and stacks.a:
        top = stacks.a[0].index
        if top <= counter:
            stacks.pb()
            stacks.rb()
            counter += 1
        elif top <= counter + width:
            stacks.pb()
            counter += 1
        else:
            stacks.ra()


def back_to_a(stacks: Stacks) -> None:
    """Return every element to ``a``, largest rank first, by the shorter rotation."""
    while stacks.b:
        largest = get_max_index(stacks.b)
        position = get_position(stacks.b, largest)
        rotate = stacks.rb if position <= len(stacks.b) // 2 else stacks.rrb
        while stacks.b[0].index != largest:
            rotate()
        stacks.pa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a``, whose elements must already carry their ranks."""
    size = len(stacks.a)
    small = {2: sort2, 3: sort3, 4: sort4, 5: sort5}
    if size in small:
        small[size](stacks)
    else:
        butterfly(stacks, size)
        back_to_a(stacks)