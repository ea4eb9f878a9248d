"""The two stacks, their operations and helpers that inspect them."""

from __future__ import annotations

import sys
from bisect import bisect_left
from collections import deque
from dataclasses import dataclass
from typing import Iterable, TextIO

from pushswap.libft.strops import atoi, split


@dataclass
class Element:
    """A stack entry: its value and its rank among all values."""

    value: int
    index: int = -1


def fill_stack(text: str) -> list[Element]:
    """Build elements from the space-separated integers in ``text``."""
    return [Element(atoi(token)) for token in split(text, " ")]


def set_index(elements: Iterable[Element]) -> None:
    """Give every element the number of elements with a smaller value."""
    elements = list(elements)
    ordered = sorted(element.value for element in elements)
    for element in elements:
        element.index = bisect_left(ordered, element.value)


def is_sorted(elements: Iterable[Element]) -> bool:
    """True when values never decrease from top to bottom."""
    values = [element.value for element in elements]
    return all(left <= right for left, right in zip(values, values[1:]))


def get_position(elements: Iterable[Element], index: int) -> int:
    """Distance from the top of the element whose rank is ``index``."""
    for position, element in enumerate(elements):
        if element.index == index:
            return position
    raise ValueError(f"no element has index {index}")


def get_min_index(elements: Iterable[Element]) -> int:
    """Smallest rank in the stack."""
    return min(element.index for element in elements)


def get_max_index(elements: Iterable[Element]) -> int:
    """Largest rank in the stack."""
    return max(element.index for element in elements)


class Stacks:
    """Stacks ``a`` and ``b`` with the operations that print their own names.

    The top of each stack is its first item. Every operation performed is
    written to ``out`` (standard output when not given) and recorded in
    ``operations``.
    """

    def __init__(
        self,
        a: Iterable[Element] = (),
        b: Iterable[Element] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.a: deque[Element] = deque(a)
        self.b: deque[Element] = deque(b or ())
        self.out = out
        self.operations: list[str] = []

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        stream = sys.stdout if self.out is None else self.out
        stream.write(name + "\n")

    @staticmethod
    def _swap(stack: deque[Element]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    def _push(self, target: deque[Element], source: deque[Element], name: str) -> None:
        if source:
            target.appendleft(source.popleft())
            self._emit(name)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens when ``b`` is empty."""
        self._push(self.a, self.b, "pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens when ``a`` is empty."""
        self._push(self.b, self.a, "pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self.a.rotate(-1)
        self._emit("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self.b.rotate(-1)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self.a.rotate(1)
        self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self.b.rotate(1)
        self._emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.a.rotate(1)
        self.b.rotate(1)
        self._emit("rrr")

    def values(self) -> list[int]:
        """Values of ``a`` from top to bottom."""
        return [element.value for element in self.a]