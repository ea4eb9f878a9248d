import io
import random
from itertools import permutations

import pytest

from pushswap.sorting import (
    back_to_a,
    butterfly,
    chunk_width,
    sort2,
    sort3,
    sort4,
    sort5,
    sort_stacks,
)
from pushswap.stacks import Stacks, fill_stack, set_index


def prepared(values):
    elements = fill_stack(" ".join(str(v) for v in values))
    set_index(elements)
    out = io.StringIO()
    return Stacks(elements, out=out), out


def replay(lines, values):
    stacks, _ = prepared(values)
    for name in lines:
        getattr(stacks, name)()
    return stacks


def check_sorted(stacks, out, values):
    assert stacks.values() == sorted(values)
    assert not stacks.b
    assert out.getvalue().split() == stacks.operations
    assert replay(out.getvalue().split(), values).values() == sorted(values)


def test_chunk_width_pinned_values():
    assert chunk_width(100) == 16
    assert chunk_width(500) == 30


def test_chunk_width_never_decreases():
    widths = [chunk_width(size) for size in range(1, 600)]
    assert all(a <= b for a, b in zip(widths, widths[1:]))


@pytest.mark.parametrize("values", list(permutations([10, 20])))
def test_sort2(values):
    stacks, out = prepared(values)
    sort2(stacks)
    check_sorted(stacks, out, values)


@pytest.mark.parametrize("values", list(permutations([-3, 0, 8])))
def test_sort3_all_orders(values):
    stacks, out = prepared(values)
    sort3(stacks)
    check_sorted(stacks, out, values)
    assert len(stacks.operations) <= 2


@pytest.mark.parametrize("values", list(permutations([1, 2, 3, 4])))
def test_sort4_all_orders(values):
    stacks, out = prepared(values)
    sort4(stacks)
    check_sorted(stacks, out, values)


@pytest.mark.parametrize("values", list(permutations([5, -1, 7, 3, 0])))
def test_sort5_all_orders(values):
    stacks, out = prepared(values)
    sort5(stacks)
    check_sorted(stacks, out, values)


def test_sorted_small_input_needs_no_operations():
    for values in ([1, 2], [1, 2, 3], [1, 2, 3, 4], [1, 2, 3, 4, 5]):
        stacks, out = prepared(values)
        sort_stacks(stacks)
        assert out.getvalue() == ""
        assert stacks.values() == values


def test_butterfly_moves_everything_to_b():
    values = random.Random(7).sample(range(-1000, 1000), 40)
    stacks, _ = prepared(values)
    butterfly(stacks, len(values))
    assert not stacks.a
    assert sorted(e.value for e in stacks.b) == sorted(values)
    back_to_a(stacks)
    assert stacks.values() == sorted(values)
    assert not stacks.b


@pytest.mark.parametrize("seed,size", [(1, 6), (2, 17), (3, 100), (4, 250)])
def test_sort_stacks_random(seed, size):
    values = random.Random(seed).sample(range(-10000, 10000), size)
    stacks, out = prepared(values)
    sort_stacks(stacks)
    check_sorted(stacks, out, values)


def test_sort_stacks_single_element_returns_it():
    stacks, out = prepared([42])
    sort_stacks(stacks)
    assert stacks.values() == [42]
    assert not stacks.b
    assert out.getvalue().split() == stacks.operations