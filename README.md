# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations, printing the name of each operation as it is performed.

## Operations

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down (bottom goes to the top)      |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

`pa` and `pb` print nothing when the stack they take from is empty.

## Command line

```
pip install .
push-swap 3 2 1
push-swap "4 67 3" 87 23
```

`python -m pushswap.cli` does the same as `push-swap`.

Arguments may hold several numbers separated by spaces; they are all joined
together. The operations are printed one per line on standard output. Lists
of two to five numbers use dedicated short sequences (`sort2` to `sort5` in
`pushswap.sorting`); any other length is moved to `b` in rank windows
(`butterfly`) and pushed back to `a` largest first (`back_to_a`).

If any token is not a valid 32-bit integer (leading whitespace and one sign
are allowed, nothing after the digits), or a number appears twice, the program
writes `Error` to standard error and exits with status 1. With no arguments it
prints nothing and exits with status 0.

## Library use

```python
import io

from pushswap.stacks import Stacks, fill_stack, set_index
from pushswap.sorting import sort_stacks

elements = fill_stack("5 1 4 2 3")
set_index(elements)
out = io.StringIO()
stacks = Stacks(elements, [], out)
sort_stacks(stacks)
print(stacks.values())     # [1, 2, 3, 4, 5]
print(stacks.operations)   # the operations performed, also written to out
```

- `pushswap.stacks`: `Element` (value and rank), `Stacks` with the eleven
  operations, `values()` and an `operations` record, and the helpers
  `fill_stack`, `set_index`, `is_sorted`, `get_position`, `get_min_index`,
  `get_max_index`.
- `pushswap.sorting`: `sort_stacks`, the small sorts, `chunk_width`,
  `butterfly` and `back_to_a`.
- `pushswap.validation`: `check_valid_args`, `is_valid_int`,
  `has_duplicates`, `join_all_args`.
- `pushswap.cli`: `main` and `format_stack`, which renders elements as
  `index: value` lines.
- `pushswap.libft`: small helpers the rest builds on — `chars` (ASCII
  classification), `strings` and `strops` (text searching, splitting,
  `atoi`/`itoa`), `memory` (byte-buffer operations), `lists` (`LinkedList`),
  `output` (`put_char`, `put_str`, `put_endl`, `put_nbr`) and `lines`
  (`LineReader`, line-by-line reading of a descriptor or binary stream).

## What it does not do

The package only produces operations. It has no command that reads a list of
operations and checks whether they sort a given input.

## Tests

```
pip install -e ".[test]"
pytest
```