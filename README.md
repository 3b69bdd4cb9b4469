# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and only
these operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (the bottom goes to the top) |

The program prints the operations it performs, one per line. A move that
cannot act (swapping or rotating a stack with fewer than two elements,
pushing from an empty stack) changes nothing and prints nothing. The combined
moves `ss`, `rr` and `rrr` run their two single moves, each printed if it
acts, and then print their own name.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

The first argument is the top of stack `a`. Each argument must consist of
decimal digits, optionally preceded by a single `-` (a leading `+` is not
accepted), be at most 11 characters long, and fit in a signed 32-bit integer.
No value may be repeated.

- With no arguments the program prints nothing and exits with status 1.
- If an argument breaks one of the rules above, it prints `Error` and exits
  with status 1; a repeated value prints `Error` and exits with status 3.
- If the input is already in ascending order (two or more values), it prints
  `Already sorted` and exits with status 0.
- Otherwise it prints the moves and exits with status 0.

The same command is available as `python -m pushswap.cli`.

Before sorting, each value is replaced by its rank among all the values, so
negative numbers are handled the same way as positive ones. The strategy
depends on how many values there are:

- 2 values: a single `sa` if needed.
- 3 values: a fixed sequence of at most two operations.
- 4 to 32 values: repeatedly bring the smallest value to the top of `a`
  (with `ra` when it is among the top three, otherwise `rra`) and push it to
  `b`, sort the remaining three, then push everything back.
- more than 32 values: binary radix sort on the ranks.

## Library use

```python
import io
from pushswap.stacks import Stacks
from pushswap.sorting import index_values, select_algorithm

out = io.StringIO()
stacks = Stacks(index_values([5, -1, 3, 0]), out)
select_algorithm(stacks)      # returns True, moving nothing, if already sorted
print(out.getvalue())         # the operations, one per line
print(list(stacks.a))         # [0, 1, 2, 3]
```

`Stacks(values, out)` holds the two stacks as `deque`s, top first, in the
attributes `a` and `b`, and writes each move to `out` (standard output when
omitted). `pushswap.sorting` also offers `bubble_sort`, `is_sorted`,
`sort_two`, `sort_three`, `sort_small` and `radix_sort`.
`pushswap.stacks` provides `find_max`, `find_min_position` and
`format_stack`, which renders a stack as `1 -> 2 -> NULL`.

`pushswap.parsing` checks and converts command-line arguments:
`parse_arguments` returns the values or raises `InputError`, whose
`exit_status` attribute holds the status the command exits with. `atoi` and
`atol` read a leading, optionally signed decimal number, wrapping at 32 and
64 bits respectively.

The package also contains small helper modules:

- `pushswap.chars`: ASCII character classes (`is_alnum`, `is_alpha`,
  `is_ascii`, `is_digit`, `is_print`) and `to_lower` / `to_upper`.
- `pushswap.cstring`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat` and `strdup` over strings read up to their first NUL;
  positions come back as indices, a missing match as `None`.
- `pushswap.textops`: `substr`, `strjoin`, `strtrim`, `split`, `itoa`,
  `strmapi` and `striteri`.
- `pushswap.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove` and `memset` on `bytes`, `bytearray` and `memoryview`.
- `pushswap.linked`: `ListNode` with `lst_add_front`, `lst_add_back`,
  `lst_last` and `lst_size`.
- `pushswap.output`: `printf` supporting `%c %s %d %i %u %x %X %p %%`, the
  `put_*` writers for text streams, and `put_char_fd`, `put_str_fd`,
  `put_endl_fd` and `put_nbr_fd` for raw file descriptors.

## What it does not do

The package only produces moves. It has no command that reads a list of moves
and checks whether they sort a given input, and it does not accept the numbers
as a single space-separated argument.

## Tests

```
pip install ".[test]"
pytest
```