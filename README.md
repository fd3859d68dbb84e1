# pushswap

Sorts a list of distinct integers using two stacks, **a** and **b**, and a
fixed set of eleven instructions. It also checks whether a sequence of
instructions sorts a given list.

## Instructions

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of a                      |
| `sb`  | swap the top two elements of b                      |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of b onto a                            |
| `pb`  | move the top of a onto b                            |
| `ra`  | rotate a up: the top element goes to the bottom     |
| `rb`  | rotate b up                                         |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate a down: the bottom element goes to the top   |
| `rrb` | rotate b down                                       |
| `rrr` | `rra` and `rrb` together                            |

An instruction on a stack too short for it leaves that stack unchanged.

## Installing

```
pip install .
```

## Sorting

Pass the numbers as separate arguments or as one space-separated string.
The first number is the top of stack a.

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The instructions are printed one per line on standard output.

- Input that is already in ascending order prints nothing.
- Input in descending order is first swapped once with `sa`.
- Two values are never sorted further: `2 1` prints only `sa`, and the
  command exits with status 1.
- Three and five values use dedicated short sequences. Other sizes keep a
  longest increasing subsequence on a, move the rest to b, then insert each
  element back at the cheapest place and rotate the smallest value to the
  top.
- Invalid input prints `Error` on standard error. An empty first argument
  prints `Error` and exits with status 1.

## Checking

`push-swap-checker` takes the same arguments and reads instructions, one per
line, from standard input. After running them it prints `OK` if stack a is
sorted in ascending order and stack b is empty, and `KO` otherwise.

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

Invalid numbers, or a line that names no instruction, print `Error` on
standard error. A line is compared with each instruction name plus its
newline only over their common length, so a last line without a newline is
still accepted. With no arguments, or an empty first argument, the checker
prints nothing.

## Input rules

- With one argument, it is split on spaces and every piece must be an
  optional `+` or `-` followed by one or more decimal digits.
- With several arguments, each may start with whitespace and one sign, and
  must otherwise be decimal digits.
- Values must lie in the 32-bit signed integer range, and may have at most
  ten non-zero digits.
- Duplicate values are rejected.

## From Python

```python
from pushswap.sorter import sort_stack
from pushswap.checker import check

ops = sort_stack([3, 2, 5, 1, 4])
print(check([3, 2, 5, 1, 4], [f"{op}\n" for op in ops]))
```

- `pushswap.stacks.Stacks` holds the two stacks as deques, top at index 0.
  It has one method per instruction, `apply()` for an instruction given by
  name or as a `pushswap.stacks.Operation`, and `is_sorted()`. Created with
  `recording=True`, it appends each instruction it performs to its
  `operations` list.
- `pushswap.sorter.sort_stack` returns the list of `Operation`s that the
  sorting command would print.
- `pushswap.checker.check` runs instruction lines on the given values and
  returns `"OK"` or `"KO"`; it raises `ValueError` on an unknown
  instruction.
- `pushswap.parsing.parse_arguments` turns command-line arguments into
  integers. On invalid input it raises `pushswap.parsing.ParseError`, a
  subclass of `ValueError`.
- `pushswap.lis.longest_increasing_subsequence` returns a longest strictly
  increasing subsequence of a list of integers.
- `pushswap.moves` holds the cost calculations and rotation helpers the
  sorter uses.