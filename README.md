# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It prints the operations, one per line, that turn the
input into stack `a` sorted in ascending order, smallest on top.

## Operations

| name  | effect                                       |
|-------|----------------------------------------------|
| `sa`  | swap the top two elements of `a`             |
| `sb`  | swap the top two elements of `b`             |
| `ss`  | `sa` and `sb` together                       |
| `pa`  | move the top of `b` onto `a`                 |
| `pb`  | move the top of `a` onto `b`                 |
| `ra`  | rotate `a` up: the top goes to the bottom    |
| `rb`  | rotate `b` up                                |
| `rr`  | `ra` and `rb` together                       |
| `rra` | rotate `a` down: the bottom goes to the top  |
| `rrb` | rotate `b` down                              |
| `rrr` | `rra` and `rrb` together                     |

An operation on a stack with too few elements leaves that stack unchanged.

## Command line

Pass the numbers as separate arguments, or as one string with spaces
between them:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The same command is available as `python -m pushswap.solver`.

Invalid input prints `Error` to standard error and exits with status 1.
This covers a missing or empty argument, characters other than digits,
spaces and signs, more than one sign in a number or a sign that does not
lead it, several numbers inside one of several arguments, values outside
the 32-bit signed range, and duplicate values. A single argument made only
of spaces exits with status 1 and prints nothing. Input that is already
sorted prints nothing and exits with status 0.

## Library use

```python
from pushswap.solver import solve
from pushswap.stack import Stacks

ops = solve([3, 2, 1])          # list of operation names

stacks = Stacks.from_values([2, 1, 3])
stacks.sa()
print(stacks.values_a())        # [1, 2, 3]
print(stacks.operations)        # ['sa']
```

`Stacks` records the name of every operation in `operations`; give it an
`output` callable to receive each name as it happens.

Arguments can be checked and converted without sorting:

```python
from pushswap.parsing import parse_arguments, InputError

try:
    values = parse_arguments(["5", "-3", "12"])
except InputError:
    ...
```

Two to five values are sorted with fixed short sequences
(`pushswap.small_sort`). Larger inputs are sorted by pushing to `b` the
element of `a` that is cheapest to place each time (`pushswap.cost`), then
finishing the last few in `a` and pushing everything back
(`pushswap.solver`).

## What it does not do

There is no checker: the package produces operations but does not read a
list of operations back and verify that it sorts a given input.

## Tests

```
pip install -e ".[test]"
pytest
```