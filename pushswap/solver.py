"""Top-level sorting strategy and the command-line entry point."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .cost import refresh_costs
from .parsing import InputError, parse_arguments
from .small_sort import (
    is_sorted,
    sort_five,
    sort_four,
    sort_three,
    sort_three_reverse,
    sort_two,
)
from .stack import Node, Stacks, Way, highest_index_node

_FINISHERS = {3: sort_three, 4: sort_four, 5: sort_five}


def cheapest_node(nodes: Iterable[Node]) -> Optional[Node]:
    """First node with the lowest total cost, or None for an empty stack."""
    return min(nodes, key=lambda node: node.moves, default=None)


def send_cheapest(stacks: Stacks) -> None:
    """Rotate both stacks for the cheapest node of ``a`` and push it to ``b``."""
    node = cheapest_node(stacks.a)
    if node is None:
        raise ValueError("stack a is empty")
    if node.way_a == Way.NORMAL:
        shared, only_a = stacks.rr, stacks.ra
    else:
        shared, only_a = stacks.rrr, stacks.rra
    only_b = stacks.rb if node.way_b == Way.NORMAL else stacks.rrb
    for _ in range(node.moves_c):
        shared()
    for _ in range(node.moves_a):
        only_a()
    for _ in range(node.moves_b):
        only_b()
    node.moves_a = node.moves_b = node.moves_c = 0
    stacks.pb()


def rotate_b_to_max(stacks: Stacks) -> None:
    """Bring the largest node of ``b`` to its top the shorter way round."""
    top = highest_index_node(stacks.b)
    if top is None:
        return
    step = stacks.rb if top.pos < top.invert_pos else stacks.rrb
    while top.pos != 0:
        step()


def _settle(stacks: Stacks) -> None:
    while stacks.a[0].index == stacks.a[-1].index + 1:
        stacks.rra()


def push_back(stacks: Stacks) -> None:
    """Move every node of ``b`` onto ``a``, pulling up bottom nodes that follow."""
    if not stacks.b:
        return
    for _ in range(len(stacks.b) - 1):
        stacks.pa()
        _settle(stacks)
    stacks.last_pa()
    _settle(stacks)


def sort_large(stacks: Stacks) -> None:
    """Sort a stack of six or more elements by cheapest insertion into ``b``."""
    if len(stacks.a) < 6:
        raise ValueError("sort_large needs at least six elements")
    stacks.pb()
    stacks.pb()
    stacks.pb()
    sort_three_reverse(stacks)
    while len(stacks.a) > 5:
        refresh_costs(stacks.a, stacks.b)
        send_cheapest(stacks)
    rotate_b_to_max(stacks)
    # Six to eight elements leave fewer than five in ``a`` here.
    _FINISHERS[len(stacks.a)](stacks)
    push_back(stacks)


def choose_sort(stacks: Stacks) -> None:
    """Pick the sorting routine that suits the size of stack ``a``."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        sort_large(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Names of the operations that sort the given values, top first."""
    stacks = Stacks.from_values(values)
    choose_sort(stacks)
    return list(stacks.operations)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations sorting the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    if not values:
        return 1
    for operation in solve(values):
        print(operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())