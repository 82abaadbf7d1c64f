"""Fixed sequences for sorting stacks of two to five elements."""

from __future__ import annotations

from typing import Sequence

from .stack import Node, Stacks, count_greater


def is_sorted(nodes: Sequence[Node]) -> bool:
    """True when values never decrease from top to bottom."""
    return all(
        earlier.value <= later.value for earlier, later in zip(nodes, nodes[1:])
    )


def is_sorted_reverse(nodes: Sequence[Node]) -> bool:
    """True when values never increase from top to bottom."""
    return all(
        earlier.value >= later.value for earlier, later in zip(nodes, nodes[1:])
    )


def sort_two(stacks: Stacks) -> None:
    """Sort a two-element stack ``a``."""
    first, second = stacks.a[0], stacks.a[1]
    if first.value > second.value:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort the top three elements of stack ``a`` into ascending order."""
    if is_sorted(stacks.a):
        return
    first, second, third = (node.value for node in stacks.a[:3])
    if first < second:
        stacks.rra()
        if first < third:
            stacks.sa()
        return
    if first < third:
        stacks.sa()
    elif first > third:
        stacks.ra()
        if second > third:
            stacks.sa()


def sort_three_reverse(stacks: Stacks) -> None:
    """Sort the three elements of stack ``b`` into descending order."""
    first, second, third = (node.value for node in stacks.b[:3])
    if first > second > third:
        return
    if first > second:
        if first > third:
            stacks.rb()
            stacks.sb()
            stacks.rrb()
        else:
            stacks.rrb()
        return
    if first > third:
        stacks.sb()
    elif first < third:
        stacks.rb()
        if second < third:
            stacks.sb()


def sort_four(stacks: Stacks) -> None:
    """Sort a four-element stack ``a`` using ``b`` for one element."""
    while count_greater(stacks.a[0], stacks.a) < 2:
        stacks.ra()
    stacks.pb()
    sort_three(stacks)
    stacks.last_pa()
    if not is_sorted(stacks.a):
        stacks.sa()


def sort_five(stacks: Stacks) -> None:
    """Sort a five-element stack ``a`` by parking its two smallest in ``b``."""
    for _ in range(2):
        while count_greater(stacks.a[0], stacks.a) < 3:
            stacks.ra()
        stacks.pb()
    sort_three(stacks)
    if stacks.b[0].value < stacks.b[1].value:
        stacks.sb()
    stacks.last_pa()
    stacks.last_pa()