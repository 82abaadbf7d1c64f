"""Cost model for moving a node of stack ``a`` onto its slot in stack ``b``."""

from __future__ import annotations

from typing import Optional, Sequence

from .stack import Node, Way, highest_index, highest_index_node, lowest_index


class DestinationError(RuntimeError):
    """Raised when no slot in stack ``b`` can receive a node."""

    def __init__(self, value: int) -> None:
        super().__init__(f"no destination in stack b for value {value}")
        self.value = value


def extreme_destination(node: Node, b: Sequence[Node]) -> bool:
    """Target the largest node of ``b`` when ``node`` is a new extreme.

    Returns True and sets ``node.dest`` when the node's index lies outside
    the range held in ``b``; returns False otherwise.
    """
    if not b:
        return False
    if node.index > highest_index(b) or node.index < lowest_index(b):
        biggest = highest_index_node(b)
        assert biggest is not None
        node.dest = biggest.pos
        return True
    return False


def middle_destination(node: Node, b: Sequence[Node]) -> Optional[int]:
    """Position in ``b`` that must reach the top so ``node`` fits above it.

    ``b`` is kept in descending circular order; the answer is the position of
    the lower node of the neighbouring pair that brackets ``node``, or 0 when
    the bracketing pair wraps from the bottom to the top. None when nothing
    brackets the node.
    """
    if not b:
        return None
    for above, below in zip(b, b[1:]):
        if above.index > node.index > below.index:
            return below.pos
    if b[0].index < node.index < b[-1].index:
        return 0
    return None


def compute_destination(node: Node, b: Sequence[Node]) -> int:
    """Set and return ``node.dest``; raise DestinationError when there is none."""
    if extreme_destination(node, b):
        return node.dest
    dest = middle_destination(node, b)
    if dest is None:
        node.dest = -1
        raise DestinationError(node.value)
    node.dest = dest
    return dest


def _middle(nodes: Sequence[Node]) -> int:
    return (len(nodes) - 1) // 2 + 1


def choose_way_b(node: Node, b: Sequence[Node]) -> Way:
    """Rotate ``b`` forwards when the destination lies in its upper half."""
    return Way.NORMAL if node.dest < _middle(b) else Way.INVERT


def choose_way_a(node: Node, a: Sequence[Node]) -> Way:
    """Rotate ``a`` forwards when the node lies in its upper half."""
    return Way.NORMAL if node.pos < _middle(a) else Way.INVERT


def moves_in_a(node: Node, a: Sequence[Node]) -> int:
    """Rotations of ``a`` needed to bring the node to the top."""
    if node.pos < _middle(a):
        return node.pos
    return node.invert_pos + 1


def moves_in_b(node: Node, b: Sequence[Node]) -> int:
    """Rotations of ``b`` needed to bring the destination to the top."""
    if node.way_b == Way.NORMAL:
        return node.dest
    return len(b) - node.dest


def combined_moves(node: Node) -> int:
    """Rotations shareable between both stacks (rr or rrr).

    When both stacks turn the same way, the shared part is taken off the
    node's separate counts and returned.
    """
    if node.way_a != node.way_b or node.moves_a <= 0 or node.moves_b <= 0:
        return 0
    shared = min(node.moves_a, node.moves_b)
    node.moves_a -= shared
    node.moves_b -= shared
    return shared


def count_moves(node: Node, a: Sequence[Node], b: Sequence[Node]) -> int:
    """Fill the node's move counters and return its total cost."""
    node.moves_a = moves_in_a(node, a)
    node.moves_b = moves_in_b(node, b)
    node.moves_c = combined_moves(node)
    return node.moves_a + node.moves_b + node.moves_c


def refresh_costs(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Recompute destination, directions and cost of every node of ``a``."""
    for node in a:
        compute_destination(node, b)
        node.way_b = choose_way_b(node, b)
        node.way_a = choose_way_a(node, a)
        node.moves = count_moves(node, a, b)