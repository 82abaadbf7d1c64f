"""The two stacks, their nodes and the push-swap operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterable, Optional, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class Way(IntEnum):
    """Direction in which a stack is rotated to bring a node to the top."""

    INVERT = 0
    NORMAL = 1


@dataclass(eq=False)
class Node:
    """One element of a stack together with the bookkeeping the solver uses."""

    value: int
    index: int = 0
    pos: int = 0
    invert_pos: int = 0
    dest: int = 0
    way_a: Way = Way.INVERT
    way_b: Way = Way.INVERT
    moves: int = 0
    moves_a: int = 0
    moves_b: int = 0
    moves_c: int = 0


def count_greater(node: Node, nodes: Iterable[Node]) -> int:
    """Number of nodes whose value is greater than ``node``'s value."""
    return sum(1 for other in nodes if node.value < other.value)


def assign_indices(nodes: Sequence[Node]) -> None:
    """Give every node its rank: 1 for the smallest value up to len(nodes)."""
    size = len(nodes)
    for node in nodes:
        node.index = size - count_greater(node, nodes)


def refresh_positions(nodes: Sequence[Node]) -> None:
    """Renumber positions from the top and from the bottom."""
    last = len(nodes) - 1
    for pos, node in enumerate(nodes):
        node.pos = pos
        node.invert_pos = last - pos


def highest_index(nodes: Iterable[Node]) -> int:
    """Largest index among the nodes, or INT_MIN when there are none."""
    return max((node.index for node in nodes), default=INT_MIN)


def lowest_index(nodes: Iterable[Node]) -> int:
    """Smallest index among the nodes, or INT_MAX when there are none."""
    return min((node.index for node in nodes), default=INT_MAX)


def highest_index_node(nodes: Iterable[Node]) -> Optional[Node]:
    """First node holding the largest index, or None for an empty stack."""
    best: Optional[Node] = None
    for node in nodes:
        if best is None or node.index > best.index:
            best = node
    return best


def format_nodes(nodes: Iterable[Node]) -> str:
    """Detailed dump of every node's fields."""
    parts = []
    for node in nodes:
        parts.append(
            f" value : {node.value}, pos : {node.pos}, index : {node.index}\n"
            f" dest : {node.dest}, invert_pos : {node.invert_pos}, "
            f"nbr_move : {node.moves} type of way b: {int(node.way_b)} "
            f"type of way a :{int(node.way_a)}\n"
            f" nbr moove a : {node.moves_a}, nbr moove b : {node.moves_b},\n\n"
        )
    parts.append("\n")
    return "".join(parts)


def format_side_by_side(a: Sequence[Node], b: Sequence[Node]) -> str:
    """Both stacks printed in two columns, top first."""
    lines = []
    for depth in range(max(len(a), len(b))):
        line = ""
        if depth < len(a):
            line += f"a : {a[depth].value}\t\t"
        if depth < len(b):
            line += f"b : {b[depth].value}"
        lines.append(line + "\n")
    return "".join(lines)


def _swap(nodes: list[Node]) -> None:
    if len(nodes) >= 2:
        nodes[0], nodes[1] = nodes[1], nodes[0]


def _rotate(nodes: list[Node]) -> None:
    if len(nodes) >= 2:
        nodes.append(nodes.pop(0))


def _reverse_rotate(nodes: list[Node]) -> None:
    if len(nodes) >= 2:
        nodes.insert(0, nodes.pop())


def _push(src: list[Node], dest: list[Node]) -> None:
    if src:
        dest.insert(0, src.pop(0))


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``; every operation is recorded by name."""

    a: list[Node] = field(default_factory=list)
    b: list[Node] = field(default_factory=list)
    operations: list[str] = field(default_factory=list)
    output: Optional[Callable[[str], None]] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Stacks":
        """Build stack ``a`` from values, top first, with ranks assigned."""
        a = [Node(value=value) for value in values]
        refresh_positions(a)
        assign_indices(a)
        return cls(a=a)

    def _record(self, name: str) -> None:
        self.operations.append(name)
        if self.output is not None:
            self.output(name)

    def _refresh(self, *stacks: list[Node]) -> None:
        for nodes in stacks:
            refresh_positions(nodes)

    def sa(self) -> None:
        _swap(self.a)
        self._refresh(self.a)
        self._record("sa")

    def sb(self) -> None:
        _swap(self.b)
        self._refresh(self.b)
        self._record("sb")

    def ss(self) -> None:
        _swap(self.a)
        _swap(self.b)
        self._refresh(self.a, self.b)
        self._record("ss")

    def pa(self) -> None:
        _push(self.b, self.a)
        self._refresh(self.a, self.b)
        self._record("pa")

    def last_pa(self) -> None:
        """Push onto ``a`` refreshing only ``a``, for when ``b`` runs out."""
        _push(self.b, self.a)
        self._refresh(self.a)
        self._record("pa")

    def pb(self) -> None:
        _push(self.a, self.b)
        self._refresh(self.a, self.b)
        self._record("pb")

    def ra(self) -> None:
        _rotate(self.a)
        self._refresh(self.a)
        self._record("ra")

    def rb(self) -> None:
        _rotate(self.b)
        self._refresh(self.b)
        self._record("rb")

    def rr(self) -> None:
        _rotate(self.a)
        _rotate(self.b)
        self._refresh(self.a, self.b)
        self._record("rr")

    def rra(self) -> None:
        _reverse_rotate(self.a)
        self._refresh(self.a)
        self._record("rra")

    def rrb(self) -> None:
        _reverse_rotate(self.b)
        self._refresh(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._refresh(self.a, self.b)
        self._record("rrr")

    def values_a(self) -> list[int]:
        return [node.value for node in self.a]

    def values_b(self) -> list[int]:
        return [node.value for node in self.b]