import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stack import (
    INT_MAX,
    INT_MIN,
    Node,
    Stacks,
    Way,
    assign_indices,
    count_greater,
    format_nodes,
    format_side_by_side,
    highest_index,
    highest_index_node,
    lowest_index,
    refresh_positions,
)

distinct_ints = st.lists(
    st.integers(min_value=INT_MIN, max_value=INT_MAX), unique=True, max_size=30
)


def _positions_consistent(nodes):
    size = len(nodes)
    return all(
        node.pos == i and node.invert_pos == size - 1 - i
        for i, node in enumerate(nodes)
    )


def test_way_values_appear_in_node_dump():
    node = Node(value=5, way_b=Way.NORMAL)
    text = format_nodes([node])
    assert "type of way b: 1 type of way a :0\n" in text


def test_from_values_keeps_order():
    stacks = Stacks.from_values([3, 1, 2])
    assert stacks.values_a() == [3, 1, 2]
    assert stacks.values_b() == []


def test_from_values_assigns_ranks():
    stacks = Stacks.from_values([30, 10, 20])
    assert [n.index for n in stacks.a] == [3, 1, 2]


@given(distinct_ints)
def test_indices_are_a_permutation_of_ranks(values):
    stacks = Stacks.from_values(values)
    assert sorted(n.index for n in stacks.a) == list(range(1, len(values) + 1))
    by_value = sorted(stacks.a, key=lambda n: n.value)
    assert [n.index for n in by_value] == list(range(1, len(values) + 1))


def test_count_greater():
    nodes = [Node(value=v) for v in (5, 1, 9, 7)]
    assert count_greater(nodes[0], nodes) == 2
    assert count_greater(nodes[2], nodes) == 0


def test_assign_indices_directly():
    nodes = [Node(value=v) for v in (-4, 8, 0)]
    assign_indices(nodes)
    assert [n.index for n in nodes] == [1, 3, 2]


def test_refresh_positions():
    nodes = [Node(value=v) for v in (4, 5, 6)]
    refresh_positions(nodes)
    assert [n.pos for n in nodes] == [0, 1, 2]
    assert [n.invert_pos for n in nodes] == [2, 1, 0]


def test_extreme_index_on_empty():
    assert highest_index([]) == INT_MIN
    assert lowest_index([]) == INT_MAX
    assert highest_index_node([]) is None


def test_highest_and_lowest_index():
    stacks = Stacks.from_values([7, 2, 9, 4])
    assert highest_index(stacks.a) == 4
    assert lowest_index(stacks.a) == 1
    assert highest_index_node(stacks.a).value == 9


def test_swap_a():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.sa()
    assert stacks.values_a() == [2, 1, 3]
    assert stacks.operations == ["sa"]
    assert _positions_consistent(stacks.a)


def test_swap_on_single_is_noop_but_recorded():
    stacks = Stacks.from_values([1])
    stacks.sa()
    assert stacks.values_a() == [1]
    assert stacks.operations == ["sa"]


def test_push_between_stacks():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.pb()
    stacks.pb()
    assert stacks.values_a() == [3]
    assert stacks.values_b() == [2, 1]
    stacks.pa()
    assert stacks.values_a() == [2, 3]
    assert stacks.values_b() == [1]
    assert stacks.operations == ["pb", "pb", "pa"]
    assert _positions_consistent(stacks.a)
    assert _positions_consistent(stacks.b)


def test_push_from_empty_is_noop():
    stacks = Stacks.from_values([1, 2])
    stacks.pa()
    assert stacks.values_a() == [1, 2]
    assert stacks.values_b() == []
    assert stacks.operations == ["pa"]


def test_last_pa_records_pa():
    stacks = Stacks.from_values([1, 2])
    stacks.pb()
    stacks.last_pa()
    assert stacks.values_a() == [1, 2]
    assert stacks.values_b() == []
    assert stacks.operations == ["pb", "pa"]
    assert _positions_consistent(stacks.a)


def test_rotations():
    stacks = Stacks.from_values([1, 2, 3, 4])
    stacks.ra()
    assert stacks.values_a() == [2, 3, 4, 1]
    stacks.rra()
    stacks.rra()
    assert stacks.values_a() == [4, 1, 2, 3]
    assert _positions_consistent(stacks.a)


def test_double_operations_touch_both():
    stacks = Stacks.from_values([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        stacks.pb()
    stacks.rr()
    assert stacks.values_a() == [5, 6, 4]
    assert stacks.values_b() == [2, 1, 3]
    stacks.rrr()
    assert stacks.values_a() == [4, 5, 6]
    assert stacks.values_b() == [3, 2, 1]
    stacks.ss()
    assert stacks.values_a() == [5, 4, 6]
    assert stacks.values_b() == [2, 3, 1]
    assert stacks.operations[-3:] == ["rr", "rrr", "ss"]


def test_output_callback_receives_names():
    seen = []
    stacks = Stacks.from_values([2, 1])
    stacks.output = seen.append
    stacks.sa()
    stacks.pb()
    stacks.rrb()
    assert seen == ["sa", "pb", "rrb"]
    assert seen == stacks.operations


@given(distinct_ints, st.sampled_from(["a", "b"]))
def test_rotate_then_reverse_is_identity(values, side):
    stacks = Stacks.from_values(values)
    if side == "b":
        for _ in values:
            stacks.pb()
    before = (stacks.values_a(), stacks.values_b())
    getattr(stacks, "r" + side)()
    getattr(stacks, "rr" + side)()
    assert (stacks.values_a(), stacks.values_b()) == before


@given(distinct_ints, st.lists(st.sampled_from(
    ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]
), max_size=40))
def test_operations_preserve_elements(values, ops):
    stacks = Stacks.from_values(values)
    for op in ops:
        getattr(stacks, op)()
    assert sorted(stacks.values_a() + stacks.values_b()) == sorted(values)
    assert stacks.operations == ops
    assert _positions_consistent(stacks.a)
    assert _positions_consistent(stacks.b)


def test_format_side_by_side():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.pb()
    text = format_side_by_side(stacks.a, stacks.b)
    assert text == "a : 2\t\tb : 1\na : 3\t\t\n"


def test_format_side_by_side_empty():
    assert format_side_by_side([], []) == ""


def test_format_nodes_lists_each_node():
    stacks = Stacks.from_values([42, 7])
    text = format_nodes(stacks.a)
    assert " value : 42, pos : 0, index : 2\n" in text
    assert " value : 7, pos : 1, index : 1\n" in text
    assert text.endswith("\n\n\n")


def test_format_nodes_empty():
    assert format_nodes([]) == "\n"


@pytest.mark.parametrize("op", ["ra", "rra", "sa"])
def test_single_stack_ops_leave_b_alone(op):
    stacks = Stacks.from_values([1, 2, 3, 4])
    stacks.pb()
    getattr(stacks, op)()
    assert stacks.values_b() == [1]