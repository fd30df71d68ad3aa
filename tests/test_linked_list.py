import pytest

from algosuite.linked_list import ListNode, build_list, list_values, remove_nth_from_end

VALUES = [1, 2, 3, 4, 5]


def test_round_trip():
    assert list_values(build_list(VALUES)) == VALUES


def test_empty_list():
    assert build_list([]) is None
    assert list_values(None) == []


def test_iteration_yields_nodes():
    head = build_list(VALUES)
    nodes = list(head)
    assert nodes[0] is head
    assert [node.val for node in nodes] == VALUES


def test_remove_second_from_end():
    assert list_values(remove_nth_from_end(build_list(VALUES), 2)) == [1, 2, 3, 5]


@pytest.mark.parametrize("n", range(1, len(VALUES) + 1))
def test_remove_drops_exactly_one(n):
    removed = VALUES[len(VALUES) - n]
    result = list_values(remove_nth_from_end(build_list(VALUES), n))
    assert len(result) == len(VALUES) - 1
    assert removed not in result
    assert [v for v in VALUES if v != removed] == result


def test_remove_head_returns_second_node():
    head = build_list(VALUES)
    second = head.next
    assert remove_nth_from_end(head, len(VALUES)) is second


def test_remove_only_node():
    assert remove_nth_from_end(ListNode(7), 1) is None


@pytest.mark.parametrize("n", [0, len(VALUES) + 1])
def test_out_of_range_leaves_list_unchanged(n):
    head = build_list(VALUES)
    assert remove_nth_from_end(head, n) is head
    assert list_values(head) == VALUES


def test_remove_from_empty():
    assert remove_nth_from_end(None, 1) is None