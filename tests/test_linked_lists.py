import pytest

from algodrills.linked_lists import (
    ListNode,
    add_two_numbers,
    build_list,
    delete_node,
    double_it,
    list_values,
    merge_two_lists,
)


def _little_endian_int(head):
    return int("".join(str(d) for d in reversed(list_values(head))))


def _big_endian_int(head):
    return int("".join(str(d) for d in list_values(head)))


@pytest.mark.parametrize("values", [[], [1], [4, 5, 1, 9]])
def test_build_list_round_trip(values):
    assert list_values(build_list(values)) == values


def test_build_list_empty_is_none():
    assert build_list([]) is None
    assert list_values(None) == []


def test_list_node_links():
    tail = ListNode(2)
    head = ListNode(1, tail)
    assert head.next is tail
    assert list_values(head) == [1, 2]
    assert repr(head) == "ListNode([1, 2])"


def test_add_two_numbers_source_example():
    first = [2, 4, 9]
    second = [5, 6, 4, 9]
    expected = _little_endian_int(build_list(first)) + _little_endian_int(build_list(second))
    l1, l2 = build_list(first), build_list(second)
    result = add_two_numbers(l1, l2)
    assert result is l2
    assert _little_endian_int(result) == expected


@pytest.mark.parametrize(
    "first, second",
    [([9] * 7, [9] * 4), ([0], [0]), ([1, 8], [0]), ([5], [5]), ([2, 4, 3], [5, 6, 4])],
)
def test_add_two_numbers_sum(first, second):
    expected = _little_endian_int(build_list(first)) + _little_endian_int(build_list(second))
    result = add_two_numbers(build_list(first), build_list(second))
    assert _little_endian_int(result) == expected
    assert all(0 <= d <= 9 for d in list_values(result))


def test_add_two_numbers_writes_into_longer_list():
    l1 = build_list([1, 2, 3])
    l2 = build_list([4])
    assert add_two_numbers(l1, l2) is l1


def test_add_two_numbers_tie_uses_second():
    l1 = build_list([1, 2])
    l2 = build_list([3, 4])
    assert add_two_numbers(l1, l2) is l2


def test_add_two_numbers_both_empty():
    assert add_two_numbers(None, None) is None


def test_merge_two_lists_sorted():
    first, second = [1, 2, 4], [1, 3, 4]
    merged = merge_two_lists(build_list(first), build_list(second))
    assert list_values(merged) == sorted(first + second)


def test_merge_two_lists_tie_takes_second_first():
    l1 = build_list([1])
    l2 = build_list([1])
    merged = merge_two_lists(l1, l2)
    assert merged is l2
    assert merged.next is l1


@pytest.mark.parametrize("first, second", [([], []), ([], [0]), ([2, 5], [])])
def test_merge_two_lists_with_empty(first, second):
    merged = merge_two_lists(build_list(first), build_list(second))
    assert list_values(merged) == first + second


def test_delete_node_source_example():
    values = [4, 5, 1, 9]
    head = build_list(values)
    delete_node(head.next)
    assert list_values(head) == [4, 1, 9]


def test_delete_node_tail_raises():
    head = build_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize("digits", [[5], [9, 9, 9], [1, 8, 9], [0], [4, 2]])
def test_double_it(digits):
    expected = 2 * _big_endian_int(build_list(digits))
    result = double_it(build_list(digits))
    assert _big_endian_int(result) == expected
    assert all(0 <= d <= 9 for d in list_values(result))


def test_double_it_keeps_head_without_carry():
    head = build_list([1, 2])
    assert double_it(head) is head


def test_double_it_new_head_on_carry():
    head = build_list([5])
    result = double_it(head)
    assert result.next is head
    assert len(list_values(result)) == 2


def test_double_it_empty():
    assert double_it(None) is None