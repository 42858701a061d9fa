import pytest

from dsalgo.linked_list import LinkedList


def test_create_from_values_keeps_order():
    values = [3, 1, 4, 1, 5]
    assert list(LinkedList(values)) == values
    assert len(LinkedList(values)) == len(values)


def test_create_empty():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0


def test_insert_at_head_tail_and_middle():
    lst = LinkedList([1, 2, 3])
    lst.insert(0, 0)
    lst.insert(9, -1)
    lst.insert(7, 2)
    assert list(lst) == [0, 1, 7, 2, 3, 9]


def test_insert_at_size_appends():
    lst = LinkedList(["a", "b"])
    lst.insert("c", 2)
    assert list(lst) == ["a", "b", "c"]
    lst.insert("d")
    assert list(lst) == ["a", "b", "c", "d"]


@pytest.mark.parametrize("index", [-2, 4])
def test_insert_out_of_range(index):
    lst = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.insert(5, index)
    assert list(lst) == [1, 2, 3]


def test_delete_sequence_from_example():
    lst = LinkedList()
    for word in ["Hello World", "Hello World", "Jimbob", "Wagwan"]:
        lst.insert(word, -1)
    assert len(lst) == 4
    assert lst.delete(0) == "Hello World"
    assert lst.delete(1) == "Jimbob"
    with pytest.raises(IndexError):
        lst.delete(2)
    assert lst.delete(0) == "Hello World"
    assert list(lst) == ["Wagwan"]


def test_delete_tail_then_append_uses_new_tail():
    lst = LinkedList([1, 2, 3])
    assert lst.delete(-1) == 3
    lst.insert(4)
    assert list(lst) == [1, 2, 4]


def test_delete_last_middle_item_updates_tail():
    lst = LinkedList([1, 2, 3])
    assert lst.delete(2) == 3
    lst.insert(5)
    assert list(lst) == [1, 2, 5]


def test_delete_until_empty():
    lst = LinkedList([1, 2])
    lst.delete(0)
    lst.delete(0)
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.delete(0)
    lst.insert(8)
    assert list(lst) == [8]


def test_delete_invalid_negative_index():
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.delete(-2)


def test_reverse():
    values = [1, 2, 3, 4]
    lst = LinkedList(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    lst.insert(0)
    assert list(lst) == [4, 3, 2, 1, 0]


def test_reverse_twice_is_identity():
    values = ["x", "y", "z"]
    lst = LinkedList(values)
    lst.reverse()
    lst.reverse()
    assert list(lst) == values


def test_reverse_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().reverse()


def test_search_found_and_missing():
    lst = LinkedList(["Hello World", "Jimbob", "Wagwan"])
    assert lst.search("Jimbob") == "Jimbob"
    assert lst.search("does not exist") is None


def test_search_with_key():
    pairs = [("a", 1), ("b", 2), ("c", 3)]
    lst = LinkedList(pairs)
    assert lst.search("b", key=lambda pair: pair[0]) == ("b", 2)
    assert lst.search("z", key=lambda pair: pair[0]) is None


def test_map_visits_in_order():
    values = [5, 6, 7]
    seen = []
    LinkedList(values).map(seen.append)
    assert seen == values


def test_str_joins_items():
    assert str(LinkedList([1, 2, 3])) == "1 2 3"
    assert str(LinkedList()) == ""