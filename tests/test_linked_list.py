import pytest

from algokit.linked_list import LinkedList


def test_insert_insert_after_erase_sequence():
    lst = LinkedList()
    lst.insert(1)
    lst.insert(2)
    lst.insert(3)
    assert lst.first().data == 3

    lst.insert_after(lst.first(), 4)
    assert lst.first().next.data == 4

    lst.erase(lst.first())
    assert lst.first().data == 4
    assert list(lst) == [4, 2, 1]
    assert len(lst) == 3


def test_prev_links():
    lst = LinkedList()
    c = lst.insert("c")
    b = lst.insert("b")
    a = lst.insert("a")
    assert c.prev is b
    assert b.prev is a
    assert a.prev is None


def test_erase_returns_following_item():
    lst = LinkedList()
    last = lst.insert(3)
    middle = lst.insert(2)
    lst.insert(1)
    assert lst.erase(middle) is last
    assert list(lst) == [1, 3]
    assert last.prev is lst.first()


def test_erase_last_returns_none():
    lst = LinkedList()
    only = lst.insert(1)
    assert lst.erase(only) is None
    assert lst.first() is None
    assert len(lst) == 0


def test_erase_next():
    lst = LinkedList()
    lst.insert(3)
    lst.insert(2)
    head = lst.insert(1)
    following = lst.erase_next(head)
    assert following.data == 3
    assert list(lst) == [1, 3]


def test_erase_next_without_successor():
    lst = LinkedList()
    item = lst.insert(1)
    with pytest.raises(IndexError):
        lst.erase_next(item)


def test_item_of_other_list_rejected():
    first, second = LinkedList(), LinkedList()
    item = first.insert(1)
    with pytest.raises(ValueError):
        second.erase(item)


def test_erased_item_cannot_be_reused():
    lst = LinkedList()
    item = lst.insert(1)
    lst.erase(item)
    with pytest.raises(ValueError):
        lst.insert_after(item, 2)


def test_items_yields_nodes_in_order():
    lst = LinkedList()
    for v in (3, 2, 1):
        lst.insert(v)
    assert [item.data for item in lst.items()] == [1, 2, 3]