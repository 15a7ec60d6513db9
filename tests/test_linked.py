import pytest

from wirefdf.linked import LinkedList


def test_construct_from_items_keeps_order():
    items = [3, 1, 2]
    ll = LinkedList(items)
    assert list(ll) == items
    assert len(ll) == len(items)


def test_empty_list():
    ll = LinkedList()
    assert list(ll) == []
    assert len(ll) == 0


def test_push_front_prepends():
    ll = LinkedList(["b", "c"])
    ll.push_front("a")
    assert list(ll) == ["a", "b", "c"]
    assert ll.last() == "c"


def test_push_back_appends():
    ll = LinkedList(["a"])
    ll.push_back("b")
    assert list(ll) == ["a", "b"]
    assert ll.last() == "b"


def test_push_front_on_empty_sets_last():
    ll = LinkedList()
    ll.push_front(5)
    assert ll.last() == 5
    ll.push_back(6)
    assert list(ll) == [5, 6]


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_clear_calls_delete_in_order_and_empties():
    seen = []
    ll = LinkedList([1, 2, 3])
    ll.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(ll) == 0
    assert list(ll) == []


def test_clear_without_delete_empties():
    ll = LinkedList(["x", "y"])
    ll.clear()
    assert len(ll) == 0
    with pytest.raises(IndexError):
        ll.last()


def test_list_usable_after_clear():
    ll = LinkedList([1])
    ll.clear()
    ll.push_back(9)
    assert list(ll) == [9]


def test_for_each_visits_every_value():
    seen = []
    ll = LinkedList(["p", "q", "r"])
    ll.for_each(seen.append)
    assert seen == list(ll)


def test_map_returns_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    doubled = original.map(lambda v: v * 2)
    assert list(doubled) == [v * 2 for v in [1, 2, 3]]
    assert list(original) == [1, 2, 3]
    assert doubled is not original


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0