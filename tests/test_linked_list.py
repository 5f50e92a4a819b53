from libmx.linked_list import LinkedList, Node
from libmx.strings import greater


def test_init_keeps_order_and_size():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.head is None


def test_push_front_and_back():
    lst = LinkedList(["b"])
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert isinstance(lst.head, Node) and lst.head.data == "a"


def test_push_back_on_empty():
    lst = LinkedList()
    lst.push_back("x")
    assert list(lst) == ["x"]


def test_pop_front():
    lst = LinkedList(["a", "b"])
    assert lst.pop_front() == "a"
    assert list(lst) == ["b"]
    assert lst.pop_front() == "b"
    assert lst.pop_front() is None
    assert len(lst) == 0


def test_pop_back():
    lst = LinkedList(["a", "b", "c"])
    assert lst.pop_back() == "c"
    assert list(lst) == ["a", "b"]
    assert lst.pop_back() == "b"
    assert lst.pop_back() == "a"
    assert lst.head is None
    assert lst.pop_back() is None


def test_sort_with_string_comparison():
    words = ["pear", "apple", "fig", "banana", "apple"]
    lst = LinkedList(words)
    result = lst.sort(greater)
    assert result is lst
    assert list(lst) == sorted(words)


def test_sort_descending_with_custom_cmp():
    numbers = [3, 1, 4, 1, 5, 9, 2]
    lst = LinkedList(numbers).sort(lambda a, b: a < b)
    assert list(lst) == sorted(numbers, reverse=True)


def test_sort_empty_and_single():
    assert list(LinkedList().sort(greater)) == []
    assert list(LinkedList(["only"]).sort(greater)) == ["only"]