import pytest

from dsakit.collections_ import IndexedList, LinkedList, Stack


def test_linked_list_push_keeps_order():
    lst = LinkedList()
    for value in (10, 13, 23, -34, 42):
        lst.push(value)
    assert list(lst) == [10, 13, 23, -34, 42]
    assert len(lst) == 5


def test_linked_list_delete_strings():
    lst = LinkedList(["ram", "sam", "zam", "tam", "ham", "pam"])
    lst.delete("zam")
    assert list(lst) == ["ram", "sam", "tam", "ham", "pam"]


def test_linked_list_delete_head_and_middle_then_push():
    lst = LinkedList([10, 13, 23, -34, 42])
    lst.delete(10)
    lst.delete(-34)
    lst.push(12)
    assert list(lst) == [13, 23, 42, 12]
    lst.delete(12)
    assert list(lst) == [13, 23, 42]


def test_linked_list_delete_first_occurrence_only():
    lst = LinkedList([1, 2, 1, 2])
    lst.delete(2)
    assert list(lst) == [1, 1, 2]


def test_linked_list_delete_missing_raises():
    lst = LinkedList([1, 2])
    with pytest.raises(ValueError):
        lst.delete(3)
    assert list(lst) == [1, 2]


def test_linked_list_delete_on_empty_does_nothing():
    lst = LinkedList()
    lst.delete(1)
    assert list(lst) == []


def test_indexed_list_get_and_remove():
    lst = IndexedList()
    for value in (12, 48, 78, 37, 10, 74, 55):
        lst.insert(value)
    assert lst.get(5) == 74
    assert lst.get(3) == 37
    assert lst.remove(2) == 78
    assert list(lst) == [12, 48, 37, 10, 74, 55]
    assert lst.remove(5) == 55
    assert list(lst) == [12, 48, 37, 10, 74]


def test_indexed_list_strings():
    lst = IndexedList(["jam", "sam", "larry", "kim"])
    assert lst.get(1) == "sam"
    assert lst.remove(2) == "larry"
    assert list(lst) == ["jam", "sam", "kim"]


def test_indexed_list_out_of_range():
    lst = IndexedList([1, 2, 3])
    with pytest.raises(IndexError, match="input index out of range"):
        lst.get(3)
    with pytest.raises(IndexError, match="input index out of range"):
        lst.remove(3)


def test_indexed_list_negative_index():
    lst = IndexedList([1, 2, 3])
    with pytest.raises(IndexError, match="invalid index: -1"):
        lst.get(-1)
    with pytest.raises(IndexError, match="invalid index: -1"):
        lst.remove(-1)
    assert len(lst) == 3


def test_stack_push_pop():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.pop() == 3
    assert len(stack) == 2
    stack.push(5)
    assert list(stack) == [1, 2, 5]


def test_stack_strings():
    stack = Stack()
    stack.push("hello")
    stack.push("world")
    assert stack.pop() == "world"
    assert list(stack) == ["hello"]


def test_stack_pop_empty_raises():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    assert len(stack) == 0