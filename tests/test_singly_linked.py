import io

import pytest

from vdskit.singly_linked import SinglyLinkedList


@pytest.mark.parametrize(
    "start, operation, returned, after",
    [
        ([], lambda s: s.push_back("b"), None, ["b"]),
        (["b"], lambda s: s.push_front("a"), None, ["a", "b"]),
        (["a", "c"], lambda s: s.insert_at(1, "b"), None, ["a", "b", "c"]),
        (["a"], lambda s: s.insert_at(0, "start"), None, ["start", "a"]),
        (["a"], lambda s: s.insert_at(1, "end"), None, ["a", "end"]),
        (["a", "b", "c"], lambda s: s.pop_front(), "a", ["b", "c"]),
        (["a", "b", "c"], lambda s: s.pop_back(), "c", ["a", "b"]),
        (["a", "b", "c", "d"], lambda s: s.remove_at(3), "d", ["a", "b", "c"]),
        (["a", "b", "c", "d"], lambda s: s.remove_at(1), "b", ["a", "c", "d"]),
        (["a", "b"], lambda s: s.remove_at(0), "a", ["b"]),
        (["x", "a", "x", "b", "x"], lambda s: s.remove_value("x"), 3, ["a", "b"]),
        (["a", "b"], lambda s: s.remove_value("q"), 0, ["a", "b"]),
        (["a", "b", "b"], lambda s: s.get_at(2), "b", ["a", "b", "b"]),
        (["a", "b", "b"], lambda s: s.find("b"), 1, ["a", "b", "b"]),
        (["a", "b"], lambda s: s.clear(), None, []),
        (["a", "b", "c"], lambda s: s.reverse(), None, ["c", "b", "a"]),
    ],
)
def test_operation(start, operation, returned, after):
    sll = SinglyLinkedList(start)
    assert operation(sll) == returned
    assert list(sll) == after
    assert len(sll) == len(after)
    assert sll.is_empty() == (not after)


@pytest.mark.parametrize(
    "start, operation, error",
    [
        (["a", "b"], lambda s: s.insert_at(-1, "x"), IndexError),
        (["a", "b"], lambda s: s.insert_at(3, "x"), IndexError),
        ([], lambda s: s.pop_front(), IndexError),
        ([], lambda s: s.pop_back(), IndexError),
        (["a"], lambda s: s.remove_at(1), IndexError),
        (["a"], lambda s: s.get_at(1), IndexError),
        (["a"], lambda s: s.find("z"), ValueError),
    ],
)
def test_operation_errors(start, operation, error):
    sll = SinglyLinkedList(start)
    with pytest.raises(error):
        operation(sll)
    assert list(sll) == start


@pytest.mark.parametrize(
    "operation",
    [
        lambda s: s.pop_back(),
        lambda s: s.remove_at(1),
        lambda s: s.remove_value("b"),
        lambda s: s.reverse(),
    ],
    ids=["pop_back", "remove_at", "remove_value", "reverse"],
)
def test_tail_stays_valid_for_push_back(operation):
    sll = SinglyLinkedList(["a", "b"])
    operation(sll)
    sll.push_back("z")
    assert list(sll)[-1] == "z"
    assert len(sll) == len(list(sll))


def test_reverse_twice_restores_order():
    sll = SinglyLinkedList(["a", "b", "c", "d"])
    sll.reverse()
    sll.reverse()
    assert list(sll) == ["a", "b", "c", "d"]


def test_copy_is_independent():
    original = SinglyLinkedList(["a", "b"])
    clone = original.copy()
    clone.push_back("c")
    assert list(original) == ["a", "b"]
    assert list(clone) == ["a", "b", "c"]


def test_print_writes_one_line_per_value():
    buffer = io.StringIO()
    SinglyLinkedList(["a", "b"]).print(buffer)
    assert buffer.getvalue() == "a\nb\n"