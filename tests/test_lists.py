import pytest

from ftkit.lists import LinkedList, Node


def test_build_and_iterate():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0
    assert lst.head is None


def test_push_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.push_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b", "c"]


def test_append_to_empty_sets_head():
    lst = LinkedList()
    node = lst.append("x")
    assert lst.head is node
    lst.append("y")
    assert list(lst) == ["x", "y"]


def test_for_each_visits_nodes_in_order():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.for_each(lambda node: seen.append(node.content))
    assert seen == [1, 2, 3]


def test_for_each_can_modify_nodes():
    lst = LinkedList(["a", "b"])

    def upper(node):
        node.content = node.content.upper()

    lst.for_each(upper)
    assert list(lst) == ["A", "B"]


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList([1, 2, 3])

    def double(node):
        node.content *= 2
        return node

    mapped = lst.map(double)
    assert list(mapped) == [x * 2 for x in [1, 2, 3]]
    assert list(lst) == [1, 2, 3]


def test_map_can_return_new_node():
    lst = LinkedList(["x", "y"])
    mapped = lst.map(lambda node: Node(node.content + "!"))
    assert list(mapped) == ["x!", "y!"]


def test_map_failure_raises():
    lst = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        lst.map(lambda node: None if node.content == 2 else node)


def test_clear_deletes_back_to_front():
    lst = LinkedList(["a", "b", "c"])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["c", "b", "a"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_deleter():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []