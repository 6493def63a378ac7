import pytest

from astarpath.search_tree import SearchNode, SearchTree
from astarpath.types import PathNode


def test_root_g_is_its_own_cost():
    tree = SearchTree()
    root = tree.add_root(PathNode("S", 0), h=4)
    entry = tree[root]
    assert entry.parent is None
    assert entry.g == 0
    assert entry.h == 4
    assert entry.f == 4


def test_child_accumulates_parent_g():
    tree = SearchTree()
    root = tree.add_root(PathNode("S", 0), h=0)
    a = tree.add_child(root, PathNode("A", 2), h=3)
    b = tree.add_child(a, PathNode("B", 1.5), h=1)

    assert tree[a].g == 2 and tree[a].f == 5
    assert tree[b].g == 3.5 and tree[b].f == 4.5
    assert tree[b].parent == a
    assert len(tree) == 3


def test_backtrack_returns_root_to_node_order():
    tree = SearchTree()
    root = tree.add_root(PathNode("S", 0), h=0)
    a = tree.add_child(root, PathNode("A", 1), h=0)
    tree.add_child(root, PathNode("X", 1), h=0)
    b = tree.add_child(a, PathNode("B", 1), h=0)

    assert [n.id for n in tree.backtrack(b)] == ["S", "A", "B"]
    assert [n.id for n in tree.backtrack(root)] == ["S"]


def test_same_identifier_may_appear_in_several_branches():
    tree = SearchTree()
    root = tree.add_root(PathNode("S", 0), h=0)
    a = tree.add_child(root, PathNode("A", 1), h=0)
    b = tree.add_child(root, PathNode("B", 1), h=0)
    via_a = tree.add_child(a, PathNode("T", 5), h=0)
    via_b = tree.add_child(b, PathNode("T", 1), h=0)

    assert tree[via_a].g == 6
    assert tree[via_b].g == 2


def test_second_root_is_rejected():
    tree = SearchTree()
    tree.add_root(PathNode("S", 0), h=0)
    with pytest.raises(ValueError):
        tree.add_root(PathNode("T", 0), h=0)


def test_search_node_is_frozen():
    node = SearchNode(PathNode("S"), None, 0, 0)
    with pytest.raises(AttributeError):
        node.g = 1  # type: ignore[misc]
