import pytest

from astarpath.comparers import BY_COST, BY_NODE_COUNT, PathCostComparer
from astarpath.path import EMPTY_PATH, Path
from astarpath.types import PathNode


def make_path(*steps) -> Path:
    return Path(tuple(PathNode(node_id, cost) for node_id, cost in steps))


@pytest.fixture
def paths():
    return {
        "cheap_long": make_path(("A", 0), ("B", 1), ("C", 1), ("D", 1)),
        "pricey_short": make_path(("A", 0), ("D", 7)),
        "mid": make_path(("A", 0), ("E", 2), ("D", 2)),
    }


def test_by_cost_ranks_by_cost_only(paths):
    ranked = sorted(paths.values(), key=BY_COST.sort_key())
    assert [p.cost for p in ranked] == [3, 4, 7]


def test_by_node_count_ranks_by_length_only(paths):
    ranked = sorted(paths.values(), key=BY_NODE_COUNT.sort_key())
    assert [len(p) for p in ranked] == [2, 3, 4]


def test_compare_three_way(paths):
    a, b = paths["cheap_long"], paths["pricey_short"]
    assert BY_COST.compare(a, b) == -1
    assert BY_COST.compare(b, a) == 1
    assert BY_COST.compare(a, a) == 0
    assert BY_NODE_COUNT.compare(a, b) == 1


def test_compare_none_sorts_first(paths):
    p = paths["mid"]
    assert BY_COST.compare(None, None) == 0
    assert BY_COST.compare(None, p) == -1
    assert BY_COST.compare(p, None) == 1
    ranked = sorted([p, None, EMPTY_PATH], key=BY_COST.sort_key())
    assert ranked[0] is None
    assert ranked[1] is EMPTY_PATH


def test_equals_and_hash_follow_the_key():
    p1 = make_path(("A", 0), ("B", 3))
    p2 = make_path(("X", 1), ("Y", 2))
    assert p1 != p2
    assert BY_COST.equals(p1, p2)
    assert BY_COST.hash(p1) == BY_COST.hash(p2)
    assert BY_NODE_COUNT.equals(p1, p2)
    assert not BY_NODE_COUNT.equals(p1, make_path(("A", 0)))
    assert BY_COST.equals(None, None)
    assert not BY_COST.equals(p1, None)


def test_non_path_arguments_are_rejected():
    with pytest.raises(TypeError):
        BY_COST.compare(make_path(("A", 0)), "A")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        BY_NODE_COUNT.hash(42)  # type: ignore[arg-type]


def test_singletons_are_shared_instances():
    assert isinstance(BY_COST, PathCostComparer)
    assert BY_COST.key(make_path(("A", 2))) == 2
    assert BY_NODE_COUNT.key(EMPTY_PATH) == 0
