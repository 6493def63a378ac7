import math

import pytest

from astarpath.heuristics import (
    HEURISTICS,
    CallableHeuristic,
    ChebyshevHeuristic,
    EuclideanHeuristic,
    HeuristicProvider,
    ManhattanHeuristic,
    OctileHeuristic,
    ZeroHeuristic,
    heuristic_by_name,
)
from astarpath.types import PathNode

A = PathNode((1, 1))
B = PathNode((4, 5))


def test_zero_heuristic():
    assert ZeroHeuristic().estimate(A, B) == 0
    assert ZeroHeuristic().estimate(PathNode("x"), PathNode("y")) == 0


@pytest.mark.parametrize(
    "heuristic,expected",
    [
        (EuclideanHeuristic(), 5.0),
        (ManhattanHeuristic(), 7.0),
        (ChebyshevHeuristic(), 4.0),
        (OctileHeuristic(), 4 + (math.sqrt(2) - 1) * 3),
    ],
)
def test_coordinate_distances(heuristic, expected):
    assert heuristic.estimate(A, B) == pytest.approx(expected)
    # symmetric and zero on the diagonal
    assert heuristic.estimate(B, A) == pytest.approx(expected)
    assert heuristic.estimate(A, A) == 0


def test_scale_multiplies_estimate():
    assert ManhattanHeuristic(scale=2.5).estimate(A, B) == pytest.approx(17.5)
    assert EuclideanHeuristic(scale=0).estimate(A, B) == 0
    with pytest.raises(ValueError):
        EuclideanHeuristic(scale=-1)


def test_three_dimensional_coordinates():
    a, b = PathNode((0, 0, 0)), PathNode((1, 2, 2))
    assert EuclideanHeuristic().estimate(a, b) == pytest.approx(3.0)
    assert ManhattanHeuristic().estimate(a, b) == 5
    with pytest.raises(ValueError, match="2-D"):
        OctileHeuristic().estimate(a, b)


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError, match="dimensions"):
        EuclideanHeuristic().estimate(PathNode((0, 0)), PathNode((0, 0, 0)))


def test_octile_is_exact_on_open_grid():
    """On an obstacle-free 8-way grid octile equals the true path cost."""
    for dx in range(4):
        for dy in range(4):
            diagonal, straight = min(dx, dy), abs(dx - dy)
            true_cost = diagonal * math.sqrt(2) + straight
            estimate = OctileHeuristic().estimate(PathNode((0, 0)), PathNode((dx, dy)))
            assert estimate == pytest.approx(true_cost)


def test_callable_heuristic():
    h = CallableHeuristic(lambda a, b: abs(a.id - b.id))
    assert h.estimate(PathNode(3), PathNode(10)) == 7
    with pytest.raises(ValueError):
        CallableHeuristic(42)  # type: ignore[arg-type]


def test_custom_subclass():
    class Constant(HeuristicProvider):
        def estimate(self, from_node, to_node):
            return 1.5

    assert Constant().estimate(A, B) == 1.5
    with pytest.raises(TypeError):
        HeuristicProvider()  # type: ignore[abstract]


@pytest.mark.parametrize("name", sorted(HEURISTICS))
def test_heuristic_by_name(name):
    assert isinstance(heuristic_by_name(name), HEURISTICS[name])
    assert isinstance(heuristic_by_name(name.upper()), HEURISTICS[name])


def test_heuristic_by_name_unknown():
    with pytest.raises(ValueError, match="Valid values are"):
        heuristic_by_name("bogus")


def test_reprs():
    assert repr(ZeroHeuristic()) == "ZeroHeuristic()"
    assert repr(OctileHeuristic()) == "OctileHeuristic(scale=1.0)"

    def straight_line(a, b):
        return 0

    assert repr(CallableHeuristic(straight_line)) == "CallableHeuristic(straight_line)"
