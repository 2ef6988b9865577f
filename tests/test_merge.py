import pytest

from polyclip import (
    ClipConfig,
    NonTerminatingConstructionError,
    Point,
    Polygon,
    PolygonError,
    area,
    merge,
)
from polyclip.config import get_clip_config
from polyclip.merger import MERGE_TRANSITIONS, MergeEvent, MergeState, MergeWalk
from polyclip.traversal import Crossing

SQUARE_A = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
SQUARE_B = Polygon([(5, 5), (15, 5), (15, 15), (5, 15)])
INNER = Polygon([(2, 2), (4, 2), (4, 4), (2, 4)])
FAR = Polygon([(20, 20), (30, 20), (30, 30), (20, 30)])
DIAMOND = Polygon([(5, -1), (11, 5), (5, 11), (-1, 5)])


def test_overlapping_squares_union_area():
    result = merge(SQUARE_A, SQUARE_B)

    assert area(result) == pytest.approx(100 + 100 - 25)
    assert result.as_tuples() == (
        (10.0, 5.0),
        (15.0, 5.0),
        (15.0, 15.0),
        (5.0, 15.0),
        (5.0, 10.0),
        (0.0, 10.0),
        (0.0, 0.0),
        (10.0, 0.0),
    )


def test_overlapping_squares_union_in_either_order():
    result = merge(SQUARE_B, SQUARE_A)

    assert len(result) == 8
    assert area(result) == pytest.approx(175.0)


def test_square_and_diamond_union():
    result = merge(SQUARE_A, DIAMOND)

    assert len(result) == 16
    assert Point(5, -1) in result.points
    assert Point(11, 5) in result.points
    assert Point(0, 0) in result.points
    assert area(result) == pytest.approx(104.0)


def test_containing_polygon_is_the_union():
    assert merge(SQUARE_A, INNER) == SQUARE_A
    assert merge(INNER, SQUARE_A) == SQUARE_A


def test_disjoint_polygons_are_concatenated():
    result = merge(SQUARE_A, FAR)

    assert result.points == SQUARE_A.points + FAR.points


def test_vertex_limit_aborts_the_walk():
    with pytest.raises(NonTerminatingConstructionError):
        merge(SQUARE_A, SQUARE_B, ClipConfig(max_vertices=5))


def test_crossings_through_corners_fail():
    square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    diamond = Polygon([(5, -5), (15, 5), (5, 15), (-5, 5)])

    # The walk returns to its seed after a single vertex.
    with pytest.raises(PolygonError):
        merge(square, diamond)


def test_walk_from_a_bogus_crossing_is_aborted():
    walk = MergeWalk(SQUARE_A, FAR, Crossing(Point(0, 0), 0, 0), ClipConfig(max_vertices=50))

    with pytest.raises(NonTerminatingConstructionError):
        walk.run()


def test_transition_table_names_every_state_change():
    jc, so = MergeState.JUST_CROSSED, MergeState.SCANNING_OUTER

    assert MERGE_TRANSITIONS[(jc, MergeEvent.INNER_VERTEX)] is so
    assert MERGE_TRANSITIONS[(so, MergeEvent.OUTER_VERTEX)] is jc
    assert MERGE_TRANSITIONS[(so, MergeEvent.INNER_CROSSING)] is jc
    assert MERGE_TRANSITIONS[(jc, MergeEvent.PROBE_CROSSED)] is so
    assert all(
        target is MergeState.CLOSED
        for (_, event), target in MERGE_TRANSITIONS.items()
        if event is MergeEvent.SEED_REACHED
    )


def test_unknown_transition_is_rejected():
    walk = MergeWalk(SQUARE_A, SQUARE_B, Crossing(Point(10, 5), 2, 1), get_clip_config())
    assert walk.state is MergeState.JUST_CROSSED

    walk.fire(MergeEvent.INNER_VERTEX)
    assert walk.state is MergeState.SCANNING_OUTER

    walk.state = MergeState.CLOSED
    with pytest.raises(RuntimeError):
        walk.fire(MergeEvent.OUTER_VERTEX)


def test_walk_ends_closed():
    walk = MergeWalk(SQUARE_A, SQUARE_B, Crossing(Point(10, 5), 2, 1), get_clip_config())
    result = walk.run()

    assert walk.state is MergeState.CLOSED
    assert area(result) == pytest.approx(175.0)
