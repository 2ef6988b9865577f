import pytest

from polyclip import (
    ClipConfig,
    NonTerminatingConstructionError,
    Polygon,
    area,
    intersect,
)

SQUARE_A = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
SQUARE_B = Polygon([(5, 5), (15, 5), (15, 15), (5, 15)])
INNER = Polygon([(2, 2), (4, 2), (4, 4), (2, 4)])
FAR = Polygon([(20, 20), (30, 20), (30, 30), (20, 30)])
DIAMOND = Polygon([(5, -1), (11, 5), (5, 11), (-1, 5)])


def vertex_set(polygon):
    return {p.as_tuple() for p in polygon.points}


def test_overlapping_squares():
    result = intersect(SQUARE_A, SQUARE_B)

    assert result is not None
    assert len(result) == 4
    assert vertex_set(result) == {(10.0, 5.0), (10.0, 10.0), (5.0, 10.0), (5.0, 5.0)}
    assert area(result) == pytest.approx(25.0)


def test_overlapping_squares_in_either_order():
    result = intersect(SQUARE_B, SQUARE_A)

    assert vertex_set(result) == {(10.0, 5.0), (10.0, 10.0), (5.0, 10.0), (5.0, 5.0)}
    assert area(result) == pytest.approx(25.0)


def test_walk_starts_at_first_crossing():
    result = intersect(SQUARE_A, SQUARE_B)
    assert result.as_tuples() == ((10.0, 5.0), (10.0, 10.0), (5.0, 10.0), (5.0, 5.0))


def test_square_clipped_by_diamond_is_an_octagon():
    result = intersect(SQUARE_A, DIAMOND)

    assert vertex_set(result) == {
        (0.0, 4.0),
        (4.0, 0.0),
        (6.0, 0.0),
        (10.0, 4.0),
        (10.0, 6.0),
        (6.0, 10.0),
        (4.0, 10.0),
        (0.0, 6.0),
    }
    assert area(result) == pytest.approx(68.0)


def test_triangle_clipped_by_strip_uses_rounded_crossings():
    triangle = Polygon([(0, 0), (4, 0), (4, 3)])
    strip = Polygon([(1, 1), (5, 1), (5, 2), (1, 2)])

    result = intersect(triangle, strip)

    assert result.as_tuples()[0] == pytest.approx((1.3333, 1.0))
    assert area(result) == pytest.approx(2.0, abs=1e-3)


def test_nested_polygon_is_the_intersection():
    assert intersect(SQUARE_A, INNER) == INNER
    assert intersect(INNER, SQUARE_A) == INNER


def test_disjoint_polygons_have_no_intersection():
    assert intersect(SQUARE_A, FAR) is None
    assert intersect(FAR, SQUARE_A) is None


def test_inputs_are_untouched_and_reusable():
    first = intersect(SQUARE_A, SQUARE_B)
    second = intersect(SQUARE_A, SQUARE_B)

    assert first == second
    assert SQUARE_A == Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])


def test_vertex_limit_aborts_the_walk():
    with pytest.raises(NonTerminatingConstructionError) as exc:
        intersect(SQUARE_A, SQUARE_B, ClipConfig(max_vertices=3))
    assert 'more than 3 vertices' in str(exc.value)
    assert exc.value.traced == 4


def test_crossings_through_corners_never_close():
    # Diamond edges run exactly through the square's corners.
    square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    diamond = Polygon([(5, -5), (15, 5), (5, 15), (-5, 5)])

    with pytest.raises(NonTerminatingConstructionError):
        intersect(square, diamond)
    with pytest.raises(NonTerminatingConstructionError):
        intersect(diamond, square)
