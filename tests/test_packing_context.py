"""
Tests for PackingContext: placement queries, commits and growth.

Covers:
- Fresh context state (origin point, zero grid lines)
- Exact fits short-circuit, growth candidates ranked by area penalty
- Candidate point and grid line maintenance on insert
- Obsolete atlas-edge lines dropped on expand, on the right axis
- Max size enforcement
"""

import pytest

from atlas_packer.packers.packing_context import PackingContext
from atlas_packer.utils.geometry import RectInt


def _place(context, size, rect_id):
    expand_data = context.try_get_expand_data(size)
    assert expand_data is not None
    if not expand_data.is_exact_fit:
        context.expand(expand_data.delta)
    context.insert(expand_data.bounds, rect_id)
    return expand_data


def test_new_context_state():
    context = PackingContext((10, 10), (100, 100))
    assert context.is_empty
    assert context.size == (10, 10)
    assert context.points == [(0, 0)]
    assert context.x_lines == [0]
    assert context.y_lines == [0]


def test_exact_fit_at_origin():
    context = PackingContext((10, 10), (100, 100))
    expand_data = context.try_get_expand_data((4, 6))
    assert expand_data.is_exact_fit
    assert expand_data.delta == (0, 0)
    assert expand_data.bounds == RectInt(0, 0, 4, 6)
    assert expand_data.context is context


def test_insert_spawns_points_from_new_lines():
    context = PackingContext((10, 10), (100, 100))
    context.insert(RectInt(0, 0, 4, 6), "a")

    assert not context.is_empty
    assert context.x_lines == [0, 4]
    assert context.y_lines == [0, 6]
    assert context.points == [(0, 6), (4, 0), (4, 6)]


def test_growth_candidate_uses_lowest_penalty():
    context = PackingContext((4, 6), (100, 100))
    context.insert(RectInt(0, 0, 4, 6), "a")

    expand_data = context.try_get_expand_data((4, 6))

    # Growing right adds 4 * 6 * (4 / 6); growing down adds 6 * 4 * (6 / 4)
    assert expand_data.bounds == RectInt(4, 0, 4, 6)
    assert expand_data.delta == (4, 0)
    assert expand_data.area_penalty == pytest.approx(16.0)


def test_equal_penalties_keep_first_point():
    context = PackingContext((10, 10), (100, 100))
    context.insert(RectInt(0, 0, 10, 10), "a")

    expand_data = context.try_get_expand_data((10, 10))
    assert expand_data.bounds == RectInt(0, 10, 10, 10)
    assert expand_data.delta == (0, 10)


def test_intersecting_points_are_skipped():
    context = PackingContext((10, 10), (100, 100))
    context.insert(RectInt(0, 0, 4, 2), "a")
    context.insert(RectInt(4, 0, 2, 6), "b")
    assert context.points == [(0, 2), (0, 6), (4, 6), (6, 0), (6, 2), (6, 6)]

    expand_data = context.try_get_expand_data((6, 3))
    assert expand_data.is_exact_fit
    assert expand_data.bounds == RectInt(0, 6, 6, 3)


def test_expand_keeps_edge_used_by_a_rect():
    context = PackingContext((4, 6), (100, 100))
    context.insert(RectInt(0, 0, 4, 6), "a")

    context.expand((4, 0))

    assert context.size == (8, 6)
    assert context.x_lines == [0, 4, 8]
    assert context.points == [(0, 6), (4, 0), (4, 6), (8, 0), (8, 6)]


def test_expand_drops_obsolete_x_edge():
    context = PackingContext((10, 10), (100, 100))
    context.insert(RectInt(0, 0, 4, 4), "a")

    context.expand((5, 0))
    assert context.x_lines == [0, 4, 15]
    assert (15, 0) in context.points

    context.expand((5, 0))
    assert context.size == (20, 10)
    assert context.x_lines == [0, 4, 20]
    assert context.y_lines == [0, 4]
    assert context.points == [(0, 4), (4, 0), (4, 4), (20, 0), (20, 4)]


def test_expand_drops_obsolete_y_edge():
    context = PackingContext((10, 10), (100, 100))
    context.insert(RectInt(0, 0, 4, 4), "a")

    context.expand((0, 5))
    context.expand((0, 5))

    assert context.size == (10, 20)
    assert context.x_lines == [0, 4]
    assert context.y_lines == [0, 4, 20]
    assert context.points == [(0, 4), (0, 20), (4, 0), (4, 4), (4, 20)]


def test_insert_after_growth_removes_covered_points():
    context = PackingContext((4, 6), (100, 100))
    context.insert(RectInt(0, 0, 4, 6), "a")
    _place(context, (4, 6), "b")

    assert context.size == (8, 6)
    assert context.points == [(0, 6), (4, 6), (8, 0), (8, 6)]
    assert [rect.id for rect in context.packed_rects] == ["a", "b"]


def test_no_placement_beyond_max_size():
    context = PackingContext((4, 4), (6, 6))
    context.insert(RectInt(0, 0, 4, 4), "a")

    assert context.try_get_expand_data((4, 4)) is None
    assert context.try_get_expand_data((2, 2)).bounds == RectInt(0, 4, 2, 2)


def test_points_stay_sorted_and_uncovered():
    context = PackingContext((8, 8), (64, 64))
    for i, size in enumerate([(8, 8), (4, 4), (4, 12), (6, 2), (3, 3), (10, 5)]):
        _place(context, size, i)

    assert context.points == sorted(set(context.points))
    assert context.x_lines == sorted(set(context.x_lines))
    assert context.y_lines == sorted(set(context.y_lines))
    for point in context.points:
        assert point[0] in context.x_lines
        assert point[1] in context.y_lines
        for packed in context.packed_rects:
            bounds = packed.bounds
            assert not (bounds.left <= point[0] < bounds.right and bounds.top <= point[1] < bounds.bottom)
