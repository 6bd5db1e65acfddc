"""Unit tests for the ray/shape intersection and reflection primitives."""

import math

import pytest

from mirror_optics.geometry import (
    direction_from_angle,
    intersect_circle,
    intersect_segment,
    length,
    reflect,
)

ORIGIN = {'x': 0.0, 'y': 0.0}
PLUS_X = {'x': 1.0, 'y': 0.0}


class TestIntersectCircle:
    """Ray/circle intersections."""

    def test_line_missing_circle_returns_none(self):
        hit = intersect_circle({'x': 0, 'y': 100}, PLUS_X, {'x': 100, 'y': 0}, 50)
        assert hit is None

    def test_outside_origin_gets_near_side_hit(self):
        hit = intersect_circle(ORIGIN, PLUS_X, {'x': 100, 'y': 0}, 50)
        assert hit is not None
        assert hit.t == pytest.approx(50)
        assert hit.point['x'] == pytest.approx(50)
        assert hit.point['y'] == pytest.approx(0)
        assert hit.normal['x'] == pytest.approx(-1)
        assert hit.normal['y'] == pytest.approx(0)
        assert hit.s is None

    def test_circle_behind_origin_returns_none(self):
        hit = intersect_circle({'x': 200, 'y': 0}, PLUS_X, {'x': 100, 'y': 0}, 50)
        assert hit is None

    def test_origin_inside_circle_hits_far_side(self):
        hit = intersect_circle({'x': 100, 'y': 0}, PLUS_X, {'x': 100, 'y': 0}, 50)
        assert hit.point['x'] == pytest.approx(150)
        assert hit.normal['x'] == pytest.approx(1)

    def test_origin_on_surface_does_not_hit_itself(self):
        hit = intersect_circle({'x': 50, 'y': 0}, {'x': -1, 'y': 0}, {'x': 100, 'y': 0}, 50)
        assert hit is None

    def test_tangent_ray_resolves_to_single_point(self):
        hit = intersect_circle({'x': 0, 'y': 50}, PLUS_X, {'x': 100, 'y': 0}, 50)
        assert hit is not None
        assert hit.t == pytest.approx(100)
        assert hit.point['x'] == pytest.approx(100)
        assert hit.normal['y'] == pytest.approx(1)

    def test_parameter_scales_with_direction_length(self):
        hit = intersect_circle(ORIGIN, {'x': 2, 'y': 0}, {'x': 100, 'y': 0}, 50)
        assert hit.t == pytest.approx(25)
        assert hit.point['x'] == pytest.approx(50)

    def test_normal_is_unit_length(self):
        d = direction_from_angle(0.3)
        hit = intersect_circle(ORIGIN, d, {'x': 100, 'y': 30}, 40)
        assert hit is not None
        assert length(hit.normal) == pytest.approx(1)

    def test_underflowing_direction_gives_no_hit(self):
        hit = intersect_circle(ORIGIN, {'x': 1e-200, 'y': 0}, {'x': 100, 'y': 0}, 50)
        assert hit is None

    def test_non_positive_radius_is_rejected(self):
        with pytest.raises(ValueError):
            intersect_circle(ORIGIN, PLUS_X, {'x': 100, 'y': 0}, 0)


class TestIntersectSegment:
    """Ray/segment intersections."""

    def test_parallel_ray_returns_none(self):
        hit = intersect_segment(ORIGIN, PLUS_X, {'x': 0, 'y': 5}, {'x': 10, 'y': 5})
        assert hit is None

    def test_collinear_ray_returns_none(self):
        hit = intersect_segment(ORIGIN, PLUS_X, {'x': 5, 'y': 0}, {'x': 10, 'y': 0})
        assert hit is None

    def test_hit_in_the_middle(self):
        hit = intersect_segment({'x': 0, 'y': 5}, PLUS_X, {'x': 10, 'y': 0}, {'x': 10, 'y': 10})
        assert hit.t == pytest.approx(10)
        assert hit.s == pytest.approx(0.5)
        assert hit.point == pytest.approx({'x': 10, 'y': 5})
        assert hit.normal['x'] == pytest.approx(-1)
        assert hit.normal['y'] == pytest.approx(0)

    def test_hit_on_first_endpoint(self):
        hit = intersect_segment(ORIGIN, PLUS_X, {'x': 10, 'y': 0}, {'x': 10, 'y': 10})
        assert hit is not None
        assert hit.s == 0

    def test_hit_on_second_endpoint(self):
        hit = intersect_segment({'x': 0, 'y': 10}, PLUS_X, {'x': 10, 'y': 0}, {'x': 10, 'y': 10})
        assert hit is not None
        assert hit.s == 1

    def test_miss_beyond_endpoint(self):
        hit = intersect_segment({'x': 0, 'y': 20}, PLUS_X, {'x': 10, 'y': 0}, {'x': 10, 'y': 10})
        assert hit is None

    def test_segment_behind_origin_returns_none(self):
        hit = intersect_segment({'x': 20, 'y': 5}, PLUS_X, {'x': 10, 'y': 0}, {'x': 10, 'y': 10})
        assert hit is None

    def test_origin_on_segment_does_not_hit_itself(self):
        hit = intersect_segment({'x': 10, 'y': 5}, PLUS_X, {'x': 10, 'y': 0}, {'x': 10, 'y': 10})
        assert hit is None

    def test_normal_is_unit_and_perpendicular(self):
        p1 = {'x': 0, 'y': 10}
        p2 = {'x': 30, 'y': 50}
        hit = intersect_segment({'x': 20, 'y': 0}, {'x': 0, 'y': 1}, p1, p2)
        assert hit is not None
        assert length(hit.normal) == pytest.approx(1)
        seg = {'x': p2['x'] - p1['x'], 'y': p2['y'] - p1['y']}
        assert hit.normal['x'] * seg['x'] + hit.normal['y'] * seg['y'] == pytest.approx(0)


class TestReflect:
    """Specular reflection."""

    def test_reflect_off_horizontal_surface(self):
        r = reflect({'x': 3, 'y': 4}, {'x': 0, 'y': 1})
        assert r['x'] == pytest.approx(3)
        assert r['y'] == pytest.approx(-4)

    def test_head_on_reflection_reverses_direction(self):
        r = reflect(PLUS_X, {'x': -1, 'y': 0})
        assert r == pytest.approx({'x': -1, 'y': 0})

    @pytest.mark.parametrize("normal_angle", [0.0, 0.4, 1.3, 2.7, -2.2])
    def test_magnitude_is_preserved(self, normal_angle):
        d = {'x': 2.5, 'y': -1.75}
        n = direction_from_angle(normal_angle)
        assert length(reflect(d, n)) == pytest.approx(length(d))

    def test_normal_facing_does_not_matter(self):
        d = {'x': 0.6, 'y': 0.8}
        n = direction_from_angle(0.9)
        flipped = {'x': -n['x'], 'y': -n['y']}
        r1 = reflect(d, n)
        r2 = reflect(d, flipped)
        assert r1['x'] == pytest.approx(r2['x'])
        assert r1['y'] == pytest.approx(r2['y'])


def test_direction_from_angle_is_unit():
    for angle in (0.0, math.pi / 6, 2.0, -1.0):
        assert length(direction_from_angle(angle)) == pytest.approx(1)
    assert direction_from_angle(0.0) == {'x': 1.0, 'y': 0.0}
