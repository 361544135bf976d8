"""Tests for Line2D segment and line queries."""

import logging
import math

import pytest

from nav_geometry.line_2d import EPS, Line2D, as_pose
from nav_geometry.pose_2d import Pose2D
from nav_geometry.vector2 import Vector2


# --- Fixtures ---


@pytest.fixture
def diagonal_up() -> Line2D:
    return Line2D.from_coordinates(0.0, 0.0, 4.0, 4.0)


@pytest.fixture
def diagonal_down() -> Line2D:
    return Line2D.from_coordinates(0.0, 4.0, 4.0, 0.0)


@pytest.fixture
def vertical_post() -> Line2D:
    return Line2D.from_coordinates(1.0, 0.0, 1.0, 5.0)


@pytest.fixture
def point_line() -> Line2D:
    """Zero-length line at (2, 3)."""
    return Line2D.from_coordinates(2.0, 3.0, 2.0, 3.0)


# --- Tests: Construction ---


class TestLine2DInit:
    def test_default_endpoints(self) -> None:
        line = Line2D()
        assert line.start == Pose2D()
        assert line.end == Pose2D()
        assert line.start is not line.end

    def test_eps_constant(self) -> None:
        assert EPS == 1e-10
        assert Line2D.eps == EPS

    def test_endpoints_are_copied(self) -> None:
        start = Pose2D(1.0, 2.0, 0.5)
        line = Line2D(start, Pose2D(3.0, 4.0))
        start.x = 100.0
        assert line.start == Pose2D(1.0, 2.0, 0.5)

    def test_vector_endpoints(self) -> None:
        line = Line2D.from_vectors(Vector2(1.0, 2.0), Vector2(3.0, 4.0))
        assert line.start == Pose2D(1.0, 2.0, 0.0)
        assert line.end == Pose2D(3.0, 4.0, 0.0)

    def test_constructor_accepts_vectors(self) -> None:
        line = Line2D(Vector2(1.0, 2.0), Vector2(3.0, 4.0))
        assert line.end == Pose2D(3.0, 4.0, 0.0)

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            as_pose((1.0, 2.0))

    def test_set_poses(self) -> None:
        line = Line2D()
        line.set(Pose2D(1.0, 1.0, 0.1), Pose2D(2.0, 2.0, 0.2))
        assert line.start == Pose2D(1.0, 1.0, 0.1)
        assert line.end == Pose2D(2.0, 2.0, 0.2)

    def test_set_vectors_keeps_orientation(self) -> None:
        line = Line2D.from_coordinates(0.0, 0.0, 1.0, 1.0, 0.3, 0.6)
        line.set(Vector2(5.0, 5.0), Vector2(6.0, 6.0))
        assert line.start == Pose2D(5.0, 5.0, 0.3)
        assert line.end == Pose2D(6.0, 6.0, 0.6)

    def test_set_coordinates(self) -> None:
        line = Line2D.from_coordinates(0.0, 0.0, 1.0, 1.0, 0.3, 0.6)
        line.set_coordinates(1.0, 2.0, 3.0, 4.0)
        assert line.start == Pose2D(1.0, 2.0, 0.3)
        line.set_coordinates(1.0, 2.0, 3.0, 4.0, theta1=1.0, theta2=2.0)
        assert line.end == Pose2D(3.0, 4.0, 2.0)


# --- Tests: Length and angle ---


class TestLengthAndAngle:
    def test_length(self) -> None:
        assert Line2D.from_coordinates(0.0, 0.0, 3.0, 4.0).get_length() == 5.0

    def test_angle(self, diagonal_up: Line2D, vertical_post: Line2D) -> None:
        assert diagonal_up.get_angle() == pytest.approx(math.pi / 4)
        assert vertical_post.get_angle() == pytest.approx(math.pi / 2)

    def test_direction_matters(self) -> None:
        line = Line2D.from_coordinates(4.0, 0.0, 0.0, 0.0)
        assert line.get_angle() == pytest.approx(math.pi)

    def test_degenerate_angle_is_zero(self, point_line: Line2D) -> None:
        assert point_line.get_length() == 0.0
        assert point_line.get_angle() == 0.0
        assert point_line.is_degenerate()


# --- Tests: Containment ---


class TestPointOnLine:
    def test_collinear_point(self, diagonal_up: Line2D) -> None:
        assert diagonal_up.is_point_on_line(Pose2D(10.0, 10.0))
        assert diagonal_up.is_point_on_line(Pose2D(-3.0, -3.0, 1.0))

    def test_off_line_point(self, diagonal_up: Line2D) -> None:
        assert not diagonal_up.is_point_on_line(Pose2D(1.0, 2.0))

    def test_accepts_vector(self, diagonal_up: Line2D) -> None:
        assert diagonal_up.is_point_on_line(Vector2(2.0, 2.0))

    def test_within_range_interior(self, diagonal_up: Line2D) -> None:
        assert diagonal_up.is_point_on_line_within_range(Pose2D(1.0, 1.0))

    def test_within_range_beyond_end(self, diagonal_up: Line2D) -> None:
        assert diagonal_up.is_point_on_line(Pose2D(5.0, 5.0))
        assert not diagonal_up.is_point_on_line_within_range(Pose2D(5.0, 5.0))

    def test_endpoints_are_included(self, diagonal_up: Line2D) -> None:
        # Closed interval on every axis, not just on collapsed ones
        assert diagonal_up.is_point_on_line_within_range(Pose2D(0.0, 0.0))
        assert diagonal_up.is_point_on_line_within_range(Pose2D(4.0, 4.0))

    def test_vertical_segment_collapsed_axis(self, vertical_post: Line2D) -> None:
        assert vertical_post.is_point_on_line_within_range(Pose2D(1.0, 2.5))
        assert vertical_post.is_point_on_line_within_range(Pose2D(1.0, 5.0))
        assert not vertical_post.is_point_on_line_within_range(Pose2D(1.0, 5.5))
        assert not vertical_post.is_point_on_line_within_range(Pose2D(1.1, 2.5))

    def test_horizontal_segment_collapsed_axis(self) -> None:
        line = Line2D.from_coordinates(0.0, 2.0, 5.0, 2.0)
        assert line.is_point_on_line_within_range(Pose2D(3.0, 2.0))
        assert not line.is_point_on_line_within_range(Pose2D(3.0, 2.0 + 1e-6))

    def test_custom_eps(self) -> None:
        line = Line2D.from_coordinates(0.0, 0.0, 10.0, 0.0)
        near = Pose2D(5.0, 1e-4)
        assert not line.is_point_on_line(near)
        assert line.is_point_on_line(near, eps=1e-2)

    def test_degenerate_line_contains_only_its_point(self, point_line: Line2D) -> None:
        assert point_line.is_point_on_line(Pose2D(2.0, 3.0))
        assert point_line.is_point_on_line_within_range(Pose2D(2.0, 3.0))
        assert not point_line.is_point_on_line(Pose2D(5.0, 7.0))


# --- Tests: Intersection ---


class TestIntersection:
    def test_crossing_diagonals(self, diagonal_up: Line2D, diagonal_down: Line2D) -> None:
        intersects, point = Line2D.get_intersection(diagonal_up, diagonal_down)
        assert intersects
        assert point.x == pytest.approx(2.0)
        assert point.y == pytest.approx(2.0)

    def test_crossing_diagonals_within_range(
        self, diagonal_up: Line2D, diagonal_down: Line2D
    ) -> None:
        intersects, point = Line2D.get_intersection_within_range(diagonal_up, diagonal_down)
        assert intersects
        assert (point.x, point.y) == pytest.approx((2.0, 2.0))

    def test_parallel(self) -> None:
        floor = Line2D.from_coordinates(0.0, 0.0, 4.0, 0.0)
        shelf = Line2D.from_coordinates(0.0, 1.0, 4.0, 1.0)
        intersects, point = Line2D.get_intersection(floor, shelf)
        assert not intersects
        assert point == Pose2D(0.0, 0.0, 0.0)

    def test_collinear_disjoint_segments(self) -> None:
        left = Line2D.from_coordinates(0.0, 0.0, 2.0, 0.0)
        right = Line2D.from_coordinates(5.0, 0.0, 7.0, 0.0)
        assert not Line2D.get_intersection(left, right)[0]
        assert not Line2D.get_intersection_within_range(left, right)[0]

    def test_lines_cross_outside_segments(self) -> None:
        a = Line2D.from_coordinates(0.0, 0.0, 1.0, 0.0)
        b = Line2D.from_coordinates(3.0, -1.0, 3.0, 1.0)
        intersects, point = Line2D.get_intersection(a, b)
        assert intersects
        assert (point.x, point.y) == pytest.approx((3.0, 0.0))
        # The infinite-line point is still returned alongside the False flag
        within, outside_point = Line2D.get_intersection_within_range(a, b)
        assert not within
        assert (outside_point.x, outside_point.y) == pytest.approx((3.0, 0.0))

    def test_touching_at_endpoint(self) -> None:
        a = Line2D.from_coordinates(0.0, 0.0, 2.0, 0.0)
        b = Line2D.from_coordinates(2.0, 0.0, 2.0, 3.0)
        intersects, point = Line2D.get_intersection_within_range(a, b)
        assert intersects
        assert (point.x, point.y) == pytest.approx((2.0, 0.0))

    def test_vertical_and_horizontal(self, vertical_post: Line2D) -> None:
        floor = Line2D.from_coordinates(-2.0, 3.0, 4.0, 3.0)
        intersects, point = Line2D.get_intersection_within_range(vertical_post, floor)
        assert intersects
        assert (point.x, point.y) == pytest.approx((1.0, 3.0))

    def test_large_coordinates_with_scaled_eps(self) -> None:
        a = Line2D.from_coordinates(1000.3, 1000.7, 3000.1, 3000.9)
        b = Line2D.from_coordinates(1000.9, 3000.2, 3000.4, 1000.6)
        intersects, point = Line2D.get_intersection_within_range(a, b, eps=1e-3)
        assert intersects
        assert 1000.0 < point.x < 3001.0
        assert 1000.0 < point.y < 3001.0

    def test_theta_interpolated_along_first_line(self) -> None:
        a = Line2D.from_coordinates(0.0, 0.0, 4.0, 0.0, 0.0, 1.0)
        b = Line2D.from_coordinates(1.0, -1.0, 1.0, 1.0)
        _, point = Line2D.get_intersection(a, b)
        assert point.theta == pytest.approx(0.25)

    def test_symmetric_in_position(self, diagonal_up: Line2D, diagonal_down: Line2D) -> None:
        _, p1 = Line2D.get_intersection(diagonal_up, diagonal_down)
        _, p2 = Line2D.get_intersection(diagonal_down, diagonal_up)
        assert (p1.x, p1.y) == pytest.approx((p2.x, p2.y))

    def test_degenerate_line_never_intersects(
        self, point_line: Line2D, diagonal_up: Line2D
    ) -> None:
        assert Line2D.get_intersection(point_line, diagonal_up) == (
            False, Pose2D(0.0, 0.0, 0.0)
        )
        assert not Line2D.get_intersection_within_range(diagonal_up, point_line)[0]

    def test_inputs_not_mutated(self, diagonal_up: Line2D, diagonal_down: Line2D) -> None:
        Line2D.get_intersection_within_range(diagonal_up, diagonal_down)
        assert diagonal_up == Line2D.from_coordinates(0.0, 0.0, 4.0, 4.0)
        assert diagonal_down == Line2D.from_coordinates(0.0, 4.0, 4.0, 0.0)


# --- Tests: Distance ---


class TestDistanceToLine:
    def test_vertical_line(self) -> None:
        line = Line2D.from_coordinates(3.0, 0.0, 3.0, 5.0)
        assert Line2D.get_distance_from_point_to_line(Pose2D(7.0, 2.0), line) == pytest.approx(4.0)

    def test_horizontal_line(self) -> None:
        line = Line2D.from_coordinates(0.0, 1.0, 2.0, 1.0)
        assert Line2D.get_distance_from_point_to_line(Pose2D(50.0, -2.0), line) == pytest.approx(3.0)

    def test_diagonal_line(self, diagonal_up: Line2D) -> None:
        distance = Line2D.get_distance_from_point_to_line(Pose2D(0.0, 4.0), diagonal_up)
        assert distance == pytest.approx(2.0 * math.sqrt(2.0))

    def test_point_on_line(self, diagonal_up: Line2D) -> None:
        assert Line2D.get_distance_from_point_to_line(Pose2D(9.0, 9.0), diagonal_up) == pytest.approx(0.0)

    def test_degenerate_line_is_point_distance(self, point_line: Line2D) -> None:
        assert Line2D.get_distance_from_point_to_line(Pose2D(5.0, 7.0), point_line) == pytest.approx(5.0)

    def test_coefficients_logged_at_debug(self, diagonal_up: Line2D, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="nav_geometry.line_2d"):
            Line2D.get_distance_from_point_to_line(Pose2D(0.0, 4.0), diagonal_up)
        assert "implicit line" in caplog.text


class TestImplicitCoefficients:
    def test_slope_form(self) -> None:
        line = Line2D.from_coordinates(0.0, 1.0, 2.0, 5.0)
        assert Line2D.implicit_coefficients(line) == pytest.approx((2.0, -1.0, 1.0))

    def test_vertical_form(self, vertical_post: Line2D) -> None:
        assert Line2D.implicit_coefficients(vertical_post) == (1.0, 0.0, -1.0)


class TestDistanceToSegment:
    def test_point_on_vertical_segment(self, vertical_post: Line2D) -> None:
        distance = Line2D.get_distance_from_point_to_line_within_range(
            Pose2D(1.0, 1.0), vertical_post
        )
        assert distance == pytest.approx(0.0)

    def test_beyond_far_end_uses_endpoint(self, vertical_post: Line2D) -> None:
        distance = Line2D.get_distance_from_point_to_line_within_range(
            Pose2D(1.0, 10.0), vertical_post
        )
        assert distance == pytest.approx(5.0)

    def test_beyond_near_end_uses_endpoint(self, vertical_post: Line2D) -> None:
        distance = Line2D.get_distance_from_point_to_line_within_range(
            Pose2D(4.0, -4.0), vertical_post
        )
        assert distance == pytest.approx(5.0)

    def test_perpendicular_foot_inside(self, diagonal_up: Line2D) -> None:
        distance = Line2D.get_distance_from_point_to_line_within_range(
            Pose2D(0.0, 4.0), diagonal_up
        )
        assert distance == pytest.approx(2.0 * math.sqrt(2.0))

    def test_foot_outside_diagonal(self, diagonal_up: Line2D) -> None:
        # Foot of (6, 8) on y = x is (7, 7), past the end at (4, 4)
        distance = Line2D.get_distance_from_point_to_line_within_range(
            Pose2D(6.0, 8.0), diagonal_up
        )
        assert distance == pytest.approx(math.hypot(2.0, 4.0))
        assert distance > Line2D.get_distance_from_point_to_line(Pose2D(6.0, 8.0), diagonal_up)

    def test_horizontal_segment(self) -> None:
        line = Line2D.from_coordinates(0.0, 0.0, 10.0, 0.0)
        assert Line2D.get_distance_from_point_to_line_within_range(
            Pose2D(5.0, 3.0), line
        ) == pytest.approx(3.0)
        assert Line2D.get_distance_from_point_to_line_within_range(
            Pose2D(13.0, 4.0), line
        ) == pytest.approx(5.0)

    def test_never_less_than_line_distance(self, diagonal_down: Line2D) -> None:
        for p in (Pose2D(0.0, 0.0), Pose2D(5.0, 5.0), Pose2D(-2.0, 9.0), Pose2D(2.0, 2.0)):
            seg = Line2D.get_distance_from_point_to_line_within_range(p, diagonal_down)
            inf = Line2D.get_distance_from_point_to_line(p, diagonal_down)
            assert seg >= inf - 1e-12

    def test_degenerate_segment(self, point_line: Line2D) -> None:
        assert Line2D.get_distance_from_point_to_line_within_range(
            Vector2(2.0, 0.0), point_line
        ) == pytest.approx(3.0)

    def test_large_coordinates_with_scaled_eps(self) -> None:
        segment = Line2D.from_coordinates(1000.3, 1000.7, 3000.1, 3000.9)
        p = Pose2D(1000.5, 3000.5)
        seg = Line2D.get_distance_from_point_to_line_within_range(p, segment, eps=1e-3)
        inf = Line2D.get_distance_from_point_to_line(p, segment, eps=1e-3)
        # Foot lies mid-segment, so no endpoint fallback
        assert seg == pytest.approx(inf)
        assert seg < 1500.0
