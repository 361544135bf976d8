"""Line and segment queries on Pose2D endpoints.

A Line2D is two poses. "Line" queries treat them as two points fixing an
infinite line; "within range" queries treat them as the closed endpoints of
a segment. All near-zero decisions use an absolute tolerance, ``EPS`` by
default, which every query accepts as the ``eps`` keyword.

Segment containment is a closed box widened by ``eps`` on both axes, so
exact endpoints count as on the segment and an axis on which the endpoints
coincide (vertical or horizontal segment) reduces to ``|coord - c| <= eps``.

A zero-length line (endpoints within ``eps`` on both axes) behaves as the
single point ``start``: its angle is ``atan2(0, 0) == 0.0``, only that
point lies on it, it never intersects anything, and distances to it are
distances to ``start``.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple, Union

from nav_geometry.pose_2d import Pose2D
from nav_geometry.vector2 import Vector2

logger = logging.getLogger(__name__)

EPS = 1e-10

PointLike = Union[Pose2D, Vector2]


def as_pose(point: PointLike) -> Pose2D:
    """Copy ``point`` into a new Pose2D (Vector2 gets ``theta = 0``).

    Raises
    ------
    TypeError
        If ``point`` is neither a Pose2D nor a Vector2.
    """
    if isinstance(point, Pose2D):
        return Pose2D(point.x, point.y, point.theta)
    if isinstance(point, Vector2):
        return Pose2D.from_vector(point)
    raise TypeError(f"Expected Pose2D or Vector2, got {type(point).__name__}")


def _within(value: float, bound_a: float, bound_b: float, eps: float) -> bool:
    return min(bound_a, bound_b) - eps <= value <= max(bound_a, bound_b) + eps


@dataclass
class Line2D:
    """Directed line/segment from ``start`` to ``end``.

    Attributes
    ----------
    start : Pose2D
        First endpoint.
    end : Pose2D
        Second endpoint.
    eps : float
        Class-level default tolerance (``EPS``).
    """

    start: Pose2D = field(default_factory=Pose2D)
    end: Pose2D = field(default_factory=Pose2D)

    eps: ClassVar[float] = EPS

    def __post_init__(self) -> None:
        # Endpoints are values; never alias the caller's poses
        self.start = as_pose(self.start)
        self.end = as_pose(self.end)

    @classmethod
    def from_coordinates(
        cls,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        theta1: float = 0.0,
        theta2: float = 0.0,
    ) -> "Line2D":
        return cls(Pose2D(x1, y1, theta1), Pose2D(x2, y2, theta2))

    @classmethod
    def from_vectors(cls, start: Vector2, end: Vector2) -> "Line2D":
        """Line between two positions; both orientations are 0."""
        return cls(Pose2D.from_vector(start), Pose2D.from_vector(end))

    # --- Mutators ---

    def set(self, start: PointLike, end: PointLike) -> None:
        """Replace the endpoints.

        Pose2D endpoints are copied whole. Vector2 endpoints only set x and
        y; the current orientations are left as they are.
        """
        for current, new in ((self.start, start), (self.end, end)):
            if isinstance(new, Pose2D):
                current.set(new.x, new.y, new.theta)
            elif isinstance(new, Vector2):
                current.set(new.x, new.y)
            else:
                raise TypeError(
                    f"Expected Pose2D or Vector2, got {type(new).__name__}"
                )

    def set_coordinates(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        theta1: Optional[float] = None,
        theta2: Optional[float] = None,
    ) -> None:
        """Replace endpoint coordinates; orientations change only when given."""
        self.start.set(x1, y1, theta1)
        self.end.set(x2, y2, theta2)

    # --- Queries ---

    def get_length(self) -> float:
        return Pose2D.get_distance(self.start, self.end)

    def get_angle(self) -> float:
        """Bearing from ``start`` to ``end`` in radians (0.0 when degenerate)."""
        return Pose2D.get_angle(self.start, self.end)

    def is_degenerate(self, eps: float = EPS) -> bool:
        """True when both endpoints coincide within ``eps`` on each axis."""
        return (
            abs(self.end.x - self.start.x) <= eps
            and abs(self.end.y - self.start.y) <= eps
        )

    def is_point_on_line(self, point: PointLike, eps: float = EPS) -> bool:
        """Collinearity test against the infinite line through the endpoints.

        Parameters
        ----------
        point : Pose2D or Vector2
            Query point; orientation is ignored.
        eps : float
            Bound on the absolute cross product.

        Returns
        -------
        bool
            True when ``|cross(end - start, point - start)| < eps``.
        """
        p = as_pose(point)
        if self.is_degenerate(eps):
            return (
                abs(p.x - self.start.x) <= eps
                and abs(p.y - self.start.y) <= eps
            )
        return abs(Pose2D.get_cross(self.end - self.start, p - self.start)) < eps

    def is_point_on_line_within_range(
        self, point: PointLike, eps: float = EPS
    ) -> bool:
        """True when ``point`` is on the line and inside the segment's box.

        The box is closed and widened by ``eps`` on both axes.
        """
        if not self.is_point_on_line(point, eps):
            return False
        return (
            _within(point.x, self.start.x, self.end.x, eps)
            and _within(point.y, self.start.y, self.end.y, eps)
        )

    # --- Two-line algorithms ---

    @staticmethod
    def get_intersection(
        line1: "Line2D", line2: "Line2D", eps: float = EPS
    ) -> Tuple[bool, Pose2D]:
        """Intersect the infinite lines through ``line1`` and ``line2``.

        Parameters
        ----------
        line1, line2 : Line2D
            Lines to intersect.
        eps : float
            Direction cross products at or below this are parallel.

        Returns
        -------
        Tuple[bool, Pose2D]
            ``(True, point)`` for crossing lines. ``point.theta`` is
            interpolated along ``line1``. Parallel, coincident or
            degenerate inputs give ``(False, Pose2D(0, 0, 0))``.
        """
        a = line1.end - line1.start
        b = line2.end - line2.start
        if abs(Pose2D.get_cross(a, b)) <= eps:
            return False, Pose2D(0.0, 0.0, 0.0)

        t = Pose2D.get_cross(b, line2.start - line1.start) / Pose2D.get_cross(b, a)
        return True, line1.start + a * t

    @staticmethod
    def get_intersection_within_range(
        line1: "Line2D", line2: "Line2D", eps: float = EPS
    ) -> Tuple[bool, Pose2D]:
        """Intersect two segments.

        Returns
        -------
        Tuple[bool, Pose2D]
            The flag is True only if the infinite lines cross at a point
            inside both segments. The point is the infinite-line result and
            carries no meaning when the flag is False.

        Notes
        -----
        The on-line test bounds the raw cross product, whose rounding error
        grows with the square of the coordinates. With coordinates in the
        thousands (maps in millimetres), interior crossings can be rejected
        at the default ``EPS``; pass a larger ``eps`` such as ``1e-6``.
        """
        intersects, point = Line2D.get_intersection(line1, line2, eps)
        if not intersects:
            return False, point

        within = (
            line1.is_point_on_line_within_range(point, eps)
            and line2.is_point_on_line_within_range(point, eps)
        )
        return within, point

    # --- Point-to-line distance ---

    @staticmethod
    def implicit_coefficients(
        line: "Line2D", eps: float = EPS
    ) -> Tuple[float, float, float]:
        """Coefficients ``(a, b, c)`` of ``a*x + b*y + c = 0`` for ``line``.

        Non-vertical lines use slope form ``(slope, -1, y0 - slope*x0)``;
        a vertical line (``|dx| <= eps``) uses ``(1, 0, -x0)``.
        """
        dx = line.end.x - line.start.x
        if abs(dx) > eps:
            slope = (line.end.y - line.start.y) / dx
            a, b, c = slope, -1.0, -slope * line.start.x + line.start.y
        else:
            a, b, c = 1.0, 0.0, -line.start.x
        logger.debug("implicit line a=%g b=%g c=%g", a, b, c)
        return a, b, c

    @staticmethod
    def get_distance_from_point_to_line(
        point: PointLike, line: "Line2D", eps: float = EPS
    ) -> float:
        """Perpendicular distance from ``point`` to the infinite line."""
        p = as_pose(point)
        if line.is_degenerate(eps):
            return Pose2D.get_distance(p, line.start)

        a, b, c = Line2D.implicit_coefficients(line, eps)
        return abs(a * p.x + b * p.y + c) / math.sqrt(a * a + b * b)

    @staticmethod
    def get_distance_from_point_to_line_within_range(
        point: PointLike, line: "Line2D", eps: float = EPS
    ) -> float:
        """Distance from ``point`` to the segment.

        Uses the perpendicular distance when the foot of the perpendicular
        lies on the segment, otherwise the distance to the nearer endpoint.

        With large coordinates the foot can fail the on-line test at the
        default ``EPS`` and fall back to an endpoint distance; pass a larger
        ``eps`` in that case, as for :meth:`get_intersection_within_range`.
        """
        p = as_pose(point)
        if line.is_degenerate(eps):
            return Pose2D.get_distance(p, line.start)

        a, b, c = Line2D.implicit_coefficients(line, eps)
        norm_sq = a * a + b * b
        residual = a * p.x + b * p.y + c
        foot = Pose2D(
            (p.x * norm_sq - a * residual) / norm_sq,
            (p.y * norm_sq - b * residual) / norm_sq,
        )

        if line.is_point_on_line_within_range(foot, eps):
            return abs(residual) / math.sqrt(norm_sq)

        return min(
            Pose2D.get_distance(p, line.start),
            Pose2D.get_distance(p, line.end),
        )
