"""Planar pose: position plus orientation.

Geometric relations (dot, cross, bearing, distance) look at the position
only; ``theta`` is carried as payload. Arithmetic operators and ``lerp``
act on all three fields. ``theta`` is never wrapped automatically; use
:func:`nav_geometry.utils.math_utils.normalize_angle` where a canonical
range matters.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from nav_geometry.utils.math_utils import clamp
from nav_geometry.vector2 import Vector2, array_components, parse_components


@dataclass
class Pose2D:
    """2D position with orientation.

    Attributes
    ----------
    x : float
        Position along the x axis.
    y : float
        Position along the y axis.
    theta : float
        Orientation in radians, stored as given.
    """

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    @classmethod
    def from_vector(cls, v: Vector2, theta: float = 0.0) -> "Pose2D":
        """Build a pose at the position of ``v`` with orientation ``theta``."""
        return cls(v.x, v.y, theta)

    @property
    def position(self) -> Vector2:
        """Copy of the position as a Vector2."""
        return Vector2(self.x, self.y)

    # --- Mutators ---

    def set(self, x: float, y: float, theta: Optional[float] = None) -> None:
        """Set position, and orientation when ``theta`` is given."""
        self.x = x
        self.y = y
        if theta is not None:
            self.theta = theta

    def set_by_polar(self, r: float, angle: float, orientation: float) -> None:
        """Set position from polar coordinates and orientation directly.

        Parameters
        ----------
        r : float
            Distance from the origin.
        angle : float
            Bearing of the position from the x axis in radians.
        orientation : float
            New ``theta``.
        """
        self.x = r * math.cos(angle)
        self.y = r * math.sin(angle)
        self.theta = orientation

    def rotated(
        self,
        angle: float,
        center: Optional[Union[Vector2, "Pose2D"]] = None,
    ) -> "Pose2D":
        """Return a copy whose position is rotated; ``theta`` is kept."""
        p = self.position.rotated(angle, center)
        return Pose2D(p.x, p.y, self.theta)

    def rotate(
        self,
        angle: float,
        center: Optional[Union[Vector2, "Pose2D"]] = None,
    ) -> None:
        """Rotate the position in place about ``center`` (default origin)."""
        result = self.rotated(angle, center)
        self.x = result.x
        self.y = result.y

    def rotate_about(self, rot_x: float, rot_y: float, angle: float) -> None:
        """Rotate the position in place about the point ``(rot_x, rot_y)``."""
        self.rotate(angle, Vector2(rot_x, rot_y))

    # --- Queries ---

    def equals(self, other: "Pose2D") -> bool:
        return self == other

    def length(self) -> float:
        return self.magnitude()

    def magnitude(self) -> float:
        """Distance of the position from the origin."""
        return math.sqrt(self.sqr_magnitude())

    def sqr_length(self) -> float:
        return self.sqr_magnitude()

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    # --- Pairwise operators (position only) ---

    @staticmethod
    def get_dot(a: "Pose2D", b: "Pose2D") -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def get_cross(a: "Pose2D", b: "Pose2D") -> float:
        return a.x * b.y - a.y * b.x

    @staticmethod
    def get_angle(a: "Pose2D", b: "Pose2D") -> float:
        """Bearing in radians from the position of ``a`` to that of ``b``."""
        return math.atan2(b.y - a.y, b.x - a.x)

    @staticmethod
    def get_distance(a: "Pose2D", b: "Pose2D") -> float:
        return math.hypot(b.x - a.x, b.y - a.y)

    @staticmethod
    def lerp(a: "Pose2D", b: "Pose2D", t: float) -> "Pose2D":
        """Interpolate x, y and theta linearly with ``t`` clamped to [0, 1].

        ``theta`` is interpolated as a plain scalar, not along the shortest
        arc. Pre-normalize ``b.theta - a.theta`` when that matters.
        """
        t = clamp(t, 0.0, 1.0)
        return Pose2D(
            a.x + (b.x - a.x) * t,
            a.y + (b.y - a.y) * t,
            a.theta + (b.theta - a.theta) * t,
        )

    @staticmethod
    def get_midpoint(a: "Pose2D", b: "Pose2D") -> "Pose2D":
        return Pose2D.lerp(a, b, 0.5)

    # --- Conversions ---

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.theta)

    def to_array(self) -> NDArray[np.float64]:
        """Return ``[x, y, theta]`` as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.theta], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: ArrayLike) -> "Pose2D":
        """Build from ``[x, y]`` or ``[x, y, theta]``.

        Raises
        ------
        ValueError
            If ``arr`` holds neither two nor three values.
        """
        values = array_components(arr, (2, 3))
        theta = float(values[2]) if values.shape[0] == 3 else 0.0
        return cls(float(values[0]), float(values[1]), theta)

    @classmethod
    def from_string(cls, text: str) -> "Pose2D":
        """Parse the ``"(x, y, theta)"`` form produced by ``str()``."""
        x, y, theta = parse_components(text, 3)
        return cls(x, y, theta)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.theta})"

    # --- Arithmetic (all three fields) ---

    def __pos__(self) -> "Pose2D":
        return Pose2D(self.x, self.y, self.theta)

    def __neg__(self) -> "Pose2D":
        return Pose2D(-self.x, -self.y, -self.theta)

    def __add__(self, other: "Pose2D") -> "Pose2D":
        if not isinstance(other, Pose2D):
            return NotImplemented
        return Pose2D(self.x + other.x, self.y + other.y, self.theta + other.theta)

    def __sub__(self, other: "Pose2D") -> "Pose2D":
        if not isinstance(other, Pose2D):
            return NotImplemented
        return Pose2D(self.x - other.x, self.y - other.y, self.theta - other.theta)

    def __mul__(self, scalar: float) -> "Pose2D":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Pose2D(self.x * scalar, self.y * scalar, self.theta * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Pose2D":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Pose2D(self.x / scalar, self.y / scalar, self.theta / scalar)

    def __iadd__(self, other: "Pose2D") -> "Pose2D":
        if not isinstance(other, Pose2D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.theta += other.theta
        return self

    def __isub__(self, other: "Pose2D") -> "Pose2D":
        if not isinstance(other, Pose2D):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.theta -= other.theta
        return self

    def __imul__(self, scalar: float) -> "Pose2D":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.theta *= scalar
        return self

    def __itruediv__(self, scalar: float) -> "Pose2D":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self.x /= scalar
        self.y /= scalar
        self.theta /= scalar
        return self
