"""Two-component vector algebra.

Vector2 is a mutable value type: arithmetic operators return new vectors,
while ``set``, ``set_by_polar``, ``rotate``, ``normalize`` and the compound
assignment operators change the receiver in place.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from nav_geometry.utils.math_utils import clamp


def parse_components(text: str, count: int) -> List[float]:
    """Parse ``"(a, b, ...)"`` into exactly ``count`` floats.

    Raises
    ------
    ValueError
        If the text is not parenthesised or has the wrong number of
        numeric components.
    """
    stripped = text.strip()
    if not (stripped.startswith('(') and stripped.endswith(')')):
        raise ValueError(f"Expected parenthesised components, got {text!r}")
    parts = [p.strip() for p in stripped[1:-1].split(',')]
    if len(parts) != count:
        raise ValueError(
            f"Expected {count} components, got {len(parts)} in {text!r}"
        )
    return [float(p) for p in parts]


def array_components(arr: ArrayLike, sizes: Tuple[int, ...]) -> NDArray[np.float64]:
    """Flatten ``arr`` to float64 and check its length is one of ``sizes``."""
    values = np.asarray(arr, dtype=np.float64).reshape(-1)
    if values.shape[0] not in sizes:
        raise ValueError(
            f"Expected array with {' or '.join(map(str, sizes))} elements, "
            f"got shape {np.shape(arr)}"
        )
    return values


@dataclass
class Vector2:
    """2D vector with x and y components.

    Not kept normalized; call :meth:`normalize` explicitly when a unit
    vector is needed.

    Attributes
    ----------
    x : float
        Component along the x axis.
    y : float
        Component along the y axis.
    """

    x: float = 0.0
    y: float = 0.0

    # --- Mutators ---

    def set(self, x: float, y: float) -> None:
        """Set both components from Cartesian coordinates."""
        self.x = x
        self.y = y

    def set_by_polar(self, r: float, angle: float) -> None:
        """Set components from polar coordinates.

        Parameters
        ----------
        r : float
            Distance from the origin.
        angle : float
            Angle from the x axis in radians.
        """
        self.x = r * math.cos(angle)
        self.y = r * math.sin(angle)

    def rotated(self, angle: float, center: Optional["Vector2"] = None) -> "Vector2":
        """Return a copy rotated by ``angle`` radians.

        Parameters
        ----------
        angle : float
            Counter-clockwise rotation in radians.
        center : Vector2 or Pose2D, optional
            Rotation center (anything with ``x`` and ``y``). Defaults to
            the origin.

        Returns
        -------
        Vector2
            Rotated vector. The receiver is unchanged.
        """
        cx = 0.0 if center is None else center.x
        cy = 0.0 if center is None else center.y
        dx = self.x - cx
        dy = self.y - cy
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(
            dx * cos_a - dy * sin_a + cx,
            dx * sin_a + dy * cos_a + cy,
        )

    def rotate(self, angle: float, center: Optional["Vector2"] = None) -> None:
        """Rotate in place by ``angle`` radians about ``center`` (default origin)."""
        result = self.rotated(angle, center)
        self.x = result.x
        self.y = result.y

    def rotate_about(self, rot_x: float, rot_y: float, angle: float) -> None:
        """Rotate in place about the point ``(rot_x, rot_y)``."""
        self.rotate(angle, Vector2(rot_x, rot_y))

    def normalize(self) -> None:
        """Scale in place to unit length.

        A zero vector becomes (nan, nan); callers guard against it.
        """
        result = self.normalized()
        self.x = result.x
        self.y = result.y

    def normalized(self) -> "Vector2":
        """Return a unit-length copy, or (nan, nan) for a zero vector."""
        length = self.length()
        if length == 0.0:
            return Vector2(math.nan, math.nan)
        return Vector2(self.x / length, self.y / length)

    # --- Queries ---

    def equals(self, other: "Vector2") -> bool:
        """Exact component-wise equality, same as ``==``."""
        return self == other

    def length(self) -> float:
        """Euclidean norm."""
        return self.magnitude()

    def magnitude(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.sqr_magnitude())

    def sqr_length(self) -> float:
        """Squared Euclidean norm."""
        return self.sqr_magnitude()

    def sqr_magnitude(self) -> float:
        """Squared Euclidean norm."""
        return self.x * self.x + self.y * self.y

    # --- Pairwise operators ---

    @staticmethod
    def get_dot(a: "Vector2", b: "Vector2") -> float:
        """Dot product ``a.x*b.x + a.y*b.y``."""
        return a.x * b.x + a.y * b.y

    @staticmethod
    def get_cross(a: "Vector2", b: "Vector2") -> float:
        """Scalar 2D cross product ``a.x*b.y - a.y*b.x``.

        Positive when ``b`` is counter-clockwise from ``a``, zero when the
        two are collinear.
        """
        return a.x * b.y - a.y * b.x

    @staticmethod
    def get_angle(a: "Vector2", b: "Vector2") -> float:
        """Bearing in radians of the direction from point ``a`` to point ``b``."""
        return math.atan2(b.y - a.y, b.x - a.x)

    @staticmethod
    def get_distance(a: "Vector2", b: "Vector2") -> float:
        """Euclidean distance between points ``a`` and ``b``."""
        return (b - a).magnitude()

    @staticmethod
    def lerp(a: "Vector2", b: "Vector2", t: float) -> "Vector2":
        """Linear interpolation from ``a`` to ``b``.

        ``t`` is clamped to [0, 1], so the result never leaves the segment.
        """
        t = clamp(t, 0.0, 1.0)
        return Vector2(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)

    # --- Conversions ---

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> NDArray[np.float64]:
        """Return components as a float64 array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: ArrayLike) -> "Vector2":
        """Build from any array-like with exactly two elements.

        Raises
        ------
        ValueError
            If ``arr`` does not hold exactly two values.
        """
        values = array_components(arr, (2,))
        return cls(float(values[0]), float(values[1]))

    @classmethod
    def from_string(cls, text: str) -> "Vector2":
        """Parse the ``"(x, y)"`` form produced by ``str()``."""
        x, y = parse_components(text, 2)
        return cls(x, y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # --- Arithmetic ---

    def __pos__(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        # Vector * vector is left undefined; use get_dot / get_cross
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self.x /= scalar
        self.y /= scalar
        return self
