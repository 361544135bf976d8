"""Scalar math helpers shared by the geometry kernel.

Provides the range guard used for interpolation parameters and the angle
conversion/normalization helpers. All angles are in radians unless a
function name says otherwise, using standard math convention (y-up,
counter-clockwise positive).
"""

import math


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to [min_val, max_val].

    Parameters
    ----------
    value : float
        Value to clamp.
    min_val : float
        Minimum bound.
    max_val : float
        Maximum bound.

    Returns
    -------
    float
        ``min_val`` if value is below it, ``max_val`` if value is above it,
        otherwise value unchanged.
    """
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value


def radians(degrees_value: float) -> float:
    """Convert degrees to radians."""
    return degrees_value * math.pi / 180.0


def degrees(radians_value: float) -> float:
    """Convert radians to degrees."""
    return radians_value * 180.0 / math.pi


def normalize_angle(angle: float) -> float:
    """Normalize angle to (-pi, pi].

    Parameters
    ----------
    angle : float
        Angle in radians.

    Returns
    -------
    float
        Normalized angle in (-pi, pi]. Both pi and -pi map to pi.
    """
    result = math.fmod(angle + math.pi, 2 * math.pi)
    if result <= 0.0:
        return result + math.pi
    return result - math.pi


def normalize_positive(angle: float) -> float:
    """Normalize angle to [0, 2*pi).

    Parameters
    ----------
    angle : float
        Angle in radians.

    Returns
    -------
    float
        Normalized angle in [0, 2*pi).
    """
    result = math.fmod(angle, 2 * math.pi)
    if result < 0:
        return result + 2 * math.pi
    return result


def shortest_angle(from_angle: float, to_angle: float) -> float:
    """Compute shortest signed rotation from ``from_angle`` to ``to_angle``.

    Parameters
    ----------
    from_angle : float
        Starting angle in radians.
    to_angle : float
        Target angle in radians.

    Returns
    -------
    float
        Signed difference in (-pi, pi]. Positive means counter-clockwise.
    """
    return normalize_angle(to_angle - from_angle)


def complement(angle: float) -> float:
    """Return the co-terminal angle of opposite sign.

    Angles outside [-2*pi, 2*pi] are first reduced with ``fmod``. A
    positive angle maps to ``angle - 2*pi``, a negative one to
    ``angle + 2*pi``. Zero maps to ``2*pi``.

    Parameters
    ----------
    angle : float
        Angle in radians.

    Returns
    -------
    float
        Complementary angle in radians.
    """
    if angle > 2 * math.pi or angle < -2 * math.pi:
        angle = math.fmod(angle, 2 * math.pi)
    if angle < 0:
        return 2 * math.pi + angle
    if angle > 0:
        return -2 * math.pi + angle
    return 2 * math.pi


def lerp_angle(a1: float, a2: float, t: float) -> float:
    """Linearly interpolate between two angles along the shortest arc.

    Parameters
    ----------
    a1 : float
        Start angle in radians.
    a2 : float
        End angle in radians.
    t : float
        Interpolation parameter, clamped to [0, 1]. 0 gives a1 and 1 gives
        a2, both wrapped into (-pi, pi].

    Returns
    -------
    float
        Interpolated angle in (-pi, pi].
    """
    t = clamp(t, 0.0, 1.0)
    diff = shortest_angle(a1, a2)
    return normalize_angle(a1 + t * diff)
