"""Closed-form curve generators producing placement sequences.

Two families are provided: circular arcs lying in one of the three
cardinal planes, and cubic Bezier curves joining two end points with
prescribed tangents.  Each generator samples the curve in absolute space
(see :func:`sample_arc` and :func:`sample_bezier`) and then hands the
samples to :func:`polychannel.resolve.resolve_to_relative`.  By default
the first position of the returned fragment is zeroed, so a fragment can
be anchored anywhere with :func:`polychannel.transforms.set_first_position`
or spliced after an existing relative sequence.

Arc angles are given in degrees.  Samples are uniform in angle for arcs
and uniform in the curve parameter ``t`` for Bezier curves; Bezier
samples are therefore denser where the curve moves slowly, not spaced by
arc length.
"""

from __future__ import annotations

from math import acos, cos, degrees, radians, sin
from numbers import Integral
from typing import Callable, Dict, Sequence, Tuple

from polychannel.errors import AmbiguousRotation, DegenerateCurve
from polychannel.geom import add, cross, dot, epsilon, iszero, mag, scale3, sub, unit, vect3
from polychannel.placement import (
    Placement,
    PlacementSequence,
    Representation,
    Rotation,
    Vec3,
)
from polychannel.resolve import resolve_to_relative

# plane name -> (maps (cos, sin) into the plane, rotation axis)
_PLANES: Dict[str, Tuple[Callable[[float, float], Vec3], Vec3]] = {
    "xy": (lambda c, s: (c, s, 0.0), (0.0, 0.0, 1.0)),
    "xz": (lambda c, s: (c, 0.0, s), (0.0, -1.0, 0.0)),
    "yz": (lambda c, s: (0.0, c, s), (1.0, 0.0, 0.0)),
}


def _check_segments(segments) -> int:
    if isinstance(segments, bool) or not isinstance(segments, Integral):
        raise DegenerateCurve(f"segment count must be an integer, got {segments!r}")
    if segments < 1:
        raise DegenerateCurve(f"segment count must be at least 1, got {segments}")
    return int(segments)


## circular arcs
## -------------

def sample_arc(plane: str, shape, size, radius: float, angle1: float,
               delta_angle: float, segments: int) -> PlacementSequence:
    """Absolute samples of a circular arc centered on the origin.

    Produces ``segments + 1`` placements at angles
    ``angle1 + k * delta_angle / segments``.  Each placement is rotated
    by its sample angle about the plane's axis (Z for ``"xy"``, -Y for
    ``"xz"``, X for ``"yz"``) so the cross-section follows the arc.
    """

    try:
        to_plane, axis = _PLANES[plane.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"bad plane specification: {plane!r}") from None
    n = _check_segments(segments)

    placements = []
    for k in range(n + 1):
        ang = angle1 + k * delta_angle / n
        rad = radians(ang)
        position = to_plane(radius * cos(rad), radius * sin(rad))
        placements.append(Placement(shape, size, position, Rotation(ang, axis)))
    return PlacementSequence(tuple(placements), Representation.ABSOLUTE)


def arc(plane: str, shape, size, radius: float, angle1: float, delta_angle: float,
        segments: int, keep_first_position: bool = False) -> PlacementSequence:
    """Relative placement fragment following a circular arc in ``plane``."""

    samples = sample_arc(plane, shape, size, radius, angle1, delta_angle, segments)
    return resolve_to_relative(samples, keep_first_position=keep_first_position)


def arc_xy(shape, size, radius, angle1, delta_angle, segments, keep_first_position=False):
    """Arc in the XY plane, see :func:`arc`."""
    return arc("xy", shape, size, radius, angle1, delta_angle, segments, keep_first_position)


def arc_xz(shape, size, radius, angle1, delta_angle, segments, keep_first_position=False):
    """Arc in the XZ plane, see :func:`arc`."""
    return arc("xz", shape, size, radius, angle1, delta_angle, segments, keep_first_position)


def arc_yz(shape, size, radius, angle1, delta_angle, segments, keep_first_position=False):
    """Arc in the YZ plane, see :func:`arc`."""
    return arc("yz", shape, size, radius, angle1, delta_angle, segments, keep_first_position)


def arc_between(plane: str, shape, size, radius: float, angle1: float, angle2: float,
                segments: int, keep_first_position: bool = False) -> PlacementSequence:
    """Arc from ``angle1`` to ``angle2`` rather than by a delta angle."""

    return arc(plane, shape, size, radius, angle1, angle2 - angle1, segments,
               keep_first_position)


## cubic Bezier curves
## -------------------

def bezier_control_points(p0, p1, d0, d1) -> Tuple[Vec3, Vec3, Vec3, Vec3]:
    """Control points of the cubic Bezier from ``p0`` to ``p1`` with end
    tangents ``d0`` and ``d1``."""

    p0 = vect3(p0)
    p1 = vect3(p1)
    return (p0,
            add(p0, scale3(vect3(d0), 1.0 / 3.0)),
            sub(p1, scale3(vect3(d1), 1.0 / 3.0)),
            p1)


def cubic_bezier_point(t: float, p0, p1, d0, d1) -> Vec3:
    """Evaluate the curve at ``t``; exactly ``p0`` at 0 and ``p1`` at 1."""

    c0, c1, c2, c3 = bezier_control_points(p0, p1, d0, d1)
    u = 1.0 - t
    b0 = u * u * u
    b1 = 3.0 * u * u * t
    b2 = 3.0 * u * t * t
    b3 = t * t * t
    return tuple(b0 * c0[i] + b1 * c1[i] + b2 * c2[i] + b3 * c3[i] for i in range(3))


def cubic_bezier_tangent(t: float, p0, p1, d0, d1) -> Vec3:
    """First derivative of the curve with respect to ``t``."""

    c0, c1, c2, c3 = bezier_control_points(p0, p1, d0, d1)
    u = 1.0 - t
    a = 3.0 * u * u
    b = 6.0 * u * t
    c = 3.0 * t * t
    return tuple(a * (c1[i] - c0[i]) + b * (c2[i] - c1[i]) + c * (c3[i] - c2[i])
                 for i in range(3))


def tangent_rotation(shape_normal: Sequence[float], tangent: Sequence[float]) -> Rotation:
    """Rotation that turns ``shape_normal`` onto ``tangent``.

    The angle comes from the normalized dot product and the axis is the
    unit cross product.  A tangent parallel to the normal needs no
    rotation and yields an identity rotation about the normal.  An
    antiparallel or zero-length tangent has no defined axis and raises
    :class:`~polychannel.errors.AmbiguousRotation`.
    """

    n = vect3(shape_normal)
    t = vect3(tangent)
    if iszero(n):
        raise ValueError("shape normal must be non-zero")
    if iszero(t):
        raise AmbiguousRotation("curve tangent vanishes; rotation is undefined")

    norms = mag(n) * mag(t)
    cosang = max(-1.0, min(1.0, dot(n, t) / norms))
    axis = cross(n, t)
    if mag(axis) / norms < epsilon:
        if cosang > 0.0:
            return Rotation(0.0, unit(n))
        raise AmbiguousRotation(
            "curve tangent is antiparallel to the shape normal; rotation axis is undefined"
        )
    return Rotation(degrees(acos(cosang)), unit(axis))


def sample_bezier(shape, size, p0, p1, d0, d1, shape_normal=(0.0, 0.0, 1.0),
                  segments: int = 10) -> PlacementSequence:
    """Absolute samples at ``t = k / segments`` for ``k = 0 .. segments``,
    each rotated to follow the curve tangent."""

    n = _check_segments(segments)
    placements = []
    for k in range(n + 1):
        t = k / n
        position = cubic_bezier_point(t, p0, p1, d0, d1)
        rotation = tangent_rotation(shape_normal, cubic_bezier_tangent(t, p0, p1, d0, d1))
        placements.append(Placement(shape, size, position, rotation))
    return PlacementSequence(tuple(placements), Representation.ABSOLUTE)


def bezier_curve(shape, size, p0, p1, d0, d1, shape_normal=(0.0, 0.0, 1.0),
                 segments: int = 10, keep_first_position: bool = False) -> PlacementSequence:
    """Relative placement fragment following a cubic Bezier curve."""

    samples = sample_bezier(shape, size, p0, p1, d0, d1, shape_normal, segments)
    return resolve_to_relative(samples, keep_first_position=keep_first_position)


def bezier_length(p0, p1, d0, d1, num_steps: int = 1000) -> float:
    """Approximate arc length by the midpoint rule on the tangent magnitude.

    For diagnostics only; placement spacing never depends on it.
    """

    steps = _check_segments(num_steps)
    dt = 1.0 / steps
    return sum(mag(cubic_bezier_tangent((i + 0.5) * dt, p0, p1, d0, d1))
               for i in range(steps)) * dt
