"""Conversion between relative and absolute placement positions.

Resolving a relative sequence is a running prefix sum over positions:
element 0 is the anchor and every later offset is added to the running
total.  The inverse takes consecutive differences.  Shape, size and
rotation always pass through untouched.

The running total is kept exactly (as :class:`~fractions.Fraction`) and
each resolved position is that total rounded once to the nearest float,
so long runs do not drift.  The differences produced by
:func:`resolve_to_relative` are chosen against the same exact total, so
``resolve_to_absolute(resolve_to_relative(s, True)) == s`` holds for any
finite coordinates.  A difference is a plain float whenever some float
lands on the target; otherwise (a big jump onto a value much closer to
zero, e.g. ``1.3`` to ``0.1``) the exact ``Fraction`` is kept.
"""

from __future__ import annotations

from fractions import Fraction
from typing import List, Sequence

from polychannel.errors import DegenerateSequence
from polychannel.geom import ZERO
from polychannel.placement import PlacementSequence, Representation, Vec3


def _offsets(values: Sequence[float]) -> list:
    total = Fraction(values[0])
    offsets = []
    for target in values[1:]:
        wanted = Fraction(target) - total
        offset = float(wanted)
        if float(total + Fraction(offset)) != target:
            offset = wanted
        total += Fraction(offset)
        offsets.append(offset)
    return offsets


def steps_along(points: Sequence[Vec3]) -> List[Vec3]:
    """Offsets that walk from ``points[0]`` through every later point.

    Resolving ``points[0]`` followed by the returned offsets reproduces
    ``points`` exactly.
    """

    columns = [_offsets([p[axis] for p in points]) for axis in range(3)]
    return list(zip(*columns))


def resolve_to_absolute(seq: PlacementSequence) -> PlacementSequence:
    """Return the absolute form of ``seq``.

    An already absolute sequence is returned unchanged.
    """

    if not seq.is_relative:
        return seq
    resolved = []
    total = None
    for placement in seq:
        offset = tuple(Fraction(c) for c in placement.position)
        total = offset if total is None else tuple(t + o for t, o in zip(total, offset))
        resolved.append(placement.with_position(tuple(float(t) for t in total)))
    return seq.derive(resolved, Representation.ABSOLUTE)


def resolve_to_relative(seq: PlacementSequence,
                        keep_first_position: bool = True) -> PlacementSequence:
    """Return the relative form of ``seq``.

    Element 0 keeps its absolute position when ``keep_first_position`` is
    true and is zeroed otherwise, which is the form curve fragments take
    before they are anchored with
    :func:`polychannel.transforms.set_first_position`.  A relative input
    is first resolved so the result always describes the same path.
    Offsets are measured from the original anchor either way, so
    re-anchoring a zeroed fragment at its old start reproduces it.
    """

    absolute = resolve_to_absolute(seq)
    if len(absolute) == 0:
        return absolute.derive((), Representation.RELATIVE)
    first = absolute[0]
    relative = [first if keep_first_position else first.with_position(ZERO)]
    steps = steps_along(absolute.positions)
    relative.extend(p.with_position(step)
                    for p, step in zip(absolute.placements[1:], steps))
    return absolute.derive(relative, Representation.RELATIVE)


def final_absolute_position(seq: PlacementSequence) -> Vec3:
    """Absolute position of the last placement of ``seq``."""

    if len(seq) == 0:
        raise DegenerateSequence("final_absolute_position", 1, 0)
    return resolve_to_absolute(seq)[-1].position
