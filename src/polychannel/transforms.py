"""Order and offset transforms on placement sequences.

All functions here are pure: they build and return a new
:class:`~polychannel.placement.PlacementSequence`.
"""

from __future__ import annotations

from functools import reduce
from typing import Sequence

from polychannel.errors import DegenerateSequence
from polychannel.geom import add, scale3, vect3
from polychannel.placement import PlacementSequence
from polychannel.resolve import resolve_to_absolute, resolve_to_relative, steps_along


def reverse_order(seq: PlacementSequence) -> PlacementSequence:
    """Reverse ``seq`` so that it traces the same path backward.

    For a relative sequence the new anchor is the old end point and each
    later element carries the step back to its predecessor's absolute
    position, so resolving the result visits the original absolute
    positions in reverse order and ends on the original start.  An
    absolute sequence is simply reordered.
    """

    items = seq.placements
    if not seq.is_relative or len(items) == 0:
        return seq.derive(reversed(items))

    backward = resolve_to_absolute(seq).positions[::-1]
    reversed_items = [items[-1].with_position(backward[0])]
    reversed_items.extend(p.with_position(step)
                          for p, step in zip(items[-2::-1], steps_along(backward)))
    return seq.derive(reversed_items)


def uniformly_increase(seq: PlacementSequence, change: Sequence[float]) -> PlacementSequence:
    """Spread ``change`` evenly over every step after the anchor.

    Each relative offset after element 0 grows by ``change / (n - 1)``,
    so the end point moves by exactly ``change``.  Useful for fanning out
    or tapering a run of identical steps.
    """

    n = len(seq)
    if n < 2:
        raise DegenerateSequence("uniformly_increase", 2, n)
    step = scale3(vect3(change), 1.0 / (n - 1))

    relative = seq if seq.is_relative else resolve_to_relative(seq, keep_first_position=True)
    items = [relative[0]]
    items.extend(p.with_position(add(p.position, step)) for p in relative.placements[1:])
    result = relative.derive(items)
    return result if seq.is_relative else resolve_to_absolute(result)


def set_first_position(seq: PlacementSequence, position: Sequence[float]) -> PlacementSequence:
    """Replace the position of element 0 only."""

    if len(seq) == 0:
        raise DegenerateSequence("set_first_position", 1, 0)
    return seq.derive((seq[0].with_position(position),) + seq.placements[1:])


def splice(*sequences: PlacementSequence) -> PlacementSequence:
    """Concatenate sequences that share a representation."""

    if not sequences:
        return PlacementSequence()
    return reduce(lambda a, b: a + b, sequences)
