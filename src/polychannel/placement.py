"""Placement records and placement sequences.

A :class:`Placement` is one primitive (a cube or a sphere) with a size,
a position and an axis-angle rotation.  A :class:`PlacementSequence` is
an immutable, ordered run of placements that all share one position
:class:`Representation`:

``RELATIVE``
    element 0 holds an absolute anchor, every later element holds the
    offset from the previous element's resolved absolute position.

``ABSOLUTE``
    every element holds a world-space coordinate.

Sequences are values.  Every transform in :mod:`polychannel.transforms`
and :mod:`polychannel.resolve` returns a new sequence and never touches
its input.

Placements can also be written as literals, which is how host design
scripts usually author them::

    ("sphr", (1, 1, 1), (0, 0, 0), (0, (0, 0, 1)))
    {"shape": "cube", "size": [1, 1, 1], "position": [3, 0, 0]}
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping, Sequence, Tuple, Union

from polychannel.errors import InvalidShapeKind, RepresentationMismatch
from polychannel.geom import iszero, vect3

Vec3 = Tuple[float, float, float]


class ShapeKind(Enum):
    """Primitive cross-section shapes."""

    CUBE = "cube"
    SPHERE = "sphere"

    @classmethod
    def parse(cls, value: Any) -> "ShapeKind":
        """Return the kind named by ``value``, rejecting anything else."""

        if isinstance(value, ShapeKind):
            return value
        if isinstance(value, str):
            kind = _SHAPE_ALIASES.get(value.strip().lower())
            if kind is not None:
                return kind
        raise InvalidShapeKind(value)


_SHAPE_ALIASES = {
    "cube": ShapeKind.CUBE,
    "sphere": ShapeKind.SPHERE,
    "sphr": ShapeKind.SPHERE,
}


class Representation(Enum):
    """How the positions of a sequence are interpreted."""

    RELATIVE = "relative"
    ABSOLUTE = "absolute"

    @classmethod
    def parse(cls, value: Any) -> "Representation":
        if isinstance(value, Representation):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"unknown representation {value!r}; expected 'relative' or 'absolute'")


@dataclass(frozen=True)
class Rotation:
    """Axis-angle rotation, ``angle`` in degrees about ``axis``."""

    angle: float = 0.0
    axis: Vec3 = (0.0, 0.0, 1.0)

    def __post_init__(self) -> None:
        if isinstance(self.angle, bool) or not isinstance(self.angle, (int, float)):
            raise ValueError(f"rotation angle must be a number, got {self.angle!r}")
        object.__setattr__(self, "angle", float(self.angle))
        object.__setattr__(self, "axis", vect3(self.axis))
        if not self.is_identity() and iszero(self.axis):
            raise ValueError("zero-length rotation axis not allowed")

    def is_identity(self) -> bool:
        return self.angle % 360.0 == 0.0

    @classmethod
    def coerce(cls, value: Any) -> "Rotation":
        """Build a rotation from ``None``, a rotation, or an ``(angle, axis)`` pair."""

        if value is None:
            return cls()
        if isinstance(value, Rotation):
            return value
        if isinstance(value, Mapping):
            return cls(value.get("angle", 0.0), value.get("axis", (0.0, 0.0, 1.0)))
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(value[0], value[1])
        raise ValueError(f"rotation must be an (angle, axis) pair, got {value!r}")


@dataclass(frozen=True)
class Placement:
    """One primitive of a polychannel."""

    shape: ShapeKind
    size: Vec3
    position: Vec3
    rotation: Rotation = field(default_factory=Rotation)

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", ShapeKind.parse(self.shape))
        object.__setattr__(self, "size", vect3(self.size))
        object.__setattr__(self, "position", vect3(self.position))
        object.__setattr__(self, "rotation", Rotation.coerce(self.rotation))

    def with_position(self, position: Sequence[float]) -> "Placement":
        """Return a copy of this placement moved to ``position``."""

        return replace(self, position=position)

    @classmethod
    def from_literal(cls, value: Any) -> "Placement":
        """Parse a tuple or mapping literal into a placement.

        Tuples are ``(shape, size, position)`` or
        ``(shape, size, position, (angle, axis))``.  Mappings use the keys
        ``shape``, ``size``, ``position`` and optionally ``rotation``.
        """

        if isinstance(value, Placement):
            return value
        if isinstance(value, Mapping):
            missing = [k for k in ("shape", "size", "position") if k not in value]
            if missing:
                raise ValueError(f"placement mapping is missing {', '.join(missing)}")
            return cls(value["shape"], value["size"], value["position"],
                       value.get("rotation"))
        if isinstance(value, (tuple, list)) and len(value) in (3, 4):
            rotation = value[3] if len(value) == 4 else None
            return cls(value[0], value[1], value[2], rotation)
        raise ValueError(f"cannot interpret {value!r} as a placement")


PlacementLike = Union[Placement, Sequence[Any], Mapping[str, Any]]


@dataclass(frozen=True)
class PlacementSequence:
    """Immutable ordered placements sharing one representation."""

    placements: Tuple[Placement, ...] = ()
    representation: Representation = Representation.RELATIVE

    def __post_init__(self) -> None:
        items = tuple(Placement.from_literal(p) for p in self.placements)
        object.__setattr__(self, "placements", items)
        object.__setattr__(self, "representation",
                           Representation.parse(self.representation))

    @classmethod
    def relative(cls, placements: Iterable[PlacementLike]) -> "PlacementSequence":
        return cls(tuple(placements), Representation.RELATIVE)

    @classmethod
    def absolute(cls, placements: Iterable[PlacementLike]) -> "PlacementSequence":
        return cls(tuple(placements), Representation.ABSOLUTE)

    @property
    def is_relative(self) -> bool:
        return self.representation is Representation.RELATIVE

    @property
    def positions(self) -> Tuple[Vec3, ...]:
        return tuple(p.position for p in self.placements)

    def derive(self, placements: Iterable[Placement],
               representation: Representation | None = None) -> "PlacementSequence":
        """Return a new sequence, keeping this representation unless told otherwise."""

        rep = self.representation if representation is None else representation
        return PlacementSequence(tuple(placements), rep)

    def __len__(self) -> int:
        return len(self.placements)

    def __iter__(self) -> Iterator[Placement]:
        return iter(self.placements)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.derive(self.placements[index])
        return self.placements[index]

    def __add__(self, other: "PlacementSequence") -> "PlacementSequence":
        if not isinstance(other, PlacementSequence):
            return NotImplemented
        if other.representation is not self.representation:
            raise RepresentationMismatch(
                f"cannot join a {self.representation.value} sequence with a "
                f"{other.representation.value} sequence"
            )
        return self.derive(self.placements + other.placements)


def as_sequence(value: Any,
                representation: Representation | str | None = None) -> PlacementSequence:
    """Coerce a sequence or a list of placement literals into a :class:`PlacementSequence`.

    ``representation`` overrides the tag of an existing sequence; a bare
    list defaults to relative.
    """

    if isinstance(value, PlacementSequence):
        if representation is None:
            return value
        return value.derive(value.placements, Representation.parse(representation))
    rep = Representation.RELATIVE if representation is None else Representation.parse(representation)
    return PlacementSequence(tuple(value), rep)
