"""Build configuration and placement documents.

Configuration is an explicit :class:`BuildConfig` value handed to
:func:`polychannel.builder.build` and :class:`polychannel.kernel.TrimeshKernel`;
nothing is stored at module level.  Hosts that keep their settings or
their placement lists in YAML can parse them with :meth:`BuildConfig.from_yaml`
and :func:`sequence_from_yaml`, for example::

    sphere_subdivisions: 3
    center: true
    color: [0.2, 0.4, 1.0, 0.8]

    representation: relative
    placements:
      - [sphr, [1, 1, 1], [0, 0, 0]]
      - {shape: cube, size: [1, 1, 1], position: [3, 0, 0], rotation: [45, [0, 0, 1]]}
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from polychannel.geom import isgoodnum
from polychannel.placement import PlacementSequence, Representation


@dataclass(frozen=True)
class BuildConfig:
    """Defaults for building polychannels."""

    sphere_subdivisions: int = 2
    center: bool = True
    color: Optional[Tuple[float, ...]] = None

    def __post_init__(self) -> None:
        value = self.sphere_subdivisions
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"sphere_subdivisions must be a non-negative integer, got {value!r}")
        if not isinstance(self.center, bool):
            raise ValueError(f"center must be a boolean, got {self.center!r}")
        if self.color is not None:
            color = tuple(self.color)
            if len(color) not in (3, 4) or not all(isgoodnum(c) for c in color):
                raise ValueError(f"color must be 3 or 4 numbers, got {self.color!r}")
            object.__setattr__(self, "color", color)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "BuildConfig":
        """Create a config from a mapping, rejecting unknown keys."""

        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(data))

    @classmethod
    def from_yaml(cls, text: str) -> "BuildConfig":
        data = yaml.safe_load(text) or {}
        if not isinstance(data, Mapping):
            raise ValueError("configuration document must be a mapping")
        return cls.from_mapping(data)

    def to_mapping(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if self.color is not None:
            data["color"] = list(self.color)
        return data


def sequence_from_mapping(data: Mapping[str, Any]) -> PlacementSequence:
    """Read ``{"representation": ..., "placements": [...]}`` into a sequence."""

    if not isinstance(data, Mapping) or "placements" not in data:
        raise ValueError("placement document must be a mapping with a 'placements' list")
    placements = data["placements"] or []
    if not isinstance(placements, (list, tuple)):
        raise ValueError("'placements' must be a list")
    rep = Representation.parse(data.get("representation", "relative"))
    return PlacementSequence(tuple(placements), rep)


def sequence_from_yaml(text: str) -> PlacementSequence:
    return sequence_from_mapping(yaml.safe_load(text))
