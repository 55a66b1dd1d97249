"""Geometry kernel interface and the default trimesh-backed kernel.

The placement pipeline never builds solids itself.  It asks a kernel for
three things: a transformed primitive, the convex hull of two solids,
and a composed scene.  Any object with those methods satisfies
:class:`GeometryKernel`; :class:`TrimeshKernel` is the implementation
used when a caller does not supply one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence

import numpy as np
import trimesh
from trimesh.visual.color import to_rgba

from polychannel.config import BuildConfig
from polychannel.geom import vect3
from polychannel.placement import Placement, Rotation, ShapeKind, Vec3
from polychannel.xform import Matrix, Rotation as RotationMatrix, Scale, Translation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RigidTransform:
    """Rotation about the origin followed by a translation."""

    translation: Vec3 = (0.0, 0.0, 0.0)
    rotation: Rotation = field(default_factory=Rotation)

    def __post_init__(self) -> None:
        object.__setattr__(self, "translation", vect3(self.translation))
        object.__setattr__(self, "rotation", Rotation.coerce(self.rotation))

    @classmethod
    def from_placement(cls, placement: Placement) -> "RigidTransform":
        return cls(placement.position, placement.rotation)

    def matrix(self) -> Matrix:
        T = Translation(self.translation)
        if self.rotation.is_identity():
            return T
        return T.mul(RotationMatrix(self.rotation.axis, self.rotation.angle))

    def as_array(self) -> np.ndarray:
        return np.asarray(self.matrix().tolist(), dtype=float)


class GeometryKernel(Protocol):
    """What the channel builder needs from a solid modeller."""

    def make_primitive(self, kind: ShapeKind, size: Vec3, transform: RigidTransform,
                       centered: bool = True) -> Any:
        ...

    def hull(self, a: Any, b: Any) -> Any:
        ...

    def compose(self, solids: Sequence[Any], color: Optional[Sequence[float]] = None) -> Any:
        ...


class TrimeshKernel:
    """Kernel producing ``trimesh.Trimesh`` solids and a ``trimesh.Scene``.

    Cubes are boxes with the given extents, spheres are icospheres of
    unit diameter scaled per axis.  Spheres are always centered on their
    position; cubes sit with their minimum corner on it when
    ``centered`` is false.
    """

    def __init__(self, config: BuildConfig | None = None):
        self.config = config if config is not None else BuildConfig()

    def make_primitive(self, kind, size, transform: RigidTransform, centered: bool = True):
        kind = ShapeKind.parse(kind)
        size = vect3(size)
        if kind is ShapeKind.CUBE:
            mesh = trimesh.creation.box(extents=size)
            if not centered:
                mesh.apply_translation(np.asarray(size) / 2.0)
        else:
            mesh = trimesh.creation.icosphere(
                subdivisions=self.config.sphere_subdivisions, radius=0.5)
            mesh.apply_transform(np.asarray(Scale(size).tolist(), dtype=float))
        mesh.apply_transform(transform.as_array())
        return mesh

    def hull(self, a, b):
        return trimesh.util.concatenate([a, b]).convex_hull

    def compose(self, solids, color=None):
        scene = trimesh.Scene()
        rgba = None if color is None else to_rgba(color)
        for i, solid in enumerate(solids):
            mesh = solid.copy()
            if rgba is not None:
                mesh.visual.face_colors = rgba
            scene.add_geometry(mesh, geom_name=f"polychannel_{i}")
        logger.debug(f"composed {len(solids)} solid(s) into scene")
        return scene
