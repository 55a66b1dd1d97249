# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("polychannel")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from polychannel.errors import (
    AmbiguousRotation,
    DegenerateCurve,
    DegenerateSequence,
    InvalidShapeKind,
    PolychannelError,
    RepresentationMismatch,
)
from polychannel.placement import (
    Placement,
    PlacementSequence,
    Representation,
    Rotation,
    ShapeKind,
    as_sequence,
)
from polychannel.resolve import (
    final_absolute_position,
    resolve_to_absolute,
    resolve_to_relative,
)
from polychannel.transforms import (
    reverse_order,
    set_first_position,
    splice,
    uniformly_increase,
)
from polychannel.curves import (
    arc,
    arc_between,
    arc_xy,
    arc_xz,
    arc_yz,
    bezier_curve,
    bezier_length,
    cubic_bezier_point,
    cubic_bezier_tangent,
    sample_arc,
    sample_bezier,
)
from polychannel.config import BuildConfig, sequence_from_mapping, sequence_from_yaml
from polychannel.kernel import GeometryKernel, RigidTransform, TrimeshKernel
from polychannel.builder import build
