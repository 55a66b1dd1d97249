"""Materialize placement sequences as hulled channel geometry."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from polychannel.config import BuildConfig
from polychannel.errors import DegenerateSequence
from polychannel.kernel import GeometryKernel, RigidTransform, TrimeshKernel
from polychannel.placement import Representation, as_sequence
from polychannel.resolve import resolve_to_absolute

logger = logging.getLogger(__name__)


def build(seq, representation: Representation | str | None = None,
          color: Optional[Sequence[float]] = None, center: Optional[bool] = None,
          shapes_only: bool = False, kernel: GeometryKernel | None = None,
          config: BuildConfig | None = None) -> Any:
    """Build the polychannel described by ``seq``.

    ``seq`` is a :class:`~polychannel.placement.PlacementSequence` or a
    list of placement literals; ``representation`` overrides its tag.
    Relative input is resolved to absolute positions first.  Every
    placement becomes one kernel primitive, then each adjacent pair
    ``(i - 1, i)`` is hulled in index order and the ``n - 1`` hulls are
    composed into the result.  With ``shapes_only`` the bare primitives
    are composed instead, which shows the cross-sections without the
    connecting skin.

    ``color`` and ``center`` default to the values in ``config``.  The
    default kernel is a :class:`~polychannel.kernel.TrimeshKernel` built
    from the same config.
    """

    config = config if config is not None else BuildConfig()
    # unknown shape kinds raise InvalidShapeKind while parsing, before any geometry
    sequence = as_sequence(seq, representation)

    required = 1 if shapes_only else 2
    if len(sequence) < required:
        raise DegenerateSequence("build", required, len(sequence))

    if kernel is None:
        kernel = TrimeshKernel(config)
    centered = config.center if center is None else center
    color = config.color if color is None else color

    absolute = resolve_to_absolute(sequence)
    primitives = [
        kernel.make_primitive(p.shape, p.size, RigidTransform.from_placement(p), centered)
        for p in absolute
    ]
    if shapes_only:
        solids = primitives
    else:
        solids = [kernel.hull(primitives[i - 1], primitives[i])
                  for i in range(1, len(primitives))]
    logger.debug(f"built {len(primitives)} primitive(s) and "
                 f"{0 if shapes_only else len(solids)} hull(s) "
                 f"from a {sequence.representation.value} sequence")
    return kernel.compose(solids, color=color)
