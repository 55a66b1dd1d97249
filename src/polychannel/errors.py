"""Exceptions raised by polychannel operations.

Every error is a local, synchronous failure of a pure computation; none
of them is transient, so callers should fix the input rather than retry.
All derive from :class:`PolychannelError`, itself a ``ValueError``, so
existing ``except ValueError`` handlers keep working.
"""


class PolychannelError(ValueError):
    """Base class for polychannel errors."""


class InvalidShapeKind(PolychannelError):
    """A placement names a shape other than cube or sphere."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"invalid shape kind {kind!r}; expected 'cube' or 'sphere'")


class DegenerateSequence(PolychannelError):
    """A sequence is too short for the requested operation."""

    def __init__(self, operation: str, required: int, actual: int):
        self.operation = operation
        self.required = required
        self.actual = actual
        super().__init__(
            f"{operation} requires at least {required} placement(s), got {actual}"
        )


class DegenerateCurve(PolychannelError):
    """A curve generator was asked for fewer than one segment."""


class AmbiguousRotation(PolychannelError):
    """A tangent-alignment rotation has no well-defined axis."""


class RepresentationMismatch(PolychannelError):
    """Sequences with different position representations were combined."""
