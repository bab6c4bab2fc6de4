"""Exceptions for the barycentric equioscillation core."""


class EquirippleError(Exception):
    """Base exception for equiripple errors."""

    pass


class PreconditionError(EquirippleError):
    """Raised when a numeric precondition is violated.

    Only raised while precondition checks are enabled. In production the
    same inputs are undefined behaviour.
    """

    pass


class NodeCountError(PreconditionError):
    """Raised when a reference set has fewer than two nodes."""

    pass


class NodeOrderError(PreconditionError):
    """Raised when reference nodes are not strictly monotonic.

    This covers repeated nodes, which make a pairwise difference vanish.
    """

    pass


class LengthMismatchError(PreconditionError):
    """Raised when a vector is not index-aligned with the reference nodes.

    This occurs when:
    - weights or node responses have a different length than the nodes
    - a caller-supplied ``out`` vector is not pre-sized to the nodes
    """

    pass


class BandCoverageError(PreconditionError):
    """Raised when an ideal-response lookup point lies outside every band."""

    pass


class DegenerateReferenceError(PreconditionError):
    """Raised when the reference delta denominator vanishes."""

    pass
