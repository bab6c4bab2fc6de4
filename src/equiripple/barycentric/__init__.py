"""Barycentric-Lagrange equioscillation core, generic over the arithmetic.

Every function takes a :class:`~equiripple.arithmetic.RealArithmetic` as its
first argument and expects to run inside that arithmetic's scope. The
regime-specific entry points live in :mod:`equiripple.arbitrary_precision`
and :mod:`equiripple.machine_precision`.
"""

from ._barycentric_weights import barycentric_weights
from ._interpolant import interpolant, interpolant_values
from ._node_responses import node_responses
from ._reference_delta import reference_delta
from ._weighted_error import weighted_error, weighted_errors

__all__ = [
    "barycentric_weights",
    "interpolant",
    "interpolant_values",
    "node_responses",
    "reference_delta",
    "weighted_error",
    "weighted_errors",
]
