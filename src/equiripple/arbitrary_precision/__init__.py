"""Equioscillation core in arbitrary (mpmath) precision.

Every function accepts ``precision``, the working precision in bits, and
leaves ``mpmath.mp.prec`` as it found it.
"""

from ._operations import (
    barycentric_weights,
    ideal_response_and_weight,
    interpolant,
    interpolant_values,
    node_responses,
    reference_delta,
    weighted_error,
    weighted_errors,
)

__all__ = [
    "barycentric_weights",
    "ideal_response_and_weight",
    "interpolant",
    "interpolant_values",
    "node_responses",
    "reference_delta",
    "weighted_error",
    "weighted_errors",
]
