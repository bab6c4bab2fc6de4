"""Equioscillation core in IEEE-754 binary64 precision."""

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
