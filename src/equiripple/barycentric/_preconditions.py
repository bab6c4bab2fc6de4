"""Validation of the numeric preconditions of the barycentric operations.

These run only while :func:`equiripple.precondition_checks_enabled` is true.
"""

from typing import Any, Sequence

from equiripple._exceptions import (
    DegenerateReferenceError,
    LengthMismatchError,
    NodeCountError,
    NodeOrderError,
)


def check_nodes(nodes: Sequence[Any]) -> None:
    """Require at least two strictly monotonic reference nodes."""
    n = len(nodes)
    if n < 2:
        raise NodeCountError(f"At least 2 reference nodes are required, got {n}")

    increasing = nodes[1] > nodes[0]
    for i in range(1, n):
        previous, current = nodes[i - 1], nodes[i]
        if current == previous or (current > previous) != increasing:
            raise NodeOrderError(
                f"Reference nodes must be strictly monotonic. "
                f"Got {current} after {previous} at index {i}"
            )


def check_aligned(name: str, vector: Sequence[Any], nodes: Sequence[Any]) -> None:
    """Require ``vector`` to be index-aligned with ``nodes``."""
    if len(vector) != len(nodes):
        raise LengthMismatchError(
            f"Length of {name} ({len(vector)}) must equal "
            f"number of reference nodes ({len(nodes)})"
        )


def check_denominator(denominator: Any) -> None:
    if denominator == 0:
        raise DegenerateReferenceError(
            "Reference delta denominator is zero; the reference set is degenerate"
        )
