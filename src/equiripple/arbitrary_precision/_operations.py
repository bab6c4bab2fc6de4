"""Arbitrary-precision entry points backed by mpmath."""

from typing import Any, List, MutableSequence, Optional, Sequence, Tuple

import mpmath

from equiripple import barycentric
from equiripple._config import DEFAULT_PRECISION
from equiripple.arithmetic import MultiprecisionArithmetic
from equiripple.band import SupportsBand
from equiripple.band import (
    ideal_response_and_weight as _ideal_response_and_weight,
)


def barycentric_weights(
    nodes: Sequence[Any],
    *,
    precision: int = DEFAULT_PRECISION,
    out: Optional[MutableSequence[Any]] = None,
) -> MutableSequence[mpmath.mpf]:
    """
    Barycentric weights of a reference set in multiprecision arithmetic.

    Parameters
    ----------
    nodes : sequence
        Strictly monotonic reference nodes (at least two). Anything
        ``mpmath.mpf`` accepts: mpf, float, int or str.
    precision : int, optional
        Working precision in bits. Default is 165.
    out : mutable sequence, optional
        Pre-sized output written in place and returned.

    Returns
    -------
    list of mpf
        ``w[i] = 1 / prod_{j != i} 2 (x[i] - x[j])``.

    Examples
    --------
    >>> from equiripple.arbitrary_precision import barycentric_weights
    >>> barycentric_weights([-1, 0, 1])
    [mpf('0.125'), mpf('-0.25'), mpf('0.125')]
    """
    arithmetic = MultiprecisionArithmetic(precision)
    with arithmetic.scope():
        return barycentric.barycentric_weights(arithmetic, nodes, out=out)


def ideal_response_and_weight(
    point: Any,
    bands: Sequence[SupportsBand],
    *,
    precision: int = DEFAULT_PRECISION,
) -> Optional[Tuple[mpmath.mpf, mpmath.mpf]]:
    """
    Ideal amplitude and error weight at ``point``.

    Returns the pair from the first band whose closed interval contains
    ``point``, or ``None`` when no band does.
    """
    arithmetic = MultiprecisionArithmetic(precision)
    with arithmetic.scope():
        return _ideal_response_and_weight(
            arithmetic, arithmetic.convert(point), bands
        )


def reference_delta(
    nodes: Sequence[Any],
    bands: Sequence[SupportsBand],
    weights: Optional[Sequence[Any]] = None,
    *,
    precision: int = DEFAULT_PRECISION,
) -> mpmath.mpf:
    """
    Reference error of a reference set in multiprecision arithmetic.

    Parameters
    ----------
    nodes : sequence
        Strictly monotonic reference nodes.
    bands : sequence of SupportsBand
        Bands covering every node.
    weights : sequence, optional
        Barycentric weights of ``nodes``. When omitted they are computed at
        ``precision``.
    precision : int, optional
        Working precision in bits. Default is 165.

    Returns
    -------
    mpf
        ``delta``, the signed equioscillation level.

    Examples
    --------
    >>> from equiripple.band import Band
    >>> from equiripple.arbitrary_precision import reference_delta
    >>> reference_delta([-1, 0, 1], [Band.constant(-1, 1, amplitude=1)])
    mpf('0.0')
    """
    arithmetic = MultiprecisionArithmetic(precision)
    with arithmetic.scope():
        return barycentric.reference_delta(arithmetic, nodes, bands, weights)


def node_responses(
    delta: Any,
    nodes: Sequence[Any],
    bands: Sequence[SupportsBand],
    *,
    precision: int = DEFAULT_PRECISION,
    out: Optional[MutableSequence[Any]] = None,
) -> MutableSequence[mpmath.mpf]:
    """
    Interpolant values at the reference nodes.

    ``C[i] = D(x[i]) + delta / W(x[i])`` for even ``i`` and
    ``D(x[i]) - delta / W(x[i])`` for odd ``i``.
    """
    arithmetic = MultiprecisionArithmetic(precision)
    with arithmetic.scope():
        return barycentric.node_responses(arithmetic, delta, nodes, bands, out=out)


def interpolant(
    point: Any,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
    *,
    precision: int = DEFAULT_PRECISION,
) -> mpmath.mpf:
    """
    Evaluate the barycentric interpolant at ``point``.

    Returns ``responses[i]`` when ``point == nodes[i]`` exactly.
    """
    arithmetic = MultiprecisionArithmetic(precision)
    with arithmetic.scope():
        return barycentric.interpolant(arithmetic, point, nodes, responses, weights)


def interpolant_values(
    points: Sequence[Any],
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
    *,
    precision: int = DEFAULT_PRECISION,
) -> List[mpmath.mpf]:
    """
    Barycentric interpolant at every point of ``points``.

    Parameters
    ----------
    points : sequence
        Evaluation points.
    nodes, responses, weights : sequence
        Index-aligned reference nodes, node responses and barycentric
        weights.
    precision : int, optional
        Working precision in bits. Default is 165.

    Returns
    -------
    list of mpf
        One interpolant value per point, all computed in a single precision
        scope. Points equal to a node return that node's response exactly.
    """
    arithmetic = MultiprecisionArithmetic(precision)
    with arithmetic.scope():
        return barycentric.interpolant_values(
            arithmetic, points, nodes, responses, weights
        )


def weighted_error(
    point: Any,
    delta: Any,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
    bands: Sequence[SupportsBand],
    *,
    precision: int = DEFAULT_PRECISION,
) -> mpmath.mpf:
    """
    Signed weighted error ``(p(x) - D(x)) * W(x)`` at ``point``.

    At ``nodes[i]`` this is exactly ``delta`` for even ``i`` and ``-delta``
    for odd ``i``.
    """
    arithmetic = MultiprecisionArithmetic(precision)
    with arithmetic.scope():
        return barycentric.weighted_error(
            arithmetic, point, delta, nodes, responses, weights, bands
        )


def weighted_errors(
    points: Sequence[Any],
    delta: Any,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
    bands: Sequence[SupportsBand],
    *,
    precision: int = DEFAULT_PRECISION,
) -> List[mpmath.mpf]:
    """
    Signed weighted error at every point of ``points``.

    Parameters
    ----------
    points : sequence
        Evaluation points, each inside one of ``bands``.
    delta : scalar
        Reference error of the reference set.
    nodes, responses, weights : sequence
        Index-aligned reference nodes, node responses and barycentric
        weights.
    bands : sequence of SupportsBand
        Bands of the ideal response. Their callbacks run at ``precision``.
    precision : int, optional
        Working precision in bits. Default is 165.

    Returns
    -------
    list of mpf
        ``(p(x) - D(x)) * W(x)`` per point; ``delta`` or ``-delta`` at the
        nodes by index parity.
    """
    arithmetic = MultiprecisionArithmetic(precision)
    with arithmetic.scope():
        return barycentric.weighted_errors(
            arithmetic, points, delta, nodes, responses, weights, bands
        )
