"""Machine-precision (binary64) entry points."""

from typing import Any, MutableSequence, Optional, Sequence, Tuple

import numpy as np

from equiripple import barycentric
from equiripple.arithmetic import MACHINE
from equiripple.band import SupportsBand
from equiripple.band import (
    ideal_response_and_weight as _ideal_response_and_weight,
)


def barycentric_weights(
    nodes: Sequence[Any],
    *,
    out: Optional[MutableSequence[Any]] = None,
) -> np.ndarray:
    """
    Barycentric weights of a reference set in binary64 arithmetic.

    Parameters
    ----------
    nodes : array_like
        Strictly monotonic reference nodes (at least two).
    out : ndarray, optional
        Pre-sized ``float64`` output written in place and returned.

    Returns
    -------
    ndarray
        ``w[i] = 1 / prod_{j != i} 2 (x[i] - x[j])``.

    Warns
    -----
    RuntimeWarning
        If a weight underflows to zero or overflows.

    Examples
    --------
    >>> from equiripple.machine_precision import barycentric_weights
    >>> barycentric_weights([-1.0, 0.0, 1.0])
    array([ 0.125, -0.25 ,  0.125])
    """
    with MACHINE.scope():
        return barycentric.barycentric_weights(MACHINE, nodes, out=out)


def ideal_response_and_weight(
    point: Any,
    bands: Sequence[SupportsBand],
) -> Optional[Tuple[np.float64, np.float64]]:
    """
    Ideal amplitude and error weight at ``point`` in binary64.

    Parameters
    ----------
    point : float
        Lookup point in the coordinate space of the bands.
    bands : sequence of SupportsBand
        Candidate bands, searched in order.

    Returns
    -------
    tuple of float64 or None
        ``(D, W)`` from the first band whose closed interval contains
        ``point``, or ``None`` when none does.

    Raises
    ------
    BandCoverageError
        If no band contains ``point`` and precondition checks are enabled.
    """
    return _ideal_response_and_weight(MACHINE, MACHINE.convert(point), bands)


def reference_delta(
    nodes: Sequence[Any],
    bands: Sequence[SupportsBand],
    weights: Optional[Sequence[Any]] = None,
) -> np.float64:
    """
    Reference error of a reference set in binary64 arithmetic.

    Weights are computed from ``nodes`` when not supplied.
    """
    with MACHINE.scope():
        return barycentric.reference_delta(MACHINE, nodes, bands, weights)


def node_responses(
    delta: Any,
    nodes: Sequence[Any],
    bands: Sequence[SupportsBand],
    *,
    out: Optional[MutableSequence[Any]] = None,
) -> np.ndarray:
    """
    Interpolant values imposed at the reference nodes, in binary64.

    Parameters
    ----------
    delta : float
        Reference error of the reference set.
    nodes : array_like
        Strictly monotonic reference nodes.
    bands : sequence of SupportsBand
        Bands covering every node.
    out : ndarray, optional
        Pre-sized ``float64`` output written in place and returned.

    Returns
    -------
    ndarray
        ``C[i] = D(x[i]) + delta / W(x[i])`` for even ``i`` and
        ``D(x[i]) - delta / W(x[i])`` for odd ``i``.
    """
    with MACHINE.scope():
        return barycentric.node_responses(MACHINE, delta, nodes, bands, out=out)


def interpolant(
    point: Any,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
) -> np.float64:
    """Barycentric interpolant at ``point``; exact at the nodes."""
    with MACHINE.scope():
        return barycentric.interpolant(MACHINE, point, nodes, responses, weights)


def interpolant_values(
    points: Sequence[Any],
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
) -> np.ndarray:
    """
    Barycentric interpolant at every point of ``points``.

    Parameters
    ----------
    points : array_like
        Evaluation points.
    nodes, responses, weights : array_like
        Index-aligned reference nodes, node responses and barycentric
        weights.

    Returns
    -------
    ndarray
        ``float64`` array with one value per point.
    """
    with MACHINE.scope():
        return barycentric.interpolant_values(
            MACHINE, points, nodes, responses, weights
        )


def weighted_error(
    point: Any,
    delta: Any,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
    bands: Sequence[SupportsBand],
) -> np.float64:
    """Signed weighted error ``(p(x) - D(x)) * W(x)`` at ``point``."""
    with MACHINE.scope():
        return barycentric.weighted_error(
            MACHINE, point, delta, nodes, responses, weights, bands
        )


def weighted_errors(
    points: Sequence[Any],
    delta: Any,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
    bands: Sequence[SupportsBand],
) -> np.ndarray:
    """
    Signed weighted error at every point of ``points``, in binary64.

    Parameters
    ----------
    points : array_like
        Evaluation points, each inside one of ``bands``.
    delta : float
        Reference error of the reference set.
    nodes, responses, weights : array_like
        Index-aligned reference nodes, node responses and barycentric
        weights.
    bands : sequence of SupportsBand
        Bands of the ideal response.

    Returns
    -------
    ndarray
        ``float64`` array of ``(p(x) - D(x)) * W(x)``, one per point. Points
        equal to ``nodes[i]`` give ``delta`` or ``-delta`` by parity of ``i``.
    """
    with MACHINE.scope():
        return barycentric.weighted_errors(
            MACHINE, points, delta, nodes, responses, weights, bands
        )
