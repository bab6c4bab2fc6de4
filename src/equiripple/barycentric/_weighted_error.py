from typing import Any, List, MutableSequence, Sequence

from equiripple.arithmetic import RealArithmetic
from equiripple.band import SupportsBand, ideal_response_and_weight

from ._interpolant import _evaluate, _prepare


def weighted_error(
    arithmetic: RealArithmetic,
    point: Any,
    delta: Any,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
    bands: Sequence[SupportsBand],
) -> Any:
    r"""
    Signed weighted error of the interpolant at ``point``.

    .. math::

        E(x) = \left(p(x) - D(x)\right) W(x)

    At a reference node the error is ``+delta`` for even indices and
    ``-delta`` for odd ones, which is what the formula yields there by
    construction of the node responses; it is returned directly.

    Parameters
    ----------
    arithmetic : RealArithmetic
        Real-number regime. Must be in scope.
    point : scalar
        Evaluation point.
    delta : scalar
        Reference error of the current reference set.
    nodes, responses, weights : sequence
        Index-aligned reference nodes, node responses and barycentric
        weights.
    bands : sequence of SupportsBand
        Bands of the ideal response; one must contain ``point``.

    Returns
    -------
    scalar
        The weighted error at ``point``.
    """
    x, c, w = _prepare(arithmetic, nodes, responses, weights)
    point = arithmetic.convert(point)
    return _error(arithmetic, point, arithmetic.convert(delta), x, c, w, bands)


def weighted_errors(
    arithmetic: RealArithmetic,
    points: Sequence[Any],
    delta: Any,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
    bands: Sequence[SupportsBand],
) -> MutableSequence[Any]:
    """Signed weighted error at every entry of ``points``."""
    x, c, w = _prepare(arithmetic, nodes, responses, weights)
    delta = arithmetic.convert(delta)
    errors = arithmetic.vector(len(points))
    for k, point in enumerate(points):
        point = arithmetic.convert(point)
        errors[k] = _error(arithmetic, point, delta, x, c, w, bands)
    return errors


def _error(
    arithmetic: RealArithmetic,
    point: Any,
    delta: Any,
    x: List[Any],
    c: List[Any],
    w: List[Any],
    bands: Sequence[SupportsBand],
) -> Any:
    for i in range(len(x)):
        if point == x[i]:
            return delta if i % 2 == 0 else -delta

    amplitude, weight = ideal_response_and_weight(arithmetic, point, bands)
    error = _evaluate(arithmetic, point, x, c, w)
    error -= amplitude
    error *= weight
    return error
