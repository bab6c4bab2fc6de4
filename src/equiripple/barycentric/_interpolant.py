from typing import Any, List, MutableSequence, Sequence, Tuple

from equiripple._config import precondition_checks_enabled
from equiripple.arithmetic import RealArithmetic

from ._preconditions import check_aligned, check_nodes


def interpolant(
    arithmetic: RealArithmetic,
    point: Any,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
) -> Any:
    r"""
    Evaluate the barycentric interpolant at ``point``.

    .. math::

        p(x) = \frac{\sum_i \frac{w_i}{x - x_i} C_i}{\sum_i \frac{w_i}{x - x_i}}

    When ``point`` equals a node exactly the corresponding node response is
    returned, since the formula is 0/0 there. The comparison is exact: the
    points probed by an exchange step are often the stored nodes themselves.

    Parameters
    ----------
    arithmetic : RealArithmetic
        Real-number regime. Must be in scope.
    point : scalar
        Evaluation point.
    nodes, responses, weights : sequence
        Index-aligned reference nodes, node responses and barycentric
        weights.

    Returns
    -------
    scalar
        Interpolant value at ``point``.
    """
    x, c, w = _prepare(arithmetic, nodes, responses, weights)
    return _evaluate(arithmetic, arithmetic.convert(point), x, c, w)


def interpolant_values(
    arithmetic: RealArithmetic,
    points: Sequence[Any],
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
) -> MutableSequence[Any]:
    """Evaluate the barycentric interpolant at every entry of ``points``."""
    x, c, w = _prepare(arithmetic, nodes, responses, weights)
    values = arithmetic.vector(len(points))
    for k, point in enumerate(points):
        values[k] = _evaluate(arithmetic, arithmetic.convert(point), x, c, w)
    return values


def _prepare(
    arithmetic: RealArithmetic,
    nodes: Sequence[Any],
    responses: Sequence[Any],
    weights: Sequence[Any],
) -> Tuple[List[Any], List[Any], List[Any]]:
    x = [arithmetic.convert(v) for v in nodes]
    if precondition_checks_enabled():
        check_nodes(x)
        check_aligned("responses", responses, x)
        check_aligned("weights", weights, x)

    c = [arithmetic.convert(v) for v in responses]
    w = [arithmetic.convert(v) for v in weights]
    return x, c, w


def _evaluate(
    arithmetic: RealArithmetic,
    point: Any,
    x: List[Any],
    c: List[Any],
    w: List[Any],
) -> Any:
    numerator = arithmetic.zero
    denominator = arithmetic.zero
    for i in range(len(x)):
        if point == x[i]:
            return c[i]
        term = w[i] / (point - x[i])
        numerator = arithmetic.fma(term, c[i], numerator)
        denominator += term
    return numerator / denominator
