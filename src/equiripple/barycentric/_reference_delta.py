import logging
from typing import Any, Optional, Sequence

from equiripple._config import precondition_checks_enabled
from equiripple.arithmetic import RealArithmetic
from equiripple.band import SupportsBand, ideal_response_and_weight

from ._barycentric_weights import barycentric_weights
from ._preconditions import check_aligned, check_denominator, check_nodes

logger = logging.getLogger(__name__)


def reference_delta(
    arithmetic: RealArithmetic,
    nodes: Sequence[Any],
    bands: Sequence[SupportsBand],
    weights: Optional[Sequence[Any]] = None,
) -> Any:
    r"""
    Signed reference error of a reference set.

    .. math::

        \delta = \frac{\sum_i w_i D(x_i)}{\sum_i (-1)^{i+1} w_i / W(x_i)}

    where :math:`D` and :math:`W` are the ideal amplitude and error weight of
    the band containing each node. This is the level at which the weighted
    error of the interpolant alternates in sign across the reference set.

    Parameters
    ----------
    arithmetic : RealArithmetic
        Real-number regime. Must be in scope.
    nodes : sequence
        Strictly monotonic reference nodes.
    bands : sequence of SupportsBand
        Bands covering every node.
    weights : sequence, optional
        Barycentric weights of ``nodes``. Computed when omitted.

    Returns
    -------
    scalar
        The reference error ``delta``.
    """
    x = [arithmetic.convert(v) for v in nodes]
    if weights is None:
        weights = barycentric_weights(arithmetic, x, stacklevel=4)
    elif precondition_checks_enabled():
        check_nodes(x)
        check_aligned("weights", weights, x)

    numerator = arithmetic.zero
    denominator = arithmetic.zero
    for i in range(len(x)):
        wi = arithmetic.convert(weights[i])
        amplitude, weight = ideal_response_and_weight(arithmetic, x[i], bands)
        numerator = arithmetic.fma(wi, amplitude, numerator)
        term = wi / weight
        if i % 2 == 0:
            term = -term
        denominator += term

    if precondition_checks_enabled():
        check_denominator(denominator)

    delta = numerator / denominator
    logger.debug("reference delta %s over %d nodes", delta, len(weights))
    return delta
