from typing import Any, MutableSequence, Optional, Sequence

from equiripple._config import precondition_checks_enabled
from equiripple.arithmetic import RealArithmetic
from equiripple.band import SupportsBand, ideal_response_and_weight

from ._preconditions import check_aligned, check_nodes


def node_responses(
    arithmetic: RealArithmetic,
    delta: Any,
    nodes: Sequence[Any],
    bands: Sequence[SupportsBand],
    out: Optional[MutableSequence[Any]] = None,
) -> MutableSequence[Any]:
    """
    Interpolant values at the reference nodes.

    Each value is the ideal amplitude offset by ``delta`` over the local
    error weight, with the sign alternating by index parity::

        C[i] = D(x[i]) + delta / W(x[i])     (i even)
        C[i] = D(x[i]) - delta / W(x[i])     (i odd)
    """
    x = [arithmetic.convert(v) for v in nodes]
    if precondition_checks_enabled():
        check_nodes(x)
        if out is not None:
            check_aligned("out", out, x)

    delta = arithmetic.convert(delta)
    responses = arithmetic.vector(len(x)) if out is None else out
    for i in range(len(x)):
        amplitude, weight = ideal_response_and_weight(arithmetic, x[i], bands)
        if i % 2 != 0:
            weight = -weight
        responses[i] = amplitude + delta / weight

    return responses
