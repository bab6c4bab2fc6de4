import logging
import warnings
from typing import Any, MutableSequence, Optional, Sequence

from equiripple._config import STRIDE_GROUPS, precondition_checks_enabled
from equiripple.arithmetic import RealArithmetic

from ._preconditions import check_aligned, check_nodes

logger = logging.getLogger(__name__)


def barycentric_weights(
    arithmetic: RealArithmetic,
    nodes: Sequence[Any],
    out: Optional[MutableSequence[Any]] = None,
    stacklevel: int = 3,
) -> MutableSequence[Any]:
    r"""
    Barycentric interpolation weights of a reference set.

    .. math::

        w_i = \frac{1}{\prod_{j \neq i} 2 (x_i - x_j)}

    For each node the factors are multiplied in strided order, stepping
    through the node indices with ``step = (n - 2) // STRIDE_GROUPS + 1``
    and starting one index later on each pass. Consecutive factors then come
    from far apart nodes, which keeps the running product within range for
    reference sets of several thousand nodes.

    Parameters
    ----------
    arithmetic : RealArithmetic
        Real-number regime. Must be in scope.
    nodes : sequence
        Strictly monotonic reference nodes, at least two.
    out : mutable sequence, optional
        Pre-sized output vector, written in place.
    stacklevel : int, optional
        Stack level of the degenerate-weight warning. The default points at
        the caller of a public entry point; nested callers add one per frame.

    Returns
    -------
    mutable sequence
        The weights, index-aligned with ``nodes``.

    References
    ----------
    - Berrut & Trefethen (2004), "Barycentric Lagrange Interpolation",
      SIAM Review 46(3):501-517
    - Pachon & Trefethen (2009), "Barycentric-Remez algorithms for best
      polynomial approximation in the chebfun system", BIT 49(4):721-741
    """
    x = [arithmetic.convert(v) for v in nodes]
    if precondition_checks_enabled():
        check_nodes(x)
        if out is not None:
            check_aligned("out", out, x)

    n = len(x)
    step = (n - 2) // STRIDE_GROUPS + 1
    logger.debug("barycentric weights: %d nodes, stride %d", n, step)

    w = arithmetic.vector(n) if out is None else out
    one = arithmetic.one
    for i in range(n):
        denom = one
        xi = x[i]
        for j in range(step):
            for k in range(j, n, step):
                if k != i:
                    denom *= arithmetic.twice(xi - x[k])
        w[i] = one / denom

    degenerate = [i for i in range(n) if w[i] == 0 or not arithmetic.isfinite(w[i])]
    if degenerate:
        warnings.warn(
            f"{len(degenerate)} of {n} barycentric weights are zero or "
            f"non-finite in {arithmetic.name} arithmetic (first at index "
            f"{degenerate[0]}). Use a higher working precision.",
            RuntimeWarning,
            stacklevel=stacklevel,
        )

    return w
