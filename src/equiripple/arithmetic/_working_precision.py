"""Scoped control of mpmath's process-wide working precision."""

import contextlib
import logging
import threading
from typing import Iterator

import mpmath

logger = logging.getLogger(__name__)

# mpmath keeps a single global precision; one scope may touch it at a time.
_precision_lock = threading.RLock()


@contextlib.contextmanager
def working_precision(precision: int) -> Iterator[None]:
    """
    Run a block at ``precision`` bits and restore the ambient precision.

    The caller's ``mpmath.mp.prec`` is captured on entry and restored on
    every exit path, including early returns and exceptions. The save, set
    and restore window is serialized across threads; nested scopes in the
    same thread are allowed.

    The lock is held for the whole block, including any band callbacks run
    inside it. A callback must not wait on another thread that itself enters
    an arbitrary-precision scope: that thread blocks on the lock and the
    wait never returns. Arbitrary-precision calls made directly from the
    callback, on the same thread, are fine.

    Parameters
    ----------
    precision : int
        Working precision in bits. Must be positive.

    Raises
    ------
    ValueError
        If ``precision`` is not a positive integer.

    Examples
    --------
    >>> import mpmath
    >>> from equiripple.arithmetic import working_precision
    >>> mpmath.mp.prec = 53
    >>> with working_precision(200):
    ...     mpmath.mp.prec
    200
    >>> mpmath.mp.prec
    53
    """
    if isinstance(precision, bool) or int(precision) != precision:
        raise ValueError(f"precision must be an integer, got {precision!r}")
    if precision <= 0:
        raise ValueError(f"precision must be positive, got {precision}")

    with _precision_lock:
        ambient = mpmath.mp.prec
        mpmath.mp.prec = int(precision)
        logger.debug("working precision %d bits (ambient %d)", precision, ambient)
        try:
            yield
        finally:
            mpmath.mp.prec = ambient
