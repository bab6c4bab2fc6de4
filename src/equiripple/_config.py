"""Package-wide constants and precondition-check switch."""

import contextlib
import os
from typing import Iterator

# Default working precision, in bits, of the arbitrary-precision regime.
DEFAULT_PRECISION: int = 165

# Number of interleaved groups in the strided barycentric weight product.
STRIDE_GROUPS: int = 15

PRECONDITION_CHECKS_ENV_VAR = "EQUIRIPPLE_CHECK_PRECONDITIONS"

_TRUTHY = {"1", "true", "yes", "on"}

_precondition_checks = (
    os.environ.get(PRECONDITION_CHECKS_ENV_VAR, "").strip().lower() in _TRUTHY
)


def precondition_checks_enabled() -> bool:
    """Whether the numeric preconditions of every operation are validated."""
    return _precondition_checks


def set_precondition_checks(enabled: bool) -> None:
    """Turn precondition validation on or off for the whole process."""
    global _precondition_checks
    _precondition_checks = bool(enabled)


@contextlib.contextmanager
def precondition_checks(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable (or disable) precondition validation.

    Parameters
    ----------
    enabled : bool, optional
        State to apply inside the block. Default is True.

    Examples
    --------
    >>> from equiripple import precondition_checks
    >>> from equiripple.machine_precision import barycentric_weights
    >>> with precondition_checks():
    ...     barycentric_weights([-1.0, 1.0])
    array([-0.25,  0.25])
    """
    previous = _precondition_checks
    set_precondition_checks(enabled)
    try:
        yield
    finally:
        set_precondition_checks(previous)
