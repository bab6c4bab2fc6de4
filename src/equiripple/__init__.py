"""equiripple: barycentric equioscillation core for Parks-McClellan design."""

from ._config import (
    DEFAULT_PRECISION,
    STRIDE_GROUPS,
    precondition_checks,
    precondition_checks_enabled,
    set_precondition_checks,
)
from ._exceptions import (
    BandCoverageError,
    DegenerateReferenceError,
    EquirippleError,
    LengthMismatchError,
    NodeCountError,
    NodeOrderError,
    PreconditionError,
)
from . import (
    arbitrary_precision,
    arithmetic,
    band,
    barycentric,
    machine_precision,
)

__all__ = [
    "DEFAULT_PRECISION",
    "STRIDE_GROUPS",
    "BandCoverageError",
    "DegenerateReferenceError",
    "EquirippleError",
    "LengthMismatchError",
    "NodeCountError",
    "NodeOrderError",
    "PreconditionError",
    "arbitrary_precision",
    "arithmetic",
    "band",
    "barycentric",
    "machine_precision",
    "precondition_checks",
    "precondition_checks_enabled",
    "set_precondition_checks",
]

__version__ = "0.1.0"
