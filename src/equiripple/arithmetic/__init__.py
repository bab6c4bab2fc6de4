"""Real-number arithmetic for the two precision regimes."""

from ._machine_arithmetic import MACHINE, MachineArithmetic
from ._multiprecision_arithmetic import MultiprecisionArithmetic
from ._real_arithmetic import RealArithmetic
from ._working_precision import working_precision

__all__ = [
    "MACHINE",
    "MachineArithmetic",
    "MultiprecisionArithmetic",
    "RealArithmetic",
    "working_precision",
]
