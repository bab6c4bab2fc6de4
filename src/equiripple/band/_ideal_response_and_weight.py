from typing import Any, Optional, Sequence, Tuple

from equiripple._config import precondition_checks_enabled
from equiripple._exceptions import BandCoverageError
from equiripple.arithmetic import RealArithmetic

from ._band import SupportsBand


def ideal_response_and_weight(
    arithmetic: RealArithmetic,
    point: Any,
    bands: Sequence[SupportsBand],
) -> Optional[Tuple[Any, Any]]:
    """
    Ideal amplitude and error weight of the first band containing ``point``.

    Containment is closed on both ends. Returns ``None`` when no band
    contains ``point``, which is a caller error; with precondition checks
    enabled a :class:`BandCoverageError` is raised instead.
    """
    for band in bands:
        if band.start <= point <= band.stop:
            return (
                arithmetic.convert(band.amplitude(band.space, point)),
                arithmetic.convert(band.weight(band.space, point)),
            )

    if precondition_checks_enabled():
        raise BandCoverageError(
            f"Point {point} is not contained in any of the {len(bands)} bands"
        )
    return None
