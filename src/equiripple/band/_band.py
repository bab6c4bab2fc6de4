from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Protocol


class BandSpace(enum.Enum):
    """Coordinate space a band's response functions are expressed in.

    ``FREQ`` is the angular frequency domain ``[0, pi]``; ``CHEBY`` is the
    cosine-mapped domain ``[-1, 1]`` the barycentric core works in.
    """

    FREQ = "freq"
    CHEBY = "cheby"


class SupportsBand(Protocol):
    """A contiguous interval with an ideal amplitude and an error weight."""

    start: Any
    stop: Any
    space: BandSpace

    def amplitude(self, space: BandSpace, x: Any) -> Any: ...

    def weight(self, space: BandSpace, x: Any) -> Any: ...


@dataclass(frozen=True)
class Band:
    """
    Frequency band of an ideal filter response.

    Parameters
    ----------
    start, stop : float or mpf
        Closed interval bounds in the coordinate space of the reference
        nodes.
    amplitude : callable
        ``amplitude(space, x)`` returns the ideal response at ``x``.
    weight : callable
        ``weight(space, x)`` returns the positive error weight at ``x``.
    space : BandSpace, optional
        Tag forwarded to ``amplitude`` and ``weight``. Default is
        ``BandSpace.CHEBY``.

    Examples
    --------
    >>> band = Band.constant(-1.0, -0.5, amplitude=1.0)
    >>> band.amplitude(band.space, -0.75)
    1.0
    >>> -0.75 in band
    True
    """

    start: Any
    stop: Any
    amplitude: Callable[[BandSpace, Any], Any]
    weight: Callable[[BandSpace, Any], Any]
    space: BandSpace = BandSpace.CHEBY

    def __contains__(self, x: Any) -> bool:
        return self.start <= x <= self.stop

    @classmethod
    def constant(
        cls,
        start: Any,
        stop: Any,
        amplitude: Any,
        weight: Any = 1.0,
        space: BandSpace = BandSpace.CHEBY,
    ) -> Band:
        """Band with a piecewise-constant ideal response and weight."""
        if start > stop:
            raise ValueError(
                f"Band start ({start}) must not exceed band stop ({stop})"
            )
        if weight <= 0:
            raise ValueError(f"Band weight must be positive, got {weight}")

        def _amplitude(space: BandSpace, x: Any) -> Any:
            return amplitude

        def _weight(space: BandSpace, x: Any) -> Any:
            return weight

        return cls(start, stop, _amplitude, _weight, space)
