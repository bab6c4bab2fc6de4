"""Band records and ideal response lookup."""

from ._band import Band, BandSpace, SupportsBand
from ._ideal_response_and_weight import ideal_response_and_weight

__all__ = [
    "Band",
    "BandSpace",
    "SupportsBand",
    "ideal_response_and_weight",
]
