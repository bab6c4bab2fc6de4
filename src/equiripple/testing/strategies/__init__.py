"""Hypothesis strategies for equioscillation core testing."""

from ._band_layouts import band_layouts
from ._band_points import band_points
from ._reference_nodes import reference_nodes

__all__ = [
    "band_layouts",
    "band_points",
    "reference_nodes",
]
