"""Testing helpers for equiripple.

Example usage:

    import hypothesis

    from equiripple.testing import band_layouts, reference_nodes

    @hypothesis.given(reference_nodes(), band_layouts())
    def test_weights(nodes, bands):
        ...
"""

from .strategies import (
    band_layouts,
    band_points,
    reference_nodes,
)

__all__ = [
    "band_layouts",
    "band_points",
    "reference_nodes",
]
