"""Test fixtures for the barycentric core tests."""

import math

import pytest

from equiripple.band import Band


def _chebyshev_nodes(n: int):
    """Chebyshev points of the second kind, cos(j pi / (n - 1)), decreasing."""
    m = n - 1
    return [math.cos(j * math.pi / m) for j in range(n)]


def _chebyshev_weights(n: int):
    """Closed-form weights of ``chebyshev_nodes`` in the doubled convention.

    With every pairwise difference doubled the classical weights
    ``(-1)^j delta_j 2^(m-1) / m`` are scaled by ``2^-m``.
    """
    m = n - 1
    weights = []
    for j in range(n):
        w = (-1) ** j / (2 * m)
        if j in (0, m):
            w /= 2
        weights.append(w)
    return weights


@pytest.fixture
def chebyshev_nodes():
    return _chebyshev_nodes


@pytest.fixture
def chebyshev_weights():
    return _chebyshev_weights


@pytest.fixture
def flat_bands():
    """Single band over [-1, 1] with constant response 1 and weight 1."""
    return [Band.constant(-1.0, 1.0, amplitude=1.0, weight=1.0)]


@pytest.fixture
def two_bands():
    """Passband [-1, -0.5] at 1 and stopband [0.5, 1] at 0, unit weights."""
    return [
        Band.constant(-1.0, -0.5, amplitude=1.0, weight=1.0),
        Band.constant(0.5, 1.0, amplitude=0.0, weight=1.0),
    ]


@pytest.fixture
def two_band_nodes():
    return [-1.0, -0.6, 0.6, 1.0]


@pytest.fixture
def lowpass_bands():
    """Lowpass in the cosine domain with a weighted stopband."""
    return [
        Band.constant(-1.0, 0.1, amplitude=0.0, weight=4.0),
        Band.constant(0.4, 1.0, amplitude=1.0, weight=1.0),
    ]


@pytest.fixture
def lowpass_nodes():
    """Twelve alternation nodes split between the lowpass bands."""
    stopband = [-1.0, -0.8, -0.6, -0.4, -0.2, 0.0, 0.1]
    passband = [0.4, 0.55, 0.7, 0.85, 1.0]
    return stopband + passband
