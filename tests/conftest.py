"""Shared fixtures for equiripple tests."""

import mpmath
import pytest

import equiripple


@pytest.fixture(autouse=True)
def _precondition_checks():
    """Run every test with numeric preconditions validated."""
    with equiripple.precondition_checks():
        yield


@pytest.fixture(autouse=True)
def _ambient_precision_unchanged():
    """No operation may leave mpmath's working precision altered."""
    ambient = mpmath.mp.prec
    yield
    assert mpmath.mp.prec == ambient
