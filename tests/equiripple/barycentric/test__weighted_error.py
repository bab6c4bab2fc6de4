"""Tests for the signed weighted error of the interpolant."""

import hypothesis
import mpmath
import numpy as np
import pytest

from equiripple import BandCoverageError
from equiripple import arbitrary_precision as ap
from equiripple import machine_precision as fp
from equiripple.band import Band
from equiripple.testing import band_points

LOWPASS_BANDS = [
    Band.constant(-1.0, 0.1, amplitude=0.0, weight=4.0),
    Band.constant(0.4, 1.0, amplitude=1.0, weight=1.0),
]
LOWPASS_NODES = [-1.0, -0.8, -0.6, -0.4, -0.2, 0.0, 0.1, 0.4, 0.55, 0.7, 0.85, 1.0]


@pytest.fixture
def two_band_reference(two_bands, two_band_nodes):
    weights = fp.barycentric_weights(two_band_nodes)
    delta = fp.reference_delta(two_band_nodes, two_bands, weights)
    responses = fp.node_responses(delta, two_band_nodes, two_bands)
    return delta, two_band_nodes, responses, weights, two_bands


class TestWeightedError:
    """Test weighted_error and weighted_errors."""

    def test_alternates_at_nodes(self, two_band_reference) -> None:
        delta, nodes, responses, weights, bands = two_band_reference
        for i, x in enumerate(nodes):
            error = fp.weighted_error(x, delta, nodes, responses, weights, bands)
            assert error == (delta if i % 2 == 0 else -delta)

    def test_alternates_at_nodes_multiprecision(
        self, lowpass_bands, lowpass_nodes
    ) -> None:
        weights = ap.barycentric_weights(lowpass_nodes)
        delta = ap.reference_delta(lowpass_nodes, lowpass_bands, weights)
        responses = ap.node_responses(delta, lowpass_nodes, lowpass_bands)
        errors = ap.weighted_errors(
            lowpass_nodes, delta, lowpass_nodes, responses, weights, lowpass_bands
        )
        assert errors == [delta if i % 2 == 0 else -delta for i in range(12)]

    @pytest.mark.parametrize("x, expected", [(-0.75, -0.03125), (0.75, 0.03125)])
    def test_between_nodes(self, two_band_reference, x, expected) -> None:
        delta, nodes, responses, weights, bands = two_band_reference
        error = fp.weighted_error(x, delta, nodes, responses, weights, bands)
        assert error == pytest.approx(expected, rel=1e-12)

    def test_zero_for_matched_target(self, flat_bands) -> None:
        nodes = [-1.0, 0.0, 1.0]
        weights = fp.barycentric_weights(nodes)
        delta = fp.reference_delta(nodes, flat_bands, weights)
        responses = fp.node_responses(delta, nodes, flat_bands)
        errors = fp.weighted_errors(
            [-0.9, -0.3, 0.5, 0.8], delta, nodes, responses, weights, flat_bands
        )
        np.testing.assert_array_equal(errors, np.zeros(4))

    def test_continuous_at_nodes(self, two_band_reference) -> None:
        """Just off a node the formula approaches the node's signed delta."""
        delta, nodes, responses, weights, bands = two_band_reference
        for i, x in enumerate(nodes):
            nearby = x + 1e-9 if x < 1.0 else x - 1e-9
            error = fp.weighted_error(nearby, delta, nodes, responses, weights, bands)
            expected = delta if i % 2 == 0 else -delta
            assert error == pytest.approx(expected, abs=1e-8)

    def test_weight_scales_error(self, two_band_nodes) -> None:
        bands = [
            Band.constant(-1.0, -0.5, amplitude=1.0, weight=3.0),
            Band.constant(0.5, 1.0, amplitude=0.0, weight=3.0),
        ]
        weights = fp.barycentric_weights(two_band_nodes)
        delta = fp.reference_delta(two_band_nodes, bands, weights)
        responses = fp.node_responses(delta, two_band_nodes, bands)
        error = fp.weighted_error(
            0.75, delta, two_band_nodes, responses, weights, bands
        )
        assert delta == pytest.approx(0.375, rel=1e-14)
        assert error == pytest.approx(3 * 0.03125, rel=1e-12)

    def test_batch_matches_pointwise(self, lowpass_bands, lowpass_nodes) -> None:
        weights = fp.barycentric_weights(lowpass_nodes)
        delta = fp.reference_delta(lowpass_nodes, lowpass_bands, weights)
        responses = fp.node_responses(delta, lowpass_nodes, lowpass_bands)
        points = [-0.95, -0.5, 0.0, 0.1, 0.4, 0.62, 1.0]
        errors = fp.weighted_errors(
            points, delta, lowpass_nodes, responses, weights, lowpass_bands
        )
        assert isinstance(errors, np.ndarray)
        for x, error in zip(points, errors):
            assert error == fp.weighted_error(
                x, delta, lowpass_nodes, responses, weights, lowpass_bands
            )

    def test_machine_agrees_with_multiprecision(
        self, lowpass_bands, lowpass_nodes
    ) -> None:
        points = np.concatenate(
            [np.linspace(-1.0, 0.1, 23), np.linspace(0.4, 1.0, 17)]
        )

        weights = fp.barycentric_weights(lowpass_nodes)
        delta = fp.reference_delta(lowpass_nodes, lowpass_bands, weights)
        responses = fp.node_responses(delta, lowpass_nodes, lowpass_bands)
        errors = fp.weighted_errors(
            points, delta, lowpass_nodes, responses, weights, lowpass_bands
        )

        mp_weights = ap.barycentric_weights(lowpass_nodes, precision=200)
        mp_delta = ap.reference_delta(
            lowpass_nodes, lowpass_bands, mp_weights, precision=200
        )
        mp_responses = ap.node_responses(
            mp_delta, lowpass_nodes, lowpass_bands, precision=200
        )
        expected = ap.weighted_errors(
            list(points),
            mp_delta,
            lowpass_nodes,
            mp_responses,
            mp_weights,
            lowpass_bands,
            precision=200,
        )
        np.testing.assert_allclose(
            errors, [float(e) for e in expected], rtol=1e-9, atol=1e-12
        )

    def test_nested_lookup_inherits_precision(self) -> None:
        seen = []

        def amplitude(space, x):
            seen.append(mpmath.mp.prec)
            return 0

        bands = [Band(-1, 1, amplitude, lambda space, x: 1)]
        nodes = [-1, 0, 1]
        ap.weighted_error(
            "0.5", 0, nodes, [1, 0, 1], [1, -2, 1], bands, precision=123
        )
        assert seen == [123]

    def test_node_hit_restores_precision(self) -> None:
        bands = [Band.constant(-1, 1, amplitude=0)]
        with mpmath.workprec(71):
            error = ap.weighted_error(
                1, "0.25", [-1, 1], [0, 0], [-1, 1], bands, precision=300
            )
            assert mpmath.mp.prec == 71
        assert error == mpmath.mpf("-0.25")

    def test_returns_regime_scalars(self, two_band_reference) -> None:
        delta, nodes, responses, weights, bands = two_band_reference
        assert isinstance(
            fp.weighted_error(0.7, delta, nodes, responses, weights, bands),
            np.float64,
        )
        assert isinstance(
            ap.weighted_error(0.7, delta, nodes, responses, weights, bands),
            mpmath.mpf,
        )

    def test_point_outside_bands_raises(self, two_band_reference) -> None:
        delta, nodes, responses, weights, bands = two_band_reference
        with pytest.raises(BandCoverageError):
            fp.weighted_error(0.0, delta, nodes, responses, weights, bands)

    @hypothesis.settings(deadline=None)
    @hypothesis.given(band_points(LOWPASS_BANDS))
    def test_machine_agrees_with_multiprecision_property(self, x) -> None:
        weights = fp.barycentric_weights(LOWPASS_NODES)
        delta = fp.reference_delta(LOWPASS_NODES, LOWPASS_BANDS, weights)
        responses = fp.node_responses(delta, LOWPASS_NODES, LOWPASS_BANDS)
        error = fp.weighted_error(
            x, delta, LOWPASS_NODES, responses, weights, LOWPASS_BANDS
        )

        mp_weights = ap.barycentric_weights(LOWPASS_NODES, precision=200)
        mp_delta = ap.reference_delta(
            LOWPASS_NODES, LOWPASS_BANDS, mp_weights, precision=200
        )
        mp_responses = ap.node_responses(
            mp_delta, LOWPASS_NODES, LOWPASS_BANDS, precision=200
        )
        expected = ap.weighted_error(
            x,
            mp_delta,
            LOWPASS_NODES,
            mp_responses,
            mp_weights,
            LOWPASS_BANDS,
            precision=200,
        )
        assert error == pytest.approx(float(expected), rel=1e-9, abs=1e-12)
