"""Benchmarks for barycentric weights, reference error and evaluation.

This module times both precision regimes on Chebyshev reference sets of
growing size and compares interpolant evaluation against
``scipy.interpolate.BarycentricInterpolator``.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
from scipy import interpolate as scipy_interpolate

from equiripple import arbitrary_precision as ap
from equiripple import machine_precision as fp
from equiripple.band import Band


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_result(name: str, timings: dict[str, dict[str, float]]) -> None:
    """Print one line per timed variant."""
    print(f"\n{name}")
    print("-" * len(name))
    for label, timing in timings.items():
        print(
            f"  {label:<14}{format_time(timing['mean'])} "
            f"+/- {format_time(timing['std'])}"
        )


def chebyshev_reference(n: int) -> list[float]:
    """Extrema of the Chebyshev polynomial of degree n - 1, decreasing."""
    return list(np.cos(np.pi * np.arange(n) / (n - 1)))


LOWPASS = [
    Band.constant(-1.0, -0.2, amplitude=0.0, weight=10.0),
    Band.constant(0.2, 1.0, amplitude=1.0, weight=1.0),
]


class BenchBarycentric:
    """Benchmarks for the barycentric core."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_weights(self, n: int = 64, precision: int = 165) -> None:
        """Benchmark barycentric_weights in both regimes.

        Parameters
        ----------
        n : int, optional
            Number of reference nodes. Default is 64.
        precision : int, optional
            Multiprecision working precision in bits. Default is 165.
        """
        nodes = chebyshev_reference(n)
        print_result(
            f"barycentric_weights (n={n})",
            {
                "float64": self._bench(fp.barycentric_weights, nodes),
                f"mpf({precision})": self._bench(
                    ap.barycentric_weights, nodes, precision=precision
                ),
            },
        )

    def bench_reference_delta(self, n: int = 64) -> None:
        """Benchmark reference_delta on a lowpass reference."""
        nodes = [x for x in chebyshev_reference(n) if abs(x) >= 0.2]
        print_result(
            f"reference_delta (n={len(nodes)})",
            {
                "float64": self._bench(fp.reference_delta, nodes, LOWPASS),
                "mpf(165)": self._bench(ap.reference_delta, nodes, LOWPASS),
            },
        )

    def bench_interpolant(self, n: int = 64, num_points: int = 2000) -> None:
        """Benchmark interpolant_values vs scipy BarycentricInterpolator.

        Parameters
        ----------
        n : int, optional
            Number of reference nodes. Default is 64.
        num_points : int, optional
            Number of evaluation points. Default is 2000.
        """
        nodes = chebyshev_reference(n)
        responses = np.cos(3.0 * np.arccos(np.asarray(nodes)))
        points = np.linspace(-0.999, 0.999, num_points)
        weights = fp.barycentric_weights(nodes)

        def scipy_values():
            interpolator = scipy_interpolate.BarycentricInterpolator(
                nodes, responses
            )
            return interpolator(points)

        print_result(
            f"interpolant_values (n={n}, points={num_points})",
            {
                "float64": self._bench(
                    fp.interpolant_values, points, nodes, responses, weights
                ),
                "scipy": self._bench(scipy_values),
            },
        )

    def bench_weighted_errors(self, n: int = 64, num_points: int = 500) -> None:
        """Benchmark a dense weighted-error scan over both bands."""
        nodes = [x for x in chebyshev_reference(n) if abs(x) >= 0.2]
        weights = fp.barycentric_weights(nodes)
        delta = fp.reference_delta(nodes, LOWPASS, weights)
        responses = fp.node_responses(delta, nodes, LOWPASS)
        half = num_points // 2
        points = np.concatenate(
            [np.linspace(-1.0, -0.2, half), np.linspace(0.2, 1.0, half)]
        )
        print_result(
            f"weighted_errors (n={len(nodes)}, points={len(points)})",
            {
                "float64": self._bench(
                    fp.weighted_errors,
                    points,
                    delta,
                    nodes,
                    responses,
                    weights,
                    LOWPASS,
                ),
            },
        )

    def run_all(self) -> None:
        """Run all barycentric benchmarks."""
        print("=" * 60)
        print("BARYCENTRIC CORE BENCHMARKS")
        print("=" * 60)

        self.bench_weights()
        self.bench_reference_delta()
        self.bench_interpolant()
        self.bench_weighted_errors()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Reference Size Scaling ---")
        for n in [16, 64, 256]:
            self.bench_weights(n=n)

        print("\n--- Working Precision Scaling ---")
        for precision in [64, 165, 512, 2048]:
            self.bench_weights(n=64, precision=precision)


if __name__ == "__main__":
    bench = BenchBarycentric(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
