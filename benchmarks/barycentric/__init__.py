"""Benchmarks for the barycentric equioscillation core.

Compares the binary64 and multiprecision regimes against each other and
against scipy's barycentric interpolator.
"""

from .bench_barycentric import BenchBarycentric

__all__ = [
    "BenchBarycentric",
]
