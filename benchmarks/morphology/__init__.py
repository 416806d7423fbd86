"""Benchmarks for morphology operators.

This module compares torchmorph operators against scipy.ndimage baselines
where scipy has a counterpart.
"""

from .bench_morphology import BenchMorphology

__all__ = [
    "BenchMorphology",
]
