"""Benchmarks for morphology operators.

This module times erosion, dilation, median, the composite operators and
the binary skeleton pipeline, and compares them with scipy.ndimage where a
baseline exists.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy import ndimage

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

from torchmorph.morphology import (
    closing,
    dilation,
    erode_bug,
    erosion,
    generate_structuring_element,
    median,
    opening,
    process,
    skeletonize,
    skeletonize_and_prune,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Time ``func(*args, **kwargs)``.

    Returns
    -------
    dict
        ``mean``, ``std``, ``min`` and ``max`` wall time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
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


def print_comparison(
    name: str,
    tm_time: dict[str, float],
    scipy_time: dict[str, float] | None = None,
) -> None:
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchmorph: {format_time(tm_time['mean'])} +/- {format_time(tm_time['std'])}"
    )
    if scipy_time is not None:
        print(
            f"  scipy:      {format_time(scipy_time['mean'])} +/- {format_time(scipy_time['std'])}"
        )
        speedup = scipy_time["mean"] / tm_time["mean"]
        if speedup >= 1:
            print(f"  Speedup:    {speedup:.2f}x faster")
        else:
            print(f"  Speedup:    {1 / speedup:.2f}x slower")


def _binary_blobs(size: int, seed: int = 0) -> torch.Tensor:
    """Smooth random blobs thresholded to a 0/255 image."""
    generator = torch.Generator().manual_seed(seed)
    noise = torch.rand(1, 1, size, size, generator=generator)
    smooth = torch.nn.functional.avg_pool2d(
        noise, kernel_size=9, stride=1, padding=4
    )[0, 0]
    image = (smooth > smooth.median()).to(torch.uint8) * 255
    image[0, 0] = 0
    image[-1, -1] = 255
    return image


class BenchMorphology:
    """Benchmarks for morphology operators."""

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

    def bench_erosion(
        self, size: int = 512, shape: str = "square", se_size: int = 5
    ) -> None:
        """Benchmark erosion vs scipy.ndimage.grey_erosion."""
        se = generate_structuring_element(shape, se_size)
        x_tm = torch.rand(size, size) * 255

        tm_time = self._bench(erosion, x_tm, se)

        scipy_time = None
        if SCIPY_AVAILABLE:
            scipy_time = self._bench(
                ndimage.grey_erosion,
                x_tm.numpy(),
                footprint=se.numpy(),
                mode="nearest",
            )

        print_comparison(
            f"erosion ({size}x{size}, {shape} {se_size})", tm_time, scipy_time
        )

    def bench_dilation(
        self, size: int = 512, shape: str = "square", se_size: int = 5
    ) -> None:
        """Benchmark dilation vs scipy.ndimage.grey_dilation."""
        se = generate_structuring_element(shape, se_size)
        x_tm = torch.rand(size, size) * 255

        tm_time = self._bench(dilation, x_tm, se)

        scipy_time = None
        if SCIPY_AVAILABLE:
            scipy_time = self._bench(
                ndimage.grey_dilation,
                x_tm.numpy(),
                footprint=se.numpy(),
                mode="nearest",
            )

        print_comparison(
            f"dilation ({size}x{size}, {shape} {se_size})", tm_time, scipy_time
        )

    def bench_median(self, size: int = 256, se_size: int = 5) -> None:
        """Benchmark median vs scipy.ndimage.median_filter."""
        se = generate_structuring_element("square", se_size)
        x_tm = torch.rand(size, size) * 255

        tm_time = self._bench(median, x_tm, se)

        scipy_time = None
        if SCIPY_AVAILABLE:
            scipy_time = self._bench(
                ndimage.median_filter,
                x_tm.numpy(),
                footprint=se.numpy(),
                mode="nearest",
            )

        print_comparison(f"median ({size}x{size}, {se_size})", tm_time, scipy_time)

    def bench_opening_closing(self, size: int = 512, se_size: int = 7) -> None:
        """Benchmark opening and closing vs scipy.ndimage."""
        se = generate_structuring_element("disk", se_size)
        x_tm = torch.rand(size, size) * 255

        for name, func, baseline in (
            ("opening", opening, "grey_opening"),
            ("closing", closing, "grey_closing"),
        ):
            tm_time = self._bench(func, x_tm, se)
            scipy_time = None
            if SCIPY_AVAILABLE:
                scipy_time = self._bench(
                    getattr(ndimage, baseline),
                    x_tm.numpy(),
                    footprint=se.numpy(),
                    mode="nearest",
                )
            print_comparison(
                f"{name} ({size}x{size}, disk {se_size})", tm_time, scipy_time
            )

    def bench_erode_bug(self, size: int = 256) -> None:
        x_tm = torch.rand(size, size) * 255
        tm_time = self._bench(erode_bug, x_tm)
        print_comparison(f"erode_bug ({size}x{size})", tm_time)

    def bench_skeletonize(self, size: int = 128) -> None:
        image = _binary_blobs(size)
        tm_time = self._bench(skeletonize, image)
        print_comparison(f"skeletonize ({size}x{size})", tm_time)

    def bench_skeletonize_and_prune(self, size: int = 128, length: int = 10) -> None:
        image = _binary_blobs(size)
        tm_time = self._bench(skeletonize_and_prune, image, length)
        print_comparison(
            f"skeletonize_and_prune ({size}x{size}, length={length})", tm_time
        )

    def bench_process_rgb(self, size: int = 512, se_size: int = 5) -> None:
        """Benchmark the channel adapter on an RGB image."""
        se = generate_structuring_element("cross", se_size)
        image = torch.randint(0, 256, (size, size, 3), dtype=torch.uint8)
        tm_time = self._bench(process, image, "gradient", se)
        print_comparison(f"process rgb gradient ({size}x{size})", tm_time)

    def run_all(self) -> None:
        """Run all benchmarks."""
        print("=" * 60)
        print("MORPHOLOGY BENCHMARKS")
        print("=" * 60)

        print("\n--- Min/Max Filters ---")
        self.bench_erosion()
        self.bench_dilation()
        self.bench_erosion(shape="disk", se_size=11)

        print("\n--- Rank Filters ---")
        self.bench_median()

        print("\n--- Composite Operators ---")
        self.bench_opening_closing()
        self.bench_erode_bug()

        print("\n--- Binary Skeletons ---")
        self.bench_skeletonize()
        self.bench_skeletonize_and_prune()

        print("\n--- Channel Adapter ---")
        self.bench_process_rgb()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Image Size Scaling (erosion) ---")
        for size in [128, 256, 512, 1024]:
            self.bench_erosion(size=size)

        print("\n--- Structuring Element Scaling (erosion) ---")
        for se_size in [3, 7, 15, 31]:
            self.bench_erosion(se_size=se_size)


if __name__ == "__main__":
    bench = BenchMorphology(warmup=5, iterations=20)
    bench.run_all()
    print("\n")
    bench.run_scaling()
