"""Command that runs and times the matrix-multiplication kernels."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from kernelpilot.config import DEFAULT_CONFIG_PATH, load_config
from kernelpilot.kernels import (
    HardwareType,
    Kernel,
    Matrix,
    MatrixLike,
    generate_matrix,
    get_kernel,
)

_BENCHMARKED = (HardwareType.CPU, HardwareType.GPU, HardwareType.SIMD)
_ARGUMENT_KERNELS = {"gpu": HardwareType.GPU, "simd": HardwareType.SIMD, "all": HardwareType.ALL}


@dataclass
class RunResult:
    """Outcome of one timed kernel run."""

    name: str
    version: str
    elapsed_ms: float
    product: Matrix

    @property
    def corner(self) -> int:
        """The top-left element of the product."""
        return self.product[0][0]


def time_kernel(kernel: Kernel, a: MatrixLike, b: MatrixLike) -> RunResult:
    """Run ``kernel`` on ``a`` and ``b`` and measure the wall-clock time."""
    start = time.perf_counter()
    product = kernel.execute(a, b)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return RunResult(kernel.name, kernel.version, elapsed_ms, product)


def benchmark_all_kernels(
    n: int, a: MatrixLike, b: MatrixLike, threads: Optional[int] = None
) -> list[RunResult]:
    """Time the CPU, GPU and SIMD kernels in that order on ``n`` by ``n`` operands."""
    if len(a) != n or len(b) != n:
        raise ValueError(f"operands must have {n} rows")
    return [time_kernel(get_kernel(hw, threads), a, b) for hw in _BENCHMARKED]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kernelpilot", description="Run and time matrix-multiplication kernels."
    )
    parser.add_argument(
        "kernel", nargs="?", default="", help="gpu, simd or all; otherwise the config decides"
    )
    parser.add_argument("size", nargs="?", type=int, help="matrix size (default from config)")
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_PATH, help="path of the JSON configuration file"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the selected kernel, or benchmark all of them, and report the timings."""
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as error:
        print(f"kernelpilot: {error}", file=sys.stderr)
        return 1

    n = args.size if args.size is not None else config.matrix_size
    if n < 1:
        print(f"kernelpilot: matrix size must be positive, got {n}", file=sys.stderr)
        return 1

    a = generate_matrix(n)
    b = generate_matrix(n)

    hw = _ARGUMENT_KERNELS.get(args.kernel, config.hardware_type)

    threads = config.threads if config.threads is not None and config.threads > 0 else None
    if threads is not None:
        print(f"Using {threads} threads (OpenMP)")

    if hw is HardwareType.ALL:
        for result in benchmark_all_kernels(n, a, b, threads):
            print(f"{result.name} | Time: {result.elapsed_ms:g} ms | C[0][0] = {result.corner}")
    else:
        kernel = get_kernel(hw, threads)
        print(f"Using Kernel: {kernel.name} (v{kernel.version})")
        result = time_kernel(kernel, a, b)
        print(f"Execution Time: {result.elapsed_ms:g} ms")
        print(f"C[0][0] = {result.corner}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())