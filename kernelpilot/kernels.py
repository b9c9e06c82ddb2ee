"""Matrix-multiplication kernels and the registry that picks one."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Optional, Sequence

Matrix = list[list[int]]
MatrixLike = Sequence[Sequence[int]]


class HardwareType(Enum):
    """Kind of hardware a kernel targets; ALL means benchmark every kernel."""

    CPU = "cpu"
    GPU = "gpu"
    SIMD = "simd"
    ALL = "all"

    @classmethod
    def parse(cls, name: str) -> "HardwareType":
        """Return the member named by ``name`` (exact, lower case)."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown hardware type: {name!r}") from None


def _columns(a: MatrixLike, b: MatrixLike) -> list[tuple[int, ...]]:
    """Check that both operands are square and of one size; return b's columns."""
    n = len(a)
    if len(b) != n:
        raise ValueError(f"matrix sizes differ: {n} and {len(b)}")
    for label, matrix in (("a", a), ("b", b)):
        for row in matrix:
            if len(row) != n:
                raise ValueError(
                    f"matrix {label} is not square: row of length {len(row)}, expected {n}"
                )
    return list(zip(*b))


def _multiply_row(row: Sequence[int], columns: Sequence[Sequence[int]]) -> list[int]:
    return [sum(x * y for x, y in zip(row, column)) for column in columns]


class Kernel:
    """A square integer matrix-multiplication kernel."""

    name: str = "Matrix Mul"
    version: str = "1.0"

    def execute(self, a: MatrixLike, b: MatrixLike) -> Matrix:
        """Return the product ``a @ b``, computed one row after another."""
        columns = _columns(a, b)
        return [_multiply_row(row, columns) for row in a]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, version={self.version!r})"


class CpuMatrixMul(Kernel):
    """Plain sequential multiplication on the CPU."""

    name = "CPU Matrix Mul"
    version = "1.0"

    def execute(self, a: MatrixLike, b: MatrixLike) -> Matrix:
        """Return the product ``a @ b``."""
        return super().execute(a, b)


class GpuMatrixMul(Kernel):
    """Stand-in for a GPU kernel; the work runs on the host."""

    name = "GPU Matrix Mul (Simulated)"
    version = "1.1"

    def execute(self, a: MatrixLike, b: MatrixLike) -> Matrix:
        """Return the product ``a @ b``."""
        return super().execute(a, b)


class SimdMatrixMul(Kernel):
    """Multiplication with the rows shared out over a pool of threads."""

    name = "SIMD (OpenMP) Matrix Mul"
    version = "2.0"

    def __init__(self, threads: Optional[int] = None) -> None:
        if threads is not None and threads <= 0:
            raise ValueError(f"thread count must be positive, got {threads}")
        self.threads = threads

    def execute(self, a: MatrixLike, b: MatrixLike) -> Matrix:
        """Return the product ``a @ b``, rows computed in parallel."""
        columns = _columns(a, b)
        workers = self.threads or os.cpu_count() or 1
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lambda row: _multiply_row(row, columns), a))


def get_kernel(hardware_type: HardwareType, threads: Optional[int] = None) -> Kernel:
    """Return the kernel for ``hardware_type``; anything but GPU or SIMD gets the CPU kernel."""
    if hardware_type is HardwareType.GPU:
        return GpuMatrixMul()
    if hardware_type is HardwareType.SIMD:
        return SimdMatrixMul(threads)
    return CpuMatrixMul()


def generate_matrix(n: int, value: int = 1) -> Matrix:
    """Return an ``n`` by ``n`` matrix filled with ``value``."""
    if n < 0:
        raise ValueError(f"matrix size must not be negative, got {n}")
    return [[value] * n for _ in range(n)]