"""Automatic detection of the best available hardware type."""

from __future__ import annotations

from os import PathLike
from typing import Union

from kernelpilot.kernels import HardwareType

CPUINFO_PATH = "/proc/cpuinfo"


def is_cuda_available() -> bool:
    """Report whether a CUDA device can be used; this build has no CUDA support."""
    return False


def supports_avx(cpuinfo_path: Union[str, PathLike] = CPUINFO_PATH) -> bool:
    """Return True if any line of the cpuinfo file mentions ``avx``."""
    try:
        with open(cpuinfo_path, encoding="utf-8", errors="replace") as cpuinfo:
            return any("avx" in line for line in cpuinfo)
    except OSError:
        return False


def detect_hardware_automatically(
    cpuinfo_path: Union[str, PathLike] = CPUINFO_PATH,
) -> HardwareType:
    """Prefer GPU, then SIMD when AVX is present, else CPU."""
    if is_cuda_available():
        return HardwareType.GPU
    if supports_avx(cpuinfo_path):
        return HardwareType.SIMD
    return HardwareType.CPU