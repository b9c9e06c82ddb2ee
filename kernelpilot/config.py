"""Reading the pilot's settings from a JSON configuration file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from typing import Any, Optional, Union

from kernelpilot.kernels import HardwareType

DEFAULT_CONFIG_PATH = "config.json"
DEFAULT_KERNEL = "cpu"
DEFAULT_MATRIX_SIZE = 256
DEFAULT_THREAD_COUNT = 1

PathType = Union[str, PathLike]


@dataclass(frozen=True)
class PilotConfig:
    """Settings read from the configuration file; missing keys take defaults."""

    kernel: str = DEFAULT_KERNEL
    threads: Optional[int] = None
    matrix_size: int = DEFAULT_MATRIX_SIZE

    @property
    def hardware_type(self) -> HardwareType:
        """The configured hardware type; unknown names mean CPU."""
        try:
            return HardwareType.parse(self.kernel)
        except ValueError:
            return HardwareType.CPU


def _as_int(data: dict[str, Any], key: str) -> Optional[int]:
    if key not in data:
        return None
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"config key {key!r} must be a number, got {value!r}")
    return int(value)


def load_config(path: PathType = DEFAULT_CONFIG_PATH) -> PilotConfig:
    """Read ``path``; a file that cannot be opened yields the default settings.

    Raises ValueError if the file is not a JSON object or holds a value of the
    wrong type.
    """
    try:
        with open(path, encoding="utf-8") as file:
            text = file.read()
    except OSError:
        return PilotConfig()

    try:
        data = json.loads(text)
    except ValueError as error:
        raise ValueError(f"invalid JSON in {path}: {error}") from error
    if not isinstance(data, dict):
        raise ValueError(f"config in {path} must be a JSON object")

    kernel = data.get("kernel", DEFAULT_KERNEL)
    if not isinstance(kernel, str):
        raise ValueError(f"config key 'kernel' must be a string, got {kernel!r}")

    threads = _as_int(data, "threads")

    matrix_size = _as_int(data, "matrix_size")
    if matrix_size is None:
        matrix_size = DEFAULT_MATRIX_SIZE
    elif matrix_size < 0:
        raise ValueError(f"config key 'matrix_size' must not be negative, got {matrix_size}")

    return PilotConfig(kernel=kernel, threads=threads, matrix_size=matrix_size)


def detect_hardware_from_config(path: PathType = DEFAULT_CONFIG_PATH) -> HardwareType:
    """Return the hardware type named by the ``kernel`` key, CPU by default."""
    return load_config(path).hardware_type


def get_thread_count_from_config(path: PathType = DEFAULT_CONFIG_PATH) -> int:
    """Return the ``threads`` setting, 1 if it is absent or there is no file."""
    threads = load_config(path).threads
    return DEFAULT_THREAD_COUNT if threads is None else threads


def get_matrix_size_from_config(path: PathType = DEFAULT_CONFIG_PATH) -> int:
    """Return the ``matrix_size`` setting, 256 if it is absent or there is no file."""
    return load_config(path).matrix_size