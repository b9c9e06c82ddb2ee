# kernelpilot

kernelpilot picks a matrix-multiplication kernel and times it. It multiplies
two square matrices filled with ones. The kernel comes from the command line
or from a JSON configuration file (`config.json` in the current directory by
default).

Three kernels are available:

| Name   | Class           | Kernel name                 | Version |
|--------|-----------------|-----------------------------|---------|
| `cpu`  | `CpuMatrixMul`  | CPU Matrix Mul              | 1.0     |
| `gpu`  | `GpuMatrixMul`  | GPU Matrix Mul (Simulated)  | 1.1     |
| `simd` | `SimdMatrixMul` | SIMD (OpenMP) Matrix Mul    | 2.0     |

The name `all` runs the three kernels in the order CPU, GPU, SIMD and reports
each one.

## Installation

```
pip install .
```

## Command line

```
kernelpilot [KERNEL] [SIZE] [--config PATH]
```

- `KERNEL`: `gpu`, `simd` or `all` select that kernel (or all of them). Any
  other value, `cpu` included, or no value, means the kernel is taken from the
  configuration file, and that defaults to the CPU kernel.
- `SIZE`: the matrix dimension. Without it the size is taken from the
  configuration file, 256 by default. It must be positive.
- `--config PATH`: the configuration file to read instead of `config.json`.

Examples:

```
kernelpilot simd 128
kernelpilot all 64
kernelpilot --config bench.json
```

A single kernel run prints the kernel's name and version, the execution time
in milliseconds and the value of `C[0][0]`. With `all`, one line per kernel
gives its name, time and `C[0][0]`. Since both inputs are all ones,
`C[0][0]` equals the matrix size.

The command exits with status 1 and a message on standard error if the
configuration file is invalid or the matrix size is not positive.

## Configuration file

```json
{
  "kernel": "simd",
  "threads": 4,
  "matrix_size": 128
}
```

- `kernel`: `cpu` (the default), `gpu`, `simd` or `all`. An unknown name
  means `cpu`.
- `threads`: the number of worker threads for the SIMD kernel. It takes
  effect only when positive, and the command then prints
  `Using N threads (OpenMP)`. Otherwise the SIMD kernel uses one thread per
  CPU.
- `matrix_size`: the matrix size when none is given on the command line. It
  must not be negative.

If the file cannot be opened, the defaults apply. A file that is not a JSON
object, or whose values have the wrong type, is an error.

## Library use

```python
from kernelpilot.kernels import HardwareType, generate_matrix, get_kernel
from kernelpilot.cli import time_kernel, benchmark_all_kernels

a = generate_matrix(64, 1)
b = generate_matrix(64, 1)
kernel = get_kernel(HardwareType.parse("simd"), 4)
result = time_kernel(kernel, a, b)
print(result.name, result.elapsed_ms, result.corner)

for run in benchmark_all_kernels(64, a, b):
    print(run.name, run.elapsed_ms)
```

- `kernelpilot.kernels`: `HardwareType`, the `Kernel` base class and its
  three subclasses, whose `execute(a, b)` returns the product as a new list of
  lists and raises `ValueError` for operands that are not square and of one
  size; `get_kernel` and `generate_matrix`.
- `kernelpilot.config`: `load_config` reads a file into a `PilotConfig`;
  `detect_hardware_from_config`, `get_thread_count_from_config` (1 when
  unset) and `get_matrix_size_from_config` read single settings.
- `kernelpilot.detect`: `supports_avx` looks for `avx` in `/proc/cpuinfo`
  (or a given file); `detect_hardware_automatically` returns GPU if CUDA is
  available, then SIMD if AVX is present, else CPU.
- `kernelpilot.cli`: `time_kernel`, `benchmark_all_kernels`, `RunResult` and
  `main`.

## What it does not do

- Nothing runs on a GPU. The GPU kernel computes on the host like the CPU
  kernel, and `is_cuda_available` always returns `False`.
- The SIMD kernel shares rows out over a pool of Python threads; it uses no
  vector instructions.
- The command does not use automatic hardware detection; the kernel comes
  only from the command line or the configuration file.

## Tests

```
pip install .[test]
pytest
```