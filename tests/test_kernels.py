import pytest

from kernelpilot.kernels import (
    CpuMatrixMul,
    GpuMatrixMul,
    HardwareType,
    Kernel,
    SimdMatrixMul,
    generate_matrix,
    get_kernel,
)

ALL_KERNELS = [CpuMatrixMul(), GpuMatrixMul(), SimdMatrixMul(), SimdMatrixMul(2)]

KERNEL_CHOICES = [
    (HardwareType.CPU, None),
    (HardwareType.GPU, None),
    (HardwareType.SIMD, None),
    (HardwareType.SIMD, 2),
]


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


@pytest.mark.parametrize("name, expected", [
    ("cpu", HardwareType.CPU),
    ("gpu", HardwareType.GPU),
    ("simd", HardwareType.SIMD),
    ("all", HardwareType.ALL),
])
def test_parse_known_names(name, expected):
    assert HardwareType.parse(name) is expected


@pytest.mark.parametrize("name", ["GPU", "tpu", ""])
def test_parse_unknown_name_raises(name):
    with pytest.raises(ValueError):
        HardwareType.parse(name)


@pytest.mark.parametrize("kernel", ALL_KERNELS)
def test_ones_product_is_size(kernel):
    n = 7
    result = kernel.execute(generate_matrix(n), generate_matrix(n))
    assert result == [[n] * n for _ in range(n)]


@pytest.mark.parametrize("hardware, threads", KERNEL_CHOICES)
def test_worked_example(hardware, threads):
    kernel = get_kernel(hardware, threads) if threads else get_kernel(hardware)
    assert kernel.execute([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


@pytest.mark.parametrize("hardware, threads", KERNEL_CHOICES)
def test_identity_leaves_matrix_unchanged(hardware, threads):
    kernel = get_kernel(hardware, threads) if threads else get_kernel(hardware)
    m = [[i * 5 + j - 3 for j in range(5)] for i in range(5)]
    assert kernel.execute(m, _identity(5)) == m
    assert kernel.execute(_identity(5), m) == m


def test_kernels_agree():
    a = [[(i * 3 + j * 7) % 11 - 5 for j in range(9)] for i in range(9)]
    b = [[(i * 2 + j * 5) % 13 - 6 for j in range(9)] for i in range(9)]
    expected = CpuMatrixMul().execute(a, b)
    for kernel in ALL_KERNELS:
        assert kernel.execute(a, b) == expected


@pytest.mark.parametrize("hardware, threads", KERNEL_CHOICES)
def test_empty_matrix(hardware, threads):
    kernel = get_kernel(hardware, threads) if threads else get_kernel(hardware)
    assert kernel.execute([], []) == []


@pytest.mark.parametrize("hardware, threads", KERNEL_CHOICES)
def test_non_square_raises(hardware, threads):
    kernel = get_kernel(hardware, threads) if threads else get_kernel(hardware)
    with pytest.raises(ValueError):
        kernel.execute([[1, 2]], [[1], [2]])


@pytest.mark.parametrize("kernel", ALL_KERNELS)
def test_size_mismatch_raises(kernel):
    with pytest.raises(ValueError):
        kernel.execute(generate_matrix(2), generate_matrix(3))


def test_inputs_not_modified():
    a = generate_matrix(3, 2)
    b = generate_matrix(3, 4)
    CpuMatrixMul().execute(a, b)
    assert a == [[2] * 3] * 3
    assert b == [[4] * 3] * 3


@pytest.mark.parametrize("kernel, name, version", [
    (CpuMatrixMul(), "CPU Matrix Mul", "1.0"),
    (GpuMatrixMul(), "GPU Matrix Mul (Simulated)", "1.1"),
    (SimdMatrixMul(), "SIMD (OpenMP) Matrix Mul", "2.0"),
])
def test_names_and_versions(kernel, name, version):
    assert (kernel.name, kernel.version) == (name, version)


@pytest.mark.parametrize("hardware, cls", [
    (HardwareType.CPU, CpuMatrixMul),
    (HardwareType.GPU, GpuMatrixMul),
    (HardwareType.SIMD, SimdMatrixMul),
    (HardwareType.ALL, CpuMatrixMul),
])
def test_get_kernel(hardware, cls):
    kernel = get_kernel(hardware)
    assert type(kernel) is cls
    assert isinstance(kernel, Kernel)


def test_get_kernel_passes_threads():
    kernel = get_kernel(HardwareType.SIMD, 3)
    assert kernel.threads == 3


@pytest.mark.parametrize("threads", [0, -2])
def test_simd_rejects_bad_thread_count(threads):
    with pytest.raises(ValueError):
        SimdMatrixMul(threads)


def test_generate_matrix():
    assert generate_matrix(3) == [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    assert generate_matrix(2, 0) == [[0, 0], [0, 0]]
    assert generate_matrix(0) == []


def test_generate_matrix_rows_are_independent():
    m = generate_matrix(2)
    m[0][0] = 9
    assert m[1][0] == 1


def test_generate_matrix_negative_raises():
    with pytest.raises(ValueError):
        generate_matrix(-1)