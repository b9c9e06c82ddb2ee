[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernelpilot"
version = "0.1.0"
description = "Select and time matrix-multiplication kernels from a JSON config or the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "matrix", "kernel", "timing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kernelpilot = "kernelpilot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kernelpilot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
