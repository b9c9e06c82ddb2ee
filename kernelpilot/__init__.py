"""Select and time matrix-multiplication kernels from a JSON config or the command line."""

__version__ = "0.1.0"