"""Dining philosophers simulation: argument parsing, the table, threads and a monitor."""

__version__ = "0.1.0"
__all__ = ["__version__"]