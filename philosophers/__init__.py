"""Dining philosophers simulation with threads, fork locks and a starvation check."""

__version__ = "0.1.0"
__all__ = ["cli", "parsing", "table"]