"""Matrices, number theory, polynomials, positional expansions, recursion exercises and concurrency primitives."""

__version__ = "0.1.0"

__all__ = [
    "matrix",
    "number_theory",
    "polynomial",
    "recursion",
    "representation",
    "queues",
    "synchronization",
]