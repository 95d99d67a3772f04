"""Data-structure and algorithm drills: digit maths, recursion, sorting, arrays and a small CLI."""

__version__ = "0.1.0"

__all__ = [
    "basic_maths",
    "recursion",
    "sorting",
    "arrays_easy",
    "arrays_medium",
    "cli",
]