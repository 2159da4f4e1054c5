"""Solvers for twenty days of a 2024 puzzle calendar, with shared grid, input and number helpers."""

__version__ = "0.1.0"