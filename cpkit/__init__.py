"""Segment trees, number theory and dynamic-programming solvers for competitive programming."""

__version__ = "0.1.0"