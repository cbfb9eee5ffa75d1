"""Noughts — a 3x3 grid game against a computer opponent."""

__version__ = "1.0.0"
