"""Runnable examples of the single-responsibility, open/closed and dependency-inversion principles."""

__version__ = "0.1.0"
__all__ = ["dip", "ocp", "srp"]