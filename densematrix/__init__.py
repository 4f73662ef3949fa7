"""Dense matrices of floats with basic linear-algebra operations."""

__version__ = "0.1.0"
__all__ = ["matrix"]