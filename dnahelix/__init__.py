"""Animated DNA double helix built from sine and cosine strands."""

__version__ = "0.1.0"
__all__ = ["__version__"]