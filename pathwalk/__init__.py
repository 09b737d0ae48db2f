"""pathwalk: arc-length traversal engine for vector paths."""

__version__ = "0.1.0"
