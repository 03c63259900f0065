"""Rotating rainbow wireframe dodecahedron."""

__version__ = "0.1.0"
