"""Wireframe viewer for .fdf height maps, with XPM loading and colour names."""

__version__ = "0.1.0"
__all__ = ["__version__"]