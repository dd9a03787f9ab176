"""Grid-based raycasting engine: .cub scene parsing, ray casting and rendering."""

__version__ = "0.1.0"
__all__ = ["__version__"]