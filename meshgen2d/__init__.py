"""Points, structured grids, lines, polynomials and small matrices for 2D meshes."""

__version__ = "0.1.0"
__all__ = ["point", "grid", "geometry", "matrices", "cli"]