"""Count clusters of orthogonally connected true cells in a 2D grid, with a command line front end."""

__version__ = "0.1.0"
__all__ = ["counter", "cli"]