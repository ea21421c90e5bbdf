"""Binary tree nodes with traversals, measurements, shape checks and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["printing", "tree"]