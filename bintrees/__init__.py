"""Linked binary trees: nodes, traversals, measurements, checks, ancestry and rendering."""

__version__ = "0.1.0"

__all__ = ["ancestry", "heap", "measure", "node", "printing", "traversal"]