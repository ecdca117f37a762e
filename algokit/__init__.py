"""Classic algorithm routines for arrays, strings, grids, graphs, trees and numbers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "combinatorics",
    "containers",
    "graphs",
    "grids",
    "numbers",
    "search",
    "strings",
    "trees",
]