"""Classic algorithms over strings, arrays, grids, lists, trees and graphs."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "dynamic",
    "graphs",
    "grids",
    "linked",
    "strings",
    "trees",
]