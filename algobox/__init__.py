"""Algorithm routines for integer sequences, strings, grids, graphs, binary trees and linked lists."""

__version__ = "0.1.0"
__all__ = [
    "arithmetic",
    "arrays",
    "graphs",
    "grids",
    "linked_lists",
    "search",
    "strings",
    "trees",
]