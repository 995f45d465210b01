"""Core abstractions for unvisited.

This module contains the worklist iterator and the function that adapts
plain iterables into it.
"""

from .iterator import UnvisitedIterator
from .adapt import skip_visited

__all__ = [
    "UnvisitedIterator",
    "skip_visited",
]
