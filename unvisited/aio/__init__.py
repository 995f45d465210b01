"""Asynchronous entry points for unvisited.

Async sources (async generators, async iterators) are drained here into a
regular UnvisitedIterator. The iterator itself stays synchronous.
"""

from .adapt import skip_visited_async

__all__ = [
    "skip_visited_async",
]
