"""unvisited - a worklist iterator that never revisits.

UnvisitedIterator is a double-ended queue that is also an iterator. It hands
items back in queue order and silently drops anything it has already handed
out, which makes it a ready-made frontier for breadth-first or depth-first
traversals of graphs with cycles.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from unvisited import UnvisitedIterator
    
    frontier = UnvisitedIterator.from_value(start)
    for node in frontier:
        frontier.extend_back(graph[node])     # breadth-first
        # frontier.extend_front(graph[node])  # depth-first

Adapting an existing iterable:
    from unvisited import skip_visited
    list(skip_visited([1, 2, 1, 3]))  # [1, 2, 3]

Async sources:
    from unvisited.aio import skip_visited_async
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import UnvisitedIterator, skip_visited
from . import aio

__all__ = [
    "__version__",
    "UnvisitedIterator",
    "skip_visited",
    "aio",
]
