"""Adapt arbitrary iterables into an UnvisitedIterator."""

from typing import Callable, Hashable, Iterable, Optional, TypeVar

from .iterator import UnvisitedIterator

T = TypeVar("T")


def skip_visited(source: Iterable[T],
                 key: Optional[Callable[[T], Hashable]] = None) -> UnvisitedIterator[T]:
    """Wrap any finite iterable so repeated items are skipped.
    
    Equivalent to ``UnvisitedIterator.from_iter(source, key=key)``. The
    source is drained immediately, so it must be finite.
    
    Args:
        source: Finite iterable of hashable items
        key: Optional visit key function
        
    Returns:
        UnvisitedIterator holding every item of ``source`` in order
        
    Example:
        >>> list(skip_visited([1, 2, 1, 3]))
        [1, 2, 3]
    """
    return UnvisitedIterator.from_iter(source, key=key)
