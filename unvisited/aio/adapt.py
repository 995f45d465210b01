"""Adapt async sources into an UnvisitedIterator.

Only the draining step is asynchronous. The iterator that comes back is the
ordinary synchronous UnvisitedIterator; producing from it never awaits.
"""

from typing import AsyncIterable, Callable, Hashable, Iterable, Optional, TypeVar, Union

from ..core.iterator import UnvisitedIterator

T = TypeVar("T")


async def skip_visited_async(source: Union[AsyncIterable[T], Iterable[T]],
                             key: Optional[Callable[[T], Hashable]] = None) -> UnvisitedIterator[T]:
    """Drain an async iterable into an UnvisitedIterator.
    
    Plain iterables are accepted too, so callers can pass either kind of
    source without checking.
    
    Args:
        source: Finite async iterable (or iterable) of hashable items
        key: Optional visit key function
        
    Returns:
        UnvisitedIterator holding every item of ``source`` in order
        
    Example:
        async def children():
            for name in ("a", "b", "a"):
                yield name
        
        frontier = await skip_visited_async(children())
        assert list(frontier) == ["a", "b"]
    """
    if not hasattr(source, '__aiter__'):
        return UnvisitedIterator.from_iter(source, key=key)
    
    iterator: UnvisitedIterator[T] = UnvisitedIterator(key=key)
    async for item in source:
        iterator.push_back(item)
    return iterator
