"""UnvisitedIterator - a worklist that never produces the same item twice.

The UnvisitedIterator is both a double-ended queue and an iterator. Callers
push items at either end and pull them back out with ``next()``. Any item
equal to one already produced is silently dropped when it reaches the front.
Duplicates are allowed to sit in the queue; they are only discarded at
production time.
"""

from collections import deque
from typing import Any, Callable, Deque, Dict, Generic, Hashable, Iterable, Iterator, Optional, Set, TypeVar

T = TypeVar("T")


class UnvisitedIterator(Generic[T]):
    """Iterator over a worklist that skips items it has already produced.
    
    The iterator is never truly finished: once ``next()`` raises
    ``StopIteration`` the caller may push more items and keep iterating.
    This is what makes it usable as a traversal frontier:
    
        frontier = UnvisitedIterator.from_value(root)
        for node in frontier:
            for child in graph[node]:
                frontier.push_back(child)
    
    Items are remembered by their visit key, which is the item itself unless
    a ``key`` callable is supplied. The visited record only grows; there is
    no way to forget an item.
    """
    
    def __init__(self, key: Optional[Callable[[T], Hashable]] = None):
        """Create an empty iterator.
        
        Args:
            key: Maps an item to the hashable value used to decide whether it
                was already produced (None = the item itself)
        """
        self._pending: Deque[T] = deque()
        self._visited: Set[Hashable] = set()
        self._key = key
        self._skipped = 0
    
    @classmethod
    def from_value(cls, value: T, key: Optional[Callable[[T], Hashable]] = None) -> "UnvisitedIterator[T]":
        """Create an iterator seeded with a single item.
        
        Args:
            value: The only pending item
            key: Optional visit key function
            
        Returns:
            UnvisitedIterator with ``value`` pending and nothing visited
        """
        iterator = cls(key=key)
        iterator._pending.appendleft(value)
        return iterator
    
    @classmethod
    def from_iter(cls, source: Iterable[T], key: Optional[Callable[[T], Hashable]] = None) -> "UnvisitedIterator[T]":
        """Create an iterator from the items of ``source``.
        
        The source is consumed eagerly and completely, so it must be finite.
        Its order is preserved and duplicates are kept until production.
        
        Args:
            source: Finite iterable of items
            key: Optional visit key function
            
        Returns:
            UnvisitedIterator with every item of ``source`` pending
        """
        iterator = cls(key=key)
        iterator._pending.extend(source)
        return iterator
    
    def push_front(self, value: T) -> None:
        """Insert an item at the head of the worklist."""
        self._pending.appendleft(value)
    
    def push_back(self, value: T) -> None:
        """Insert an item at the tail of the worklist."""
        self._pending.append(value)
    
    def extend_back(self, values: Iterable[T]) -> None:
        """Append items to the tail, keeping their order."""
        self._pending.extend(values)
    
    def extend_front(self, values: Iterable[T]) -> None:
        """Prepend items so they are produced in the given order.
        
        ``extend_front([a, b])`` yields ``a`` then ``b`` before anything that
        was already pending.
        """
        # deque.extendleft reverses its argument
        self._pending.extendleft(reversed(list(values)))
    
    def __iter__(self) -> Iterator[T]:
        return self
    
    def __next__(self) -> T:
        """Produce the next item that has not been produced before.
        
        Items at the front whose key is already visited are dropped. When the
        worklist runs out, ``StopIteration`` is raised; pushing new items
        afterwards makes the iterator productive again.
        
        Raises:
            StopIteration: If no unvisited item is pending
            TypeError: If an item (or its key) is not hashable
        """
        while self._pending:
            value = self._pending.popleft()
            visit_key = self._visit_key(value)
            if visit_key in self._visited:
                self._skipped += 1
                continue
            self._visited.add(visit_key)
            return value
        raise StopIteration
    
    def _visit_key(self, value: T) -> Hashable:
        if self._key is None:
            return value
        return self._key(value)
    
    # Introspection
    
    def is_visited(self, value: T) -> bool:
        """Check whether an item (by its visit key) was already produced."""
        return self._visit_key(value) in self._visited
    
    def has_pending(self) -> bool:
        """Check whether any entries, duplicates included, are queued."""
        return bool(self._pending)
    
    def get_stats(self) -> Dict[str, Any]:
        """Return counters describing the current state.
        
        Returns:
            Dictionary containing:
            - pending: Raw entries waiting in the worklist
            - visited: Distinct items produced so far
            - skipped: Duplicates discarded at production time
        """
        return {
            'pending': len(self._pending),
            'visited': len(self._visited),
            'skipped': self._skipped,
        }
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(pending={len(self._pending)}, "
            f"visited={len(self._visited)})"
        )
