"""Test fixtures for unvisited consumers.

These fixtures provide controlled access to internal state for testing purposes
without exposing implementation details as part of the public API.
"""

from typing import Any, Dict, FrozenSet, Hashable, List, Optional

from ..core.iterator import UnvisitedIterator


class UnvisitedTestHelper:
    """Read-only view of an UnvisitedIterator for test suites.
    
    Example:
        frontier = UnvisitedIterator.from_value(1)
        frontier.push_front(2)
        helper = UnvisitedTestHelper(frontier)
        
        assert helper.front() == 2
        assert helper.pending_items() == [2, 1]
        assert helper.visited_keys() == frozenset()
    """
    
    def __init__(self, iterator: UnvisitedIterator):
        """Initialize with the iterator to inspect.
        
        Args:
            iterator: The UnvisitedIterator under test
        """
        self._iterator = iterator
    
    def pending_items(self) -> List[Any]:
        """Snapshot of the worklist, front to back, duplicates included."""
        return list(self._iterator._pending)
    
    def visited_keys(self) -> FrozenSet[Hashable]:
        """Snapshot of the visit keys produced so far."""
        return frozenset(self._iterator._visited)
    
    def front(self) -> Optional[Any]:
        """Item that the next production step will look at first."""
        pending = self._iterator._pending
        return pending[0] if pending else None
    
    def back(self) -> Optional[Any]:
        """Item most recently pushed at the tail."""
        pending = self._iterator._pending
        return pending[-1] if pending else None
    
    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level iterator state for testing.
        
        Returns:
            Dictionary containing:
            - pending_count: Raw entries in the worklist
            - visited_count: Distinct items produced
            - skipped_count: Duplicates discarded so far
            - distinct_pending: Pending entries not yet visited, deduplicated
            - exhausted: Whether the next production step would stop
        """
        stats = self._iterator.get_stats()
        visited = self._iterator._visited
        key = self._iterator._visit_key
        unvisited_pending = {key(item) for item in self._iterator._pending} - visited
        return {
            'pending_count': stats['pending'],
            'visited_count': stats['visited'],
            'skipped_count': stats['skipped'],
            'distinct_pending': len(unvisited_pending),
            'exhausted': not unvisited_pending,
        }
