"""Testing utilities for unvisited consumers."""

from .fixtures import UnvisitedTestHelper

__all__ = ['UnvisitedTestHelper']
