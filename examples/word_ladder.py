#!/usr/bin/env python3
"""
Word ladder search using UnvisitedIterator as the BFS frontier.

This example demonstrates:
- Seeding a frontier with a single start word
- Discovering neighbours lazily and pushing them at the back
- Relying on the iterator to drop words that were already expanded

Usage:
    python examples/word_ladder.py cold warm
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from unvisited import UnvisitedIterator

WORDS = {
    "cold", "cord", "card", "ward", "warm", "word", "worm", "corm",
    "wore", "core", "care", "ware", "wart", "cart", "colt", "coat",
}


def neighbours(word):
    """Yield dictionary words that differ from ``word`` by one letter."""
    for i in range(len(word)):
        for letter in "abcdefghijklmnopqrstuvwxyz":
            candidate = word[:i] + letter + word[i + 1:]
            if candidate != word and candidate in WORDS:
                yield candidate


def ladder(start, goal):
    """Return the shortest chain of words from start to goal, or None."""
    parents = {start: None}
    frontier = UnvisitedIterator.from_value(start)
    
    for word in frontier:
        if word == goal:
            chain = []
            while word is not None:
                chain.append(word)
                word = parents[word]
            return list(reversed(chain))
        
        for nxt in neighbours(word):
            # First discovery wins, which keeps the path shortest
            parents.setdefault(nxt, word)
            frontier.push_back(nxt)
    
    return None


def main():
    start, goal = (sys.argv[1], sys.argv[2]) if len(sys.argv) > 2 else ("cold", "warm")
    
    chain = ladder(start, goal)
    if chain is None:
        print(f"No ladder from {start!r} to {goal!r}")
        return 1
    
    print(" -> ".join(chain))
    print(f"{len(chain) - 1} steps")
    return 0


if __name__ == "__main__":
    sys.exit(main())
