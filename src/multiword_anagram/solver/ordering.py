"""Canonical form and final ordering of solutions."""

from collections.abc import Iterable

from sortedcontainers import SortedSet

Solution = tuple[str, ...]
"""A solution in canonical form: its words in lexicographic order."""


def canonicalize(words: Iterable[str]) -> Solution:
    """Return the canonical form of a word sequence, independent of discovery order."""
    return tuple(sorted(words))


def solution_sort_key(solution: Solution) -> tuple[int, int, Solution]:
    """Order solutions by word count (ascending), shortest word (descending), then words.

    Favors fewer, longer words first.
    """
    shortest = min((len(word) for word in solution), default=0)
    return (len(solution), -shortest, solution)


class SolutionSet:
    """Deduplicating collection of canonical solutions, iterated in final order."""

    def __init__(self) -> None:
        self._solutions: SortedSet = SortedSet(key=solution_sort_key)

    def add(self, words: Iterable[str]) -> bool:
        """Insert a solution.

        Returns:
            True if the canonical form was not already present.
        """
        solution = canonicalize(words)
        if solution in self._solutions:
            return False
        self._solutions.add(solution)
        return True

    def __contains__(self, words: object) -> bool:
        if not isinstance(words, (list, tuple)):
            return False
        return canonicalize(words) in self._solutions

    def __len__(self) -> int:
        return len(self._solutions)

    def __iter__(self):
        return iter(self._solutions)

    def to_list(self) -> list[list[str]]:
        """Ordered solutions as lists of words."""
        return [list(solution) for solution in self._solutions]
