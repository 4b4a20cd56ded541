"""Multiword Anagram Solver.

Partitions the letters of a phrase into one or more dictionary words, using every letter
exactly once.  Words are looked up in a prefix tree and combined by backtracking, subject to
optional constraints: start letters, word count and length bounds, required substrings, and
time and solution-count budgets.

Example:
    >>> solver = AnagramSolver()
    >>> solver.load_dictionary_from_words(["cat", "act", "a"])
    3
    >>> solver.solve("acta", max_words=2)
    [['a', 'act'], ['a', 'cat']]
"""

from .letters import InvalidPhraseError, LetterCounts, LetterUnderflowError, PhraseTooLongError
from .patterns import Pattern
from .solver.config import SolverConfig
from .solver.constraints import SolverConstraints
from .solver.solver import AnagramSolver, SolveResult
from .trie import Trie

__all__ = [
    "AnagramSolver",
    "InvalidPhraseError",
    "LetterCounts",
    "LetterUnderflowError",
    "Pattern",
    "PhraseTooLongError",
    "SolveResult",
    "SolverConfig",
    "SolverConstraints",
    "Trie",
]
