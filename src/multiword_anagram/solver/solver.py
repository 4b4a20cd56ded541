"""Main solver module: the public entry point for loading words and solving phrases."""

import logging
from dataclasses import dataclass, field
from os import PathLike
from typing import Any

from multiword_anagram.letters import InvalidPhraseError, LetterCounts, PhraseTooLongError
from multiword_anagram.solver.config import config as solver_config
from multiword_anagram.solver.constraints import SolverConstraints
from multiword_anagram.solver.search import PhraseSearch
from multiword_anagram.trie import Trie
from multiword_anagram.util import int_comma, preview, time_str
from multiword_anagram.wordlist import insert_text, insert_words, load_into

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """Solutions for a phrase along with statistics about the search."""

    solutions: list[list[str]] = field(default_factory=list)
    """Distinct solutions in final order; each solution's words are sorted."""

    timed_out: bool = False
    """Whether the search stopped at the wall-clock budget (the result may be partial)."""

    hit_solution_cap: bool = False
    """Whether the search stopped at `max_solutions`."""

    nodes_visited: int = 0
    """Number of dictionary nodes entered during the search."""

    elapsed_seconds: float = 0.0
    """Wall-clock duration of the search."""

    @property
    def complete(self) -> bool:
        """Whether the search explored the whole space (no budget cut it short)."""
        return not (self.timed_out or self.hit_solution_cap)


class AnagramSolver:
    """Find multiword anagrams of a phrase using a dictionary loaded once up front.

    Args:
        raise_on_invalid_phrase (bool | None): Raise `InvalidPhraseError` for a phrase with
            characters other than letters and whitespace, instead of returning no solutions.
            Defaults to the configured `raise_on_invalid_phrase`.
    """

    def __init__(self, *, raise_on_invalid_phrase: bool | None = None) -> None:
        self.trie = Trie()
        self.raise_on_invalid_phrase = (
            solver_config.raise_on_invalid_phrase
            if raise_on_invalid_phrase is None
            else raise_on_invalid_phrase
        )

    @property
    def dictionary_size(self) -> int:
        return len(self.trie)

    @property
    def min_word_length(self) -> int:
        return self.trie.min_word_length

    @property
    def max_word_length(self) -> int:
        return self.trie.max_word_length

    def add_word(self, word: str) -> bool:
        """Add a single word.  Returns False if it normalizes to nothing or is already known."""
        return self.trie.insert(word)

    def load_dictionary_from_words(self, words: list[str] | tuple[str, ...] | set[str]) -> int:
        """Add a collection of words.  Returns the number of new words."""
        added = insert_words(self.trie, words)
        logger.info("Loaded %d new words (dictionary size %d).", added, len(self.trie))
        return added

    def load_dictionary_from_text(self, text: str) -> int:
        """Add words from text, one word per line.  Returns the number of new words."""
        added = insert_text(self.trie, text)
        logger.info("Loaded %d new words from text (dictionary size %d).", added, len(self.trie))
        return added

    def load_dictionary_from_path(self, path: str | PathLike | None = None) -> int:
        """Add words from a file, one word per line.  Returns the number of new words.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the file cannot be read.
        """
        return load_into(self.trie, path)

    def solve(
        self, phrase: str, constraints: SolverConstraints | None = None, **kwargs: Any
    ) -> list[list[str]]:
        """Return every multiword anagram of `phrase`, best first.

        Constraints are given either as a `SolverConstraints` or as its fields in keyword form,
        e.g. `solver.solve("dormitory", max_words=2, must_not_start_with="xyz")`.

        Solutions are ordered by number of words (ascending), length of the shortest word
        (descending), then alphabetically.  An invalid phrase or an empty dictionary yields an
        empty list.
        """
        return self.solve_with_stats(phrase, constraints, **kwargs).solutions

    def solve_with_stats(
        self, phrase: str, constraints: SolverConstraints | None = None, **kwargs: Any
    ) -> SolveResult:
        """Like `solve`, but also report whether a budget cut the search short.

        Raises:
            PhraseTooLongError: If the phrase has more than `max_phrase_letters` letters.
            InvalidPhraseError: If the phrase is invalid and `raise_on_invalid_phrase` is set.
        """
        if constraints is None:
            constraints = SolverConstraints(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a SolverConstraints or keyword constraints, not both.")
        constraints = constraints.with_defaults(
            timeout_seconds=solver_config.default_timeout_seconds,
            max_solutions=solver_config.default_max_solutions,
        )

        try:
            letters = LetterCounts.from_phrase(phrase)
        except InvalidPhraseError as e:
            logger.info("Rejected phrase %r: %s", phrase, e)
            if self.raise_on_invalid_phrase:
                raise
            return SolveResult()

        if letters.is_empty():
            logger.debug("Phrase %r has no letters.", phrase)
            return SolveResult()
        if self.trie.min_word_length == 0:
            logger.debug("Dictionary is empty; nothing to solve.")
            return SolveResult()
        if letters.total() > solver_config.max_phrase_letters:
            raise PhraseTooLongError(
                f"Phrase has {letters.total()} letters; the limit is "
                f"{solver_config.max_phrase_letters} (ANAGRAM_MAX_PHRASE_LETTERS)."
            )

        if solver_config.deterministic:
            self.trie.freeze()

        search = PhraseSearch(
            self.trie,
            letters,
            constraints,
            report_interval=solver_config.report_interval,
        )
        solutions = search.run().to_list()

        state = search.state
        result = SolveResult(
            solutions=solutions,
            timed_out=state.timed_out,
            hit_solution_cap=state.hit_solution_cap(),
            nodes_visited=state.nodes_visited,
            elapsed_seconds=state.elapsed(),
        )
        logger.info(
            "Solved %r (%s): %s solutions, %s nodes in %s%s%s. %s",
            phrase,
            letters,
            int_comma(len(solutions)),
            int_comma(result.nodes_visited),
            time_str(result.elapsed_seconds),
            " [timed out]" if result.timed_out else "",
            " [solution cap]" if result.hit_solution_cap else "",
            preview(solutions),
        )
        return result
