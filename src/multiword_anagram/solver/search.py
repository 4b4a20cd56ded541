"""Backtracking search for multiword anagrams.

Two mutually recursive steps share one mutable context (`PhraseSearch`):

* `compose_phrase` decides, at a word boundary, whether the words chosen so far can be
  finalized as a solution or need another word;
* `extend_word` walks the dictionary trie one letter at a time, constrained by the letters
  still available, and hands every complete word back to `compose_phrase`.

IMPORTANT: the remaining letters, the word path, the partial word and the pattern bits are
mutated in place.  Every mutation made on entering a branch is undone before the branch
returns, on every return path, so the context is bit-for-bit unchanged after `run()`.
"""

import logging

from multiword_anagram.letters import LetterCounts
from multiword_anagram.solver.constraints import SolverConstraints
from multiword_anagram.solver.ordering import SolutionSet
from multiword_anagram.solver.state import SearchState
from multiword_anagram.trie import Trie, TrieNode
from multiword_anagram.util import int_comma, time_str

logger = logging.getLogger(__name__)


class PhraseSearch:
    """The search context for one phrase.

    Args:
        trie (Trie): Dictionary index.  Read only.
        letters (LetterCounts): Letters of the phrase.  Mutated during the search and restored
            afterwards.
        constraints (SolverConstraints): Query constraints.  Read only.
        report_interval (int): Log progress every this many visited trie nodes (0 disables).
    """

    def __init__(
        self,
        trie: Trie,
        letters: LetterCounts,
        constraints: SolverConstraints,
        *,
        report_interval: int = 0,
    ) -> None:
        self.trie = trie
        self.letters = letters
        self.constraints = constraints
        self.patterns = constraints.patterns
        self.report_interval = report_interval

        self.path: list[str] = []
        """Words chosen so far, in discovery order."""

        self.solutions = SolutionSet()
        self.state = SearchState(
            timeout_seconds=constraints.timeout_seconds,
            max_solutions=constraints.max_solutions,
            n_patterns=len(self.patterns),
        )

        # Every following word needs at least this many letters
        self.min_next_length = max(trie.min_word_length, constraints.min_word_length or 0)

    def run(self) -> SolutionSet:
        """Search exhaustively (up to the budgets) and return the distinct solutions found."""
        self.compose_phrase()
        return self.solutions

    def compose_phrase(self) -> None:
        """Finalize the current word path, or look for the next word."""
        state = self.state
        if state.should_stop():
            return

        letters = self.letters
        n_words = len(self.path)
        max_words = self.constraints.max_words
        at_word_limit = max_words is not None and n_words >= max_words

        if self.patterns:
            any_unsatisfied = False
            for i, pattern in enumerate(self.patterns):
                if state.satisfied[i]:
                    continue
                # An unsatisfied pattern must fit inside the words still to come
                if not pattern.feasible_in(letters):
                    return
                any_unsatisfied = True
            if any_unsatisfied and (letters.is_empty() or at_word_limit):
                return

        if max_words is not None and n_words > max_words:
            return

        if letters.is_empty():
            if self.path:
                self._record_solution()
            return

        if letters.total() < self.min_next_length:
            return
        if at_word_limit:
            return

        self.extend_word(self.trie.root, [])

    def extend_word(self, node: TrieNode, word: list[str]) -> None:
        """Depth-first walk from `node`, where `word` spells the path from the root."""
        state = self.state
        if state.should_stop():
            return

        state.nodes_visited += 1
        if self.report_interval and state.nodes_visited % self.report_interval == 0:
            self._report_progress()

        min_length = self.constraints.min_word_length
        if node.is_word and word and (min_length is None or len(word) >= min_length):
            self._choose_word("".join(word))
            if state.stopped():
                return

        letters = self.letters
        # Nothing can be appended: no longer word exists or every letter is in use
        if len(word) >= self.trie.max_word_length or letters.is_empty():
            return

        at_start = not word
        for ch, child in node.children.items():
            if letters.get(ch) == 0:
                continue
            if at_start and not self.constraints.is_valid_start_letter(ch):
                continue

            letters.decrement(ch)
            word.append(ch)
            try:
                self.extend_word(child, word)
            finally:
                word.pop()
                letters.increment(ch)

            if state.stopped():
                return

    def _choose_word(self, word: str) -> None:
        """Append a complete word to the path and try to finish the phrase with it."""
        satisfied = self.state.satisfied
        flipped = [
            i
            for i, pattern in enumerate(self.patterns)
            if not satisfied[i] and pattern.found_in(word)
        ]
        for i in flipped:
            satisfied[i] = True
        self.path.append(word)
        try:
            self.compose_phrase()
        finally:
            self.path.pop()
            for i in flipped:
                satisfied[i] = False

    def _record_solution(self) -> None:
        """Validate a complete path and add it to the solution set."""
        constraints = self.constraints
        state = self.state
        if constraints.max_words is not None and len(self.path) > constraints.max_words:
            return
        if not constraints.meets_start_requirements(self.path):
            return
        if not state.all_satisfied():
            return

        if self.solutions.add(self.path):
            state.solutions_found += 1
            if state.hit_solution_cap():
                logger.debug("Reached solution cap of %d.", state.max_solutions)

    def _report_progress(self) -> None:
        state = self.state
        logger.debug(
            "Visited %s nodes, %s solutions, elapsed %s, current path: %s",
            int_comma(state.nodes_visited),
            int_comma(state.solutions_found),
            time_str(state.elapsed()),
            " ".join(self.path) or "-",
        )
