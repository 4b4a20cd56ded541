"""Required-substring constraints ("patterns").

A pattern plays two different roles during the search:

* while it is unsatisfied, the remaining letters must still be able to spell it
  (multiset feasibility, `Pattern.feasible_in`), otherwise the branch is dead;
* it only becomes satisfied once a chosen word contains it literally
  (`Pattern.found_in`).  An anagram of the pattern spread over a word does not count.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from multiword_anagram.letters import LetterCounts, normalize_word


@dataclass(frozen=True)
class Pattern:
    """A normalized literal substring with its letter counts."""

    text: str
    """Normalized text, comparable with normalized dictionary words."""

    counts: LetterCounts = field(compare=False, repr=False)
    """Letters needed to spell `text`."""

    @classmethod
    def from_text(cls, text: str) -> "Pattern":
        normalized = normalize_word(text)
        return cls(text=normalized, counts=LetterCounts.from_word(normalized))

    def feasible_in(self, letters: LetterCounts) -> bool:
        """Whether `letters` still holds every letter of the pattern."""
        return letters.can_subtract(self.counts)

    def found_in(self, word: str) -> bool:
        """Whether `word` contains the pattern as a literal substring."""
        return self.text in word


def compile_patterns(texts: Iterable[str] | None) -> tuple[Pattern, ...]:
    """Normalize required substrings.

    Patterns that normalize to the empty string are dropped, since every word contains them.
    """
    if not texts:
        return ()
    patterns = (Pattern.from_text(text) for text in texts)
    return tuple(p for p in patterns if p.text)
