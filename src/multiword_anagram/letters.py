"""Module for letter counting: the multiset of letters an anagram must use up."""

from array import array

ALPHABET_SIZE = 26
ORD_A = ord("a")


class InvalidPhraseError(ValueError):
    """Raised when a phrase contains a character that is neither a letter nor whitespace."""


class PhraseTooLongError(ValueError):
    """Raised when a phrase has more letters than the search can recurse through."""


class LetterUnderflowError(RuntimeError):
    """Raised when a letter is consumed that has no remaining count.

    The search only descends into letters with a positive count, so this signals a bug.
    """


def letter_index(ch: str) -> int:
    """Return the 0-based index of a lowercase letter `a`-`z`, or -1 for anything else."""
    if len(ch) == 1 and "a" <= ch <= "z":
        return ord(ch) - ORD_A
    return -1


def normalize_word(word: str) -> str:
    """Normalize a dictionary word: trim, lowercase, and keep only the letters `a`-`z`.

    Only ASCII is lowercased, so non-ASCII letters such as the Kelvin sign are dropped rather
    than folded into `a`-`z`.
    """
    lowered = (ch.lower() for ch in word.strip() if ch.isascii())
    return "".join(ch for ch in lowered if "a" <= ch <= "z")


class LetterCounts:
    """A fixed-size count of the lowercase letters `a`-`z`.

    Mutated in place during the search: `decrement` when a letter is used and
    `increment` when it is given back.  The running total is cached so that the
    hot path never has to sum all 26 slots.
    """

    __slots__ = ("counts", "_total")

    def __init__(self, counts: array | None = None) -> None:
        self.counts = array("I", [0] * ALPHABET_SIZE) if counts is None else counts
        self._total = sum(self.counts)

    @classmethod
    def from_phrase(cls, phrase: str) -> "LetterCounts":
        """Count the letters in a phrase, case-insensitively.

        Whitespace is skipped.  Any other non-letter character, and any non-ASCII letter, is
        rejected.

        Raises:
            InvalidPhraseError: If the phrase contains an invalid character.
        """
        letters = cls()
        for ch in phrase:
            if ch.isalpha():
                index = letter_index(ch.lower()) if ch.isascii() else -1
                if index < 0:
                    raise InvalidPhraseError(f"Unsupported letter in phrase: {ch!r}")
                letters.counts[index] += 1
                letters._total += 1
            elif not ch.isspace():
                raise InvalidPhraseError(f"Invalid character in phrase: {ch!r}")
        return letters

    @classmethod
    def from_word(cls, word: str) -> "LetterCounts":
        """Count the letters of an already-normalized word."""
        letters = cls()
        for ch in word:
            letters.increment(ch)
        return letters

    def copy(self) -> "LetterCounts":
        """Return an independent copy."""
        return LetterCounts(array("I", self.counts))

    def total(self) -> int:
        """Total number of letters."""
        return self._total

    def is_empty(self) -> bool:
        return self._total == 0

    def get(self, ch: str) -> int:
        """Return the count for a letter (0 for anything that is not `a`-`z`)."""
        index = letter_index(ch)
        return self.counts[index] if index >= 0 else 0

    def can_subtract(self, other: "LetterCounts") -> bool:
        """Whether every count in `other` is covered by this multiset."""
        if other._total > self._total:
            return False
        return all(mine >= theirs for mine, theirs in zip(self.counts, other.counts))

    def subtract(self, other: "LetterCounts") -> None:
        """Remove all letters of `other` in place.

        Raises:
            LetterUnderflowError: If `other` is not contained in this multiset.
        """
        if not self.can_subtract(other):
            raise LetterUnderflowError(f"Cannot subtract {other} from {self}")
        for i, n in enumerate(other.counts):
            self.counts[i] -= n
        self._total -= other._total

    def add(self, other: "LetterCounts") -> None:
        """Add all letters of `other` in place."""
        for i, n in enumerate(other.counts):
            self.counts[i] += n
        self._total += other._total

    def decrement(self, ch: str) -> None:
        """Use up one occurrence of a letter."""
        index = letter_index(ch)
        if index < 0 or self.counts[index] == 0:
            raise LetterUnderflowError(f"No remaining {ch!r} to use")
        self.counts[index] -= 1
        self._total -= 1

    def increment(self, ch: str) -> None:
        """Give back one occurrence of a letter."""
        index = letter_index(ch)
        if index < 0:
            raise ValueError(f"Invalid letter: {ch!r}")
        self.counts[index] += 1
        self._total += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterCounts):
            return NotImplemented
        return self.counts == other.counts

    def __hash__(self) -> int:
        return hash(self.counts.tobytes())

    def __len__(self) -> int:
        return self._total

    def __str__(self) -> str:
        """The letters in alphabetical order, e.g. `acttt`."""
        return "".join(chr(ORD_A + i) * n for i, n in enumerate(self.counts))

    def __repr__(self) -> str:
        return f"LetterCounts({str(self)!r})"
