"""Constraints applied to a single anagram query."""

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields

from multiword_anagram.letters import letter_index
from multiword_anagram.patterns import Pattern, compile_patterns

StartLetters = str | Iterable[str]
"""A set of start letters, either as a string (`"abc"`) or any iterable of letters."""

StartCounts = str | Mapping[str, int]
"""Minimum start-letter counts, as a mapping or a string where repeats count (`"aab"`)."""


def parse_letter_set(letters: StartLetters | None) -> frozenset[str] | None:
    """Lowercase a collection of start letters into a set."""
    if letters is None:
        return None
    return frozenset(ch.lower() for ch in letters)


def parse_letter_counts(letters: StartCounts | None) -> dict[str, int] | None:
    """Lowercase start-letter requirements into a letter -> minimum count mapping."""
    if letters is None:
        return None
    if isinstance(letters, str):
        return dict(Counter(letters.lower()))
    counts: Counter[str] = Counter()
    for ch, n in letters.items():
        counts[ch.lower()] += n
    return dict(counts)


def _check_letters(name: str, letters: Iterable[str]) -> None:
    for ch in letters:
        if len(ch) != 1 or letter_index(ch) < 0:
            raise ValueError(f"{name} must contain only letters a-z, got {ch!r}")


def _check_non_negative(name: str, value: float | None) -> None:
    if value is not None and value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class SolverConstraints:
    """Optional constraints for a solve query.  Every field defaults to "no constraint"."""

    must_start_with: Mapping[str, int] | None = None
    """Minimum number of words in a solution starting with each letter."""

    can_only_ever_start_with: frozenset[str] | None = None
    """If set, every word must start with one of these letters."""

    must_not_start_with: frozenset[str] | None = None
    """No word may start with one of these letters."""

    max_words: int | None = None
    """Maximum number of words per solution."""

    min_word_length: int | None = None
    """Minimum length of every word in a solution."""

    timeout_seconds: float | None = None
    """Wall-clock budget for the search, polled cooperatively."""

    max_solutions: int | None = None
    """Stop once this many distinct solutions have been found."""

    contains_patterns: tuple[str, ...] | None = None
    """Literal substrings; each must appear inside some word of every solution."""

    patterns: tuple[Pattern, ...] = field(init=False, repr=False, compare=False)
    """Normalized `contains_patterns`, derived on construction."""

    def __post_init__(self) -> None:
        """Normalize letter constraints to lowercase and validate bounds."""
        must_start_with = parse_letter_counts(self.must_start_with)
        can_only = parse_letter_set(self.can_only_ever_start_with)
        must_not = parse_letter_set(self.must_not_start_with)
        contains = self.contains_patterns
        if isinstance(contains, str):
            contains = (contains,)
        elif contains is not None:
            contains = tuple(contains)

        if must_start_with is not None:
            _check_letters("must_start_with", must_start_with)
            for ch, n in must_start_with.items():
                _check_non_negative(f"must_start_with[{ch!r}]", n)
        if can_only is not None:
            _check_letters("can_only_ever_start_with", can_only)
        if must_not is not None:
            _check_letters("must_not_start_with", must_not)
        _check_non_negative("max_words", self.max_words)
        _check_non_negative("min_word_length", self.min_word_length)
        _check_non_negative("timeout_seconds", self.timeout_seconds)
        _check_non_negative("max_solutions", self.max_solutions)

        # Frozen dataclass: assign normalized values through object.__setattr__
        object.__setattr__(self, "must_start_with", must_start_with)
        object.__setattr__(self, "can_only_ever_start_with", can_only)
        object.__setattr__(self, "must_not_start_with", must_not)
        object.__setattr__(self, "contains_patterns", contains)
        object.__setattr__(self, "patterns", compile_patterns(contains))

    def __hash__(self) -> int:
        # Explicit, since the generated hash would fail on the must_start_with dict
        starts = self.must_start_with
        if starts is not None:
            starts = tuple(sorted(starts.items()))
        return hash(
            (
                starts,
                self.can_only_ever_start_with,
                self.must_not_start_with,
                self.max_words,
                self.min_word_length,
                self.timeout_seconds,
                self.max_solutions,
                self.contains_patterns,
            )
        )

    def is_valid_start_letter(self, ch: str) -> bool:
        """Whether a word may start with `ch` under the allow/deny lists."""
        if self.must_not_start_with is not None and ch in self.must_not_start_with:
            return False
        if self.can_only_ever_start_with is not None and ch not in self.can_only_ever_start_with:
            return False
        return True

    def meets_start_requirements(self, words: Iterable[str]) -> bool:
        """Whether the first letters of `words` cover every `must_start_with` minimum."""
        if not self.must_start_with:
            return True
        starts = Counter(word[0] for word in words if word)
        return all(starts[ch] >= n for ch, n in self.must_start_with.items())

    def with_defaults(
        self, *, timeout_seconds: float | None, max_solutions: int | None
    ) -> "SolverConstraints":
        """Return a copy with the budgets filled in where this query leaves them unset."""
        if (self.timeout_seconds is not None or timeout_seconds is None) and (
            self.max_solutions is not None or max_solutions is None
        ):
            return self
        data = self.to_dict()
        if data["timeout_seconds"] is None:
            data["timeout_seconds"] = timeout_seconds
        if data["max_solutions"] is None:
            data["max_solutions"] = max_solutions
        return SolverConstraints.from_dict(data)

    def to_dict(self) -> dict:
        """Return a dictionary representation of the constraints for serialization."""
        return {
            "must_start_with": self.must_start_with,
            "can_only_ever_start_with": (
                None if self.can_only_ever_start_with is None
                else "".join(sorted(self.can_only_ever_start_with))
            ),
            "must_not_start_with": (
                None if self.must_not_start_with is None
                else "".join(sorted(self.must_not_start_with))
            ),
            "max_words": self.max_words,
            "min_word_length": self.min_word_length,
            "timeout_seconds": self.timeout_seconds,
            "max_solutions": self.max_solutions,
            "contains_patterns": (
                None if self.contains_patterns is None else list(self.contains_patterns)
            ),
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "SolverConstraints":
        """Create constraints from a dictionary representation.

        Raises:
            ValueError: If the dictionary has keys that are not constraint fields.
        """
        known = {f.name for f in fields(cls) if f.init}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown constraint fields: {', '.join(sorted(unknown))}")
        return cls(**data)
