from collections import Counter
from itertools import product
from pathlib import Path
from time import time

import pytest

from multiword_anagram import (
    AnagramSolver,
    InvalidPhraseError,
    PhraseTooLongError,
    SolverConstraints,
)
from multiword_anagram.solver.config import config as solver_config

DIRTY_ROOM_WORDS = [
    "dormitory",
    "dirty",
    "room",
    "dirt",
    "my",
    "or",
    "moor",
    "tidy",
    "rot",
    "rim",
    "dry",
    "toy",
]
DIRTY_ROOM_SOLUTIONS = [["dormitory"], ["dirty", "moor"], ["dirty", "room"]]


def make_solver(words: list[str]) -> AnagramSolver:
    solver = AnagramSolver()
    solver.load_dictionary_from_words(words)
    return solver


def assert_valid_solutions(solver: AnagramSolver, phrase: str, solutions: list[list[str]]) -> None:
    """Check letter conservation, membership, uniqueness and word order."""
    target = Counter(ch for ch in phrase.lower() if ch.isalpha())
    seen = set()
    for words in solutions:
        assert Counter("".join(words)) == target
        assert all(word in solver.trie for word in words)
        assert words == sorted(words)
        assert tuple(words) not in seen
        seen.add(tuple(words))


def test_single_word_anagrams_sorted_alphabetically() -> None:
    solver = make_solver(["cat", "act", "tac"])
    assert solver.solve("cat") == [["act"], ["cat"], ["tac"]]


def test_max_words_limits_the_partition() -> None:
    solver = make_solver(["cat", "a"])
    assert solver.solve("acta", max_words=2) == [["a", "cat"]]
    assert solver.solve("acta", max_words=1) == []


def test_phrase_without_letters_yields_nothing() -> None:
    solver = make_solver(["cat"])
    assert solver.solve("123") == []
    assert solver.solve("") == []
    assert solver.solve("   ") == []


def test_invalid_phrase_yields_nothing_by_default() -> None:
    solver = make_solver(["cat"])
    assert solver.solve("c-a-t") == []


def test_invalid_phrase_can_raise() -> None:
    solver = AnagramSolver(raise_on_invalid_phrase=True)
    solver.add_word("cat")
    with pytest.raises(InvalidPhraseError):
        solver.solve("c-a-t")


def test_empty_dictionary_yields_nothing() -> None:
    solver = AnagramSolver()
    assert solver.solve("cat") == []
    solver.add_word("!!!")
    assert solver.dictionary_size == 0
    assert solver.solve("cat") == []


def test_phrase_is_case_and_space_insensitive() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    assert solver.solve("Dirty Room") == DIRTY_ROOM_SOLUTIONS
    assert solver.solve("DIRTYROOM") == DIRTY_ROOM_SOLUTIONS


def test_all_solutions_are_valid_and_ordered() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    solutions = solver.solve("dirty room")
    assert solutions == DIRTY_ROOM_SOLUTIONS
    assert_valid_solutions(solver, "dirty room", solutions)


def test_min_word_length() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    assert solver.solve("dirty room", min_word_length=5) == [["dormitory"]]
    assert solver.solve("dirty room", min_word_length=10) == []


def test_can_only_ever_start_with() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    assert solver.solve("dirty room", can_only_ever_start_with="dr") == [
        ["dormitory"],
        ["dirty", "room"],
    ]


def test_must_not_start_with() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    assert solver.solve("dirty room", must_not_start_with="d") == []
    assert solver.solve("dirty room", must_not_start_with="R") == [
        ["dormitory"],
        ["dirty", "moor"],
    ]


def test_must_start_with_minimums() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    assert solver.solve("dirty room", must_start_with="m") == [["dirty", "moor"]]
    assert solver.solve("dirty room", must_start_with={"d": 1, "r": 1}) == [["dirty", "room"]]
    assert solver.solve("dirty room", must_start_with="dd") == []


def test_contains_patterns_requires_literal_substring() -> None:
    solver = make_solver(["cat", "a"])
    assert solver.solve("acta", max_words=2, contains_patterns=["at"]) == [["a", "cat"]]
    # "cat" holds the letters of "ct" but not the substring
    assert solver.solve("acta", max_words=2, contains_patterns=["ct"]) == []
    assert solver.solve("acta", max_words=2, contains_patterns=["xy"]) == []


def test_contains_patterns_on_larger_dictionary() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    assert solver.solve("dirty room", contains_patterns=["oo"]) == [
        ["dirty", "moor"],
        ["dirty", "room"],
    ]
    assert solver.solve("dirty room", contains_patterns=["mit"]) == [["dormitory"]]
    assert solver.solve("dirty room", contains_patterns=["irt", "room"]) == [["dirty", "room"]]
    # An anagram of a chosen word is feasible but never literally present
    assert solver.solve("dirty room", contains_patterns=["ytrid"]) == []


def test_patterns_may_be_satisfied_by_different_words() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    assert solver.solve("dirty room", contains_patterns=["ty", "mo"]) == [["dirty", "moor"]]


def test_max_solutions_caps_the_result() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    result = solver.solve_with_stats("dirty room", max_solutions=2)
    assert len(result.solutions) == 2
    assert result.hit_solution_cap
    assert not result.complete
    assert all(words in DIRTY_ROOM_SOLUTIONS for words in result.solutions)

    assert solver.solve("dirty room", max_solutions=0) == []
    assert solver.solve("dirty room", max_solutions=10) == DIRTY_ROOM_SOLUTIONS


def test_solve_with_stats_reports_complete_search() -> None:
    solver = make_solver(DIRTY_ROOM_WORDS)
    result = solver.solve_with_stats("dirty room")
    assert result.solutions == DIRTY_ROOM_SOLUTIONS
    assert result.complete
    assert result.nodes_visited > 0
    assert result.elapsed_seconds >= 0


def big_solver() -> AnagramSolver:
    letters = "abcdefgh"
    words = ["".join(p) for n in (1, 2, 3) for p in product(letters, repeat=n)]
    return make_solver(words)


def test_zero_timeout_returns_promptly() -> None:
    solver = big_solver()
    start = time()
    result = solver.solve_with_stats("abcdefgh abcdefgh abcdefgh", timeout_seconds=0)
    assert time() - start < 5
    assert result.timed_out
    assert_valid_solutions(solver, "abcdefgh abcdefgh abcdefgh", result.solutions)


def test_short_timeout_gives_valid_partial_result() -> None:
    solver = big_solver()
    phrase = "abcdefgh abcdefgh abcdefgh"
    result = solver.solve_with_stats(phrase, timeout_seconds=0.2, max_words=12)
    assert result.timed_out
    assert result.elapsed_seconds < 5
    assert_valid_solutions(solver, phrase, result.solutions)
    assert all(len(words) <= 12 for words in result.solutions)


def test_constraints_object_and_keywords_are_exclusive() -> None:
    solver = make_solver(["cat"])
    assert solver.solve("cat", SolverConstraints(max_words=1)) == [["cat"]]
    with pytest.raises(TypeError):
        solver.solve("cat", SolverConstraints(), max_words=1)


def test_configured_default_solution_cap(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(solver_config, "default_max_solutions", 1)
    solver = make_solver(["cat", "act", "tac"])
    assert len(solver.solve("cat")) == 1
    assert solver.solve("cat", max_solutions=5) == [["act"], ["cat"], ["tac"]]


def test_load_dictionary_from_text_and_path(tmp_path: Path) -> None:
    solver = AnagramSolver()
    assert solver.load_dictionary_from_text("Cat\n\nact\n  TAC  \n42\n") == 3
    assert solver.dictionary_size == 3

    word_file = tmp_path / "words.txt"
    word_file.write_text("a\ncat\nmoor\n", encoding="utf-8")
    assert solver.load_dictionary_from_path(word_file) == 2
    assert solver.dictionary_size == 5
    assert solver.min_word_length == 1
    assert solver.max_word_length == 4
    assert solver.solve("acta", max_words=2) == [["a", "act"], ["a", "cat"], ["a", "tac"]]


def test_load_dictionary_from_missing_path_raises(tmp_path: Path) -> None:
    solver = AnagramSolver()
    with pytest.raises(FileNotFoundError):
        solver.load_dictionary_from_path(tmp_path / "missing.txt")
    assert solver.dictionary_size == 0


def test_load_dictionary_from_configured_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    word_file = tmp_path / "words.txt"
    word_file.write_text("cat\n", encoding="utf-8")
    monkeypatch.setattr(solver_config, "word_list_path", str(word_file))
    solver = AnagramSolver()
    assert solver.load_dictionary_from_path() == 1
    assert solver.solve("tac") == [["cat"]]


def test_over_long_phrase_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(solver_config, "max_phrase_letters", 5)
    solver = make_solver(["a", "cat"])
    assert solver.solve("a cat") == [["a", "cat"]]
    with pytest.raises(PhraseTooLongError):
        solver.solve("a cat a a")


def test_many_one_letter_words_fit_the_recursion_limit() -> None:
    solver = make_solver(["a"])
    assert solver.solve("a" * 150) == [["a"] * 150]


def test_solve_orders_children_alphabetically() -> None:
    solver = make_solver(["tac", "cat", "act"])
    assert not solver.trie.is_frozen
    assert solver.solve("cat", max_solutions=1) == [["act"]]
    assert solver.trie.is_frozen
