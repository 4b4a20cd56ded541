from multiword_anagram.solver.ordering import SolutionSet, canonicalize, solution_sort_key


def test_canonicalize_sorts_words() -> None:
    assert canonicalize(["room", "dirty"]) == ("dirty", "room")


def test_solution_set_deduplicates_permutations() -> None:
    solutions = SolutionSet()
    assert solutions.add(["room", "dirty"])
    assert not solutions.add(["dirty", "room"])
    assert len(solutions) == 1
    assert ["room", "dirty"] in solutions


def test_solutions_are_ordered_by_count_then_shortest_word_then_words() -> None:
    solutions = SolutionSet()
    for words in (["a", "bcd"], ["cd", "ab"], ["abcd"], ["a", "b", "cd"], ["dcba"]):
        solutions.add(words)
    assert solutions.to_list() == [
        ["abcd"],
        ["dcba"],
        ["ab", "cd"],
        ["a", "bcd"],
        ["a", "b", "cd"],
    ]


def test_sort_key_prefers_longer_shortest_word() -> None:
    assert solution_sort_key(("ab", "cd")) < solution_sort_key(("a", "bcd"))
