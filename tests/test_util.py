from multiword_anagram.util import int_comma, preview, time_str


def test_time_str() -> None:
    assert time_str(0) == "00:00:00.00"
    assert time_str(3723.456) == "01:02:03.46"


def test_int_comma() -> None:
    assert int_comma(1234567) == "1,234,567"
    assert int_comma(12) == "12"


def test_preview_truncates() -> None:
    solutions = [["act"], ["cat"], ["tac"], ["a", "ct"]]
    assert preview(solutions) == "act | cat | tac | ..."
    assert preview(solutions[:1]) == "act"
    assert preview([]) == "-"
