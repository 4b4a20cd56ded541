"""Multiword anagram solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the anagram solver.

    Each field may be overridden by an environment variable prefixed with `ANAGRAM_`,
    e.g. `ANAGRAM_DEFAULT_TIMEOUT_SECONDS=2.5`.
    """

    deterministic: bool = True
    """Whether to traverse the dictionary in alphabetical order.

    Children are sorted once, before the first search after new words are loaded.  Only
    matters when a timeout or solution cap cuts the search short: it makes the partial
    result independent of dictionary load order.  Default: True.
    """

    report_interval: int = 100_000
    """Interval (in number of dictionary nodes visited) at which to log progress. Default: 100000."""

    max_phrase_letters: int = 200
    """Longest phrase (in letters) accepted by `solve`. Default: 200.

    The search recurses up to four frames per letter (one-letter words), so this keeps a
    search well inside the interpreter's default recursion limit of 1000.  Longer phrases
    raise `PhraseTooLongError`; raise this together with `sys.setrecursionlimit` if needed.
    """

    default_timeout_seconds: float | None = None
    """Wall-clock budget used when a query does not set one. If None (default), no limit."""

    default_max_solutions: int | None = None
    """Solution cap used when a query does not set one. If None (default), no limit."""

    raise_on_invalid_phrase: bool = False
    """Whether an invalid phrase raises `InvalidPhraseError` instead of yielding no solutions.

    Default: False.
    """

    word_list_path: str | None = None
    """Default dictionary file for `load_word_list`, one word per line."""

    model_config = SettingsConfigDict(
        env_prefix="ANAGRAM_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )


config = SolverConfig()
