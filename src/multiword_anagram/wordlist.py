"""Module for loading dictionary words into the trie."""

import logging
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from multiword_anagram.solver.config import config as solver_config
from multiword_anagram.trie import Trie

logger = logging.getLogger(__name__)


def load_word_list(path: str | PathLike | None = None) -> str:
    """Read a whole dictionary file, one word per line.

    Args:
        path: Path to the word list.  Defaults to the configured `word_list_path`.

    Returns:
        The file contents.

    Raises:
        FileNotFoundError: If the file does not exist (or no path is given or configured).
        OSError: If the file cannot be read.
    """
    if path is None:
        path = solver_config.word_list_path
    if path is None:
        raise FileNotFoundError("No word list path given and ANAGRAM_WORD_LIST_PATH is not set.")

    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    return word_list_path.read_text(encoding="utf-8")


def insert_words(trie: Trie, words: Iterable[str]) -> int:
    """Insert words into the trie.

    Returns:
        The number of words that were new after normalization.
    """
    return sum(1 for word in words if trie.insert(word))


def insert_text(trie: Trie, text: str) -> int:
    """Insert one word per line of `text` into the trie.

    Returns:
        The number of words that were new after normalization.
    """
    return insert_words(trie, text.splitlines())


def load_into(trie: Trie, path: str | PathLike | None = None) -> int:
    """Read a dictionary file and insert its words into the trie.

    Returns:
        The number of words that were new after normalization.
    """
    text = load_word_list(path)
    added = insert_text(trie, text)
    logger.info(
        "Loaded %d new words from %s (dictionary size %d, word lengths %d-%d).",
        added,
        path if path is not None else solver_config.word_list_path,
        len(trie),
        trie.min_word_length,
        trie.max_word_length,
    )
    return added
