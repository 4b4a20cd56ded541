"""Prefix tree over normalized dictionary words."""

from collections.abc import Iterator

from multiword_anagram.letters import normalize_word


class TrieNode:
    """A single node of the dictionary index."""

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        """Mapping of next letter to child node, in insertion order until `Trie.freeze`."""

        self.is_word: bool = False
        """Whether the path from the root to this node spells a dictionary word."""


class Trie:
    """Dictionary index used by the search engine.

    Words are normalized on insertion (see `normalize_word`); words that normalize to the
    empty string are discarded silently.  Read-only once a search starts.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self._n_words = 0
        self._min_len: int | None = None
        self._max_len = 0
        self._frozen = True

    def insert(self, word: str) -> bool:
        """Insert a word.

        Returns:
            True if the normalized word was new, False if it was empty or already present.
        """
        normalized = normalize_word(word)
        if not normalized:
            return False

        node = self.root
        for ch in normalized:
            next_node = node.children.get(ch)
            if next_node is None:
                next_node = TrieNode()
                node.children[ch] = next_node
                self._frozen = False
            node = next_node
        if node.is_word:
            return False
        node.is_word = True

        length = len(normalized)
        self._n_words += 1
        self._min_len = length if self._min_len is None else min(self._min_len, length)
        self._max_len = max(self._max_len, length)
        return True

    def freeze(self) -> None:
        """Put every node's children in alphabetical order.

        A no-op unless new nodes were added since the last call.  Traversal order decides
        which solutions a search finds first when a budget cuts it short.
        """
        if self._frozen:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            if list(node.children) != sorted(node.children):
                node.children = dict(sorted(node.children.items()))
            stack.extend(node.children.values())
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        """Whether children are in alphabetical order everywhere."""
        return self._frozen

    @property
    def min_word_length(self) -> int:
        """Length of the shortest word, or 0 for an empty index."""
        return self._min_len or 0

    @property
    def max_word_length(self) -> int:
        """Length of the longest word, or 0 for an empty index."""
        return self._max_len

    def is_empty(self) -> bool:
        return self._n_words == 0

    def __len__(self) -> int:
        return self._n_words

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        normalized = normalize_word(word)
        if not normalized:
            return False
        node = self.root
        for ch in normalized:
            next_node = node.children.get(ch)
            if next_node is None:
                return False
            node = next_node
        return node.is_word

    def __iter__(self) -> Iterator[str]:
        """Iterate over the stored words in alphabetical order."""
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix
            # Push in reverse so children are popped alphabetically
            for ch, child in sorted(node.children.items(), reverse=True):
                stack.append((child, prefix + ch))
