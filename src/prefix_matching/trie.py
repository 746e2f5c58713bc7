"""A character trie for longest prefix matching."""

from __future__ import annotations

import logging
import re
from typing import Any

from .normalize import is_blank, normalize

__all__ = [
    "InvalidInputError",
    "Node",
    "PrefixMatchingError",
    "UnicodeTrie",
]

logger = logging.getLogger(__name__)

#: Line boundaries for multiline detection, which are narrower than the ones of :meth:`str.splitlines`
LINE_BREAK = re.compile(r"\r\n|\r|\n")


class PrefixMatchingError(Exception):
    """The base class for errors raised by :mod:`prefix_matching`."""


class InvalidInputError(PrefixMatchingError, ValueError):
    """An error raised when a query can not be matched, e.g., because it spans multiple lines."""

    def __init__(self, text: str) -> None:
        """Initialize the error."""
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"Multiline input is not supported so cannot process input string: {self.text!r}"


class Node:
    """Trie node class."""

    __slots__ = ("children", "terminal")

    children: dict[str, Node]
    terminal: bool

    def __init__(self) -> None:
        """Initialize the node."""
        self.children = {}
        self.terminal = False


class UnicodeTrie:
    """A trie over normalized strings, keyed by Unicode code point.

    .. code-block::

        >>> trie = UnicodeTrie()
        >>> for prefix in ["+", "+44", "+4420"]:
        ...     trie.insert(prefix)
        >>> trie.find_longest_prefix("+44 20 7946 0958")
        '+4420'

    Only the deepest node reached by walking the input is checked. A shorter
    prefix along the way is not reported if the walk continues past it and
    ends on a node that isn't a prefix:

    .. code-block::

        >>> trie = UnicodeTrie()
        >>> trie.insert("a")
        >>> trie.insert("abx")
        >>> trie.find_longest_prefix("aby") is None
        True

    All prefixes have to be inserted before querying from multiple threads.
    """

    def __init__(self) -> None:
        """Create an empty trie."""
        self.root = Node()
        self._size = 0

    def insert(self, prefix: str) -> None:
        """Insert the normalized form of the prefix.

        :param prefix: A raw prefix. Inserting the same prefix twice has no effect.
        """
        key = normalize(prefix)
        if not key:
            # the root stands for the empty prefix and is never terminal
            logger.warning("skipping prefix that normalizes to an empty string: %r", prefix)
            return
        node = self.root
        for character in key:
            next_node = node.children.get(character)
            if next_node is None:
                next_node = node.children[character] = Node()
            node = next_node
        if not node.terminal:
            node.terminal = True
            self._size += 1

    def find_longest_prefix(self, text: str | None) -> str | None:
        """Find the loaded prefix reached by walking the trie along the text.

        :param text: A single line of text. Missing or blank text is never matched.
        :returns:
            The normalized characters consumed by the walk, if the node the walk
            stops on marks a loaded prefix. Otherwise, none.
        :raises InvalidInputError: If the text spans more than one line
        """
        if is_blank(text):
            return None
        if _is_multiline(text):  # type:ignore[arg-type]
            logger.debug("rejecting multiline input: %r", text)
            raise InvalidInputError(text)  # type:ignore[arg-type]

        key = normalize(text)  # type:ignore[arg-type]
        node, depth = self._walk(key)
        if depth and node.terminal:
            return key[:depth]
        return None

    def __contains__(self, prefix: Any) -> bool:
        if not isinstance(prefix, str):
            return False
        key = normalize(prefix)
        if not key:
            return False
        node, depth = self._walk(key)
        return depth == len(key) and node.terminal

    def __len__(self) -> int:
        return self._size

    def _walk(self, key: str) -> tuple[Node, int]:
        """Follow the key from the root as far as it goes and return the last node and its depth."""
        node = self.root
        depth = 0
        for character in key:
            next_node = node.children.get(character)
            if next_node is None:
                break
            node = next_node
            depth += 1
        return node, depth


def _is_multiline(text: str) -> bool:
    lines = LINE_BREAK.split(text)
    # a single trailing line break does not start a new line
    if lines[-1] == "":
        lines.pop()
    return len(lines) > 1
