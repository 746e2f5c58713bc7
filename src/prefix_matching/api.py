"""Loading prefixes and matching queries against them."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from .normalize import is_blank, normalize
from .trie import InvalidInputError, PrefixMatchingError, UnicodeTrie

__all__ = [
    "DEFAULT_ENCODING",
    "InvalidInputError",
    "PrefixLoadError",
    "PrefixMatch",
    "PrefixMatcher",
    "PrefixMatchingError",
    "PrefixSource",
]

logger = logging.getLogger(__name__)

#: The encoding used to read prefix files unless another is given
DEFAULT_ENCODING = "utf-8"

#: A local path to a line-delimited prefix file, or the lines themselves
PrefixSource = Union[str, Path, Iterable[str]]


class PrefixLoadError(PrefixMatchingError):
    """An error raised when a prefix source can't be read."""

    def __init__(self, location: Any) -> None:
        """Initialize the error."""
        super().__init__(location)
        self.location = location

    def __str__(self) -> str:
        return f"could not load prefixes from {self.location}"


class PrefixMatch(BaseModel):
    """The result of matching a query against the loaded prefixes.

    >>> match = PrefixMatch(prefix="+4420", remainder="79460958", normalized="+442079460958")
    >>> match.text
    '+442079460958'
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(..., description="The loaded prefix, in normalized form, that matched the query")
    remainder: str = Field(..., description="The rest of the normalized query after the prefix")
    normalized: str = Field(..., description="The query after normalization")

    @property
    def text(self) -> str:
        """Get the normalized query by re-joining the prefix and remainder."""
        return self.prefix + self.remainder


def _read_lines(location: PrefixSource, *, encoding: str) -> list[str]:
    if isinstance(location, (str, Path)):
        with open(location, encoding=encoding) as file:
            return list(file)
    return list(location)


class PrefixMatcher:
    """Match queries against prefixes loaded from a line-delimited source.

    .. code-block::

        >>> matcher = PrefixMatcher.from_prefixes(["+", "+44", "+4420", "foo", "arandomprefix"])
        >>> matcher.find_longest_prefix("+44 20-7946-0958")
        '+4420'
        >>> matcher.find_longest_prefix("+301 123 456 789")
        '+'
        >>> matcher.find_longest_prefix("bar") is None
        True
    """

    #: The index that prefixes are inserted into
    trie: UnicodeTrie

    def __init__(self, trie: UnicodeTrie | None = None) -> None:
        """Instantiate a matcher.

        :param trie: An index to insert prefixes into. If not given, an empty one is created.
        """
        self.trie = UnicodeTrie() if trie is None else trie

    @classmethod
    def from_prefixes(cls, location: PrefixSource, **kwargs: Any) -> PrefixMatcher:
        """Get a matcher with the prefixes from the given source already loaded.

        :param location:
            One of the following:

            - A string or :class:`pathlib.Path` object corresponding to a local file path
              to a line-delimited prefix file
            - An iterable of prefix strings
        :param kwargs: Keyword arguments to pass to :meth:`load_prefixes`
        :returns:
            A matcher
        """
        rv = cls()
        rv.load_prefixes(location, **kwargs)
        return rv

    def load_prefixes(self, location: PrefixSource, *, encoding: str = DEFAULT_ENCODING) -> None:
        """Insert each non-blank line from the source as a prefix.

        :param location: A local file path or an iterable of lines
        :param encoding: The encoding used when the location is a file path
        :raises PrefixLoadError:
            If the source can't be read. All lines are read before any is inserted,
            so a failed load doesn't change the loaded prefixes.
        """
        logger.debug("loading prefixes from %s", location)
        try:
            lines = _read_lines(location, encoding=encoding)
        except (OSError, ValueError) as e:
            logger.error("could not load prefixes from %s", location)
            raise PrefixLoadError(location) from e

        before = len(self.trie)
        for line in lines:
            if not is_blank(line):
                self.trie.insert(line)
        logger.debug("loaded %d new prefixes from %s", len(self.trie) - before, location)

    def find_longest_prefix(self, text: str | None) -> str | None:
        """Find the loaded prefix that the text starts with.

        :param text: A single line of text
        :returns: The matching prefix in normalized form, if one can be found
        :raises InvalidInputError: If the text spans more than one line

        See :meth:`prefix_matching.trie.UnicodeTrie.find_longest_prefix`.
        """
        return self.trie.find_longest_prefix(text)

    def match(self, text: str | None) -> PrefixMatch | None:
        """Match the text and split it into the prefix and the remainder.

        :param text: A single line of text
        :returns: A match, if a prefix can be found
        :raises InvalidInputError: If the text spans more than one line

        >>> matcher = PrefixMatcher.from_prefixes(["+44"])
        >>> matcher.match("+44 7700 900123")
        PrefixMatch(prefix='+44', remainder='7700900123', normalized='+447700900123')
        """
        prefix = self.find_longest_prefix(text)
        if prefix is None:
            return None
        normalized = normalize(text)  # type:ignore[arg-type]
        return PrefixMatch(prefix=prefix, remainder=normalized[len(prefix) :], normalized=normalized)

    def __contains__(self, prefix: Any) -> bool:
        return prefix in self.trie

    def __len__(self) -> int:
        return len(self.trie)
