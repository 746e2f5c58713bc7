# -*- coding: utf-8 -*-

"""Longest prefix matching over whitespace- and Unicode-normalized text."""

from .api import (
    InvalidInputError,
    PrefixLoadError,
    PrefixMatch,
    PrefixMatcher,
    PrefixMatchingError,
)
from .normalize import is_blank, normalize
from .trie import UnicodeTrie
from .version import get_version

__all__ = [
    "PrefixMatcher",
    "PrefixMatch",
    "UnicodeTrie",
    "get_version",
    # errors
    "PrefixMatchingError",
    "PrefixLoadError",
    "InvalidInputError",
    # normalization
    "normalize",
    "is_blank",
]
