"""Text normalization applied to prefixes and queries alike.

Both insertion into and lookup in a :class:`prefix_matching.trie.UnicodeTrie`
go through :func:`normalize`, so that the same text matches regardless of
how it was spaced or which Unicode representation it arrived in.

>>> normalize("  +44 20 7946 0958 ")
'+442079460958'
>>> normalize("cafe\\u0301") == "caf\\u00e9"
True
"""

from __future__ import annotations

import unicodedata

__all__ = [
    "NORMALIZATION_FORM",
    "is_blank",
    "normalize",
]

#: The Unicode normalization form applied after whitespace removal
NORMALIZATION_FORM = "NFC"


def normalize(text: str) -> str:
    """Remove all whitespace from a string and apply canonical composition.

    :param text: A raw prefix or query string
    :returns:
        The string with leading, trailing, and internal whitespace deleted,
        composed to NFC. This is empty if the string only contained whitespace.

    >>> normalize(" f o o ")
    'foo'
    >>> normalize("\\t \\n")
    ''
    """
    return unicodedata.normalize(NORMALIZATION_FORM, "".join(text.split()))


def is_blank(text: str | None) -> bool:
    """Check if the text is missing, empty, or only whitespace."""
    return text is None or not text.strip()
