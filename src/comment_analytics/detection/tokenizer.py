"""Whitespace normalization and Unicode-aware word tokenization."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
# Anything that is not a Unicode letter or digit (``\w`` minus the underscore)
_NON_WORD_RE = re.compile(r"[\W_]+")


def normalize(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def tokenize_lowered(lowered: str) -> list[str]:
    """Split already-lowercased text into letter/digit tokens."""
    return _NON_WORD_RE.sub(" ", lowered).split()


def tokenize(text: str) -> list[str]:
    """Lowercase *text* and split it into letter/digit tokens.

    No filtering happens here: stopwords, short tokens and numbers are all
    kept. Callers decide what counts as a theme.
    """
    return tokenize_lowered(text.lower())
