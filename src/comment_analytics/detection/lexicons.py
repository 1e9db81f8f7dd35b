"""Static word sets and pattern tables for comment classification."""

from __future__ import annotations

import re
from dataclasses import dataclass

from comment_analytics.detection.names import COMMON_FIRST_NAMES

# ---------------------------------------------------------------------------
# Word sets
# ---------------------------------------------------------------------------

TOXIC_WORDS: frozenset[str] = frozenset(
    {
        "asshole",
        "bitch",
        "bullshit",
        "crap",
        "damn",
        "dick",
        "fuck",
        "fucking",
        "idiot",
        "idiots",
        "moron",
        "morons",
        "pissed",
        "shit",
        "stfu",
        "stupid",
        "wtf",
    }
)

POSITIVE_WORDS: frozenset[str] = frozenset(
    {
        "agree",
        "agreed",
        "amazing",
        "awesome",
        "beautiful",
        "best",
        "brilliant",
        "cool",
        "enjoy",
        "enjoyed",
        "excellent",
        "fantastic",
        "fascinating",
        "favorite",
        "good",
        "grateful",
        "great",
        "helpful",
        "impressive",
        "incredible",
        "incredibly",
        "insight",
        "insightful",
        "interesting",
        "love",
        "loved",
        "nice",
        "respect",
        "smart",
        "thank",
        "thankful",
        "thanks",
        "thoughtful",
        "valuable",
        "wonderful",
        "wow",
    }
)

NEGATIVE_WORDS: frozenset[str] = frozenset(
    {
        "awful",
        "bad",
        "boring",
        "clueless",
        "disappointing",
        "disgusting",
        "dumb",
        "garbage",
        "gross",
        "hate",
        "horrible",
        "idiot",
        "misleading",
        "nonsense",
        "pathetic",
        "ridiculous",
        "sad",
        "shame",
        "shameful",
        "terrible",
        "trash",
        "unfortunate",
        "wrong",
    }
)

STOPWORDS: frozenset[str] = frozenset(
    {
        "a", "about", "after", "again", "all", "also", "an", "and", "any", "are",
        "as", "at", "be", "because", "been", "before", "but", "by", "can",
        "could", "did", "do", "does", "doing", "don", "down", "even", "for",
        "from", "get", "go", "good", "got", "has", "have", "he", "her", "here",
        "him", "his", "how", "i", "if", "in", "into", "is", "it", "its", "just",
        "like", "love", "me", "more", "most", "my", "no", "not", "of", "on",
        "one", "or", "our", "out", "people", "really", "s", "she", "so", "some",
        "than", "that", "the", "their", "them", "then", "there", "these",
        "they", "this", "to", "too", "up", "us", "very", "was", "we", "were",
        "what", "when", "where", "which", "who", "why", "will", "with", "would",
        "you", "your",
        # High-frequency filler that pollutes topics
        "being", "need", "right", "think",
        # Platform meta words
        "channel", "episode", "interview", "podcast", "video",
    }
)

# ---------------------------------------------------------------------------
# Pattern tables (matched against lowercased, normalized text)
# ---------------------------------------------------------------------------

TOXIC_PHRASE_PATTERNS: tuple[str, ...] = (
    r"\b(who|what|why|how) the hell\b",
    r"\bshut up\b",
)

QUESTION_PREFIXES: tuple[str, ...] = ("why ", "how ", "what ", "when ", "where ", "who ")

SUGGESTION_PATTERNS: tuple[str, ...] = (
    r"\b(should|could|please|recommend|consider|try)\b",
    r"\b(would love|wish|can you|could you|it would be great)\b",
)

_ONLY_LOWER_ASCII_RE = re.compile(r"[a-z]+")


@dataclass(frozen=True)
class Lexicon:
    """Immutable bundle of word sets and compiled patterns.

    One instance is shared process-wide (``DEFAULT_LEXICON``); tests and
    callers that need different tables build their own and pass it in.
    """

    positive: frozenset[str]
    negative: frozenset[str]
    toxic: frozenset[str]
    stopwords: frozenset[str]
    person_names: frozenset[str]
    toxic_phrases: tuple[re.Pattern, ...]
    suggestion_patterns: tuple[re.Pattern, ...]
    question_prefixes: tuple[str, ...] = QUESTION_PREFIXES

    @classmethod
    def build(
        cls,
        positive: frozenset[str] = POSITIVE_WORDS,
        negative: frozenset[str] = NEGATIVE_WORDS,
        toxic: frozenset[str] = TOXIC_WORDS,
        stopwords: frozenset[str] = STOPWORDS,
        person_names: frozenset[str] = COMMON_FIRST_NAMES,
        toxic_phrases: tuple[str, ...] = TOXIC_PHRASE_PATTERNS,
        suggestion_patterns: tuple[str, ...] = SUGGESTION_PATTERNS,
    ) -> Lexicon:
        """Compile pattern strings and freeze word collections."""
        return cls(
            positive=frozenset(positive),
            negative=frozenset(negative),
            toxic=frozenset(toxic),
            stopwords=frozenset(stopwords),
            person_names=frozenset(person_names),
            toxic_phrases=tuple(re.compile(p) for p in toxic_phrases),
            suggestion_patterns=tuple(re.compile(p) for p in suggestion_patterns),
        )

    def is_theme_token(self, token: str) -> bool:
        if len(token) < 4:
            return False
        if token.isnumeric():
            return False
        if token in self.stopwords:
            return False
        if token in self.positive or token in self.negative:
            return False
        return token not in self.toxic

    def is_person_token(self, token: str) -> bool:
        # Single-word heuristic only; surnames and multi-word names stay topics.
        if not _ONLY_LOWER_ASCII_RE.fullmatch(token):
            return False
        if not self.is_theme_token(token):
            return False
        return token in self.person_names


DEFAULT_LEXICON = Lexicon.build()
