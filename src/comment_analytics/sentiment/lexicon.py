"""Lexicon-count sentiment scoring."""

from __future__ import annotations

from typing import Literal

from comment_analytics.detection.lexicons import DEFAULT_LEXICON, Lexicon

Sentiment = Literal["positive", "neutral", "negative"]

SENTIMENTS: tuple[Sentiment, ...] = ("positive", "neutral", "negative")


class LexiconSentimentScorer:
    """Score token lists as (#positive tokens - #negative tokens)."""

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self._lexicon = lexicon or DEFAULT_LEXICON

    def score(self, tokens: list[str]) -> int:
        """Return the integer polarity score; every occurrence counts."""
        total = 0
        for token in tokens:
            if token in self._lexicon.positive:
                total += 1
            if token in self._lexicon.negative:
                total -= 1
        return total

    def label(self, tokens: list[str]) -> Sentiment:
        s = self.score(tokens)
        if s >= 1:
            return "positive"
        if s <= -1:
            return "negative"
        return "neutral"

    def label_batch(self, token_lists: list[list[str]]) -> list[Sentiment]:
        return [self.label(tokens) for tokens in token_lists]
