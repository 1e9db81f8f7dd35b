"""Highlight selection: score, rank, dedupe and ellipsize display excerpts."""

from __future__ import annotations

from dataclasses import dataclass

from comment_analytics.config import EngineConfig, engine_config
from comment_analytics.detection.classifier import CommentSignals
from comment_analytics.models import Highlights
from comment_analytics.sentiment.lexicon import Sentiment

ELLIPSIS = "…"

# Quotes only: nudge positive comments up and negative ones down
_SENTIMENT_BONUS: dict[str, float] = {"positive": 1.0, "neutral": 0.0, "negative": -0.25}


def ellipsize(text: str, max_len: int, min_cut: int = 40) -> str:
    """Shorten *text* to *max_len* characters plus an ellipsis.

    Cuts at the last space inside the budget, unless that space sits at or
    before *min_cut*, in which case the cut is hard.
    """
    if len(text) <= max_len:
        return text
    head = text[:max_len]
    last_space = head.rfind(" ")
    if last_space > min_cut:
        head = head[:last_space]
    return f"{head.rstrip()}{ELLIPSIS}"


@dataclass(frozen=True)
class HighlightCandidate:
    """One eligible comment with its composite score."""

    comment_id: str
    text: str
    score: float


class HighlightPool:
    """Candidates for one highlight list (quotes, questions or suggestions)."""

    def __init__(
        self,
        text_len: int,
        score_denom: int,
        like_cap: int,
        limit: int,
        min_cut: int = 40,
        sentiment_bonus: bool = False,
    ) -> None:
        self._text_len = text_len
        self._denom = score_denom
        self._like_cap = like_cap
        self._limit = limit
        self._min_cut = min_cut
        self._sentiment_bonus = sentiment_bonus
        self._candidates: list[HighlightCandidate] = []

    def score(self, text: str, like_count: int | None, sentiment: Sentiment) -> float:
        like_score = min(like_count or 0, self._like_cap)
        length_score = min(len(text), self._denom) / self._denom
        bonus = _SENTIMENT_BONUS[sentiment] if self._sentiment_bonus else 0.0
        return like_score + length_score + bonus

    def offer(
        self, comment_id: str, text: str, like_count: int | None, sentiment: Sentiment
    ) -> None:
        self._candidates.append(
            HighlightCandidate(
                comment_id=comment_id,
                text=text,
                score=self.score(text, like_count, sentiment),
            )
        )

    def ranked(self) -> list[HighlightCandidate]:
        """All candidates by score descending; ties keep encounter order."""
        return sorted(self._candidates, key=lambda c: -c.score)

    def select(self) -> list[str]:
        """Top distinct excerpts, already ellipsized for display."""
        seen: set[str] = set()
        out: list[str] = []
        for candidate in self.ranked():
            display = ellipsize(candidate.text, self._text_len, self._min_cut)
            # Keyed on the display string so texts sharing a long prefix collapse too
            key = display.lower()
            if key in seen:
                continue
            seen.add(key)
            out.append(display)
            if len(out) >= self._limit:
                break
        return out


class HighlightSelector:
    """Route safe comments into the quote, question and suggestion pools."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        cfg = config or engine_config
        self.quotes = HighlightPool(
            text_len=cfg.quote_text_len,
            score_denom=cfg.quote_len_score_denom,
            like_cap=cfg.like_score_cap,
            limit=cfg.highlight_limit,
            min_cut=cfg.ellipsis_min_cut,
            sentiment_bonus=True,
        )
        self.questions = HighlightPool(
            text_len=cfg.highlight_text_len,
            score_denom=cfg.highlight_len_score_denom,
            like_cap=cfg.like_score_cap,
            limit=cfg.highlight_limit,
            min_cut=cfg.ellipsis_min_cut,
        )
        self.suggestions = HighlightPool(
            text_len=cfg.highlight_text_len,
            score_denom=cfg.highlight_len_score_denom,
            like_cap=cfg.like_score_cap,
            limit=cfg.highlight_limit,
            min_cut=cfg.ellipsis_min_cut,
        )

    def add(self, comment_id: str, like_count: int | None, signals: CommentSignals) -> None:
        if signals.unsafe:
            return
        args = (comment_id, signals.text, like_count, signals.sentiment)
        self.quotes.offer(*args)
        if signals.is_question:
            self.questions.offer(*args)
        if signals.is_suggestion:
            self.suggestions.offer(*args)

    def result(self) -> Highlights:
        return Highlights(
            questions=tuple(self.questions.select()),
            suggestions=tuple(self.suggestions.select()),
            quotes=tuple(self.quotes.select()),
        )
