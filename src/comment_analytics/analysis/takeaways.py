"""Creator takeaways: short ranked insights derived from aggregate statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass

from comment_analytics.analysis.themes import ThemeResult
from comment_analytics.config import EngineConfig, engine_config
from comment_analytics.models import CreatorTakeaway, SentimentBreakdown, ThemeEntry


def format_percent(value: float) -> str:
    """Render a 0-1 rate as a whole percent, rounding halves up."""
    return f"{math.floor(value * 100 + 0.5)}%"


def summarize_labels(themes: list[ThemeEntry], limit: int = 3) -> str:
    return ", ".join(theme.label for theme in themes[:limit])


@dataclass(frozen=True)
class TakeawayCandidate:
    # A ranking key, not a probability: rate-based priorities may exceed 1.0
    priority: float
    title: str
    detail: str


class TakeawayGenerator:
    """Build, rank and dedupe takeaway candidates for one analysis run."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        cfg = config or engine_config
        self._limit = cfg.takeaway_limit

    def candidates(
        self,
        comment_count: int,
        sentiment: SentimentBreakdown,
        question_count: int,
        suggestion_count: int,
        themes: ThemeResult,
    ) -> list[TakeawayCandidate]:
        """Return every candidate whose rule fires, in rule order."""
        if comment_count <= 0:
            return []

        question_rate = question_count / comment_count
        suggestion_rate = suggestion_count / comment_count
        negative_rate = sentiment.negative / comment_count
        positive_rate = sentiment.positive / comment_count

        topics_summary = summarize_labels(themes.topics)
        people_summary = summarize_labels(themes.people)

        out = [
            TakeawayCandidate(
                priority=0.55,
                title="What people latched onto",
                detail=(
                    f"Most discussion clusters around: {topics_summary}."
                    if topics_summary
                    else "No strong topic cluster stood out in this snapshot."
                ),
            )
        ]

        if themes.people:
            out.append(
                TakeawayCandidate(
                    priority=0.7 + min(themes.people[0].count / comment_count, 0.25),
                    title="The conversation is partly about the people",
                    detail=(
                        f"A meaningful slice of comments mention: {people_summary}. "
                        "Treat those as “host/guest” feedback, not topic feedback."
                    ),
                )
            )

        if question_count >= 3:
            out.append(
                TakeawayCandidate(
                    priority=0.75 + question_rate,
                    title="Viewers want clarity",
                    detail=(
                        f"Questions make up {format_percent(question_rate)} of comments "
                        f"({question_count:,} total)."
                    ),
                )
            )

        if suggestion_count >= 2:
            out.append(
                TakeawayCandidate(
                    priority=0.7 + suggestion_rate,
                    title="There are clear improvement requests",
                    detail=(
                        f"Suggestions show up in {format_percent(suggestion_rate)} of comments "
                        f"({suggestion_count:,} total)."
                    ),
                )
            )

        # At most one sentiment-extremity takeaway per run
        if negative_rate >= 0.25:
            out.append(
                TakeawayCandidate(
                    priority=0.6 + negative_rate,
                    title="Sentiment is meaningfully negative",
                    detail=(
                        f"Negative sentiment appears in {format_percent(negative_rate)} of "
                        "comments. Consider a pinned comment or follow-up to address the most "
                        "common friction."
                    ),
                )
            )
        elif positive_rate >= 0.45:
            out.append(
                TakeawayCandidate(
                    priority=0.6 + positive_rate,
                    title="Sentiment is strongly positive",
                    detail=(
                        f"Positive sentiment appears in {format_percent(positive_rate)} of "
                        "comments. Lean into the angle that’s resonating (and repeat the format)."
                    ),
                )
            )

        return out

    def rank(self, candidates: list[TakeawayCandidate]) -> list[CreatorTakeaway]:
        """Sort by priority, keep the first of each title, cap the list."""
        seen: set[str] = set()
        out: list[CreatorTakeaway] = []
        for cand in sorted(candidates, key=lambda c: -c.priority):
            if cand.title in seen:
                continue
            seen.add(cand.title)
            out.append(CreatorTakeaway(title=cand.title, detail=cand.detail))
        return out[: self._limit]

    def generate(
        self,
        comment_count: int,
        sentiment: SentimentBreakdown,
        question_count: int,
        suggestion_count: int,
        themes: ThemeResult,
    ) -> list[CreatorTakeaway]:
        return self.rank(
            self.candidates(comment_count, sentiment, question_count, suggestion_count, themes)
        )
