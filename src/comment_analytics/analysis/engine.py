"""CommentAnalyticsEngine: one pass over a comment snapshot → CommentAnalytics."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from comment_analytics.analysis.highlights import HighlightSelector
from comment_analytics.analysis.takeaways import TakeawayGenerator
from comment_analytics.analysis.themes import ThemeAggregator
from comment_analytics.collection.schemas import CommentRecord
from comment_analytics.config import EngineConfig, engine_config
from comment_analytics.detection.classifier import CommentClassifier
from comment_analytics.detection.lexicons import DEFAULT_LEXICON, Lexicon
from comment_analytics.models import (
    COMMENT_ANALYTICS_SCHEMA,
    CommentAnalytics,
    RadarCounts,
    SentimentBreakdown,
    Themes,
)


def format_timestamp(moment: datetime | None = None) -> str:
    """ISO-8601 UTC with millisecond precision and a trailing ``Z``."""
    if moment is None:
        moment = datetime.now(tz=UTC)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _like_count(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class CommentAnalyticsEngine:
    """Deterministic lexicon-and-heuristic comment analytics.

    Holds only immutable configuration; every call to :meth:`analyze` works on
    fresh local accumulators, so one engine can serve concurrent callers.
    """

    def __init__(self, lexicon: Lexicon | None = None, config: EngineConfig | None = None) -> None:
        self._lexicon = lexicon or DEFAULT_LEXICON
        self._config = config or engine_config
        self._classifier = CommentClassifier(self._lexicon)
        self._takeaways = TakeawayGenerator(self._config)

    @property
    def classifier(self) -> CommentClassifier:
        return self._classifier

    def analyze(
        self,
        comments: Iterable[CommentRecord],
        analyzed_at: datetime | None = None,
    ) -> CommentAnalytics:
        """Analyze a comment snapshot.

        Comments whose text is not a string, or that normalize to nothing,
        are left out of every count including ``comment_count``.
        """
        sentiment = {"positive": 0, "neutral": 0, "negative": 0}
        toxic_count = 0
        question_count = 0
        suggestion_count = 0
        analyzed = 0

        themes = ThemeAggregator(self._lexicon, self._config)
        highlights = HighlightSelector(self._config)

        for comment in comments:
            if not isinstance(comment.text, str):
                continue
            signals = self._classifier.classify(comment.text)
            if signals is None:
                continue
            analyzed += 1

            sentiment[signals.sentiment] += 1
            # Phrase-level toxicity only blocks highlighting; it is not counted
            if signals.toxic_hard:
                toxic_count += 1
            if signals.is_question:
                question_count += 1
            if signals.is_suggestion:
                suggestion_count += 1

            themes.add(signals)
            highlights.add(comment.id, _like_count(comment.like_count), signals)

        breakdown = SentimentBreakdown(**sentiment)
        theme_result = themes.result()
        takeaways = self._takeaways.generate(
            analyzed, breakdown, question_count, suggestion_count, theme_result
        )

        return CommentAnalytics(
            schema_tag=COMMENT_ANALYTICS_SCHEMA,
            comment_count=analyzed,
            analyzed_at=format_timestamp(analyzed_at),
            sentiment_breakdown=breakdown,
            toxic_count=toxic_count,
            question_count=question_count,
            suggestion_count=suggestion_count,
            radar=RadarCounts(
                praise=breakdown.positive,
                criticism=breakdown.negative,
                question=question_count,
                suggestion=suggestion_count,
                toxic=toxic_count,
                people=theme_result.people_comment_count,
            ),
            themes=Themes(topics=tuple(theme_result.topics), people=tuple(theme_result.people)),
            highlights=highlights.result(),
            takeaways=tuple(takeaways),
        )
