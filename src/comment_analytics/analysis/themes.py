"""Theme extraction: distinct-comment token counts split into topics and people."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field

from comment_analytics.config import EngineConfig, engine_config
from comment_analytics.detection.classifier import CommentSignals
from comment_analytics.detection.lexicons import DEFAULT_LEXICON, Lexicon
from comment_analytics.models import ThemeEntry


def rank_counts(counts: Mapping[str, int], limit: int | None = None) -> list[ThemeEntry]:
    """Order labels by count descending, then label ascending."""
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        ordered = ordered[:limit]
    return [ThemeEntry(label=label, count=count) for label, count in ordered]


@dataclass
class ThemeResult:
    """Ranked theme buckets for one corpus."""

    topics: list[ThemeEntry] = field(default_factory=list)
    people: list[ThemeEntry] = field(default_factory=list)
    people_comment_count: int = 0  # comments with at least one person token


class ThemeAggregator:
    """Accumulate theme tokens comment by comment, then rank and partition."""

    def __init__(self, lexicon: Lexicon | None = None, config: EngineConfig | None = None) -> None:
        cfg = config or engine_config
        self._lexicon = lexicon or DEFAULT_LEXICON
        self._candidates = cfg.theme_ranked_candidates
        self._bucket_size = cfg.theme_bucket_size
        self._counts: Counter = Counter()
        self._people_comments = 0

    def add(self, signals: CommentSignals) -> None:
        # theme_tokens are already unique per comment, so each comment adds at most 1
        self._counts.update(signals.theme_tokens)
        if signals.person_tokens:
            self._people_comments += 1

    def result(self) -> ThemeResult:
        topics: list[ThemeEntry] = []
        people: list[ThemeEntry] = []
        for entry in rank_counts(self._counts, limit=self._candidates):
            if self._lexicon.is_person_token(entry.label):
                people.append(entry)
            else:
                topics.append(entry)
        return ThemeResult(
            topics=topics[: self._bucket_size],
            people=people[: self._bucket_size],
            people_comment_count=self._people_comments,
        )
