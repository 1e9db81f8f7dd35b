"""Radar categories: per-comment binary classifications and their roll-ups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from comment_analytics.models import CommentAnalytics, RadarCounts

# key → display label. Every category is a 0/1 flag per comment, so a count
# can never exceed the number of analyzed comments.
RADAR_CATEGORIES: dict[str, str] = {
    "praise": "Praise",
    "criticism": "Criticism",
    "question": "Questions",
    "suggestion": "Suggestions",
    "toxic": "Toxic",
    "people": "People",
}


@dataclass(frozen=True)
class RadarBucket:
    key: str
    label: str
    count: int
    rate: float


def radar_buckets(radar: RadarCounts, total_comments: int) -> list[RadarBucket]:
    """Return one bucket per category in display order, with prevalence rates."""
    denom = total_comments if total_comments > 0 else 1
    buckets = []
    for key, label in RADAR_CATEGORIES.items():
        count = getattr(radar, key)
        buckets.append(RadarBucket(key=key, label=label, count=count, rate=count / denom))
    return buckets


def aggregate_radar(analytics: Iterable[CommentAnalytics]) -> tuple[int, RadarCounts]:
    """Sum comment counts and radar counts across several analytics records."""
    totals = dict.fromkeys(RADAR_CATEGORIES, 0)
    comment_count = 0
    for entry in analytics:
        comment_count += entry.comment_count
        for key in RADAR_CATEGORIES:
            totals[key] += getattr(entry.radar, key)
    return comment_count, RadarCounts(**totals)
