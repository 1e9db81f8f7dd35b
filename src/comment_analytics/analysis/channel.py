"""Channel-level roll-up of per-video CommentAnalytics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

import pandas as pd

from comment_analytics.analysis.engine import format_timestamp
from comment_analytics.analysis.radar import aggregate_radar
from comment_analytics.analysis.takeaways import format_percent
from comment_analytics.collection.loader import InvalidContentError, load_video, read_json
from comment_analytics.collection.schemas import ChannelRef, VideoMetadata
from comment_analytics.collection.store import ContentStore, write_json
from comment_analytics.models import (
    CHANNEL_AGGREGATE_SCHEMA,
    ChannelAggregate,
    ChannelRefModel,
    CommentAnalytics,
    CreatorTakeaway,
    SentimentBreakdown,
    ThemeEntry,
)
from comment_analytics.validation import parse_comment_analytics


@dataclass
class VideoAnalytics:
    """One analyzed video belonging to the channel."""

    video: VideoMetadata
    analytics: CommentAnalytics


class ChannelAggregator:
    """Combine the analytics of every analyzed video on one channel."""

    def __init__(
        self,
        store: ContentStore | None = None,
        top_n: int = 8,
        takeaway_limit: int = 3,
    ) -> None:
        self._store = store or ContentStore()
        self._top_n = top_n
        self._takeaway_limit = takeaway_limit

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def collect(
        self, platform: str, channel_id: str
    ) -> tuple[ChannelRef, list[VideoAnalytics], list[str]]:
        """Load (channel, analyzed videos, skipped video ids) from the store.

        Videos whose analytics fail validation (wrong schema version or
        corrupt) are skipped and reported, never silently mixed in.
        """
        channel: ChannelRef | None = None
        videos: list[VideoAnalytics] = []
        skipped: list[str] = []

        for key in self._store.list_videos(platform):
            video_path = self._store.video_path(key)
            analytics_path = self._store.analytics_path(key)
            if not video_path.is_file() or not analytics_path.is_file():
                continue

            video = load_video(video_path)
            if video.channel.channel_id != channel_id:
                continue
            if channel is None:
                channel = video.channel

            try:
                result = parse_comment_analytics(read_json(analytics_path))
            except InvalidContentError:
                result = None
            if result is None or not result.ok:
                print(f"[channel] skipping {key}: analytics not reusable")
                skipped.append(key.video_id)
                continue
            videos.append(VideoAnalytics(video=video, analytics=result.analytics))

        if channel is None:
            raise FileNotFoundError(
                f"No videos found for channel {platform}:{channel_id}. "
                "Ensure videos are ingested and analyzed."
            )
        if not videos:
            raise FileNotFoundError(
                f"No analyzed videos found for channel {platform}:{channel_id}. "
                "Run 'comment-analytics analyze' first."
            )
        return channel, videos, skipped

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def top_topics(self, analytics: list[CommentAnalytics]) -> list[ThemeEntry]:
        """Sum topic counts across videos; rank by count desc, label asc."""
        rows = [
            {"label": theme.label, "count": theme.count}
            for entry in analytics
            for theme in entry.themes.topics
        ]
        if not rows:
            return []
        df = pd.DataFrame(rows)
        grouped = (
            df.groupby("label", as_index=False)["count"]
            .sum()
            .sort_values(["count", "label"], ascending=[False, True])
            .head(self._top_n)
        )
        return [
            ThemeEntry(label=str(row["label"]), count=int(row["count"]))
            for _, row in grouped.iterrows()
        ]

    def takeaways(
        self,
        video_count: int,
        total_comments: int,
        sentiment: SentimentBreakdown,
        topics: list[ThemeEntry],
    ) -> list[CreatorTakeaway]:
        if total_comments <= 0 or video_count <= 0:
            return []

        positive_rate = sentiment.positive / total_comments
        negative_rate = sentiment.negative / total_comments
        avg_per_video = math.floor(total_comments / video_count + 0.5)

        out: list[CreatorTakeaway] = []
        if topics:
            top_three = ", ".join(t.label for t in topics[:3])
            out.append(
                CreatorTakeaway(
                    title="Channel-wide topic patterns",
                    detail=(
                        f"Across {video_count} videos, viewers consistently discuss: {top_three}."
                    ),
                )
            )

        if positive_rate >= 0.35:
            out.append(
                CreatorTakeaway(
                    title="Strong positive engagement across channel",
                    detail=(
                        f"{format_percent(positive_rate)} of comments show positive sentiment. "
                        "Your content resonates well with your audience."
                    ),
                )
            )
        elif negative_rate >= 0.25:
            out.append(
                CreatorTakeaway(
                    title="Consider audience friction points",
                    detail=(
                        f"{format_percent(negative_rate)} of comments show negative sentiment. "
                        "Review common themes to identify improvement areas."
                    ),
                )
            )

        if avg_per_video >= 100:
            out.append(
                CreatorTakeaway(
                    title="High engagement rate",
                    detail=(
                        f"Averaging {avg_per_video:,} comments per video shows strong "
                        "community interaction."
                    ),
                )
            )

        return out[: self._takeaway_limit]

    def aggregate(
        self,
        channel: ChannelRef,
        videos: list[VideoAnalytics],
        skipped: list[str] | None = None,
        now: datetime | None = None,
    ) -> ChannelAggregate:
        analytics = [v.analytics for v in videos]
        total_comments, radar = aggregate_radar(analytics)
        sentiment = SentimentBreakdown(
            positive=sum(a.sentiment_breakdown.positive for a in analytics),
            neutral=sum(a.sentiment_breakdown.neutral for a in analytics),
            negative=sum(a.sentiment_breakdown.negative for a in analytics),
        )
        topics = self.top_topics(analytics)

        return ChannelAggregate(
            schema_tag=CHANNEL_AGGREGATE_SCHEMA,
            generated_at=format_timestamp(now),
            channel=ChannelRefModel(
                platform=channel.platform,
                channel_id=channel.channel_id,
                channel_title=channel.channel_title,
                channel_url=channel.channel_url,
            ),
            video_count=len(videos),
            total_comments=total_comments,
            sentiment_breakdown=sentiment,
            radar=radar,
            top_topics=tuple(topics),
            takeaways=tuple(self.takeaways(len(videos), total_comments, sentiment, topics)),
            skipped_videos=tuple(skipped or ()),
        )

    def run(self, platform: str, channel_id: str, now: datetime | None = None) -> ChannelAggregate:
        """Collect, aggregate and write ``channel-aggregate.json``."""
        channel, videos, skipped = self.collect(platform, channel_id)
        aggregate = self.aggregate(channel, videos, skipped, now=now)
        out_path = self._store.channel_aggregate_path(platform, channel_id)
        write_json(out_path, aggregate.to_json_dict())
        print(
            f"[channel] {platform}:{channel_id}: {aggregate.video_count} videos, "
            f"{aggregate.total_comments:,} comments → {out_path}"
        )
        return aggregate
