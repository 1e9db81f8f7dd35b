"""Pydantic models for the analytics artifacts written to the content store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

COMMENT_ANALYTICS_SCHEMA = "constructive.comment-analytics@v3"
CHANNEL_AGGREGATE_SCHEMA = "constructive.channel-aggregate@v1"


class _Frozen(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict:
        """Plain JSON-ready dict using the camelCase wire names."""
        return self.model_dump(by_alias=True, mode="json")


class SentimentBreakdown(_Frozen):
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative


class RadarCounts(_Frozen):
    """Per-comment binary category counts; each is <= commentCount."""

    praise: int = 0
    criticism: int = 0
    question: int = 0
    suggestion: int = 0
    toxic: int = 0
    people: int = 0


class ThemeEntry(_Frozen):
    label: str
    count: int


class Themes(_Frozen):
    topics: tuple[ThemeEntry, ...] = ()
    people: tuple[ThemeEntry, ...] = ()


class Highlights(_Frozen):
    questions: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    quotes: tuple[str, ...] = ()


class CreatorTakeaway(_Frozen):
    title: str
    detail: str


class CommentAnalytics(_Frozen):
    """The engine's output for one video's comment snapshot."""

    schema_tag: str = Field(default=COMMENT_ANALYTICS_SCHEMA, alias="schema")
    comment_count: int
    analyzed_at: str
    sentiment_breakdown: SentimentBreakdown
    toxic_count: int
    question_count: int
    suggestion_count: int
    radar: RadarCounts
    themes: Themes
    highlights: Highlights
    takeaways: tuple[CreatorTakeaway, ...] = ()


class ChannelRefModel(_Frozen):
    platform: str
    channel_id: str
    channel_title: str
    channel_url: str | None = None


class ChannelAggregate(_Frozen):
    """Cross-video roll-up of CommentAnalytics for one channel."""

    schema_tag: str = Field(default=CHANNEL_AGGREGATE_SCHEMA, alias="schema")
    generated_at: str
    channel: ChannelRefModel
    video_count: int
    total_comments: int
    sentiment_breakdown: SentimentBreakdown
    radar: RadarCounts
    top_topics: tuple[ThemeEntry, ...] = ()
    takeaways: tuple[CreatorTakeaway, ...] = ()
    skipped_videos: tuple[str, ...] = ()
