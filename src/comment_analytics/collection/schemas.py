"""Dataclasses for ingested comment and video records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommentRecord:
    """A single ingested viewer comment (read-only engine input)."""

    id: str
    text: str  # raw, untrimmed
    author_name: str | None = None
    published_at: str | None = None  # ISO-8601
    like_count: int | None = None

    def to_dict(self) -> dict:
        out: dict = {"id": self.id}
        if self.author_name is not None:
            out["authorName"] = self.author_name
        if self.published_at is not None:
            out["publishedAt"] = self.published_at
        if self.like_count is not None:
            out["likeCount"] = self.like_count
        out["text"] = self.text
        return out


@dataclass(frozen=True)
class ChannelRef:
    """The channel that owns a video."""

    platform: str
    channel_id: str
    channel_title: str
    channel_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "platform": self.platform,
            "channelId": self.channel_id,
            "channelTitle": self.channel_title,
            "channelUrl": self.channel_url,
        }


@dataclass(frozen=True)
class VideoMetadata:
    """Contents of a ``video.json`` sidecar."""

    platform: str
    video_id: str
    video_url: str
    title: str
    channel: ChannelRef
    description: str | None = None
    published_at: str | None = None
    thumbnail_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "platform": self.platform,
            "videoId": self.video_id,
            "videoUrl": self.video_url,
            "title": self.title,
            "description": self.description,
            "channel": self.channel.to_dict(),
            "publishedAt": self.published_at,
            "thumbnailUrl": self.thumbnail_url,
        }
