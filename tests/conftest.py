"""Shared fixtures: sample comments and an on-disk content store builder."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from comment_analytics.collection.schemas import ChannelRef, CommentRecord, VideoMetadata
from comment_analytics.collection.store import write_json

FROZEN_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)

CHANNEL_ID = "UCx9Yk2LmNoPqRsTuVwXyZ01"
OTHER_CHANNEL_ID = "UCotherChannel0000000001"
VIDEO_A = "aaaaaaaaaaa"
VIDEO_B = "bbbbbbbbbbb"
VIDEO_C = "ccccccccccc"

SCENARIO_TEXTS = [
    "This is amazing, thank you!",
    "Why does this happen?",
    "You should add captions.",
    "This is trash, idiot.",
]


def make_comments(texts: list[str], likes: list[int | None] | None = None) -> list[CommentRecord]:
    likes = likes or [None] * len(texts)
    return [
        CommentRecord(id=f"c{i}", text=text, like_count=like)
        for i, (text, like) in enumerate(zip(texts, likes, strict=True))
    ]


@pytest.fixture
def scenario_comments() -> list[CommentRecord]:
    return make_comments(SCENARIO_TEXTS)


class ContentTree:
    """Writes ``platforms/youtube/...`` folders under a temporary root."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.base = root / "platforms" / "youtube"

    def video_dir(self, video_id: str, channel_id: str | None = CHANNEL_ID) -> Path:
        if channel_id is None:
            return self.base / "videos" / video_id
        return self.base / "channels" / channel_id / "videos" / video_id

    def add_video(
        self,
        video_id: str,
        texts: list[str] | None = None,
        channel_id: str | None = CHANNEL_ID,
        channel_title: str = "Test Channel",
        with_metadata: bool = True,
    ) -> Path:
        folder = self.video_dir(video_id, channel_id)
        folder.mkdir(parents=True, exist_ok=True)
        if texts is not None:
            write_json(
                folder / "comments.json",
                [c.to_dict() for c in make_comments(texts)],
            )
        if with_metadata:
            video = VideoMetadata(
                platform="youtube",
                video_id=video_id,
                video_url=f"https://www.youtube.com/watch?v={video_id}",
                title=f"Video {video_id}",
                channel=ChannelRef(
                    platform="youtube",
                    channel_id=channel_id or CHANNEL_ID,
                    channel_title=channel_title,
                ),
            )
            write_json(folder / "video.json", video.to_dict())
        return folder


@pytest.fixture
def content_tree(tmp_path: Path) -> ContentTree:
    return ContentTree(tmp_path / "content")
