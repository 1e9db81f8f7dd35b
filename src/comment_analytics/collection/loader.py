"""Read and structurally check ``comments.json`` / ``video.json`` files."""

from __future__ import annotations

import json
from pathlib import Path

from comment_analytics.collection.schemas import ChannelRef, CommentRecord, VideoMetadata

SUPPORTED_PLATFORMS = ("youtube",)


class InvalidContentError(ValueError):
    """A content file is unreadable or does not have the expected shape."""


def read_json(path: Path) -> object:
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidContentError(f"Failed to decode {path} as UTF-8: {exc}") from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidContentError(f"Failed to parse JSON at {path}: {exc}") from exc


def read_json_object(path: Path) -> dict:
    parsed = read_json(path)
    if not isinstance(parsed, dict):
        raise InvalidContentError(f"Invalid JSON at {path}: expected object.")
    return parsed


def read_json_array(path: Path) -> list:
    parsed = read_json(path)
    if not isinstance(parsed, list):
        raise InvalidContentError(f"Invalid JSON at {path}: expected array.")
    return parsed


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _optional_like_count(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    return None


def to_comment_records(entries: list, source: Path | str = "<memory>") -> list[CommentRecord]:
    """Keep entries with string ``id`` and ``text``; drop everything else.

    Raises InvalidContentError when nothing usable is left.
    """
    out: list[CommentRecord] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        if not isinstance(entry.get("id"), str) or not isinstance(entry.get("text"), str):
            continue
        out.append(
            CommentRecord(
                id=entry["id"],
                text=entry["text"],
                author_name=_optional_str(entry.get("authorName")),
                published_at=_optional_str(entry.get("publishedAt")),
                like_count=_optional_like_count(entry.get("likeCount")),
            )
        )

    if not out:
        raise InvalidContentError(f"Invalid comments.json at {source}: no valid comment records.")
    return out


def _require_str(value: object, path: Path | str, what: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidContentError(f"Invalid video.json at {path}: expected non-empty {what}.")
    return value


def to_video_metadata(value: dict, source: Path | str = "<memory>") -> VideoMetadata:
    platform = value.get("platform")
    if platform not in SUPPORTED_PLATFORMS:
        raise InvalidContentError(
            f"Invalid video.json at {source}: unsupported platform {platform!r}."
        )

    channel = value.get("channel")
    if not isinstance(channel, dict):
        raise InvalidContentError(f"Invalid video.json at {source}: expected channel object.")
    if channel.get("platform") != platform:
        raise InvalidContentError(
            f"Invalid video.json at {source}: expected channel.platform {platform!r}."
        )

    return VideoMetadata(
        platform=platform,
        video_id=_require_str(value.get("videoId"), source, "videoId"),
        video_url=_require_str(value.get("videoUrl"), source, "videoUrl"),
        title=_require_str(value.get("title"), source, "title"),
        description=_optional_str(value.get("description")),
        channel=ChannelRef(
            platform=platform,
            channel_id=_require_str(channel.get("channelId"), source, "channel.channelId"),
            channel_title=_require_str(channel.get("channelTitle"), source, "channel.channelTitle"),
            channel_url=_optional_str(channel.get("channelUrl")),
        ),
        published_at=_optional_str(value.get("publishedAt")),
        thumbnail_url=_optional_str(value.get("thumbnailUrl")),
    )


def load_comments(path: Path) -> list[CommentRecord]:
    return to_comment_records(read_json_array(path), path)


def load_video(path: Path) -> VideoMetadata:
    return to_video_metadata(read_json_object(path), path)
