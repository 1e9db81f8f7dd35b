"""On-disk content store: channel-scoped video folders plus a legacy flat tree."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import parse_qs, urlparse

from comment_analytics.config import storage_config

_VIDEO_ID_RE = re.compile(r"[a-zA-Z0-9_-]{11}")

COMMENTS_FILE = "comments.json"
VIDEO_FILE = "video.json"
ANALYTICS_FILE = "analytics.json"
CHANNEL_AGGREGATE_FILE = "channel-aggregate.json"


@dataclass(frozen=True)
class VideoKey:
    platform: str
    video_id: str

    def __str__(self) -> str:
        return f"{self.platform}:{self.video_id}"


def extract_video_id(value: str) -> str | None:
    """Return the 11-character YouTube id from a bare id or a watch/short URL."""
    trimmed = value.strip()
    if not trimmed:
        return None
    if _VIDEO_ID_RE.fullmatch(trimmed):
        return trimmed

    url = urlparse(trimmed if "://" in trimmed else f"https://{trimmed}")
    host = (url.hostname or "").lower()
    if host == "youtu.be":
        candidate = url.path.lstrip("/")
        return candidate if _VIDEO_ID_RE.fullmatch(candidate) else None
    if host == "youtube.com" or host.endswith(".youtube.com"):
        v = parse_qs(url.query).get("v", [""])[0]
        if _VIDEO_ID_RE.fullmatch(v):
            return v
        parts = [p for p in url.path.split("/") if p]
        if parts and _VIDEO_ID_RE.fullmatch(parts[-1]):
            return parts[-1]
    return None


def _looks_like_url(value: str) -> bool:
    return "://" in value or value.startswith(("youtu.be/", "youtube.com/", "www.youtube.com/"))


def parse_video_ref(value: str) -> VideoKey:
    """Parse ``youtube:<id>``, a bare ``<id>``, or a YouTube URL."""
    raw = value.strip()
    if not raw:
        raise ValueError("Video reference must be non-empty (e.g. youtube:<videoId>).")

    if _looks_like_url(raw):
        video_id = extract_video_id(raw)
        if not video_id:
            raise ValueError(f"Could not parse a YouTube video id from {value!r}.")
        return VideoKey("youtube", video_id)

    platform, sep, rest = raw.partition(":")
    if not sep:
        return VideoKey("youtube", raw)
    if platform.strip() != "youtube" or not rest.strip() or ":" in rest:
        raise ValueError("Invalid video reference. Use youtube:<videoId> (or <videoId>).")
    return VideoKey("youtube", rest.strip())


def parse_channel_ref(value: str) -> tuple[str, str]:
    """Parse ``youtube:<channelId>`` into (platform, channel_id)."""
    platform, sep, channel_id = value.strip().partition(":")
    if not sep or platform.strip() != "youtube" or not channel_id.strip() or ":" in channel_id:
        raise ValueError("Invalid channel reference. Use youtube:<channelId>.")
    return platform.strip(), channel_id.strip()


def write_json(path: Path, data: object) -> None:
    """Write *data* as 2-space-indented JSON with a trailing newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


class ContentStore:
    """Resolve content paths under ``<root>/platforms/<platform>/``.

    The video index is built lazily per platform and cached for the lifetime
    of the store; call :meth:`refresh` after adding folders on disk.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = Path(root) if root is not None else storage_config.content_root
        self._index: dict[str, dict[str, Path]] = {}

    @property
    def root(self) -> Path:
        return self._root

    def refresh(self) -> None:
        self._index.clear()

    # ------------------------------------------------------------------
    # Channel-scoped layout
    # ------------------------------------------------------------------

    def platform_dir(self, platform: str) -> Path:
        return self._root / "platforms" / platform

    @staticmethod
    def _check_channel_id(platform: str, channel_id: str) -> None:
        if not channel_id:
            raise ValueError("channel_id is required for channel-scoped storage.")
        if platform == "youtube" and _VIDEO_ID_RE.fullmatch(channel_id):
            raise ValueError(
                f"channel_id {channel_id!r} looks like a YouTube video id; "
                "did you swap parameters?"
            )

    def channel_dir(self, platform: str, channel_id: str) -> Path:
        self._check_channel_id(platform, channel_id)
        return self.platform_dir(platform) / "channels" / channel_id

    def channel_aggregate_path(self, platform: str, channel_id: str) -> Path:
        return self.channel_dir(platform, channel_id) / CHANNEL_AGGREGATE_FILE

    # ------------------------------------------------------------------
    # Video index (channel-scoped + legacy)
    # ------------------------------------------------------------------

    def _build_index(self, platform: str) -> dict[str, Path]:
        index: dict[str, Path] = {}
        base = self.platform_dir(platform)

        legacy = base / "videos"
        if legacy.is_dir():
            for entry in sorted(legacy.iterdir()):
                if entry.is_dir():
                    index[entry.name] = entry

        scoped: set[str] = set()
        channels = base / "channels"
        if channels.is_dir():
            for channel in sorted(channels.iterdir()):
                videos = channel / "videos"
                if not videos.is_dir():
                    continue
                for entry in sorted(videos.iterdir()):
                    if not entry.is_dir():
                        continue
                    video_id = entry.name
                    if video_id in scoped:
                        raise ValueError(
                            f"Duplicate video id {platform}:{video_id} in channels tree: "
                            f"{index[video_id]} and {entry}."
                        )
                    if video_id in index:
                        print(
                            f"[store] duplicate {platform}:{video_id}; preferring "
                            f"{entry} over legacy {index[video_id]}"
                        )
                    index[video_id] = entry
                    scoped.add(video_id)

        return index

    def _video_index(self, platform: str) -> dict[str, Path]:
        if platform not in self._index:
            self._index[platform] = self._build_index(platform)
        return self._index[platform]

    def resolve_video_dir(self, key: VideoKey) -> Path:
        resolved = self._video_index(key.platform).get(key.video_id)
        if resolved is None:
            raise FileNotFoundError(
                f"Video not found for {key}. Checked legacy videos/ and channels/*/videos/."
            )
        return resolved

    def list_videos(self, platform: str = "youtube") -> list[VideoKey]:
        return [VideoKey(platform, vid) for vid in sorted(self._video_index(platform))]

    def comments_path(self, key: VideoKey) -> Path:
        return self.resolve_video_dir(key) / COMMENTS_FILE

    def video_path(self, key: VideoKey) -> Path:
        return self.resolve_video_dir(key) / VIDEO_FILE

    def analytics_path(self, key: VideoKey) -> Path:
        return self.resolve_video_dir(key) / ANALYTICS_FILE
