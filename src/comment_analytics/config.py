"""Configuration via pydantic-settings (reads from .env or environment variables)."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root = two levels up from this file (src/comment_analytics/config.py)
_ROOT = Path(__file__).parent.parent.parent


class EngineConfig(BaseSettings):
    """Ranking limits and score constants for the analytics engine."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="ANALYTICS_",
    )

    like_score_cap: int = 25
    theme_bucket_size: int = 8
    theme_ranked_candidates: int = 16
    highlight_limit: int = 3
    takeaway_limit: int = 3
    # Display budgets (characters) before ellipsizing
    highlight_text_len: int = 140
    quote_text_len: int = 160
    # Length-score denominators
    highlight_len_score_denom: int = 200
    quote_len_score_denom: int = 220
    # A word-boundary cut is only used when the last space sits past this index
    ellipsis_min_cut: int = 40


class StorageConfig(BaseSettings):
    """Where the content store lives on disk."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    content_root: Path = Field(default=_ROOT / "content", alias="CONTENT_ROOT")


# Singleton instances (import these in application code)
engine_config = EngineConfig()
storage_config = StorageConfig()
