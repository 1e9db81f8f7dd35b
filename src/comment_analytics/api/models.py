"""Pydantic request/response models for the Comment Analytics API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    schema_version: str
    content_root: str


class CommentPayload(BaseModel):
    id: str
    text: str
    author_name: str | None = Field(default=None, alias="authorName")
    published_at: str | None = Field(default=None, alias="publishedAt")
    like_count: int | None = Field(default=None, alias="likeCount", ge=0)


class AnalyzeRequest(BaseModel):
    comments: list[CommentPayload]


class ClassifyRequest(BaseModel):
    text: str


class ClassifyResponse(BaseModel):
    text: str
    toxic_hard: bool
    toxic_soft: bool
    sentiment: str
    is_question: bool
    is_suggestion: bool
    theme_tokens: list[str]
    person_tokens: list[str]


class ValidateRequest(BaseModel):
    document: Any


class ValidateResponse(BaseModel):
    valid: bool
    kind: str | None = None
    reason: str | None = None
