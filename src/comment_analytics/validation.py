"""Structural validation of persisted CommentAnalytics documents.

Decides whether an ``analytics.json`` read back from disk can be reused
as-is. A failed check is never fatal: callers treat it as "not analyzed yet"
and recompute. The result says *why* a document was rejected so a version
bump can be told apart from a damaged file.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from pydantic import ValidationError

from comment_analytics.analysis.radar import RADAR_CATEGORIES
from comment_analytics.models import COMMENT_ANALYTICS_SCHEMA, CommentAnalytics


class ValidationErrorKind(str, Enum):
    """Why a document was rejected."""

    SCHEMA_MISMATCH = "SCHEMA_MISMATCH"
    CORRUPT = "CORRUPT"


@dataclass(frozen=True)
class ValidationIssue:
    kind: ValidationErrorKind
    reason: str


@dataclass(frozen=True)
class ValidationResult:
    """Either a parsed CommentAnalytics or the issue that rejected it."""

    analytics: CommentAnalytics | None = None
    issue: ValidationIssue | None = None

    @property
    def ok(self) -> bool:
        return self.analytics is not None


class _Corrupt(Exception):
    pass


def _is_count(value: object) -> bool:
    # bool is an int subclass but never a count
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value) and value >= 0


def _is_integer_count(value: object) -> bool:
    if not _is_count(value):
        return False
    return isinstance(value, int) or float(value).is_integer()


def _require(condition: bool, reason: str) -> None:
    if not condition:
        raise _Corrupt(reason)


def _check_theme_bucket(bucket: object, name: str) -> None:
    _require(isinstance(bucket, list), f"{name} must be a list")
    for theme in bucket:
        _require(isinstance(theme, dict), f"{name} entries must be objects")
        _require(isinstance(theme.get("label"), str), f"{name} label must be a string")
        _require(_is_count(theme.get("count")), f"{name} count must be a non-negative number")


def _check_string_list(items: object, name: str) -> None:
    _require(isinstance(items, list), f"{name} must be a list")
    _require(all(isinstance(item, str) for item in items), f"{name} must hold strings")


def _check_structure(value: dict) -> None:
    comment_count = value.get("commentCount")
    _require(_is_count(comment_count), "commentCount must be a non-negative number")
    _require(isinstance(value.get("analyzedAt"), str), "analyzedAt must be a string")

    breakdown = value.get("sentimentBreakdown")
    _require(isinstance(breakdown, dict), "sentimentBreakdown must be an object")
    for key in ("positive", "neutral", "negative"):
        _require(
            _is_count(breakdown.get(key)),
            f"sentimentBreakdown.{key} must be a non-negative number",
        )
    total = breakdown["positive"] + breakdown["neutral"] + breakdown["negative"]
    _require(total == comment_count, "sentiment counts do not sum to commentCount")

    for key in ("toxicCount", "questionCount", "suggestionCount"):
        _require(_is_count(value.get(key)), f"{key} must be a non-negative number")

    radar = value.get("radar")
    _require(isinstance(radar, dict), "radar must be an object")
    for key in RADAR_CATEGORIES:
        count = radar.get(key)
        _require(_is_integer_count(count), f"radar.{key} must be a non-negative integer")
        _require(count <= comment_count, f"radar.{key} exceeds commentCount")
    # Radar counts are deliberately not cross-checked against the summary
    # counters; only the per-category bound is part of the contract.

    themes = value.get("themes")
    _require(isinstance(themes, dict), "themes must be an object")
    _check_theme_bucket(themes.get("topics"), "themes.topics")
    _check_theme_bucket(themes.get("people"), "themes.people")

    highlights = value.get("highlights")
    _require(isinstance(highlights, dict), "highlights must be an object")
    for key in ("questions", "suggestions", "quotes"):
        _check_string_list(highlights.get(key), f"highlights.{key}")

    takeaways = value.get("takeaways")
    _require(isinstance(takeaways, list), "takeaways must be a list")
    for takeaway in takeaways:
        _require(isinstance(takeaway, dict), "takeaways entries must be objects")
        _require(isinstance(takeaway.get("title"), str), "takeaway title must be a string")
        _require(isinstance(takeaway.get("detail"), str), "takeaway detail must be a string")


def parse_comment_analytics(
    value: object, expected_schema: str = COMMENT_ANALYTICS_SCHEMA
) -> ValidationResult:
    """Validate *value* (parsed JSON) and return a discriminated result."""
    if isinstance(value, CommentAnalytics):
        value = value.to_json_dict()

    if not isinstance(value, dict):
        return ValidationResult(
            issue=ValidationIssue(ValidationErrorKind.CORRUPT, "expected a JSON object")
        )

    tag = value.get("schema")
    if tag is not None and not isinstance(tag, str):
        return ValidationResult(
            issue=ValidationIssue(ValidationErrorKind.CORRUPT, "schema must be a string")
        )
    if tag != expected_schema:
        # Untagged documents predate schema tagging and count as another version
        return ValidationResult(
            issue=ValidationIssue(
                ValidationErrorKind.SCHEMA_MISMATCH,
                f"schema {tag!r} does not match {expected_schema!r}",
            )
        )

    try:
        _check_structure(value)
        analytics = CommentAnalytics.model_validate(value)
    except _Corrupt as exc:
        return ValidationResult(issue=ValidationIssue(ValidationErrorKind.CORRUPT, str(exc)))
    except ValidationError as exc:
        return ValidationResult(
            issue=ValidationIssue(
                ValidationErrorKind.CORRUPT, f"{exc.error_count()} field error(s): {exc}"
            )
        )

    return ValidationResult(analytics=analytics)


def is_comment_analytics(value: object) -> bool:
    """Boolean shim over :func:`parse_comment_analytics`."""
    return parse_comment_analytics(value).ok
