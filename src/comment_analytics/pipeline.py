"""AnalysisPipeline: walk the content store and keep analytics.json up to date."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from comment_analytics.analysis.engine import CommentAnalyticsEngine
from comment_analytics.collection.loader import InvalidContentError, load_comments, read_json
from comment_analytics.collection.store import ContentStore, VideoKey, write_json
from comment_analytics.models import CommentAnalytics
from comment_analytics.validation import (
    ValidationErrorKind,
    ValidationIssue,
    ValidationResult,
    parse_comment_analytics,
)


class RunStatus(str, Enum):
    COMPUTED = "computed"  # no analytics.json, or --overwrite
    REUSED = "reused"  # existing analytics.json passed validation
    RECOMPUTED = "recomputed"  # existing analytics.json was stale or corrupt
    SKIPPED = "skipped"  # no comments.json


@dataclass
class RunOutcome:
    key: VideoKey
    status: RunStatus
    analytics: CommentAnalytics | None = None
    issue: ValidationIssue | None = None  # why a cached file was not reused


class AnalysisPipeline:
    """Analyze videos in the content store, reusing valid cached output."""

    def __init__(
        self,
        store: ContentStore | None = None,
        engine: CommentAnalyticsEngine | None = None,
    ) -> None:
        self._store = store or ContentStore()
        self._engine = engine or CommentAnalyticsEngine()

    def run_video(
        self, key: VideoKey, overwrite: bool = False, now: datetime | None = None
    ) -> RunOutcome:
        """Analyze one video. Raises InvalidContentError on malformed comments."""
        comments_path = self._store.comments_path(key)
        if not comments_path.is_file():
            return RunOutcome(key=key, status=RunStatus.SKIPPED)

        analytics_path = self._store.analytics_path(key)
        issue: ValidationIssue | None = None

        if not overwrite and analytics_path.is_file():
            try:
                result = parse_comment_analytics(read_json(analytics_path))
            except InvalidContentError as exc:
                result = ValidationResult(
                    issue=ValidationIssue(ValidationErrorKind.CORRUPT, str(exc))
                )
            if result.ok:
                return RunOutcome(key=key, status=RunStatus.REUSED, analytics=result.analytics)
            issue = result.issue
            print(f"[analyze] {key}: cached analytics rejected ({issue.kind.value})")

        analytics = self._engine.analyze(load_comments(comments_path), analyzed_at=now)
        write_json(analytics_path, analytics.to_json_dict())

        status = RunStatus.RECOMPUTED if issue is not None else RunStatus.COMPUTED
        return RunOutcome(key=key, status=status, analytics=analytics, issue=issue)

    def run(
        self,
        video: VideoKey | None = None,
        overwrite: bool = False,
        now: datetime | None = None,
    ) -> list[RunOutcome]:
        """Analyze *video*, or every video in the store when it is None."""
        targets = [video] if video is not None else self._store.list_videos()
        outcomes: list[RunOutcome] = []

        for key in targets:
            outcome = self.run_video(key, overwrite=overwrite, now=now)
            outcomes.append(outcome)
            if outcome.status is RunStatus.SKIPPED:
                continue
            count = outcome.analytics.comment_count if outcome.analytics else 0
            print(f"[analyze] {key}: {outcome.status.value} ({count:,} comments)")

        updated = sum(1 for o in outcomes if o.status is not RunStatus.SKIPPED)
        print(f"[analyze] done, {updated} video(s) up to date")
        return outcomes
