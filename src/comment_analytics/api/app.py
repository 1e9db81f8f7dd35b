"""FastAPI application for the Comment Analytics service."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from comment_analytics.analysis.engine import CommentAnalyticsEngine
from comment_analytics.api.models import (
    AnalyzeRequest,
    ClassifyRequest,
    ClassifyResponse,
    HealthResponse,
    ValidateRequest,
    ValidateResponse,
)
from comment_analytics.collection.schemas import CommentRecord
from comment_analytics.config import storage_config
from comment_analytics.models import COMMENT_ANALYTICS_SCHEMA
from comment_analytics.validation import parse_comment_analytics

# ---------------------------------------------------------------------------
# Engine: initialised once at startup, holds no per-request state
# ---------------------------------------------------------------------------

_engine = CommentAnalyticsEngine()


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Comment Analytics API",
    description=(
        "Deterministic comment analytics for video creators: sentiment, "
        "themes, highlights and takeaways."
    ),
    version="0.1.0",
)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse, tags=["Meta"])
def health() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(
        status="ok",
        schema_version=COMMENT_ANALYTICS_SCHEMA,
        content_root=str(storage_config.content_root),
    )


@app.post("/analyze", tags=["Inference"])
def analyze(req: AnalyzeRequest) -> dict:
    """Analyze a comment snapshot and return CommentAnalytics (camelCase JSON)."""
    records = [
        CommentRecord(
            id=c.id,
            text=c.text,
            author_name=c.author_name,
            published_at=c.published_at,
            like_count=c.like_count,
        )
        for c in req.comments
    ]
    return _engine.analyze(records).to_json_dict()


@app.post("/classify", response_model=ClassifyResponse, tags=["Inference"])
def classify(req: ClassifyRequest) -> ClassifyResponse:
    """Per-comment signals for one piece of text."""
    signals = _engine.classifier.classify(req.text)
    if signals is None:
        raise HTTPException(status_code=422, detail="text must not be empty")

    return ClassifyResponse(
        text=signals.text,
        toxic_hard=signals.toxic_hard,
        toxic_soft=signals.toxic_soft,
        sentiment=signals.sentiment,
        is_question=signals.is_question,
        is_suggestion=signals.is_suggestion,
        theme_tokens=list(signals.theme_tokens),
        person_tokens=list(signals.person_tokens),
    )


@app.post("/validate", response_model=ValidateResponse, tags=["Validation"])
def validate(req: ValidateRequest) -> ValidateResponse:
    """Check whether a stored analytics document could be reused as-is."""
    result = parse_comment_analytics(req.document)
    if result.ok:
        return ValidateResponse(valid=True)
    return ValidateResponse(valid=False, kind=result.issue.kind.value, reason=result.issue.reason)
