"""Tests for takeaway candidates, ranking and percent formatting."""

import pytest

from comment_analytics.analysis.takeaways import (
    TakeawayCandidate,
    TakeawayGenerator,
    format_percent,
    summarize_labels,
)
from comment_analytics.analysis.themes import ThemeResult
from comment_analytics.models import SentimentBreakdown, ThemeEntry


@pytest.fixture
def gen():
    return TakeawayGenerator()


def _themes(topics=(), people=()):
    return ThemeResult(
        topics=[ThemeEntry(label=label, count=n) for label, n in topics],
        people=[ThemeEntry(label=label, count=n) for label, n in people],
    )


def _titles(takeaways):
    return [t.title for t in takeaways]


@pytest.mark.parametrize(
    "value,expected",
    [(0.0, "0%"), (0.25, "25%"), (0.125, "13%"), (0.004, "0%"), (1.0, "100%")],
)
def test_format_percent_rounds_half_up(value, expected):
    assert format_percent(value) == expected


def test_summarize_labels():
    themes = [ThemeEntry(label=x, count=1) for x in ["audio", "editing", "lighting", "music"]]
    assert summarize_labels(themes) == "audio, editing, lighting"
    assert summarize_labels([]) == ""


def test_zero_comments_no_takeaways(gen):
    assert gen.generate(0, SentimentBreakdown(), 0, 0, _themes()) == []


def test_topic_takeaway_always_present(gen):
    out = gen.generate(10, SentimentBreakdown(neutral=10), 0, 0, _themes())
    assert _titles(out) == ["What people latched onto"]
    assert out[0].detail == "No strong topic cluster stood out in this snapshot."


def test_topic_detail_lists_top_three(gen):
    themes = _themes(topics=[("audio", 5), ("editing", 4), ("lighting", 3), ("music", 2)])
    out = gen.generate(10, SentimentBreakdown(neutral=10), 0, 0, themes)
    assert out[0].detail == "Most discussion clusters around: audio, editing, lighting."


def test_question_takeaway_needs_three(gen):
    two = gen.candidates(10, SentimentBreakdown(neutral=10), 2, 0, _themes())
    three = gen.candidates(10, SentimentBreakdown(neutral=10), 3, 0, _themes())
    assert "Viewers want clarity" not in _titles(two)
    assert "Viewers want clarity" in _titles(three)


def test_question_detail_formats_rate_and_count(gen):
    out = gen.generate(1200, SentimentBreakdown(neutral=1200), 1200, 0, _themes())
    clarity = next(t for t in out if t.title == "Viewers want clarity")
    assert clarity.detail == "Questions make up 100% of comments (1,200 total)."


def test_suggestion_takeaway_needs_two(gen):
    out = gen.candidates(10, SentimentBreakdown(neutral=10), 0, 2, _themes())
    assert "There are clear improvement requests" in _titles(out)


def test_people_priority_is_capped(gen):
    themes = _themes(people=[("jordan", 10)])
    out = gen.candidates(10, SentimentBreakdown(neutral=10), 0, 0, themes)
    people = next(c for c in out if c.title == "The conversation is partly about the people")
    assert people.priority == pytest.approx(0.95)


def test_negative_wins_over_positive(gen):
    sentiment = SentimentBreakdown(positive=5, negative=5)
    out = gen.candidates(10, sentiment, 0, 0, _themes())
    titles = _titles(out)
    assert "Sentiment is meaningfully negative" in titles
    assert "Sentiment is strongly positive" not in titles


def test_positive_threshold(gen):
    out = gen.candidates(100, SentimentBreakdown(positive=45, neutral=55), 0, 0, _themes())
    assert "Sentiment is strongly positive" in _titles(out)
    out = gen.candidates(100, SentimentBreakdown(positive=44, neutral=56), 0, 0, _themes())
    assert "Sentiment is strongly positive" not in _titles(out)


def test_ranked_by_priority_and_capped(gen):
    sentiment = SentimentBreakdown(positive=1, neutral=6, negative=3)
    out = gen.generate(10, sentiment, 5, 4, _themes(topics=[("audio", 3)]))
    # clarity 1.25, requests 1.1, negative 0.9, topics 0.55 dropped
    assert _titles(out) == [
        "Viewers want clarity",
        "There are clear improvement requests",
        "Sentiment is meaningfully negative",
    ]


def test_rank_dedupes_titles(gen):
    out = gen.rank(
        [
            TakeawayCandidate(priority=0.5, title="Same", detail="low"),
            TakeawayCandidate(priority=0.9, title="Same", detail="high"),
        ]
    )
    assert len(out) == 1
    assert out[0].detail == "high"
