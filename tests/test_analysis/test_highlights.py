"""Tests for highlight scoring, ranking, dedupe and ellipsizing."""

import pytest

from comment_analytics.analysis.highlights import (
    ELLIPSIS,
    HighlightPool,
    HighlightSelector,
    ellipsize,
)
from comment_analytics.detection.classifier import CommentClassifier

# ---------------------------------------------------------------------------
# ellipsize
# ---------------------------------------------------------------------------


def test_short_text_unchanged():
    assert ellipsize("short text", 140) == "short text"


def test_exact_length_unchanged():
    text = "x" * 140
    assert ellipsize(text, 140) == text


def test_cuts_at_word_boundary():
    text = "word " * 60
    out = ellipsize(text, 140)
    assert out.endswith(ELLIPSIS)
    assert len(out) <= 141
    assert out[:-1] == out[:-1].rstrip()
    assert out[:-1].endswith("word")


def test_hard_cut_without_spaces():
    out = ellipsize("a" * 200, 140)
    assert out == "a" * 140 + ELLIPSIS


def test_hard_cut_when_only_space_is_early():
    text = "a" * 30 + " " + "b" * 200
    out = ellipsize(text, 140)
    assert len(out) == 141
    assert out.startswith("a" * 30 + " b")


# ---------------------------------------------------------------------------
# Pool scoring and ranking
# ---------------------------------------------------------------------------


@pytest.fixture
def quote_pool():
    return HighlightPool(text_len=160, score_denom=220, like_cap=25, limit=3, sentiment_bonus=True)


def test_like_score_is_capped(quote_pool):
    capped = quote_pool.score("same", 30, "neutral")
    at_cap = quote_pool.score("same", 25, "neutral")
    assert capped == at_cap


def test_missing_likes_count_as_zero(quote_pool):
    assert quote_pool.score("same", None, "neutral") == quote_pool.score("same", 0, "neutral")


def test_sentiment_bonus_quotes_only(quote_pool):
    base = quote_pool.score("text", 0, "neutral")
    assert quote_pool.score("text", 0, "positive") == pytest.approx(base + 1.0)
    assert quote_pool.score("text", 0, "negative") == pytest.approx(base - 0.25)

    plain = HighlightPool(text_len=140, score_denom=200, like_cap=25, limit=3)
    assert plain.score("text", 0, "positive") == plain.score("text", 0, "neutral")


def test_length_score_saturates(quote_pool):
    assert quote_pool.score("x" * 220, 0, "neutral") == pytest.approx(1.0)
    assert quote_pool.score("x" * 500, 0, "neutral") == pytest.approx(1.0)


def test_ranking_with_capped_likes(quote_pool):
    for cid, likes in zip(["l0", "l10", "l30", "l5", "l1"], [0, 10, 30, 5, 1], strict=True):
        quote_pool.offer(cid, "Loved this, great work!", likes, "positive")
    assert [c.comment_id for c in quote_pool.ranked()] == ["l30", "l10", "l5", "l1", "l0"]
    # identical text collapses to a single excerpt
    assert quote_pool.select() == ["Loved this, great work!"]


def test_ties_keep_encounter_order(quote_pool):
    quote_pool.offer("first", "abc", 3, "neutral")
    quote_pool.offer("second", "xyz", 3, "neutral")
    assert [c.comment_id for c in quote_pool.ranked()] == ["first", "second"]


def test_dedupe_is_case_insensitive(quote_pool):
    quote_pool.offer("a", "Great Video", 5, "positive")
    quote_pool.offer("b", "great video", 4, "positive")
    quote_pool.offer("c", "Different one", 0, "neutral")
    assert quote_pool.select() == ["Great Video", "Different one"]


def test_select_respects_limit(quote_pool):
    for i in range(6):
        quote_pool.offer(f"c{i}", f"comment number {i}", i, "neutral")
    assert len(quote_pool.select()) == 3
    assert len(quote_pool.ranked()) == 6


# ---------------------------------------------------------------------------
# Selector routing
# ---------------------------------------------------------------------------


@pytest.fixture
def clf():
    return CommentClassifier()


def test_unsafe_comments_never_highlighted(clf):
    sel = HighlightSelector()
    sel.add("t1", 100, clf.classify("Why are you such an idiot?"))
    sel.add("t2", 100, clf.classify("Who the hell asked, you should stop"))
    sel.add("ok", 0, clf.classify("Why is the audio quiet?"))
    result = sel.result()
    assert result.quotes == ("Why is the audio quiet?",)
    assert result.questions == ("Why is the audio quiet?",)
    assert result.suggestions == ()


def test_routes_questions_and_suggestions(clf):
    sel = HighlightSelector()
    sel.add("q", 0, clf.classify("How did you light this?"))
    sel.add("s", 0, clf.classify("You should add captions."))
    result = sel.result()
    assert result.questions == ("How did you light this?",)
    assert result.suggestions == ("You should add captions.",)
    assert len(result.quotes) == 2


def test_long_quote_is_ellipsized(clf):
    sel = HighlightSelector()
    sel.add("long", 0, clf.classify("great " * 60))
    (quote,) = sel.result().quotes
    assert quote.endswith(ELLIPSIS)
    assert len(quote) <= 161
