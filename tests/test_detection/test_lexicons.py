"""Tests for the Lexicon value object and its token predicates."""

import pytest

from comment_analytics.detection.lexicons import (
    DEFAULT_LEXICON,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    TOXIC_WORDS,
    Lexicon,
)


@pytest.fixture
def lex():
    return DEFAULT_LEXICON


# ---------------------------------------------------------------------------
# Theme tokens
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("token", ["captions", "microphone", "editing", "happen"])
def test_content_words_are_theme_tokens(lex, token):
    assert lex.is_theme_token(token)


@pytest.mark.parametrize("token", ["add", "mic", "a", ""])
def test_short_tokens_are_not_themes(lex, token):
    assert not lex.is_theme_token(token)


def test_numbers_are_not_themes(lex):
    assert not lex.is_theme_token("2024")
    assert not lex.is_theme_token("١٢٣٤")  # Arabic-Indic digits


def test_stopwords_are_not_themes(lex):
    assert not lex.is_theme_token("because")
    assert not lex.is_theme_token("podcast")


def test_polarity_and_toxic_words_are_not_themes(lex):
    assert not lex.is_theme_token("amazing")
    assert not lex.is_theme_token("terrible")
    assert not lex.is_theme_token("idiot")


# ---------------------------------------------------------------------------
# Person tokens
# ---------------------------------------------------------------------------


def test_common_first_name_is_person(lex):
    assert lex.is_person_token("jordan")
    assert lex.is_person_token("sarah")


def test_non_name_is_not_person(lex):
    assert not lex.is_person_token("captions")


def test_person_token_must_be_lowercase_ascii(lex):
    assert not lex.is_person_token("Jordan")
    assert not lex.is_person_token("zoë")


def test_short_name_is_not_person(lex):
    # three letters fails the theme-length rule before the name lookup
    assert not lex.is_person_token("tom")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def test_word_sets_are_lowercase():
    for words in (POSITIVE_WORDS, NEGATIVE_WORDS, TOXIC_WORDS):
        assert all(w == w.lower() for w in words)


def test_default_lexicon_is_frozen(lex):
    with pytest.raises(AttributeError):
        lex.positive = frozenset()  # type: ignore[misc]


def test_build_with_custom_tables():
    custom = Lexicon.build(positive=frozenset({"stellar"}), toxic_phrases=(r"\bgo away\b",))
    assert "stellar" in custom.positive
    assert "amazing" not in custom.positive
    assert custom.toxic_phrases[0].search("please go away now")
    assert not custom.is_theme_token("stellar")
