"""Per-comment classification: toxicity, sentiment, question/suggestion, themes."""

from __future__ import annotations

from dataclasses import dataclass, field

from comment_analytics.detection.lexicons import DEFAULT_LEXICON, Lexicon
from comment_analytics.detection.tokenizer import normalize, tokenize_lowered
from comment_analytics.sentiment.lexicon import LexiconSentimentScorer, Sentiment


@dataclass(frozen=True)
class CommentSignals:
    """Classification result for one non-empty comment."""

    text: str  # normalized text
    toxic_hard: bool  # a token is in the toxic word set
    toxic_soft: bool  # a toxic phrase pattern matched
    sentiment: Sentiment
    is_question: bool
    is_suggestion: bool
    theme_tokens: tuple[str, ...] = field(default_factory=tuple)  # unique, first-seen order
    person_tokens: tuple[str, ...] = field(default_factory=tuple)

    @property
    def unsafe(self) -> bool:
        """True when the comment must never be shown as a highlight."""
        return self.toxic_hard or self.toxic_soft

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "toxicHard": self.toxic_hard,
            "toxicSoft": self.toxic_soft,
            "sentiment": self.sentiment,
            "isQuestion": self.is_question,
            "isSuggestion": self.is_suggestion,
            "themeTokens": list(self.theme_tokens),
            "personTokens": list(self.person_tokens),
        }


class CommentClassifier:
    """Derive toxicity, sentiment and intent flags for single comments."""

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self._lexicon = lexicon or DEFAULT_LEXICON
        self._sentiment = LexiconSentimentScorer(self._lexicon)

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    def classify(self, text: str) -> CommentSignals | None:
        """Classify raw comment text; returns None if it normalizes to empty."""
        cleaned = normalize(text)
        if not cleaned:
            return None
        lowered = cleaned.lower()
        return self.classify_normalized(cleaned, lowered, tokenize_lowered(lowered))

    def classify_normalized(
        self, cleaned: str, lowered: str, tokens: list[str]
    ) -> CommentSignals:
        lex = self._lexicon

        toxic_hard = any(token in lex.toxic for token in tokens)
        toxic_soft = any(p.search(lowered) for p in lex.toxic_phrases)

        # dict preserves insertion order, so this dedupes without reordering
        themes = tuple(dict.fromkeys(t for t in tokens if lex.is_theme_token(t)))
        people = tuple(t for t in themes if lex.is_person_token(t))

        return CommentSignals(
            text=cleaned,
            toxic_hard=toxic_hard,
            toxic_soft=toxic_soft,
            sentiment=self._sentiment.label(tokens),
            is_question=self._is_question(cleaned, lowered),
            is_suggestion=any(p.search(lowered) for p in lex.suggestion_patterns),
            theme_tokens=themes,
            person_tokens=people,
        )

    def _is_question(self, cleaned: str, lowered: str) -> bool:
        if "?" in cleaned:
            return True
        return lowered.startswith(self._lexicon.question_prefixes)
