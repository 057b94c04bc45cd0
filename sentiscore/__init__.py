"""
sentiscore: lexicon and rule-based sentiment scoring for short texts.

Public API:
    handle = load_lexicon()
    record = score("not bad at all", handle)
    records = score_batch(texts, handle)
"""

from sentiscore.core import (
    ConfigurationError,
    InvalidInputWarning,
    LexiconHandle,
    LexiconOptions,
    ScoreOptions,
    ScoreRecord,
    SentimentScorer,
    load_lexicon,
    polarity_scores,
    score,
    score_batch,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidInputWarning",
    "LexiconHandle",
    "LexiconOptions",
    "ScoreOptions",
    "ScoreRecord",
    "SentimentScorer",
    "load_lexicon",
    "polarity_scores",
    "score",
    "score_batch",
]
