"""
Core components module for sentiscore.

Contains the lexicon store, tokenizer/tagger, valence aggregator and the
public scoring API.
"""

from sentiscore.core.aggregator import ScoreOptions, ScoreRecord
from sentiscore.core.analyzer import (
    SentimentScorer,
    get_default_scorer,
    polarity_scores,
    score,
    score_batch,
)
from sentiscore.core.errors import ConfigurationError, InvalidInputWarning
from sentiscore.core.lexicon import LexiconHandle, LexiconOptions, load_lexicon

__all__ = [
    "ConfigurationError",
    "InvalidInputWarning",
    "LexiconHandle",
    "LexiconOptions",
    "ScoreOptions",
    "ScoreRecord",
    "SentimentScorer",
    "get_default_scorer",
    "load_lexicon",
    "polarity_scores",
    "score",
    "score_batch",
]
