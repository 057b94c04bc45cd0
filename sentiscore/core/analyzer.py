# coding: utf-8
"""
Public scoring API.

    handle = load_lexicon()                       # once, at startup
    record = score("The food was great, the service SLOW.", handle)
    record.compound, record.pos, record.neu, record.neg

    records = score_batch(texts, handle, max_workers=4)   # order-preserving

A handle can be omitted; the process-wide default is then loaded once, from
SENTISCORE_LEXICON_PATH / SENTISCORE_RULES_PATH or the full VADER lexicon.
"""
from __future__ import annotations

import logging
import threading
import warnings
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Dict, Iterable, List, Mapping, Optional

from sentiscore import config
from sentiscore.core.aggregator import ScoreOptions, ScoreRecord, aggregate, empty_record
from sentiscore.core.errors import InvalidInputWarning
from sentiscore.core.lexicon import LexiconHandle, LexiconOptions, load_lexicon
from sentiscore.core.tokenizer import punctuation_emphasis, tag_tokens, tokenize

logger = logging.getLogger(__name__)

_default_handle: Optional[LexiconHandle] = None
_default_scorer: Optional["SentimentScorer"] = None
_default_lock = threading.Lock()


def get_default_handle() -> LexiconHandle:
    """Process-wide handle, loaded on first use. Raises ConfigurationError."""
    global _default_handle
    if _default_handle is None:
        with _default_lock:
            if _default_handle is None:
                _default_handle = load_lexicon(
                    config.LEXICON_PATH, LexiconOptions(rules_path=config.RULES_PATH)
                )
    return _default_handle


def score(text: str, handle: Optional[LexiconHandle] = None,
          options: Optional[ScoreOptions] = None) -> ScoreRecord:
    """
    Score one string. Never raises for per-call input problems: a non-text
    value warns with InvalidInputWarning and is scored as "".
    """
    if handle is None:
        handle = get_default_handle()
    if options is None:
        options = config.default_options()

    if not isinstance(text, str):
        warnings.warn(
            f"score() expected str, got {type(text).__name__}; scoring as empty text",
            InvalidInputWarning,
            stacklevel=2,
        )
        logger.debug("[score] non-text input of type %s treated as empty", type(text).__name__)
        text = ""

    if not text.strip():
        return empty_record(text, options)

    tokens = tokenize(text, options.strip_quotation_marks)
    tagged = tag_tokens(tokens, handle, options.include_unusual_negations)
    return aggregate(text, tagged, punctuation_emphasis(text), options)


def score_batch(texts: Iterable[str], handle: Optional[LexiconHandle] = None,
                options: Optional[ScoreOptions] = None,
                max_workers: Optional[int] = None) -> List[ScoreRecord]:
    """
    Score every text; results come back in input order.

    The handle is resolved before any worker starts, so a ConfigurationError
    stops the whole batch up front and nothing fails part-way.
    """
    texts = list(texts)
    if handle is None:
        handle = get_default_handle()
    if options is None:
        options = config.default_options()

    workers = max_workers if max_workers is not None else config.MAX_WORKERS
    job = partial(_score_one, handle=handle, options=options)

    if workers <= 1 or len(texts) < 2:
        return [job(t) for t in texts]

    logger.debug("[score_batch] %d texts on %d threads", len(texts), workers)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sentiscore") as ex:
        return list(ex.map(job, texts))


def _score_one(text, handle: LexiconHandle, options: ScoreOptions) -> ScoreRecord:
    return score(text, handle, options)


class SentimentScorer:
    """
    Bound scorer: a lexicon handle plus default options.

    Usage:
        scorer = SentimentScorer()
        scorer.polarity_scores("not bad at all")
        # → {"neg": 0.0, "neu": 0.513, "pos": 0.487, "compound": 0.431}

    Args:
        handle:        LexiconHandle to use; loaded from config when None.
        options:       ScoreOptions applied to every call.
        extra_lexicon: {term: valence} merged over the configured lexicon
                       (ignored when ``handle`` is given).
        max_workers:   thread count for score_batch.
    """

    def __init__(self, handle: Optional[LexiconHandle] = None,
                 options: Optional[ScoreOptions] = None,
                 extra_lexicon: Optional[Mapping[str, float]] = None,
                 max_workers: Optional[int] = None):
        if handle is None:
            if extra_lexicon:
                handle = load_lexicon(
                    config.LEXICON_PATH,
                    LexiconOptions(extra_lexicon=extra_lexicon, rules_path=config.RULES_PATH),
                )
            else:
                handle = get_default_handle()
        self.handle = handle
        self.options = options or config.default_options()
        self.max_workers = max_workers

    def score(self, text: str) -> ScoreRecord:
        return score(text, self.handle, self.options)

    def score_batch(self, texts: Iterable[str]) -> List[ScoreRecord]:
        return score_batch(texts, self.handle, self.options, self.max_workers)

    def polarity_scores(self, text: str) -> Dict[str, float]:
        """VADER-compatible ``{"neg", "neu", "pos", "compound"}`` dict."""
        return self.score(text).as_dict()


def get_default_scorer() -> SentimentScorer:
    global _default_scorer
    if _default_scorer is None:
        # Resolve outside the lock; get_default_handle takes it too
        handle = get_default_handle()
        with _default_lock:
            if _default_scorer is None:
                _default_scorer = SentimentScorer(handle=handle)
    return _default_scorer


def polarity_scores(text: str) -> Dict[str, float]:
    """Module-level convenience function using the default scorer."""
    return get_default_scorer().polarity_scores(text)
