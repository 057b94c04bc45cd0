# coding: utf-8
"""
Tokenizer & tagger.

Lighter than general NLP tokenization: it keeps the casing and punctuation
signals the aggregator needs (ALL-CAPS words, ``!``/``?`` runs, clause
punctuation) and never raises for any ``str`` input.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from sentiscore.core import rules
from sentiscore.core.lexicon import LexiconHandle

_QUOTES = "\"'`“”‘’«»"
_Q = re.escape(_QUOTES)

_TOKEN_RE = re.compile(
    # Emoticons: :) :-( ;D =P <3 </3
    r"(?P<emoticon>(?:</?3|[:;=][-^']?[()\[\]DPp])(?!\w))"
    # Words, with optional surrounding quotes; keeps internal ' and -
    rf"|(?P<word>[{_Q}]*\w+(?:[-'’]\w+)*[{_Q}]*)"
)

_CLAUSE_PUNCT = set(",;:.!?…")


@dataclass(frozen=True)
class Token:
    text: str
    lower: str
    index: int
    is_all_caps: bool
    ends_clause: bool = False


def tokenize(text: str, strip_quotation_marks: bool = True) -> List[Token]:
    """
    Split ``text`` into Tokens.

    Contraction apostrophes stay attached ("don't"). With
    ``strip_quotation_marks`` the quote characters around a word are removed
    before lookup; otherwise they stay part of the token.
    """
    if not text:
        return []

    matches = list(_TOKEN_RE.finditer(text))
    tokens: List[Token] = []
    for pos, m in enumerate(matches):
        surface = m.group()
        is_word = m.group("word") is not None
        if is_word and strip_quotation_marks:
            surface = surface.strip(_QUOTES)
            if not surface:
                continue

        gap_end = matches[pos + 1].start() if pos + 1 < len(matches) else len(text)
        gap = text[m.end():gap_end]

        tokens.append(Token(
            text=surface,
            lower=surface.lower().replace("’", "'"),
            index=len(tokens),
            is_all_caps=is_word and surface.isupper() and len(surface) >= 2,
            ends_clause=any(c in _CLAUSE_PUNCT for c in gap),
        ))
    return tokens


def punctuation_emphasis(text: str) -> float:
    """
    Global emphasis from ``!`` and ``?`` in the whole input.

    ``!`` counts up to 4. A single ``?`` adds nothing, 2-3 add a step each,
    4 or more add a flat maximum.
    """
    if not text:
        return 0.0
    ep = min(text.count("!"), rules.EXCLAIM_CAP) * rules.EXCLAIM_INCR

    qm = 0.0
    qm_count = text.count("?")
    if qm_count > 1:
        qm = qm_count * rules.QUESTION_INCR if qm_count <= 3 else rules.QUESTION_MAX

    return ep + qm


# ---------------------------------------------------------------------------
# Tagger
# ---------------------------------------------------------------------------

class Role(str, Enum):
    IDIOM = "idiom"
    IDIOM_TAIL = "idiom_tail"
    BOOSTER = "booster"
    BOOSTER_LEAD = "booster_lead"
    CONTRASTIVE = "contrastive"
    NEGATOR = "negator"
    SENTIMENT = "sentiment"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class TaggedToken:
    token: Token
    role: Role
    valence: float = 0.0
    delta: float = 0.0
    negates: bool = False
    span: int = 1

    @property
    def bears_sentiment(self) -> bool:
        return self.role in (Role.SENTIMENT, Role.IDIOM)


def _clause_limits(tokens: List[Token]) -> List[int]:
    """For each position, the index one past the last token of its clause."""
    limits = [len(tokens)] * len(tokens)
    end = len(tokens)
    for k in range(len(tokens) - 1, -1, -1):
        if tokens[k].ends_clause:
            end = k + 1
        limits[k] = end
    return limits


def tag_tokens(tokens: List[Token], handle: LexiconHandle,
               include_unusual_negations: bool = True) -> List[TaggedToken]:
    """
    Assign each token its rule role against ``handle``.

    Idioms are matched first (longest span, within one clause), then
    two-word boosters ("kind of"), then single-word roles.
    """
    n = len(tokens)
    lowered = [t.lower for t in tokens]
    limits = _clause_limits(tokens)
    tags: List[Optional[TaggedToken]] = [None] * n

    i = 0
    while i < n:
        tok = tokens[i]
        negates = handle.is_negator(tok.lower, include_unusual_negations)

        idiom = handle.match_idiom(lowered, i, end=limits[i])
        if idiom is not None:
            span, valence = idiom
            tags[i] = TaggedToken(tok, Role.IDIOM, valence=valence, span=span)
            for k in range(i + 1, i + span):
                tags[k] = TaggedToken(tokens[k], Role.IDIOM_TAIL)
            i += span
            continue

        if i + 1 < n and not tok.ends_clause:
            delta = handle.booster(f"{lowered[i]} {lowered[i + 1]}")
            if delta is not None:
                tags[i] = TaggedToken(tok, Role.BOOSTER_LEAD)
                tags[i + 1] = TaggedToken(tokens[i + 1], Role.BOOSTER, delta=delta)
                i += 2
                continue

        w = tok.lower
        delta = handle.booster(w)
        valence = handle.valence(w)
        if handle.is_contrastive(w):
            tags[i] = TaggedToken(tok, Role.CONTRASTIVE)
        elif delta is not None:
            tags[i] = TaggedToken(tok, Role.BOOSTER, delta=delta, negates=negates)
        elif valence is not None:
            # "no" followed by a sentiment word acts only as a negator
            next_scored = i + 1 < n and lowered[i + 1] in handle and not tok.ends_clause
            if negates and next_scored:
                tags[i] = TaggedToken(tok, Role.NEGATOR, negates=True)
            else:
                tags[i] = TaggedToken(tok, Role.SENTIMENT, valence=valence, negates=negates)
        elif negates:
            tags[i] = TaggedToken(tok, Role.NEGATOR, negates=True)
        else:
            tags[i] = TaggedToken(tok, Role.NEUTRAL)
        i += 1

    return [t for t in tags if t is not None]
