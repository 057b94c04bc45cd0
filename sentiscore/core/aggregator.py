# coding: utf-8
"""
Valence aggregator.

Walks the tagged token sequence left to right, applies the modifier rules
(idiom override, negation, booster/damper, ALL-CAPS, contrastive
conjunctions), then normalizes the raw sum into a ScoreRecord:

    compound  ∈ [-1.0, +1.0]   — normalized weighted composite
    pos/neg/neu ∈ [0.0, 1.0]   — proportion ratios (sum == 1.0)
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from sentiscore.core import rules
from sentiscore.core.tokenizer import Role, TaggedToken


@dataclass(frozen=True)
class ScoreOptions:
    """
    Per-call options.

    include_unusual_negations: any token ending in ``n't`` negates, not only
                               the listed contractions.
    include_neutral_score:     populate ``neu``; when False it is None.
    strip_quotation_marks:     remove quote characters around words before
                               lookup, so quoted words are scored.
    """
    include_unusual_negations: bool = True
    include_neutral_score: bool = True
    strip_quotation_marks: bool = True


@dataclass(frozen=True)
class ScoreRecord:
    """Score of one input string. Immutable; holds no reference to the lexicon."""
    text: str
    tokens: Tuple[str, ...] = ()
    sentiments: Tuple[float, ...] = ()
    compound: float = 0.0
    pos: float = 0.0
    neu: Optional[float] = 1.0
    neg: float = 0.0
    contrastive_count: int = 0

    def __post_init__(self):
        if len(self.tokens) != len(self.sentiments):
            raise ValueError("tokens and sentiments must be aligned")
        if not -1.0 <= self.compound <= 1.0:
            raise ValueError(f"compound out of range: {self.compound}")
        for name in ("pos", "neg", "neu"):
            value = getattr(self, name)
            if value is not None and not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} out of range: {value}")
        if self.contrastive_count < 0:
            raise ValueError("contrastive_count must be >= 0")

    def as_dict(self) -> Dict[str, float]:
        """VADER-style ``{"neg", "neu", "pos", "compound"}`` dict."""
        out = {"neg": self.neg}
        if self.neu is not None:
            out["neu"] = self.neu
        out["pos"] = self.pos
        out["compound"] = self.compound
        return out


def empty_record(text: str, options: ScoreOptions) -> ScoreRecord:
    return ScoreRecord(
        text=text,
        compound=0.0,
        pos=0.0,
        neg=0.0,
        neu=1.0 if options.include_neutral_score else None,
    )


# ---------------------------------------------------------------------------
# Per-token modifiers
# ---------------------------------------------------------------------------

def _has_caps_differential(tagged: Sequence[TaggedToken]) -> bool:
    """True if some token is ALL CAPS and some sentiment word is not."""
    has_caps = any(t.token.is_all_caps for t in tagged)
    has_plain = any(t.bears_sentiment and not t.token.is_all_caps for t in tagged)
    return has_caps and has_plain


def _emphasize(valence: float) -> float:
    if valence > 0:
        return valence + rules.C_INCR
    if valence < 0:
        return valence - rules.C_INCR
    return valence


def _booster_scalar(booster: TaggedToken, valence: float, is_cap_diff: bool) -> float:
    """Signed delta a booster adds to ``valence``, following its sign."""
    if valence == 0:
        return 0.0
    scalar = booster.delta
    if valence < 0:
        scalar *= -1
    if booster.token.is_all_caps and is_cap_diff:
        scalar += rules.C_INCR if valence > 0 else -rules.C_INCR
    return scalar


def _negation_check(valence: float, tagged: Sequence[TaggedToken], i: int, k: int) -> float:
    j = i - k
    word = tagged[j].token.lower
    between = [t.token.lower for t in tagged[j + 1:i]]
    if word == "never" and any(b in rules.NEVER_SO_WORDS for b in between):
        return valence * rules.NEVER_SO_SCALAR
    if word == "without" and between[:1] == ["doubt"]:
        return valence
    return valence * rules.N_SCALAR


def _least_check(valence: float, tagged: Sequence[TaggedToken], i: int) -> float:
    """Negate after "least", except "at least" and "very least"."""
    if i == 0:
        return valence
    prev = tagged[i - 1].token
    if prev.lower != "least" or prev.ends_clause:
        return valence
    if i > 1 and tagged[i - 2].token.lower in rules.LEAST_EXEMPT:
        return valence
    return valence * rules.N_SCALAR


def _sentiment_valence(tagged: Sequence[TaggedToken], i: int, is_cap_diff: bool) -> float:
    tag = tagged[i]
    valence = tag.valence
    if tag.token.is_all_caps and is_cap_diff:
        valence = _emphasize(valence)

    # Idioms take their override valence as is
    if tag.role is Role.IDIOM:
        return valence

    for k in range(1, rules.WINDOW + 1):
        j = i - k
        if j < 0:
            break
        prev = tagged[j]
        if prev.token.ends_clause or prev.role is Role.CONTRASTIVE:
            break
        if prev.role in (Role.IDIOM, Role.IDIOM_TAIL):
            continue
        if prev.role is Role.SENTIMENT and not prev.negates:
            continue

        if prev.role is Role.BOOSTER:
            s = _booster_scalar(prev, valence, is_cap_diff) * rules.BOOSTER_DECAY[k - 1]
            if j > 0 and tagged[j - 1].negates and not tagged[j - 1].token.ends_clause:
                s *= rules.NEGATED_BOOSTER_SCALAR
            valence += s

        if prev.negates:
            valence = _negation_check(valence, tagged, i, k)

    return _least_check(valence, tagged, i)


def compute_valences(tagged: Sequence[TaggedToken]) -> List[float]:
    """Per-token contributions before contrastive weighting, aligned to ``tagged``."""
    is_cap_diff = _has_caps_differential(tagged)
    sentiments = [0.0] * len(tagged)
    for i, tag in enumerate(tagged):
        if tag.bears_sentiment:
            sentiments[i] = _sentiment_valence(tagged, i, is_cap_diff)
    return sentiments


# ---------------------------------------------------------------------------
# Contrastive conjunction weighting
# ---------------------------------------------------------------------------

def contrastive_check(tagged: Sequence[TaggedToken],
                      sentiments: List[float]) -> Tuple[List[float], int]:
    """
    Discount contributions before the first contrastive conjunction (×0.5)
    and emphasize those after it (×1.5), like VADER's _but_check.
    Returns (weighted sentiments, number of conjunctions in the text).
    """
    positions = [i for i, t in enumerate(tagged) if t.role is Role.CONTRASTIVE]
    if not positions:
        return list(sentiments), 0

    conj_idx = positions[0]
    result = list(sentiments)
    for i, s in enumerate(sentiments):
        if i < conj_idx:
            result[i] = s * rules.CONTRAST_BEFORE
        elif i > conj_idx:
            result[i] = s * rules.CONTRAST_AFTER
    return result, len(positions)


# ---------------------------------------------------------------------------
# Normalize and sift
# ---------------------------------------------------------------------------

def normalize(score: float, alpha: float = rules.ALPHA) -> float:
    """Normalize score to [-1, 1]: score / sqrt(score² + alpha)."""
    if score == 0.0:
        return 0.0
    val = score / math.sqrt(score * score + alpha)
    return max(-1.0, min(1.0, val))


def sift_scores(sentiments: Sequence[float]) -> Tuple[float, float, int]:
    pos_sum = sum(s + rules.SIFT_OFFSET for s in sentiments if s > 0)
    neg_sum = sum(s - rules.SIFT_OFFSET for s in sentiments if s < 0)
    neu_count = sum(1 for s in sentiments if s == 0.0)
    return pos_sum, neg_sum, neu_count


def round_simplex(values: Sequence[float], digits: int = rules.PROPORTION_DIGITS) -> List[float]:
    """Round proportions to ``digits`` places keeping their sum at exactly 1."""
    scale = 10 ** digits
    scaled = [v * scale for v in values]
    units = [math.floor(x) for x in scaled]
    missing = max(0, scale - sum(units))
    order = sorted(range(len(values)), key=lambda k: scaled[k] - units[k], reverse=True)
    for k in order[:missing]:
        units[k] += 1
    return [u / scale for u in units]


def aggregate(text: str, tagged: Sequence[TaggedToken], punct: float,
              options: ScoreOptions) -> ScoreRecord:
    """Build the ScoreRecord for ``text`` from its tagged tokens."""
    if not tagged:
        return empty_record(text, options)

    sentiments = compute_valences(tagged)
    sentiments, contrastive_count = contrastive_check(tagged, sentiments)

    # Raw sum + punctuation emphasis
    sum_s = float(sum(sentiments))
    if sum_s > 0:
        sum_s += punct
    elif sum_s < 0:
        sum_s -= punct
    compound = round(normalize(sum_s), rules.COMPOUND_DIGITS)

    pos_sum, neg_sum, neu_count = sift_scores(sentiments)
    if pos_sum > abs(neg_sum):
        pos_sum += punct
    elif pos_sum < abs(neg_sum):
        neg_sum -= punct

    total = pos_sum + abs(neg_sum) + neu_count
    pos, neg, neu = round_simplex([
        abs(pos_sum / total),
        abs(neg_sum / total),
        abs(neu_count / total),
    ])

    return ScoreRecord(
        text=text,
        tokens=tuple(t.token.text for t in tagged),
        sentiments=tuple(sentiments),
        compound=compound,
        pos=pos,
        neu=neu if options.include_neutral_score else None,
        neg=neg,
        contrastive_count=contrastive_count,
    )
