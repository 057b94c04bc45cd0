# coding: utf-8
"""
Lexicon & rule store.

load_lexicon() reads a VADER-format lexicon file (``token<TAB>valence`` with
optional std-dev and raw-rating columns), merges the rule tables from
``rules.py`` plus an optional JSON rules file, and returns an immutable
LexiconHandle shared read-only by every scoring call.

Any problem with the resources raises ConfigurationError here, never later.
"""
from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass, field
from importlib import resources
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from sentiscore.core import rules
from sentiscore.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Full VADER lexicon shipped inside the vaderSentiment distribution
DEFAULT_LEXICON_PATH = str(resources.files("vaderSentiment").joinpath("vader_lexicon.txt"))

_RULE_KEYS = {"negators", "boosters", "idioms", "contrastives", "replace"}


@dataclass(frozen=True)
class LexiconOptions:
    """
    Load-time options.

    Args:
        extra_lexicon: {term: valence} merged over the lexicon file, e.g.
                       domain terms a caller wants scored.
        rules_path:    JSON file extending (or, with ``"replace": true``,
                       replacing) negators, boosters, idioms, contrastives.
    """
    extra_lexicon: Optional[Mapping[str, float]] = None
    rules_path: Optional[str] = None


@dataclass(frozen=True)
class LexiconHandle:
    """Read-only lexicon and rule tables. Safe to share across threads."""
    valences: Mapping[str, float]
    negators: FrozenSet[str]
    boosters: Mapping[str, float]
    idioms: Mapping[str, float]
    contrastives: FrozenSet[str]
    source: str = ""
    idiom_max_tokens: int = field(default=rules.IDIOM_MAX_TOKENS)

    def __len__(self) -> int:
        return len(self.valences)

    def __contains__(self, word: object) -> bool:
        return word in self.valences

    def valence(self, word: str) -> Optional[float]:
        return self.valences.get(word)

    def booster(self, word: str) -> Optional[float]:
        return self.boosters.get(word)

    def is_negator(self, word: str, include_unusual: bool = True) -> bool:
        if word in self.negators:
            return True
        return include_unusual and word.endswith("n't")

    def is_contrastive(self, word: str) -> bool:
        return word in self.contrastives

    def match_idiom(self, words: List[str], start: int,
                    end: Optional[int] = None) -> Optional[Tuple[int, float]]:
        """Longest idiom in ``words[start:end]`` starting at ``start`` → (span, valence)."""
        end = len(words) if end is None else min(end, len(words))
        for span in range(self.idiom_max_tokens, 1, -1):
            if start + span > end:
                continue
            phrase = " ".join(words[start:start + span])
            if phrase in self.idioms:
                return span, self.idioms[phrase]
        return None


# ---------------------------------------------------------------------------
# Lexicon file
# ---------------------------------------------------------------------------

def _parse_valence(raw: str, where: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"non-numeric valence {raw!r} at {where}") from exc
    if not math.isfinite(value):
        raise ConfigurationError(f"non-finite valence {raw!r} at {where}")
    return value


def _read_lexicon_file(path: str) -> Dict[str, float]:
    if not os.path.isfile(path):
        raise ConfigurationError("lexicon file not found", path)
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"cannot read lexicon file: {exc}", path) from exc

    valences: Dict[str, float] = {}
    for lineno, line in enumerate(lines, start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        parts = line.split("\t")
        if len(parts) < 2 or not parts[0].strip():
            raise ConfigurationError(
                f"malformed lexicon line {lineno}: expected token<TAB>valence", path
            )
        word = parts[0].strip().lower()
        valences[word] = _parse_valence(parts[1].strip(), f"{path}:{lineno}")

    if not valences:
        raise ConfigurationError("lexicon file has no entries", path)
    return valences


# ---------------------------------------------------------------------------
# Rules file
# ---------------------------------------------------------------------------

def _read_rules_file(path: str) -> Dict:
    if not os.path.isfile(path):
        raise ConfigurationError("rules file not found", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"cannot read rules file: {exc}", path) from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"rules file is not valid JSON: {exc}", path) from exc

    if not isinstance(data, dict):
        raise ConfigurationError("rules file must contain a JSON object", path)
    unknown = set(data) - _RULE_KEYS
    if unknown:
        raise ConfigurationError(f"unknown rules keys: {sorted(unknown)}", path)
    return data


def _word_list(data: Dict, key: str, path: str) -> List[str]:
    values = data.get(key, [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ConfigurationError(f"'{key}' must be a list of strings", path)
    return [v.strip().lower() for v in values if v.strip()]


def _weight_map(data: Dict, key: str, path: str) -> Dict[str, float]:
    values = data.get(key, {})
    if not isinstance(values, dict):
        raise ConfigurationError(f"'{key}' must be an object of phrase: number", path)
    out: Dict[str, float] = {}
    for phrase, weight in values.items():
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ConfigurationError(f"'{key}.{phrase}' must be a number", path)
        out[" ".join(phrase.lower().split())] = _parse_valence(str(weight), f"{path}:{key}")
    return out


def _check_spans(boosters: Dict[str, float], idioms: Dict[str, float], where: str) -> int:
    for phrase in boosters:
        if len(phrase.split()) > 2:
            raise ConfigurationError(f"booster {phrase!r} is longer than two words", where)
    longest = 2
    for phrase in idioms:
        n = len(phrase.split())
        if n < 2 or n > rules.IDIOM_MAX_TOKENS:
            raise ConfigurationError(
                f"idiom {phrase!r} must span 2-{rules.IDIOM_MAX_TOKENS} words", where
            )
        longest = max(longest, n)
    return longest


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------

def load_lexicon(resource_locator: Optional[str] = None,
                 options: Optional[LexiconOptions] = None) -> LexiconHandle:
    """
    Load the lexicon and rule tables into an immutable handle.

    Args:
        resource_locator: path to a VADER-format lexicon file; None loads the
                          full VADER lexicon from the vaderSentiment package.
        options:          LexiconOptions (extra terms, JSON rules file).

    Raises:
        ConfigurationError: resource missing, unreadable or malformed.
    """
    options = options or LexiconOptions()
    path = resource_locator or DEFAULT_LEXICON_PATH

    valences = _read_lexicon_file(path)
    if options.extra_lexicon:
        for term, weight in options.extra_lexicon.items():
            valences[" ".join(str(term).lower().split())] = _parse_valence(
                str(weight), "extra_lexicon"
            )

    negators = {w.lower() for w in rules.NEGATE}
    boosters = dict(rules.BOOSTER_DICT)
    idioms = dict(rules.IDIOMS)
    contrastives = set(rules.CONTRASTIVE_CONJ)

    if options.rules_path:
        data = _read_rules_file(options.rules_path)
        if data.get("replace", False):
            negators, boosters, idioms, contrastives = set(), {}, {}, set()
        negators.update(_word_list(data, "negators", options.rules_path))
        boosters.update(_weight_map(data, "boosters", options.rules_path))
        idioms.update(_weight_map(data, "idioms", options.rules_path))
        contrastives.update(_word_list(data, "contrastives", options.rules_path))

    idiom_max = _check_spans(boosters, idioms, options.rules_path or "rules.py")

    handle = LexiconHandle(
        valences=MappingProxyType(valences),
        negators=frozenset(negators),
        boosters=MappingProxyType(boosters),
        idioms=MappingProxyType(idioms),
        contrastives=frozenset(contrastives),
        source=path,
        idiom_max_tokens=idiom_max,
    )
    logger.info(
        "[lexicon] loaded %d terms, %d idioms, %d boosters from %s",
        len(valences), len(idioms), len(boosters), path,
    )
    return handle
