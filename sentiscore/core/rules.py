# coding: utf-8
"""
Rule tables and tuning constants for the valence aggregator.

Values follow VADER (Hutto & Gilbert, 2014); they are empirically tuned and
kept fixed so scores stay reproducible across runs. A JSON rules file passed
to load_lexicon() can extend or override every table below.
"""
from __future__ import annotations

from typing import Dict, List

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Booster additive increment/decrement
B_INCR = 0.293
B_DECR = -0.293

# ALL CAPS emphasis increment
C_INCR = 0.733

# Negation scalar: dampens and flips
N_SCALAR = -0.74

# Normalize alpha, approximates the max expected raw sum
ALPHA = 15

# Booster decay by distance from the sentiment word (1, 2, 3 tokens back)
BOOSTER_DECAY = (1.0, 0.95, 0.90)

# Booster delta multiplier when the booster directly follows a negator
NEGATED_BOOSTER_SCALAR = 0.5

# Look-back window for negators and boosters
WINDOW = 3

# "never so good" / "never this good" boost
NEVER_SO_SCALAR = 1.25

# Contrastive conjunction weighting
CONTRAST_BEFORE = 0.5
CONTRAST_AFTER = 1.5

# Punctuation emphasis
EXCLAIM_CAP = 4
EXCLAIM_INCR = 0.292
QUESTION_INCR = 0.18
QUESTION_MAX = 0.96

# Added to each sentiment contribution's magnitude when sifting pos/neg
SIFT_OFFSET = 1.0

# Decimal places for reported scores
COMPOUND_DIGITS = 4
PROPORTION_DIGITS = 3

# ---------------------------------------------------------------------------
# Negation words
# ---------------------------------------------------------------------------
NEGATE: List[str] = [
    "aint", "arent", "cannot", "cant", "couldnt", "darent", "didnt", "doesnt",
    "ain't", "aren't", "can't", "couldn't", "daren't", "didn't", "doesn't",
    "dont", "hadnt", "hasnt", "havent", "isnt", "mightnt", "mustnt", "neither",
    "don't", "hadn't", "hasn't", "haven't", "isn't", "mightn't", "mustn't",
    "neednt", "needn't", "never", "no", "none", "nope", "nor", "not", "nothing",
    "nowhere", "oughtnt", "shant", "shouldnt", "uhuh", "wasnt", "werent",
    "oughtn't", "shan't", "shouldn't", "uh-uh", "wasn't", "weren't",
    "without", "wont", "wouldnt", "won't", "wouldn't", "rarely", "seldom",
    "despite",
]

# ---------------------------------------------------------------------------
# Booster / dampener dictionary (additive deltas)
# ---------------------------------------------------------------------------
BOOSTER_DICT: Dict[str, float] = {
    # Intensifiers
    "absolutely": B_INCR, "amazingly": B_INCR, "awfully": B_INCR,
    "completely": B_INCR, "considerable": B_INCR, "considerably": B_INCR,
    "decidedly": B_INCR, "deeply": B_INCR, "effing": B_INCR,
    "enormous": B_INCR, "enormously": B_INCR, "entirely": B_INCR,
    "especially": B_INCR, "exceptional": B_INCR, "exceptionally": B_INCR,
    "extreme": B_INCR, "extremely": B_INCR, "fabulously": B_INCR,
    "flipping": B_INCR, "flippin": B_INCR, "frackin": B_INCR,
    "fracking": B_INCR, "fricking": B_INCR, "frickin": B_INCR,
    "frigging": B_INCR, "friggin": B_INCR, "fully": B_INCR,
    "fuckin": B_INCR, "fucking": B_INCR, "fuggin": B_INCR, "fugging": B_INCR,
    "greatly": B_INCR, "hella": B_INCR, "highly": B_INCR, "hugely": B_INCR,
    "incredible": B_INCR, "incredibly": B_INCR, "intensely": B_INCR,
    "major": B_INCR, "majorly": B_INCR, "more": B_INCR, "most": B_INCR,
    "particularly": B_INCR, "purely": B_INCR, "quite": B_INCR,
    "really": B_INCR, "remarkably": B_INCR, "so": B_INCR,
    "substantially": B_INCR, "thoroughly": B_INCR, "total": B_INCR,
    "totally": B_INCR, "tremendous": B_INCR, "tremendously": B_INCR,
    "uber": B_INCR, "unbelievably": B_INCR, "unusually": B_INCR,
    "utter": B_INCR, "utterly": B_INCR, "very": B_INCR,
    # Diminishers
    "almost": B_DECR, "barely": B_DECR, "hardly": B_DECR,
    "just enough": B_DECR, "kind of": B_DECR, "kinda": B_DECR,
    "kindof": B_DECR, "kind-of": B_DECR, "less": B_DECR, "little": B_DECR,
    "marginal": B_DECR, "marginally": B_DECR, "occasional": B_DECR,
    "occasionally": B_DECR, "partly": B_DECR, "scarce": B_DECR,
    "scarcely": B_DECR, "slight": B_DECR, "slightly": B_DECR,
    "somewhat": B_DECR, "sort of": B_DECR, "sorta": B_DECR, "sortof": B_DECR,
    "sort-of": B_DECR,
}

# ---------------------------------------------------------------------------
# Idioms and special-case phrases (override valence, checked first)
# ---------------------------------------------------------------------------
IDIOMS: Dict[str, float] = {
    # Sentiment-laden idioms
    "cut the mustard": 2.0, "hand to mouth": -2.0, "back handed": -2.0,
    "blow smoke": -2.0, "blowing smoke": -2.0, "upper hand": 1.0,
    "break a leg": 2.0, "cooking with gas": 2.0, "in the black": 2.0,
    "in the red": -2.0, "on the ball": 2.0, "under the weather": -2.0,
    # Special cases
    "the shit": 3.0, "the bomb": 3.0, "bad ass": 1.5, "yeah right": -2.0,
    "kiss of death": -1.5, "to die for": 3.0, "beating heart": 3.1,
    "broken heart": -2.9, "bus stop": 0.0,
    # Sport and activity names built from individually negative words
    "trap shooting": 0.0, "skeet shooting": 0.0, "clay shooting": 0.0,
    "target shooting": 0.0, "shooting guard": 0.0, "dead lift": 0.0,
    "kill shot": 0.0, "crime fiction": 0.0,
}

# Longest idiom span, in tokens
IDIOM_MAX_TOKENS = 3

# ---------------------------------------------------------------------------
# Contrastive conjunctions ("but" equivalents)
# ---------------------------------------------------------------------------
CONTRASTIVE_CONJ: List[str] = ["but", "however", "nevertheless", "nonetheless"]

# ---------------------------------------------------------------------------
# Other lexical triggers
# ---------------------------------------------------------------------------
NEVER_SO_WORDS = ("so", "this")
LEAST_EXEMPT = ("at", "very")
