"""
pandas adapter: score a text column and summarize scores per category.

Row order is preserved, so the result lines up with the source frame's index
for any later join the caller makes.
"""
import logging
from typing import Optional

import pandas as pd

from sentiscore.core.analyzer import SentimentScorer, get_default_scorer
from sentiscore.utils.labels import LABELS, score_to_label

logger = logging.getLogger(__name__)

SCORE_COLUMNS = ("compound", "pos", "neu", "neg", "label")


def score_frame(df: pd.DataFrame, column: str,
                scorer: Optional[SentimentScorer] = None,
                prefix: str = "") -> pd.DataFrame:
    """
    Return a copy of ``df`` with compound/pos/neu/neg/label columns added.

    Missing cells (None/NaN) are scored as empty text.
    """
    if column not in df.columns:
        raise KeyError(f"column {column!r} not in DataFrame")
    scorer = scorer or get_default_scorer()

    values = df[column].tolist()
    missing = df[column].isna().tolist()
    texts = ["" if is_na else value for value, is_na in zip(values, missing)]
    if any(missing):
        logger.info("[frame] %d missing '%s' cells scored as empty", sum(missing), column)

    records = scorer.score_batch(texts)

    out = df.copy()
    out[f"{prefix}compound"] = [r.compound for r in records]
    out[f"{prefix}pos"] = [r.pos for r in records]
    out[f"{prefix}neu"] = [r.neu for r in records]
    out[f"{prefix}neg"] = [r.neg for r in records]
    out[f"{prefix}label"] = [score_to_label(r.compound) for r in records]
    return out


def summarize_scores(df: pd.DataFrame, by: str,
                     compound_column: str = "compound") -> pd.DataFrame:
    """
    Per-category mean compound, row count and label shares.

    Expects a frame produced by score_frame(); labels are derived from the
    compound column when no ``label`` column is present.
    """
    if by not in df.columns:
        raise KeyError(f"column {by!r} not in DataFrame")

    labels = df["label"] if "label" in df.columns else df[compound_column].map(score_to_label)

    summary = (
        df.groupby(by)[compound_column]
        .agg(["mean", "count"])
        .rename(columns={"mean": "mean_compound", "count": "n"})
    )
    shares = pd.crosstab(df[by], labels, normalize="index")
    shares = shares.reindex(columns=list(LABELS), fill_value=0.0)
    shares.columns.name = None

    return summary.join(shares).reset_index()
