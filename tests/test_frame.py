"""
Tests for sentiscore/utils/frame.py and sentiscore/utils/labels.py

Run from the project root:
    pytest tests/test_frame.py -v
"""
import os
import sys

import pandas as pd
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

SAMPLE_LEXICON = os.path.join(os.path.dirname(__file__), "data", "sample_lexicon.txt")

from sentiscore.core.aggregator import ScoreOptions
from sentiscore.core.analyzer import SentimentScorer
from sentiscore.core.lexicon import load_lexicon
from sentiscore.utils.frame import SCORE_COLUMNS, score_frame, summarize_scores
from sentiscore.utils.labels import LABELS, score_to_label


@pytest.fixture(scope="module")
def scorer():
    return SentimentScorer(handle=load_lexicon(SAMPLE_LEXICON), options=ScoreOptions())


@pytest.fixture
def games_df():
    return pd.DataFrame({
        "team": ["A", "A", "B", "B"],
        "text": ["great game", "terrible defense", None, "good"],
    })


class TestScoreToLabel:
    @pytest.mark.parametrize("compound,expected", [
        (-0.9, "Negative"),
        (-0.35, "Negative"),
        (-0.2, "Somewhat-Negative"),
        (0.0, "Neutral"),
        (0.149, "Neutral"),
        (0.15, "Somewhat-Positive"),
        (0.35, "Positive"),
        (1.0, "Positive"),
    ])
    def test_thresholds(self, compound, expected):
        assert score_to_label(compound) == expected
        assert expected in LABELS


class TestScoreFrame:
    def test_adds_score_columns(self, games_df, scorer):
        scored = score_frame(games_df, "text", scorer)
        for col in SCORE_COLUMNS:
            assert col in scored.columns
        assert scored["compound"].tolist() == pytest.approx([0.6249, -0.4767, 0.0, 0.4404], abs=1e-4)
        assert scored["label"].tolist() == ["Positive", "Negative", "Neutral", "Positive"]

    def test_source_frame_untouched(self, games_df, scorer):
        score_frame(games_df, "text", scorer)
        assert list(games_df.columns) == ["team", "text"]

    def test_index_preserved(self, scorer):
        df = pd.DataFrame({"text": ["bad", "good"]}, index=[10, 3])
        scored = score_frame(df, "text", scorer)
        assert scored.index.tolist() == [10, 3]
        assert scored.loc[3, "compound"] > 0 > scored.loc[10, "compound"]

    def test_prefix(self, games_df, scorer):
        scored = score_frame(games_df, "text", scorer, prefix="s_")
        assert "s_compound" in scored.columns
        assert "compound" not in scored.columns

    def test_missing_column(self, games_df, scorer):
        with pytest.raises(KeyError):
            score_frame(games_df, "body", scorer)


class TestSummarizeScores:
    def test_per_category(self, games_df, scorer):
        summary = summarize_scores(score_frame(games_df, "text", scorer), "team")
        assert list(summary.columns) == ["team", "mean_compound", "n", *LABELS]

        a = summary[summary["team"] == "A"].iloc[0]
        assert a["n"] == 2
        assert a["mean_compound"] == pytest.approx((0.6249 - 0.4767) / 2, abs=1e-4)
        assert a["Positive"] == pytest.approx(0.5)
        assert a["Negative"] == pytest.approx(0.5)
        assert a["Neutral"] == pytest.approx(0.0)

        b = summary[summary["team"] == "B"].iloc[0]
        assert b["Neutral"] == pytest.approx(0.5)

    def test_labels_derived_when_absent(self):
        df = pd.DataFrame({"team": ["A", "B"], "compound": [0.9, -0.9]})
        summary = summarize_scores(df, "team")
        assert summary.set_index("team").loc["B", "Negative"] == pytest.approx(1.0)

    def test_missing_group_column(self, games_df, scorer):
        with pytest.raises(KeyError):
            summarize_scores(score_frame(games_df, "text", scorer), "league")
