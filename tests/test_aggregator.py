"""
Tests for sentiscore/core/aggregator.py helpers

Run from the project root:
    pytest tests/test_aggregator.py -v
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

SAMPLE_LEXICON = os.path.join(os.path.dirname(__file__), "data", "sample_lexicon.txt")

from sentiscore.core.aggregator import (
    ScoreOptions,
    ScoreRecord,
    contrastive_check,
    empty_record,
    normalize,
    round_simplex,
    sift_scores,
)
from sentiscore.core.lexicon import load_lexicon
from sentiscore.core.tokenizer import tag_tokens, tokenize


@pytest.fixture(scope="module")
def handle():
    return load_lexicon(SAMPLE_LEXICON)


class TestNormalize:
    def test_zero(self):
        assert normalize(0.0) == 0.0

    def test_known_value(self):
        assert normalize(1.9) == pytest.approx(0.4404, abs=1e-4)

    def test_strictly_increasing(self):
        raws = [-50.0, -4.0, -1.0, -0.1, 0.0, 0.1, 1.0, 4.0, 50.0]
        values = [normalize(r) for r in raws]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_bounded(self):
        for raw in (1e6, -1e6, 1e150, -1e150):
            assert -1.0 <= normalize(raw) <= 1.0


class TestRoundSimplex:
    def test_thirds_sum_to_one(self):
        values = round_simplex([1 / 3, 1 / 3, 1 / 3])
        assert sorted(values) == [0.333, 0.333, 0.334]
        assert sum(values) == pytest.approx(1.0, abs=1e-9)

    def test_largest_remainder_gets_unit(self):
        assert round_simplex([2.85 / 5.85, 0.0, 3 / 5.85]) == [0.487, 0.0, 0.513]

    def test_exact_values_untouched(self):
        assert round_simplex([1.0, 0.0, 0.0]) == [1.0, 0.0, 0.0]


class TestSift:
    def test_offsets_and_neutral_count(self):
        pos_sum, neg_sum, neu_count = sift_scores([1.9, 0.0, -2.5, 0.0])
        assert pos_sum == pytest.approx(2.9)
        assert neg_sum == pytest.approx(-3.5)
        assert neu_count == 2


class TestContrastiveCheck:
    def test_no_conjunction(self, handle):
        tagged = tag_tokens(tokenize("good and bad"), handle)
        weighted, count = contrastive_check(tagged, [1.9, 0.0, -2.5])
        assert weighted == [1.9, 0.0, -2.5]
        assert count == 0

    def test_discounts_before_emphasizes_after(self, handle):
        tagged = tag_tokens(tokenize("good but bad"), handle)
        weighted, count = contrastive_check(tagged, [1.9, 0.0, -2.5])
        assert weighted == pytest.approx([0.95, 0.0, -3.75])
        assert count == 1

    def test_split_at_first_conjunction_only(self, handle):
        tagged = tag_tokens(tokenize("good but bad however fine"), handle)
        weighted, count = contrastive_check(tagged, [1.9, 0.0, -2.5, 0.0, 0.8])
        assert count == 2
        assert weighted == pytest.approx([1.9 * 0.5, 0.0, -2.5 * 1.5, 0.0, 0.8 * 1.5])

    def test_repeated_conjunctions_do_not_compound(self, handle):
        tagged = tag_tokens(tokenize("good " + "but " * 3000 + "great"), handle)
        sentiments = [0.0] * len(tagged)
        sentiments[0], sentiments[-1] = 1.9, 3.1
        weighted, count = contrastive_check(tagged, sentiments)
        assert count == 3000
        assert weighted[0] == pytest.approx(0.95)
        assert weighted[-1] == pytest.approx(4.65)


class TestScoreRecord:
    def test_misaligned_tokens_rejected(self):
        with pytest.raises(ValueError):
            ScoreRecord(text="x", tokens=("x",), sentiments=())

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            ScoreRecord(text="x", compound=1.5)
        with pytest.raises(ValueError):
            ScoreRecord(text="x", pos=-0.1)

    def test_frozen(self):
        record = ScoreRecord(text="x")
        with pytest.raises(AttributeError):
            record.compound = 0.5

    def test_empty_record(self):
        record = empty_record("", ScoreOptions())
        assert record.as_dict() == {"neg": 0.0, "neu": 1.0, "pos": 0.0, "compound": 0.0}
        assert empty_record("", ScoreOptions(include_neutral_score=False)).neu is None

    def test_as_dict_without_neutral(self):
        record = ScoreRecord(text="x", neu=None)
        assert "neu" not in record.as_dict()
