"""
Batch Lexicon Sentiment Scorer

Loads the lexicon once, scores every text of the input, and writes the scored
rows to CSV (or prints them). Input is either a .csv file with a text column
or a plain text file with one text per line.

Usage:
    python batch_score.py INPUT [options]

Options:
    --column STR        Text column for .csv input (default: text)
    --output STR        Write scored rows to this CSV instead of printing
    --summary-by STR    Also print per-category summary for this column
    --workers INT       Scoring threads (default: SENTISCORE_MAX_WORKERS or 1)
    --lexicon STR       Lexicon file (default: VADER lexicon from vaderSentiment)
    --rules STR         JSON rules file extending negators/boosters/idioms
    --keep-quotes       Do not strip quotation marks around words
    --strict-negations  Only listed negations, not every "n't" contraction
    --no-neutral        Leave the neu column empty
    --dry-run           Score but do not write the output file
"""
import argparse
import os
import sys
from dataclasses import replace
from typing import List, Optional

import pandas as pd

from sentiscore import config
from sentiscore.core.analyzer import SentimentScorer
from sentiscore.core.errors import ConfigurationError
from sentiscore.core.lexicon import LexiconOptions, load_lexicon
from sentiscore.utils.frame import SCORE_COLUMNS, score_frame, summarize_scores


def _read_input(path: str, column: str) -> pd.DataFrame:
    if path.lower().endswith(".csv"):
        return pd.read_csv(path)
    with open(path, encoding="utf-8") as f:
        lines = [line.rstrip("\n") for line in f]
    return pd.DataFrame({column: lines})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Batch Lexicon Sentiment Scorer")
    parser.add_argument("input", type=str)
    parser.add_argument("--column",     type=str, default="text")
    parser.add_argument("--output",     type=str, default=None)
    parser.add_argument("--summary-by", type=str, default=None)
    parser.add_argument("--workers",    type=int, default=config.MAX_WORKERS)
    parser.add_argument("--lexicon",    type=str, default=config.LEXICON_PATH)
    parser.add_argument("--rules",      type=str, default=config.RULES_PATH)
    parser.add_argument("--keep-quotes",      action="store_true")
    parser.add_argument("--strict-negations", action="store_true")
    parser.add_argument("--no-neutral",       action="store_true")
    parser.add_argument("--dry-run",          action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config.configure_logging()

    print("[Batch] Lexicon Sentiment Scorer starting...")
    print(f"  Input:   {args.input}")
    print(f"  Lexicon: {args.lexicon or 'vaderSentiment default'}")
    print(f"  Workers: {args.workers}")
    print(f"  Dry run: {args.dry_run}")

    # Load once, before touching the input, so a bad lexicon stops everything
    try:
        handle = load_lexicon(args.lexicon, LexiconOptions(rules_path=args.rules))
    except ConfigurationError as e:
        print(f"[Batch] Configuration error: {e}")
        return 2

    if not os.path.isfile(args.input):
        print(f"[Batch] Input file not found: {args.input}")
        return 1
    df = _read_input(args.input, args.column)
    if args.column not in df.columns:
        print(f"[Batch] Column '{args.column}' not found. Available: {list(df.columns)}")
        return 1

    options = config.default_options()
    if args.keep_quotes:
        options = replace(options, strip_quotation_marks=False)
    if args.strict_negations:
        options = replace(options, include_unusual_negations=False)
    if args.no_neutral:
        options = replace(options, include_neutral_score=False)

    scorer = SentimentScorer(handle=handle, options=options, max_workers=args.workers)
    print(f"[Batch] Scoring {len(df)} texts...")
    scored = score_frame(df, args.column, scorer)

    if args.summary_by:
        if args.summary_by not in scored.columns:
            print(f"[Batch] Summary column '{args.summary_by}' not found; skipping summary.")
        else:
            print("[Batch] Summary:")
            print(summarize_scores(scored, args.summary_by).to_string(index=False))

    if args.output and not args.dry_run:
        scored.to_csv(args.output, index=False)
        print(f"[Batch] Wrote {len(scored)} rows to {args.output}")
    else:
        print(scored[[args.column, *SCORE_COLUMNS]].to_string(index=False))

    print(f"[Batch] Complete. Total scored: {len(scored)}.")
    if args.dry_run:
        print("[Batch] Dry-run mode: no output file was written.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
