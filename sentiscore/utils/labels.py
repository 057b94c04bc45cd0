"""
Compound score → label mapping shared by the DataFrame adapter and the CLI.
"""

LABELS = ("Negative", "Somewhat-Negative", "Neutral", "Somewhat-Positive", "Positive")


def score_to_label(compound: float) -> str:
    if compound <= -0.35:
        return "Negative"
    elif compound <= -0.15:
        return "Somewhat-Negative"
    elif compound < 0.15:
        return "Neutral"
    elif compound < 0.35:
        return "Somewhat-Positive"
    else:
        return "Positive"
