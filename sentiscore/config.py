"""
Runtime configuration for sentiscore.

Settings come from the environment, with a ``.env`` file (current directory
or project root) loaded first. Nothing here is read during scoring; the values
only seed the default scorer and the batch CLI.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_PACKAGE_DIR = Path(__file__).parent
_PROJECT_ROOT = _PACKAGE_DIR.parent

load_dotenv(_PROJECT_ROOT / ".env")   # project root
load_dotenv()                         # cwd .env, does not override


def _env_bool(key: str, default: bool) -> bool:
    """1/true/yes/y → True."""
    return str(os.getenv(key, str(int(default)))).strip().lower() in ("1", "true", "yes", "y")


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


# --- Resources ---
LEXICON_PATH = os.getenv("SENTISCORE_LEXICON_PATH") or None
RULES_PATH = os.getenv("SENTISCORE_RULES_PATH") or None

# --- Batch scoring ---
MAX_WORKERS = max(1, _env_int("SENTISCORE_MAX_WORKERS", 1))

# --- Default score options ---
STRIP_QUOTES = _env_bool("SENTISCORE_STRIP_QUOTES", True)
UNUSUAL_NEGATIONS = _env_bool("SENTISCORE_UNUSUAL_NEGATIONS", True)
NEUTRAL_SCORE = _env_bool("SENTISCORE_NEUTRAL_SCORE", True)

# --- Logging ---
LOG_LEVEL = os.getenv("SENTISCORE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_options():
    """ScoreOptions seeded from the environment."""
    from sentiscore.core.aggregator import ScoreOptions

    return ScoreOptions(
        include_unusual_negations=UNUSUAL_NEGATIONS,
        include_neutral_score=NEUTRAL_SCORE,
        strip_quotation_marks=STRIP_QUOTES,
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a root stream handler once; later calls only adjust the level."""
    level_name = (level or LOG_LEVEL).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=getattr(logging, level_name, logging.WARNING), format=LOG_FORMAT)
    else:
        root.setLevel(getattr(logging, level_name, logging.WARNING))
