"""
Tests for sentiscore/config.py (environment settings and logging setup)

Run from the project root:
    pytest tests/test_config.py -v
"""
import importlib
import logging
import os
import sys
from unittest.mock import patch

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from sentiscore import config
from sentiscore.core.aggregator import ScoreOptions

ENV_KEYS = [
    "SENTISCORE_LEXICON_PATH",
    "SENTISCORE_RULES_PATH",
    "SENTISCORE_MAX_WORKERS",
    "SENTISCORE_LOG_LEVEL",
    "SENTISCORE_STRIP_QUOTES",
    "SENTISCORE_UNUSUAL_NEGATIONS",
    "SENTISCORE_NEUTRAL_SCORE",
]


@pytest.fixture
def reload_config(monkeypatch):
    """Re-import config under a patched environment, restore it afterwards."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)

    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


# ---------------------------------------------------------------------------
# Tests: environment settings
# ---------------------------------------------------------------------------
class TestEnvSettings:
    def test_defaults(self, reload_config):
        cfg = reload_config()
        assert cfg.LEXICON_PATH is None
        assert cfg.RULES_PATH is None
        assert cfg.MAX_WORKERS == 1
        assert cfg.LOG_LEVEL == "WARNING"
        assert cfg.default_options() == ScoreOptions()

    def test_paths_and_workers(self, reload_config, tmp_path):
        cfg = reload_config(
            SENTISCORE_LEXICON_PATH=str(tmp_path / "lex.txt"),
            SENTISCORE_RULES_PATH=str(tmp_path / "rules.json"),
            SENTISCORE_MAX_WORKERS="6",
            SENTISCORE_LOG_LEVEL="debug",
        )
        assert cfg.LEXICON_PATH == str(tmp_path / "lex.txt")
        assert cfg.RULES_PATH == str(tmp_path / "rules.json")
        assert cfg.MAX_WORKERS == 6
        assert cfg.LOG_LEVEL == "DEBUG"

    def test_empty_path_means_default(self, reload_config):
        assert reload_config(SENTISCORE_LEXICON_PATH="").LEXICON_PATH is None

    @pytest.mark.parametrize("raw,expected", [("abc", 1), ("0", 1), ("-3", 1), ("4", 4)])
    def test_max_workers_parsing(self, reload_config, raw, expected):
        assert reload_config(SENTISCORE_MAX_WORKERS=raw).MAX_WORKERS == expected

    def test_option_flags(self, reload_config):
        cfg = reload_config(
            SENTISCORE_STRIP_QUOTES="no",
            SENTISCORE_UNUSUAL_NEGATIONS="0",
            SENTISCORE_NEUTRAL_SCORE="False",
        )
        assert cfg.default_options() == ScoreOptions(
            include_unusual_negations=False,
            include_neutral_score=False,
            strip_quotation_marks=False,
        )

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " y "])
    def test_truthy_flag_values(self, reload_config, raw):
        assert reload_config(SENTISCORE_STRIP_QUOTES=raw).STRIP_QUOTES is True


# ---------------------------------------------------------------------------
# Tests: logging setup
# ---------------------------------------------------------------------------
class TestConfigureLogging:
    def test_basic_config_when_no_handlers(self):
        root = logging.getLogger()
        with patch.object(root, "handlers", []), \
                patch.object(logging, "basicConfig") as mock_basic:
            config.configure_logging("info")
        mock_basic.assert_called_once_with(level=logging.INFO, format=config.LOG_FORMAT)

    def test_only_sets_level_when_handlers_exist(self):
        root = logging.getLogger()
        previous = root.level
        try:
            with patch.object(root, "handlers", [logging.NullHandler()]), \
                    patch.object(logging, "basicConfig") as mock_basic:
                config.configure_logging("DEBUG")
            mock_basic.assert_not_called()
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_unknown_level_falls_back_to_warning(self):
        root = logging.getLogger()
        previous = root.level
        try:
            with patch.object(root, "handlers", [logging.NullHandler()]):
                config.configure_logging("chatty")
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)

    def test_level_defaults_to_setting(self):
        root = logging.getLogger()
        with patch.object(root, "handlers", []), \
                patch.object(config, "LOG_LEVEL", "ERROR"), \
                patch.object(logging, "basicConfig") as mock_basic:
            config.configure_logging()
        mock_basic.assert_called_once_with(level=logging.ERROR, format=config.LOG_FORMAT)
