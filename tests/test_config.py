"""Tests for environment-driven configuration.

HOW: The config module reads the environment at import time, so each test
sets variables with monkeypatch and reloads the module. The fixture
reloads it once more afterwards to restore the defaults.
"""

import importlib

import pytest

from transcript_aligner import config


@pytest.fixture
def reload_config(monkeypatch):
    for name in ("TRANSCRIPT_ALIGNER_METHOD", "TRANSCRIPT_ALIGNER_LOOKAHEAD",
                 "TRANSCRIPT_ALIGNER_MAX_CELLS", "TRANSCRIPT_ALIGNER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:

    def test_defaults(self, reload_config):
        module = reload_config()
        assert module.DEFAULT_METHOD == "align"
        assert module.DEFAULT_LOOKAHEAD == 6
        assert module.MAX_ALIGNMENT_CELLS == 25_000_000
        assert module.LOG_LEVEL == "WARNING"

    def test_overrides(self, reload_config, monkeypatch):
        monkeypatch.setenv("TRANSCRIPT_ALIGNER_METHOD", "windowed")
        monkeypatch.setenv("TRANSCRIPT_ALIGNER_LOOKAHEAD", "10")
        monkeypatch.setenv("TRANSCRIPT_ALIGNER_MAX_CELLS", "1000")
        monkeypatch.setenv("TRANSCRIPT_ALIGNER_LOG_LEVEL", "debug")
        module = reload_config()
        assert module.DEFAULT_METHOD == "windowed"
        assert module.DEFAULT_LOOKAHEAD == 10
        assert module.MAX_ALIGNMENT_CELLS == 1000
        assert module.LOG_LEVEL == "DEBUG"

    def test_malformed_integer(self, reload_config, monkeypatch):
        monkeypatch.setenv("TRANSCRIPT_ALIGNER_LOOKAHEAD", "six")
        with pytest.raises(ValueError, match="TRANSCRIPT_ALIGNER_LOOKAHEAD"):
            reload_config()
