"""
Tests for config.py - environment settings and overrides.
"""

import logging
import sys
import os
from unittest.mock import patch

import pytest

# Add source root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import ConfigError, GameConfig, _sanitize_env_value, configure_logging


class TestSanitizeEnvValue:
    """Tests for _sanitize_env_value()."""

    def test_none(self):
        assert _sanitize_env_value(None) is None

    def test_strips_whitespace_and_quotes(self):
        assert _sanitize_env_value('  "snake.log" ') == "snake.log"
        assert _sanitize_env_value("'150'") == "150"

    def test_empty_is_unset(self):
        assert _sanitize_env_value("   ") is None
        assert _sanitize_env_value('""') is None


class TestGameConfig:
    """Tests for GameConfig."""

    def test_defaults(self):
        config = GameConfig.from_env({})
        assert config.tick_ms == 100
        assert config.tick_seconds == 0.1
        assert config.seed is None
        assert config.log_file is None
        assert config.log_level == "INFO"

    def test_from_env(self):
        config = GameConfig.from_env({
            "SNAKE_TICK_MS": "150",
            "SNAKE_SEED": '"42"',
            "SNAKE_LOG_FILE": "snake.log",
            "SNAKE_LOG_LEVEL": "debug",
        })
        assert config.tick_ms == 150
        assert config.seed == 42
        assert config.log_file == "snake.log"
        assert config.log_level == "DEBUG"

    def test_bad_integer(self):
        with pytest.raises(ConfigError, match="SNAKE_TICK_MS"):
            GameConfig.from_env({"SNAKE_TICK_MS": "fast"})

    def test_non_positive_tick(self):
        with pytest.raises(ConfigError):
            GameConfig.from_env({"SNAKE_TICK_MS": "0"})

    def test_unknown_log_level(self):
        with pytest.raises(ConfigError):
            GameConfig.from_env({"SNAKE_LOG_LEVEL": "chatty"})

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)

    def test_override_applies_only_given_values(self):
        base = GameConfig.from_env({"SNAKE_TICK_MS": "150", "SNAKE_SEED": "1"})
        merged = base.override(tick_ms=None, seed=7, log_file=None)
        assert merged.tick_ms == 150
        assert merged.seed == 7
        assert base.seed == 1


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @patch("config.logging.basicConfig")
    def test_log_file(self, mock_basic):
        configure_logging(GameConfig(log_file="snake.log", log_level="DEBUG"))
        kwargs = mock_basic.call_args[1]
        assert kwargs["filename"] == "snake.log"
        assert kwargs["level"] == logging.DEBUG

    @patch("config.logging.basicConfig")
    def test_no_log_file_discards_records(self, mock_basic):
        configure_logging(GameConfig())
        handlers = mock_basic.call_args[1]["handlers"]
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)
