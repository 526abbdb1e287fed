"""
Runtime settings for terminal snake.

Settings come from the environment (optionally via a .env file loaded with
python-dotenv) and can be overridden from the command line:

    SNAKE_TICK_MS    milliseconds between ticks (default: 100)
    SNAKE_SEED       seed for food placement (default: unseeded)
    SNAKE_LOG_FILE   file to write logs to (default: no logging)
    SNAKE_LOG_LEVEL  logging level name (default: INFO)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from domain.constants import TICK_INTERVAL_MS


class ConfigError(ValueError):
    """A setting has a value that cannot be used."""


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace.

    Values like SNAKE_LOG_FILE="snake.log" keep their quotes when exported from
    some shells, so wrapping quotes are stripped here. Empty values count as unset.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned or None


def _parse_int(name: str, value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class GameConfig:
    tick_ms: int = TICK_INTERVAL_MS
    seed: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    def validate(self) -> "GameConfig":
        if self.tick_ms <= 0:
            raise ConfigError(f"Tick interval must be positive, got {self.tick_ms}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log level {self.log_level!r}")
        self.log_level = self.log_level.upper()
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        tick_ms = _parse_int("SNAKE_TICK_MS", _sanitize_env_value(env.get("SNAKE_TICK_MS")))
        seed = _parse_int("SNAKE_SEED", _sanitize_env_value(env.get("SNAKE_SEED")))

        return cls(
            tick_ms=TICK_INTERVAL_MS if tick_ms is None else tick_ms,
            seed=seed,
            log_file=_sanitize_env_value(env.get("SNAKE_LOG_FILE")),
            log_level=_sanitize_env_value(env.get("SNAKE_LOG_LEVEL")) or "INFO",
        ).validate()

    def override(self, **values) -> "GameConfig":
        """Return a copy with every non-None keyword applied."""
        merged = {
            "tick_ms": self.tick_ms,
            "seed": self.seed,
            "log_file": self.log_file,
            "log_level": self.log_level,
        }
        merged.update({key: value for key, value in values.items() if value is not None})
        return GameConfig(**merged).validate()


def configure_logging(config: GameConfig):
    """
    Send log records to the configured file. The terminal belongs to the
    renderer, so without a log file records are discarded.
    """
    if config.log_file:
        logging.basicConfig(
            filename=config.log_file,
            level=getattr(logging, config.log_level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        logging.basicConfig(handlers=[logging.NullHandler()], level=logging.WARNING)
