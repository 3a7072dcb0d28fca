from __future__ import annotations
import logging
import os
from dataclasses import dataclass

from keybench.errors import ConfigError


# Defaults
_DEFAULT_ITERATIONS = 1_000_000
_DEFAULT_REPEAT = 1
_DEFAULT_WARMUP = 1000
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    iterations: int = _DEFAULT_ITERATIONS
    repeat: int = _DEFAULT_REPEAT
    warmup: int = _DEFAULT_WARMUP
    log_level: int = logging.WARNING


def int_from_env(var: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{var} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{var} must be >= {minimum}, got {value}")
    return value


def log_level_from_env(var: str, default: str = _DEFAULT_LOG_LEVEL) -> int:
    raw = (os.environ.get(var) or "").strip() or default
    level = logging.getLevelName(raw.upper())
    # getLevelName maps unknown names to the string "Level <name>"
    if not isinstance(level, int):
        raise ConfigError(f"{var} is not a logging level: {raw!r}")
    return level


def get_iterations() -> int:
    return int_from_env('KEYBENCH_ITERATIONS', _DEFAULT_ITERATIONS)


def get_repeat() -> int:
    return int_from_env('KEYBENCH_REPEAT', _DEFAULT_REPEAT, minimum=1)


def get_warmup() -> int:
    return int_from_env('KEYBENCH_WARMUP', _DEFAULT_WARMUP)


def get_log_level() -> int:
    return log_level_from_env('KEYBENCH_LOG_LEVEL')


def load_settings() -> Settings:
    return Settings(
        iterations=get_iterations(),
        repeat=get_repeat(),
        warmup=get_warmup(),
        log_level=get_log_level(),
    )
