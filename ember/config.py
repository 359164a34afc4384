from __future__ import annotations
import logging
import os

from ember.errors import EmberConfigError

# Defaults
DEFAULT_PROMPT = "> "
DEFAULT_ON_ERROR = "continue"
DEFAULT_LOG_LEVEL = "WARNING"

ON_ERROR_POLICIES = ("continue", "exit")


def get_prompt() -> str:
    return os.environ.get("EMBER_PROMPT", DEFAULT_PROMPT)


def get_on_error() -> str:
    policy = os.environ.get("EMBER_ON_ERROR", DEFAULT_ON_ERROR).strip().lower()
    if policy not in ON_ERROR_POLICIES:
        raise EmberConfigError(
            f"EMBER_ON_ERROR must be one of {', '.join(ON_ERROR_POLICIES)}, got {policy!r}"
        )
    return policy


def get_log_level() -> int:
    return parse_log_level(os.environ.get("EMBER_LOG_LEVEL", DEFAULT_LOG_LEVEL))


def parse_log_level(raw: str) -> int:
    """Level name (any case) or number; EmberConfigError if logging has no such level."""
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise EmberConfigError(f"Unknown log level {raw!r}")
    return level
