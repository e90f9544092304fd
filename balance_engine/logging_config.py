"""Logging setup shared by the CLI, demo and UI entry points."""

from __future__ import annotations

import logging

from balance_engine.errors import ConfigError

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""

    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ConfigError(f"Invalid log level '{level}', expected one of {sorted(VALID_LOG_LEVELS)}")

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def log_fallback(logger: logging.Logger, component: str, reason: str | None = None) -> None:
    """Record that a component replaced its output with a fixed fallback."""

    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    logger.warning("Fallback applied for %s (%s)", component, reason or "unspecified", extra=extra)
