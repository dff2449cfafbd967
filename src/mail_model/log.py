"""Logging setup for Mail Model."""

from __future__ import annotations

import logging

import structlog

from mail_model.config import Settings, get_settings
from mail_model.exceptions import ConfigurationError


def configure_logging(settings: Settings | None = None) -> int:
    """Configure structlog filtering at the configured level.

    Debug mode lowers the level to DEBUG whatever log_level says. The level
    name is still checked.

    Args:
        settings: Package settings. If None, uses default settings.

    Returns:
        The numeric logging level that was applied.

    Raises:
        ConfigurationError: If the level name is not a known logging level.
    """
    settings = settings or get_settings()

    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {settings.log_level!r}")
    if settings.debug:
        level = logging.DEBUG

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    structlog.get_logger().debug("logging_configured", level=settings.log_level, debug=settings.debug)
    return level
