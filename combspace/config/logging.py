"""Logging configuration for the combspace package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

PACKAGE_LOGGER = "combspace"


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Parameters
    ----------
    level : str
        Log level.
    format : str
        Log format string.
    file : Path | None
        Log file path.
    console : bool
        Whether to log to console.

    Examples
    --------
    >>> config = LoggingConfig()
    >>> config.level
    'INFO'
    >>> config.console
    True
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    file: Path | None = Field(default=None, description="Log file path")
    console: bool = Field(default=True, description="Log to console")


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Apply a logging configuration to the combspace package logger.

    Handlers previously attached by this function are replaced, so calling
    it again reconfigures rather than duplicating output. The root logger
    is left untouched.

    Parameters
    ----------
    config : LoggingConfig
        Logging configuration to apply.

    Returns
    -------
    logging.Logger
        The configured ``combspace`` logger.

    Examples
    --------
    >>> logger = configure_logging(LoggingConfig(level="DEBUG", console=False))
    >>> logger.level == logging.DEBUG
    True
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.level)

    for handler in [h for h in logger.handlers if getattr(h, "_combspace", False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = []
    if config.console:
        handlers.append(logging.StreamHandler())
    if config.file is not None:
        handlers.append(logging.FileHandler(config.file))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._combspace = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
