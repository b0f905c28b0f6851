"""Logging for the Unstructured client.

Adapted from CAMEL-AI (https://github.com/camel-ai/camel)
Copyright 2023-2026 @ CAMEL-AI.org. All Rights Reserved.
Licensed under the Apache License, Version 2.0
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Iterable, Mapping

LOGGER_NAME = "unstructured_client"
LOGGING_DISABLED_ENV = "UNSTRUCTURED_CLIENT_LOGGING_DISABLED"
LOG_LEVEL_ENV = "UNSTRUCTURED_CLIENT_LOG_LEVEL"
REDACTED = "<redacted>"

_logger = logging.getLogger(LOGGER_NAME)


def _configure_library_logging(level: str | int = logging.WARNING) -> None:
    """Attach a stderr handler to the client's logger, once."""
    if _logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    _logger.addHandler(handler)
    try:
        _logger.setLevel(level)
    except ValueError:
        _logger.setLevel(logging.WARNING)
        _logger.warning("Ignoring unknown %s=%r", LOG_LEVEL_ENV, level)


def get_logger(name: str) -> logging.Logger:
    """Get a child logger of 'unstructured_client'.

    Args:
        name: Module name, e.g. 'client' or 'transport'.

    Returns:
        The logger 'unstructured_client.{name}'.
    """
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def set_log_level(level: str | int) -> None:
    """Set the logging level for the client and its handlers.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', logging.DEBUG).
    """
    _logger.setLevel(level)
    for handler in _logger.handlers:
        handler.setLevel(level)


def redact_headers(
    headers: Mapping[str, str], secret_names: Iterable[str]
) -> dict[str, str]:
    """Copy request headers for logging with secret values masked.

    Header names are matched case-insensitively.
    """
    secrets = {name.lower() for name in secret_names}
    return {
        name: REDACTED if name.lower() in secrets else value
        for name, value in headers.items()
    }


if os.environ.get(LOGGING_DISABLED_ENV, "false").lower() != "true":
    _configure_library_logging(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
