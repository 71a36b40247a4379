# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Logging helpers.

Loggers live under the ``asgi_mock_client`` namespace and carry structured
context through ``extra={"event": ..., ...}``. Nothing is configured on
import; call :func:`setup_logger` to get readable output while debugging a
test run.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from typing import Any, ClassVar

ROOT_LOGGER_NAME = "asgi_mock_client"

# LogRecord attributes that are not user supplied ``extra`` fields
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger inside the package namespace."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {key: value for key, value in vars(record).items() if key not in _RESERVED}


class ColoredFormatter(logging.Formatter):
    """Human readable formatter with ANSI level colors and trailing extras."""

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str | None = None, *, use_color: bool = True) -> None:
        super().__init__(fmt or "%(levelname)s %(name)s: %(message)s")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if self.use_color and levelname in self.LEVEL_COLORS:
            record.levelname = f"{self.LEVEL_COLORS[levelname]}{levelname}{self.RESET}"
        try:
            line = super().format(record)
        finally:
            record.levelname = levelname
        extras = _extra_fields(record)
        if extras:
            line += " " + " ".join(f"{key}={value}" for key, value in sorted(extras.items()))
        return line


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, serializer: Callable[[dict[str, Any]], str] | None = None) -> None:
        super().__init__()
        self._serialize = serializer or (lambda payload: json.dumps(payload, default=str, separators=(",", ":")))

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = _extra_fields(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return self._serialize(payload)


def setup_logger(
    *,
    level: int | str = logging.INFO,
    use_json: bool = False,
    json_serializer: Callable[[dict[str, Any]], str] | None = None,
    stream: Any = None,
    force: bool = False,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Repeated calls are no-ops unless ``force`` is set, in which case the
    previously installed handler is replaced.

    Args:
        level: Level for the package logger
        use_json: Emit JSON lines instead of colored text
        json_serializer: Custom serializer for JSON payloads
        stream: Target stream, defaults to stderr
        force: Replace an existing handler

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    installed = [h for h in logger.handlers if getattr(h, "_asgi_mock_client", False)]
    if installed and not force:
        return logger
    for handler in installed:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler._asgi_mock_client = True  # type: ignore[attr-defined]
    if use_json:
        handler.setFormatter(JSONFormatter(json_serializer))
    else:
        handler.setFormatter(ColoredFormatter(use_color=stream is None and sys.stderr.isatty()))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["ColoredFormatter", "JSONFormatter", "ROOT_LOGGER_NAME", "get_logger", "setup_logger"]
