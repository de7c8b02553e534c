"""Structured logging for the binding.

Every logger handed out by :func:`get_logger` lives under the shared
``openai_binding`` logger. That logger owns one console handler writing JSON
lines to stderr and, optionally, one rotating file handler installed by
:func:`configure_logger`. Handlers added by applications are left alone.

The level comes from ``OPENAI_BINDING_LOG_LEVEL`` (default ``INFO``). Events
are emitted with :func:`log_event`, one JSON object per record::

    {"ts": "...", "level": "INFO", "logger": "openai_binding.client",
     "event": "http.response", "method": "POST", "endpoint": "/chat/completions",
     "status": 200, "elapsed_ms": 412}
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "openai_binding"
LOG_LEVEL_ENV = "OPENAI_BINDING_LOG_LEVEL"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_INITIALIZED_ATTR = "_binding_logger_initialized"
_CONSOLE_ATTR = "_binding_console_handler"
_FILE_ATTR = "_binding_file_handler"

_FILE_MAX_BYTES = 10 * 1024 * 1024
_FILE_BACKUPS = 5

_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name to its numeric value; unknown or empty names give ``default``."""
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _tagged(handler: logging.Handler, attr: str, level: int, json_mode: bool) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, attr, True)
    return handler


def _managed(logger: logging.Logger, attr: str) -> list:
    return [h for h in logger.handlers if getattr(h, attr, False)]


def _drop(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    with contextlib.suppress(Exception):
        handler.close()


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Return the shared logger, creating its console handler on first use.

    On later calls the level is re-read from the environment and the console
    handler is pointed at the current ``sys.stderr`` (test runners swap it).
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    wanted = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    logger.setLevel(wanted)

    if not getattr(logger, _INITIALIZED_ATTR, False):
        logger.handlers[:] = [_tagged(logging.StreamHandler(sys.stderr), _CONSOLE_ATTR, wanted, json_mode)]
        logger.propagate = False
        setattr(logger, _INITIALIZED_ATTR, True)
        return logger

    for handler in _managed(logger, _CONSOLE_ATTR):
        stream = getattr(handler, "stream", None)
        if stream is None or getattr(stream, "closed", False):
            _drop(logger, handler)
            logger.addHandler(_tagged(logging.StreamHandler(sys.stderr), _CONSOLE_ATTR, wanted, json_mode))
            continue
        handler.setLevel(wanted)
        if isinstance(handler, logging.StreamHandler) and stream is not sys.stderr:
            handler.setStream(sys.stderr)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the shared ``openai_binding`` logger.

    Names outside the hierarchy are prefixed with ``openai_binding.`` so every
    record reaches the managed handlers.
    """
    base = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    child = logging.getLogger(name)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Adjust the shared logger at runtime.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level. Applied
        to the logger and to every handler it owns.
    file_path:
        Path of a rotating log file (10 MB, 5 backups). Any file handler
        installed by a previous call is replaced; ``None`` just removes it.
    json_mode:
        JSON lines (default) or plain text for the file handler.

    Returns
    -------
    logging.Logger
        The shared ``openai_binding`` logger.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)
    if isinstance(level, str):
        logger.setLevel(_parse_level(level, default=logger.level))
    elif level is not None:
        logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(logger.level)

    for handler in _managed(logger, _FILE_ATTR):
        _drop(logger, handler)
    if file_path is None:
        return logger

    path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    file_handler = RotatingFileHandler(path, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8")
    logger.addHandler(_tagged(file_handler, _FILE_ATTR, logger.level, json_mode))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit ``event`` as one JSON record.

    ``ctx`` fields come first, then ``fields``; ``None`` values are dropped
    unless ``keep_none`` is set. Nothing is serialized when ``level`` is
    disabled.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_dict())
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
]
