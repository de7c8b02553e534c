"""Formatter and context types used by :mod:`openai_binding.base.logging`."""

from .json_formatter import ISO, JsonFormatter
from .logging_context import LogContext

__all__ = ["ISO", "JsonFormatter", "LogContext"]
