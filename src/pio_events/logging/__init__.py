"""Structured logging utilities."""

from .setup import add_sdk_context, build_processors, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "add_sdk_context",
    "build_processors",
]
