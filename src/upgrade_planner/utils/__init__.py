"""Shared helpers."""

from .logger import get_logger, set_verbose

__all__ = ["get_logger", "set_verbose"]
