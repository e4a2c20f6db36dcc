"""Logging micro API for resume-insights."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
