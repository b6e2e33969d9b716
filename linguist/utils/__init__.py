"""Shared utilities for Linguist."""

from .logging import DEFAULT_FORMAT, preview, setup_logging

__all__ = [
    "DEFAULT_FORMAT",
    "preview",
    "setup_logging",
]
