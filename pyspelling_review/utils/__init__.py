"""Utility modules for pyspelling-review."""

from __future__ import annotations

from . import file_discovery

__all__ = [
    "file_discovery",
]
