"""Spell-check review add-on for pull and merge requests.

Runs ``pyspelling`` over changed files and turns its text output into a
Markdown report that can be posted back to the review.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
