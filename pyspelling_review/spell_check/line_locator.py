"""Locate the source lines on which a flagged token appears."""

from __future__ import annotations

import logging
from pathlib import Path

from pyspelling_review.models import ConfirmedMisspelling

from .word_matcher import contains_word

LOGGER = logging.getLogger(__name__)


def locate(file_path: str | Path, token: str) -> list[int]:
    """Return every 1-based line number where ``token`` stands alone.

    Raises ``OSError`` when the file cannot be read; callers decide whether
    that is fatal.
    """
    matches: list[int] = []
    line_number = 0
    # Only "\n" ends a line, matching git and the hosting platforms
    with Path(file_path).open("r", encoding="utf-8", errors="replace", newline="\n") as handle:
        for line in handle:
            line_number += 1
            if contains_word(line, token):
                matches.append(line_number)
    return matches


def locate_misspelling(file_path: str | Path, token: str) -> ConfirmedMisspelling:
    """Wrap :func:`locate` in a :class:`ConfirmedMisspelling`."""
    line_numbers = locate(file_path, token)
    if not line_numbers:
        LOGGER.debug("Token %r not found as a standalone word in %s", token, file_path)
    return ConfirmedMisspelling(
        file_path=str(file_path),
        token=token,
        line_numbers=line_numbers,
    )
