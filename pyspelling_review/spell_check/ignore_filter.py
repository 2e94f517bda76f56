"""Filtering of checker boilerplate and user-ignored words.

``pyspelling`` surrounds the misspelled tokens with banner, header and
separator lines. Everything left after removing those lines (and any word
the user chose to ignore) is treated as one reportable token per line.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .spell_check_config import (
    FAILURE_BANNER,
    MISSPELLED_HEADER,
    SEPARATOR_LINE,
    SOURCE_MARKER_PREFIX,
)


def _boilerplate_variants(file_path: str) -> set[str]:
    return {
        MISSPELLED_HEADER,
        f"{SOURCE_MARKER_PREFIX} {file_path}",
        FAILURE_BANNER,
        SEPARATOR_LINE,
        "",
    }


def is_boilerplate(line: str, file_path: str) -> bool:
    """Return True when ``line`` is checker output rather than a token."""
    return line.strip() in _boilerplate_variants(file_path)


def strip_known_noise(
    lines: Sequence[str],
    file_path: str,
    ignored_words: Iterable[str] | None = None,
) -> list[str]:
    """Drop boilerplate lines and ignored words, keeping everything else in order.

    Every occurrence is removed, not just the first. Repeated tokens that are
    not ignored are kept so that each is reported.
    """
    noise = _boilerplate_variants(file_path)
    noise.update(word.strip() for word in (ignored_words or ()))
    return [line for line in lines if line.strip() not in noise]
