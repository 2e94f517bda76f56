"""Standalone-word matching used to map flagged tokens back to source lines.

A token only counts as present on a line when it occupies a whole
whitespace-delimited segment, optionally followed by one full stop. This
keeps ``io`` from matching inside ``al@test.io`` and keeps URL fragments
from being reported as typos.
"""

from __future__ import annotations

import re

_URL_PATTERN = re.compile(
    r"^https?://(www\.)?"
    r"[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_+.~#?&/=]*)$"
)


def is_url(candidate: str) -> bool:
    """Return True for ``http(s)://`` URLs, with or without path and query."""
    return bool(_URL_PATTERN.match(candidate.strip()))


def _strip_sentence_end(segment: str) -> str:
    if segment.endswith("."):
        return segment[:-1]
    return segment


def contains_word(line: str, token: str) -> bool:
    """Return True when ``token`` appears in ``line`` as a standalone word."""
    wanted = token.strip()
    if not wanted:
        return False
    for segment in line.split():
        if is_url(segment):
            continue
        if _strip_sentence_end(segment).strip() == wanted:
            return True
    return False
