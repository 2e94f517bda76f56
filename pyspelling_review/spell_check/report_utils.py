"""Turn raw pyspelling output into Markdown report fragments.

Each failing file becomes one :class:`ReportFragment`: a link to the file on
the hosting platform followed by a ``Line | Typo`` table. Files whose output
does not contain the failure marker contribute nothing.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from pyspelling_review.hosting.location import resolve_url
from pyspelling_review.models import Platform, ReportFragment

from .ignore_filter import strip_known_noise
from .line_locator import locate_misspelling
from .spell_check_config import FAILURE_MARKER, REPORT_HEADER, TABLE_DIVIDER, TABLE_HEADER

LOGGER = logging.getLogger(__name__)


def _escape_cell(value: str) -> str:
    return value.replace("|", "\\|")


def collect_spell_issues(results: Mapping[str, str]) -> dict[str, str]:
    """Return the entries of ``results`` whose output reports a failure.

    Entries with a blank path cannot be linked to and are skipped.
    """
    issues: dict[str, str] = {}
    for path, output in results.items():
        if FAILURE_MARKER not in output:
            continue
        if not path.strip():
            LOGGER.warning("Skipping spelling failure reported for a blank file path")
            continue
        issues[path] = output
    return issues


def build_fragment(
    file_path: str,
    output: str,
    *,
    ignored_words: Iterable[str],
    location_url: str,
) -> ReportFragment:
    """Build the fragment for a single failing file."""
    fragment = ReportFragment(file_path=file_path, location_url=location_url)
    tokens = strip_known_noise(output.splitlines(), file_path, ignored_words)

    for token in tokens:
        try:
            misspelling = locate_misspelling(file_path, token.strip())
        except OSError as exc:
            LOGGER.warning("Could not read %s while locating misspellings: %s", file_path, exc)
            fragment.error = f"Could not read file: {exc.strerror or exc}"
            break
        fragment.add_misspelling(misspelling)

    LOGGER.info(
        "%s: %d token(s) flagged, %d row(s) located",
        file_path,
        len(tokens),
        len(fragment.rows),
    )
    return fragment


def build_report_fragments(
    results: Mapping[str, str],
    ignored_words: Iterable[str] | None,
    repo_slug: str,
    platform: Platform | str,
    branch: str,
) -> list[ReportFragment]:
    """Build one fragment per failing file, in the order of ``results``."""
    words = list(ignored_words or [])
    fragments: list[ReportFragment] = []
    for file_path, output in collect_spell_issues(results).items():
        location_url = resolve_url(platform, repo_slug, branch, file_path)
        fragments.append(
            build_fragment(
                file_path,
                output,
                ignored_words=words,
                location_url=location_url,
            )
        )
    return fragments


def render_fragment(fragment: ReportFragment) -> str:
    """Render a single fragment as a Markdown section."""
    lines = [f"#### [{fragment.file_path}]({fragment.location_url})", ""]
    if fragment.error:
        lines.append(f"_{fragment.error}_")
        lines.append("")
    lines.append(TABLE_HEADER)
    lines.append(TABLE_DIVIDER)
    for row in fragment.rows:
        lines.append(f"{row.line_number} | {_escape_cell(row.token)}")
    return "\n".join(lines)


def build_report_markdown(fragments: Iterable[ReportFragment]) -> str:
    """Join the report header and every fragment into one Markdown block."""
    sections = [REPORT_HEADER]
    sections.extend(render_fragment(fragment) for fragment in fragments)
    return "\n\n".join(sections) + "\n"


def build_report(
    results: Mapping[str, str],
    ignored_words: Iterable[str] | None,
    repo_slug: str,
    platform: Platform | str,
    branch: str,
) -> str | None:
    """Return the full report, or ``None`` when no file failed."""
    fragments = build_report_fragments(results, ignored_words, repo_slug, platform, branch)
    if not fragments:
        return None
    return build_report_markdown(fragments)
