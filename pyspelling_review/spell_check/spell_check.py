"""Spell-check the files of a pull/merge request and report misspellings.

This module drives the whole run: it validates the configuration, checks
that pyspelling and a dictionary backend are installed, resolves the files
to check, runs the checker once per file and, when any file fails, builds
the Markdown report and hands it to a publisher.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from dotenv import load_dotenv

from pyspelling_review.hosting import (
    PlatformContext,
    ReportPublisher,
    StdoutPublisher,
    coerce_platform,
    create_publisher,
    detect_platform_context,
)
from pyspelling_review.models import CheckConfiguration, Platform
from pyspelling_review.utils.file_discovery import discover_files, exclude_ignored

from .errors import NoFilesFoundError, SpellCheckConfigurationError, SpellCheckError
from .pyspelling_runner import CheckerRunner, check_for_dependencies, run_pyspelling
from .report_utils import build_report, collect_spell_issues
from .spell_check_config import CONFIGURATION_ERROR_MESSAGE

LOGGER = logging.getLogger(__name__)

DependencyChecker = Callable[[bool], None]
FileResolver = Callable[[CheckConfiguration], list[str]]


def validate_configuration(config: CheckConfiguration) -> str:
    """Return the profile name, raising when it is missing or empty."""
    profile_name = config.profile_name
    if not profile_name:
        raise SpellCheckConfigurationError(CONFIGURATION_ERROR_MESSAGE)
    return profile_name


def _default_dependency_checker(require_all_backends: bool) -> None:
    check_for_dependencies(require_all_backends=require_all_backends)


def _discover(config: CheckConfiguration) -> list[str]:
    return discover_files(config.files_pattern, base_ref=config.base_ref)


def resolve_files(
    config: CheckConfiguration,
    *,
    file_resolver: FileResolver | None = None,
) -> list[str]:
    """Return the files to check with ignored files removed."""
    found = (file_resolver or _discover)(config)
    files = exclude_ignored(found, config.ignored_files)
    skipped = len(found) - len(files)
    if skipped:
        LOGGER.info("Skipping %d ignored file(s)", skipped)
    if not files:
        raise NoFilesFoundError("No files found to check")
    return files


def run_checks(
    profile_name: str,
    files: Iterable[str],
    runner: CheckerRunner | None = None,
) -> Mapping[str, str]:
    """Run the checker once per file, in order, and return the raw outputs."""
    run = runner or run_pyspelling
    results: dict[str, str] = {}
    for file_path in files:
        LOGGER.info("Checking %s with matrix %s", file_path, profile_name)
        results[file_path] = run(profile_name, file_path)
    return MappingProxyType(results)


def check_spelling(
    config: CheckConfiguration,
    *,
    platform_context: PlatformContext | None = None,
    runner: CheckerRunner | None = None,
    publisher: ReportPublisher | None = None,
    dependency_checker: DependencyChecker | None = None,
    file_resolver: FileResolver | None = None,
) -> str | None:
    """Run the full pipeline and return the published report.

    Returns ``None`` when no file has misspellings; nothing is published in
    that case. Fatal problems raise a :class:`SpellCheckError` subclass.

    The platform is detected from CI variables only once a report is needed,
    and ``publisher`` defaults to the one :func:`create_publisher` picks for
    that platform.
    """
    profile_name = validate_configuration(config)
    (dependency_checker or _default_dependency_checker)(config.require_all_backends)

    files = resolve_files(config, file_resolver=file_resolver)
    LOGGER.info("Spell-checking %d file(s)", len(files))

    results = run_checks(profile_name, files, runner)
    spell_issues = collect_spell_issues(results)
    if not spell_issues:
        LOGGER.info("No spelling issues found")
        return None

    LOGGER.info("%d file(s) with spelling issues", len(spell_issues))
    context = platform_context or detect_platform_context()
    report = build_report(
        spell_issues,
        config.ignored_words,
        context.repo_slug,
        context.platform,
        context.branch,
    )
    if report is None:
        return None

    (publisher or create_publisher(context)).publish(report)
    return report


def load_ignored_words_file(path: Path) -> list[str]:
    """Read one word per line, skipping blanks and ``#`` comments."""
    with path.open("r", encoding="utf-8") as handle:
        return [
            line.strip()
            for line in handle
            if line.strip() and not line.strip().startswith("#")
        ]


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run pyspelling on changed files and report misspellings to the pull/merge request."
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Matrix name in .pyspelling.yml (default: $PYSPELLING_MATRIX).",
    )
    parser.add_argument(
        "--files",
        default=None,
        metavar="GLOB",
        help="Glob of files to check (default: files modified or added on this branch).",
    )
    parser.add_argument(
        "--base-ref",
        default=None,
        help="Git ref to diff against when --files is not given (default: the CI target branch, else HEAD~1).",
    )
    parser.add_argument(
        "--ignore-word",
        action="append",
        dest="ignored_words",
        help="Word to leave out of the report (case-sensitive, can be specified multiple times).",
    )
    parser.add_argument(
        "--ignore-words-file",
        type=Path,
        default=None,
        help="File with one word to ignore per line; lines starting with # are comments.",
    )
    parser.add_argument(
        "--ignore-file",
        action="append",
        dest="ignored_files",
        help="Path to leave out of the check (can be specified multiple times).",
    )
    parser.add_argument(
        "--require-all-backends",
        action="store_true",
        help="Require both aspell and hunspell instead of either one.",
    )
    parser.add_argument(
        "--platform",
        default=None,
        choices=Platform.all_values(),
        help="Hosting platform to link to instead of detecting it from CI variables (requires --repo-slug and --branch).",
    )
    parser.add_argument(
        "--repo-slug",
        default=None,
        help="Repository slug (owner/name) used with --platform.",
    )
    parser.add_argument(
        "--branch",
        default=None,
        help="Branch name used in file links with --platform.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the report instead of posting it to the review.",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        default=None,
        help="Path to a .env file with configuration and tokens.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.platform is not None and not (args.repo_slug and args.branch):
        parser.error("--platform requires --repo-slug and --branch")
    return args


def build_configuration(args: argparse.Namespace) -> CheckConfiguration:
    """Merge environment configuration with command-line flags."""
    if args.dotenv is not None:
        load_dotenv(dotenv_path=args.dotenv, override=True)
    else:
        load_dotenv()

    ignored_words = list(args.ignored_words or [])
    if args.ignore_words_file is not None:
        ignored_words.extend(load_ignored_words_file(args.ignore_words_file))

    return CheckConfiguration.from_env(os.environ).merged(
        profile_name=args.name,
        ignored_words=ignored_words,
        ignored_files=args.ignored_files or [],
        files_pattern=args.files,
        base_ref=args.base_ref,
        require_all_backends=args.require_all_backends or None,
    )


def context_from_args(args: argparse.Namespace) -> PlatformContext | None:
    """Return a context built from --platform/--repo-slug/--branch, if given."""
    if args.platform is None:
        return None
    return PlatformContext(
        platform=coerce_platform(args.platform),
        repo_slug=args.repo_slug or "",
        branch=args.branch or "",
    )


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = build_configuration(args)
        context = context_from_args(args)
        publisher: ReportPublisher | None = StdoutPublisher() if args.dry_run else None
        report = check_spelling(config, platform_context=context, publisher=publisher)
    except OSError as exc:
        LOGGER.error("%s", exc)
        return 1
    except SpellCheckError as exc:
        LOGGER.error("%s", exc)
        return 1

    if report is None:
        print("No spelling issues found.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
