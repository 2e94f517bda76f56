"""Resolve the list of files to spell-check.

Either expands a glob pattern or asks git for the files modified and added
on the current branch relative to a base ref.
"""

from __future__ import annotations

import glob
import logging
import os
import subprocess
from pathlib import Path
from typing import Iterable, Mapping

LOGGER = logging.getLogger(__name__)

FALLBACK_BASE_REF = "HEAD~1"


def default_base_ref(environ: Mapping[str, str] | None = None) -> str:
    """Return the ref to diff against, derived from CI variables when present."""
    env = os.environ if environ is None else environ
    target = env.get("GITHUB_BASE_REF") or env.get("CI_MERGE_REQUEST_TARGET_BRANCH_NAME")
    if target:
        return f"origin/{target}"
    return FALLBACK_BASE_REF


def git_command(args: list[str], cwd: Path | None = None) -> tuple[int, str]:
    """Run a git command and return (exit_code, stdout)."""
    cmd = ["git"] + args
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        return 1, str(exc)
    if result.returncode != 0:
        return result.returncode, result.stderr
    return result.returncode, result.stdout


def _changed_files(diff_filter: str, base_ref: str, cwd: Path | None) -> list[str]:
    exit_code, output = git_command(
        ["diff", "--name-only", f"--diff-filter={diff_filter}", f"{base_ref}...HEAD"],
        cwd,
    )
    if exit_code != 0:
        LOGGER.error("git diff against %s failed: %s", base_ref, output.strip())
        return []
    return [line.strip() for line in output.splitlines() if line.strip()]


def _dedupe(paths: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for path in paths:
        if path in seen:
            continue
        seen.add(path)
        ordered.append(path)
    return ordered


def discover_files(
    pattern: str | None = None,
    *,
    base_ref: str | None = None,
    cwd: Path | None = None,
) -> list[str]:
    """Return the files to check, in a stable order.

    With ``pattern`` the glob is expanded (recursively, files only) and
    sorted. Without it, modified files come first and added files after.
    """
    if pattern:
        root = cwd or Path.cwd()
        matches = glob.glob(pattern, root_dir=str(root), recursive=True)
        files = sorted(match for match in matches if (root / match).is_file())
        LOGGER.info("Pattern %s matched %d file(s)", pattern, len(files))
        return files

    ref = base_ref or default_base_ref()
    modified = _changed_files("M", ref, cwd)
    added = _changed_files("A", ref, cwd)
    files = _dedupe(modified + added)
    LOGGER.info(
        "Found %d modified and %d added file(s) against %s",
        len(modified),
        len(added),
        ref,
    )
    return files


def exclude_ignored(files: Iterable[str], ignored_files: Iterable[str]) -> list[str]:
    """Drop every path listed in ``ignored_files``, preserving order."""
    ignored = {path.strip() for path in ignored_files}
    return [path for path in files if path not in ignored]
