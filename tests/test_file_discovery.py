from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pyspelling_review.utils.file_discovery as fd


def test_pattern_expands_to_sorted_files(tmp_path: Path) -> None:
    (tmp_path / "docs" / "nested").mkdir(parents=True)
    (tmp_path / "docs" / "b.md").write_text("b", encoding="utf-8")
    (tmp_path / "docs" / "a.md").write_text("a", encoding="utf-8")
    (tmp_path / "docs" / "nested" / "c.md").write_text("c", encoding="utf-8")
    (tmp_path / "docs" / "notes.txt").write_text("x", encoding="utf-8")

    files = fd.discover_files("docs/**/*.md", cwd=tmp_path)

    assert files == ["docs/a.md", "docs/b.md", "docs/nested/c.md"]


def test_pattern_without_matches_is_empty(tmp_path: Path) -> None:
    assert fd.discover_files("*.rst", cwd=tmp_path) == []


def test_changed_files_lists_modified_then_added(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def fake_git(args, cwd=None):
        calls.append(args)
        if "--diff-filter=M" in args:
            return 0, "README.md\ndocs/guide.md\n"
        return 0, "docs/new.md\nREADME.md\n"

    monkeypatch.setattr(fd, "git_command", fake_git)

    files = fd.discover_files(base_ref="origin/main")

    assert files == ["README.md", "docs/guide.md", "docs/new.md"]
    assert calls[0][-1] == "origin/main...HEAD"


def test_failed_git_command_yields_no_files(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(fd, "git_command", lambda args, cwd=None: (128, "fatal: bad revision"))
    assert fd.discover_files(base_ref="origin/missing") == []


@pytest.mark.parametrize(
    ("environ", "expected"),
    [
        ({"GITHUB_BASE_REF": "main"}, "origin/main"),
        ({"CI_MERGE_REQUEST_TARGET_BRANCH_NAME": "develop"}, "origin/develop"),
        ({}, "HEAD~1"),
    ],
)
def test_default_base_ref(environ: dict[str, str], expected: str) -> None:
    assert fd.default_base_ref(environ) == expected


def test_exclude_ignored_keeps_order() -> None:
    files = ["Gemfile", "README.md", "docs/a.md"]
    assert fd.exclude_ignored(files, ["Gemfile", " docs/a.md "]) == ["README.md"]
