from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pyspelling_review.hosting import detect_platform_context, resolve_url
from pyspelling_review.models import Platform
from pyspelling_review.spell_check.errors import UnsupportedPlatformError


@pytest.mark.parametrize("platform", [Platform.GITHUB, Platform.GITLAB, "github", "GitLab"])
def test_resolve_url_uses_tree_scheme(platform: Platform | str) -> None:
    url = resolve_url(platform, "HamstringAssassin/resume", "main", "spec/fixtures/test.yml")
    assert url == "/HamstringAssassin/resume/tree/main/spec/fixtures/test.yml"


def test_supported_platforms_are_github_and_gitlab() -> None:
    assert Platform.supported() == (Platform.GITHUB, Platform.GITLAB)
    for platform in Platform:
        if platform in Platform.supported():
            assert resolve_url(platform, "o/r", "main", "a.md") == "/o/r/tree/main/a.md"
        else:
            with pytest.raises(UnsupportedPlatformError):
                resolve_url(platform, "o/r", "main", "a.md")


def test_resolve_url_keeps_empty_branch() -> None:
    assert resolve_url(Platform.GITHUB, "owner/repo", "", "a.md") == "/owner/repo/tree//a.md"


@pytest.mark.parametrize("platform", [Platform.BITBUCKET, "bitbucket", "gitea"])
def test_resolve_url_rejects_other_platforms(platform: Platform | str) -> None:
    with pytest.raises(UnsupportedPlatformError, match="does not yet support"):
        resolve_url(platform, "owner/repo", "main", "a.md")


class TestDetectPlatformContext:
    def test_github_pull_request(self) -> None:
        context = detect_platform_context(
            {
                "GITHUB_ACTIONS": "true",
                "GITHUB_REPOSITORY": "owner/repo",
                "GITHUB_HEAD_REF": "feature/typos",
                "GITHUB_REF": "refs/pull/42/merge",
            }
        )
        assert context.platform is Platform.GITHUB
        assert context.repo_slug == "owner/repo"
        assert context.branch == "feature/typos"
        assert context.request_id == "42"
        assert context.api_url == "https://api.github.com"

    def test_github_push_has_no_request_id(self) -> None:
        context = detect_platform_context(
            {
                "GITHUB_ACTIONS": "true",
                "GITHUB_REPOSITORY": "owner/repo",
                "GITHUB_REF": "refs/heads/main",
                "GITHUB_REF_NAME": "main",
            }
        )
        assert context.branch == "main"
        assert context.request_id is None

    def test_gitlab_merge_request(self) -> None:
        context = detect_platform_context(
            {
                "GITLAB_CI": "true",
                "CI_PROJECT_PATH": "group/project",
                "CI_MERGE_REQUEST_SOURCE_BRANCH_NAME": "fix-typos",
                "CI_MERGE_REQUEST_IID": "7",
                "CI_API_V4_URL": "https://gitlab.example.com/api/v4",
            }
        )
        assert context.platform is Platform.GITLAB
        assert context.repo_slug == "group/project"
        assert context.branch == "fix-typos"
        assert context.request_id == "7"
        assert context.api_url == "https://gitlab.example.com/api/v4"

    def test_bitbucket_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedPlatformError, match="bitbucket"):
            detect_platform_context({"BITBUCKET_BUILD_NUMBER": "12"})

    def test_unknown_environment_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedPlatformError):
            detect_platform_context({})
