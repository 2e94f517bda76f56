"""Detect the hosting platform and review metadata from CI variables.

Detection runs once per run. Everything downstream receives the resulting
:class:`PlatformContext` instead of probing the environment again.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Mapping

from pyspelling_review.models import Platform
from pyspelling_review.spell_check.errors import UnsupportedPlatformError

from .location import UNSUPPORTED_PLATFORM_MESSAGE

LOGGER = logging.getLogger(__name__)

DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_GITLAB_API_URL = "https://gitlab.com/api/v4"

_PULL_REF_RE = re.compile(r"^refs/pull/(?P<number>\d+)/")


@dataclass(frozen=True)
class PlatformContext:
    """Where the current change lives and how to reach its review."""

    platform: Platform
    repo_slug: str
    branch: str
    request_id: str | None = None
    api_url: str | None = None


def _github_context(environ: Mapping[str, str]) -> PlatformContext:
    request_id = None
    match = _PULL_REF_RE.match(environ.get("GITHUB_REF", ""))
    if match:
        request_id = match.group("number")
    branch = environ.get("GITHUB_HEAD_REF") or environ.get("GITHUB_REF_NAME", "")
    return PlatformContext(
        platform=Platform.GITHUB,
        repo_slug=environ.get("GITHUB_REPOSITORY", ""),
        branch=branch,
        request_id=request_id,
        api_url=environ.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL,
    )


def _gitlab_context(environ: Mapping[str, str]) -> PlatformContext:
    branch = environ.get("CI_MERGE_REQUEST_SOURCE_BRANCH_NAME") or environ.get(
        "CI_COMMIT_REF_NAME", ""
    )
    return PlatformContext(
        platform=Platform.GITLAB,
        repo_slug=environ.get("CI_PROJECT_PATH", ""),
        branch=branch,
        request_id=environ.get("CI_MERGE_REQUEST_IID") or None,
        api_url=environ.get("CI_API_V4_URL") or DEFAULT_GITLAB_API_URL,
    )


def detect_platform_context(environ: Mapping[str, str] | None = None) -> PlatformContext:
    """Return the :class:`PlatformContext` for the running CI job.

    Raises :class:`UnsupportedPlatformError` on Bitbucket or when neither
    GitHub Actions nor GitLab CI variables are present.
    """
    env = os.environ if environ is None else environ

    if env.get("GITHUB_ACTIONS"):
        context = _github_context(env)
    elif env.get("GITLAB_CI"):
        context = _gitlab_context(env)
    elif env.get("BITBUCKET_BUILD_NUMBER"):
        raise UnsupportedPlatformError(
            UNSUPPORTED_PLATFORM_MESSAGE.format(platform=Platform.BITBUCKET.value)
        )
    else:
        raise UnsupportedPlatformError(
            UNSUPPORTED_PLATFORM_MESSAGE.format(platform="this CI environment")
        )

    LOGGER.info(
        "Detected %s repository %s on branch %s",
        context.platform.value,
        context.repo_slug or "?",
        context.branch or "?",
    )
    return context
