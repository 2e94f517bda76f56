"""Sinks that attach the finished report to the pull or merge request."""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Protocol, TextIO
from urllib.parse import quote

import requests

from pyspelling_review.models import Platform
from pyspelling_review.spell_check.errors import PublishError

from .context import DEFAULT_GITHUB_API_URL, DEFAULT_GITLAB_API_URL, PlatformContext

LOGGER = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30


class ReportPublisher(Protocol):
    """Anything that accepts a block of Markdown for the current review."""

    def publish(self, text: str) -> None:
        ...


class StdoutPublisher:
    """Write the report to a stream; used for local and dry runs."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def publish(self, text: str) -> None:
        self.stream.write(text)
        if not text.endswith("\n"):
            self.stream.write("\n")


def _post(url: str, *, headers: dict[str, str], payload: dict[str, str]) -> None:
    try:
        response = requests.post(url, json=payload, headers=headers, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        raise PublishError(f"Posting spelling report failed ({status}): {url}", status_code=status) from exc
    except requests.RequestException as exc:
        raise PublishError(f"Posting spelling report failed: {exc}") from exc


class GitHubCommentPublisher:
    """Post the report as an issue comment on a GitHub pull request."""

    def __init__(
        self,
        repo_slug: str,
        pull_number: str,
        token: str,
        *,
        api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> None:
        self.repo_slug = repo_slug
        self.pull_number = pull_number
        self.api_url = api_url.rstrip("/")
        self._token = token

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/repos/{self.repo_slug}/issues/{self.pull_number}/comments"

    def publish(self, text: str) -> None:
        LOGGER.info("Posting spelling report to %s#%s", self.repo_slug, self.pull_number)
        _post(
            self.endpoint,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Accept": "application/vnd.github+json",
            },
            payload={"body": text},
        )


class GitLabNotePublisher:
    """Post the report as a note on a GitLab merge request."""

    def __init__(
        self,
        project_path: str,
        merge_request_iid: str,
        token: str,
        *,
        api_url: str = DEFAULT_GITLAB_API_URL,
    ) -> None:
        self.project_path = project_path
        self.merge_request_iid = merge_request_iid
        self.api_url = api_url.rstrip("/")
        self._token = token

    @property
    def endpoint(self) -> str:
        project_id = quote(self.project_path, safe="")
        return f"{self.api_url}/projects/{project_id}/merge_requests/{self.merge_request_iid}/notes"

    def publish(self, text: str) -> None:
        LOGGER.info("Posting spelling report to %s!%s", self.project_path, self.merge_request_iid)
        _post(
            self.endpoint,
            headers={"PRIVATE-TOKEN": self._token},
            payload={"body": text},
        )


TOKEN_ENV_VARS = {
    Platform.GITHUB: "GITHUB_TOKEN",
    Platform.GITLAB: "GITLAB_TOKEN",
}


def token_from_env(context: PlatformContext, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the API token for the platform of ``context``, if set."""
    env = os.environ if environ is None else environ
    name = TOKEN_ENV_VARS.get(context.platform)
    return env.get(name) if name else None


def create_publisher(
    context: PlatformContext,
    token: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ReportPublisher:
    """Pick the publisher for ``context``.

    ``token`` defaults to the platform token variable in ``environ``. Falls
    back to :class:`StdoutPublisher` when there is no token or the job is not
    running for a pull/merge request.
    """
    if token is None:
        token = token_from_env(context, environ)
    if not token or not context.request_id:
        LOGGER.info("No review to post to (token or request id missing); writing report to stdout")
        return StdoutPublisher()

    if context.platform is Platform.GITHUB:
        return GitHubCommentPublisher(
            context.repo_slug,
            context.request_id,
            token,
            api_url=context.api_url or DEFAULT_GITHUB_API_URL,
        )
    if context.platform is Platform.GITLAB:
        return GitLabNotePublisher(
            context.repo_slug,
            context.request_id,
            token,
            api_url=context.api_url or DEFAULT_GITLAB_API_URL,
        )
    LOGGER.warning("No publisher for platform %s; writing report to stdout", context.platform.value)
    return StdoutPublisher()
