from __future__ import annotations

import io
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pyspelling_review.hosting.publish as publish_mod
from pyspelling_review.hosting import PlatformContext
from pyspelling_review.models import Platform
from pyspelling_review.spell_check.errors import PublishError


@pytest.fixture
def captured_posts(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    posts: list[dict] = []

    def fake_post(url, *, json, headers, timeout):
        posts.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        response = Mock()
        response.raise_for_status = Mock(return_value=None)
        return response

    monkeypatch.setattr(publish_mod.requests, "post", fake_post)
    return posts


def test_github_publisher_posts_issue_comment(captured_posts: list[dict]) -> None:
    publisher = publish_mod.GitHubCommentPublisher("owner/repo", "42", "secret")
    publisher.publish("### report")

    post = captured_posts[0]
    assert post["url"] == "https://api.github.com/repos/owner/repo/issues/42/comments"
    assert post["json"] == {"body": "### report"}
    assert post["headers"]["Authorization"] == "Bearer secret"
    assert post["timeout"] == publish_mod.REQUEST_TIMEOUT


def test_gitlab_publisher_posts_merge_request_note(captured_posts: list[dict]) -> None:
    publisher = publish_mod.GitLabNotePublisher(
        "group/project", "7", "secret", api_url="https://gitlab.example.com/api/v4/"
    )
    publisher.publish("### report")

    post = captured_posts[0]
    assert post["url"] == "https://gitlab.example.com/api/v4/projects/group%2Fproject/merge_requests/7/notes"
    assert post["headers"] == {"PRIVATE-TOKEN": "secret"}


def test_http_error_raises_publish_error(monkeypatch: pytest.MonkeyPatch) -> None:
    response = Mock(status_code=403)
    response.raise_for_status = Mock(side_effect=requests.HTTPError("forbidden", response=response))
    monkeypatch.setattr(publish_mod.requests, "post", lambda *args, **kwargs: response)

    with pytest.raises(PublishError) as excinfo:
        publish_mod.GitHubCommentPublisher("owner/repo", "1", "secret").publish("text")

    assert excinfo.value.status_code == 403


def test_connection_error_raises_publish_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args, **kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(publish_mod.requests, "post", fail)

    with pytest.raises(PublishError, match="unreachable"):
        publish_mod.GitLabNotePublisher("group/project", "1", "secret").publish("text")


def test_stdout_publisher_writes_text() -> None:
    stream = io.StringIO()
    publish_mod.StdoutPublisher(stream).publish("report")
    assert stream.getvalue() == "report\n"


class TestCreatePublisher:
    def test_github_with_token(self) -> None:
        context = PlatformContext(Platform.GITHUB, "owner/repo", "main", request_id="5")
        publisher = publish_mod.create_publisher(context, environ={"GITHUB_TOKEN": "t"})
        assert isinstance(publisher, publish_mod.GitHubCommentPublisher)
        assert publisher.endpoint.endswith("/repos/owner/repo/issues/5/comments")

    def test_gitlab_with_token(self) -> None:
        context = PlatformContext(Platform.GITLAB, "group/project", "main", request_id="3")
        publisher = publish_mod.create_publisher(context, environ={"GITLAB_TOKEN": "t"})
        assert isinstance(publisher, publish_mod.GitLabNotePublisher)

    def test_missing_token_falls_back_to_stdout(self) -> None:
        context = PlatformContext(Platform.GITHUB, "owner/repo", "main", request_id="5")
        publisher = publish_mod.create_publisher(context, environ={})
        assert isinstance(publisher, publish_mod.StdoutPublisher)

    def test_missing_request_id_falls_back_to_stdout(self) -> None:
        context = PlatformContext(Platform.GITLAB, "group/project", "main")
        publisher = publish_mod.create_publisher(context, "t")
        assert isinstance(publisher, publish_mod.StdoutPublisher)
