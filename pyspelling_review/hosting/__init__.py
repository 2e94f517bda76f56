"""Hosting platform helpers: detection, file links and report publishing."""

from __future__ import annotations

from .context import PlatformContext, detect_platform_context
from .location import coerce_platform, resolve_url
from .publish import (
    GitHubCommentPublisher,
    GitLabNotePublisher,
    ReportPublisher,
    StdoutPublisher,
    create_publisher,
)

__all__ = [
    "GitHubCommentPublisher",
    "GitLabNotePublisher",
    "PlatformContext",
    "ReportPublisher",
    "StdoutPublisher",
    "coerce_platform",
    "create_publisher",
    "detect_platform_context",
    "resolve_url",
]
