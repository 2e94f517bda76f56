"""Enumerations shared by the review pipeline."""

from __future__ import annotations

from enum import Enum


class Platform(str, Enum):
    """Hosting platforms the pipeline knows about.

    Only ``GITHUB`` and ``GITLAB`` are supported. ``BITBUCKET`` is listed so
    that detection can name the platform it refuses to handle.
    """

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"

    @classmethod
    def supported(cls) -> tuple["Platform", ...]:
        return (cls.GITHUB, cls.GITLAB)

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]
