"""Exceptions raised by the spell-check pipeline.

Every fatal condition derives from :class:`SpellCheckError` so the CLI can
report it and exit with a non-zero status. Per-file read failures are not
represented here: they are recorded on the affected report fragment.
"""

from __future__ import annotations


class SpellCheckError(Exception):
    """Base class for fatal pipeline errors."""


class SpellCheckConfigurationError(SpellCheckError):
    """Raised when the configuration is missing a required value."""


class MissingDependencyError(SpellCheckError):
    """Raised when the checker or its dictionary backends are unavailable."""


class NoFilesFoundError(SpellCheckError):
    """Raised when no files remain to be checked."""


class UnsupportedPlatformError(SpellCheckError):
    """Raised when the hosting platform is neither GitHub nor GitLab."""


class PublishError(SpellCheckError):
    """Raised when the report cannot be posted to the review."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
