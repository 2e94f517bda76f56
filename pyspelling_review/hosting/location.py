"""Build links to files on the hosting platform."""

from __future__ import annotations

from pyspelling_review.models import Platform
from pyspelling_review.spell_check.errors import UnsupportedPlatformError

UNSUPPORTED_PLATFORM_MESSAGE = (
    "This plugin does not yet support {platform}; only GitHub and GitLab "
    "pull/merge requests can be reported on."
)


def coerce_platform(platform: Platform | str) -> Platform:
    """Return ``platform`` as a :class:`Platform`, rejecting unknown values."""
    if isinstance(platform, Platform):
        return platform
    try:
        return Platform(str(platform).strip().lower())
    except ValueError as exc:
        raise UnsupportedPlatformError(
            UNSUPPORTED_PLATFORM_MESSAGE.format(platform=platform)
        ) from exc


def resolve_url(platform: Platform | str, repo_slug: str, branch: str, path: str) -> str:
    """Return the repository-relative link to ``path`` at ``branch``.

    GitHub and GitLab share the ``/<slug>/tree/<branch>/<path>`` scheme; any
    other platform raises :class:`UnsupportedPlatformError`.
    """
    resolved = coerce_platform(platform)
    if resolved in Platform.supported():
        return f"/{repo_slug}/tree/{branch}/{path}"
    raise UnsupportedPlatformError(UNSUPPORTED_PLATFORM_MESSAGE.format(platform=resolved.value))
