"""Spell-check package exports.

This package exposes the key helpers used by other parts of the project
so callers can import from ``pyspelling_review.spell_check``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .errors import (
        MissingDependencyError,
        NoFilesFoundError,
        PublishError,
        SpellCheckConfigurationError,
        SpellCheckError,
        UnsupportedPlatformError,
    )
    from .ignore_filter import is_boilerplate, strip_known_noise
    from .line_locator import locate, locate_misspelling
    from .pyspelling_runner import check_for_dependencies, run_pyspelling
    from .report_utils import (
        build_report,
        build_report_fragments,
        build_report_markdown,
        collect_spell_issues,
        render_fragment,
    )
    from .spell_check import check_spelling, run_checks, validate_configuration
    from .word_matcher import contains_word, is_url

__all__ = [
    "build_report",
    "build_report_fragments",
    "build_report_markdown",
    "check_for_dependencies",
    "check_spelling",
    "collect_spell_issues",
    "contains_word",
    "is_boilerplate",
    "is_url",
    "locate",
    "locate_misspelling",
    "render_fragment",
    "run_checks",
    "run_pyspelling",
    "strip_known_noise",
    "validate_configuration",
    "MissingDependencyError",
    "NoFilesFoundError",
    "PublishError",
    "SpellCheckConfigurationError",
    "SpellCheckError",
    "UnsupportedPlatformError",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "build_report": (".report_utils", "build_report"),
    "build_report_fragments": (".report_utils", "build_report_fragments"),
    "build_report_markdown": (".report_utils", "build_report_markdown"),
    "collect_spell_issues": (".report_utils", "collect_spell_issues"),
    "render_fragment": (".report_utils", "render_fragment"),
    "check_for_dependencies": (".pyspelling_runner", "check_for_dependencies"),
    "run_pyspelling": (".pyspelling_runner", "run_pyspelling"),
    "check_spelling": (".spell_check", "check_spelling"),
    "run_checks": (".spell_check", "run_checks"),
    "validate_configuration": (".spell_check", "validate_configuration"),
    "contains_word": (".word_matcher", "contains_word"),
    "is_url": (".word_matcher", "is_url"),
    "is_boilerplate": (".ignore_filter", "is_boilerplate"),
    "strip_known_noise": (".ignore_filter", "strip_known_noise"),
    "locate": (".line_locator", "locate"),
    "locate_misspelling": (".line_locator", "locate_misspelling"),
    "MissingDependencyError": (".errors", "MissingDependencyError"),
    "NoFilesFoundError": (".errors", "NoFilesFoundError"),
    "PublishError": (".errors", "PublishError"),
    "SpellCheckConfigurationError": (".errors", "SpellCheckConfigurationError"),
    "SpellCheckError": (".errors", "SpellCheckError"),
    "UnsupportedPlatformError": (".errors", "UnsupportedPlatformError"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    This avoids importing submodules until actually used, which stops import
    order problems between ``spell_check`` and ``hosting``.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"pyspelling_review.spell_check{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
