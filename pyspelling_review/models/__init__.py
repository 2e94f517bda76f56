"""Public model exports for the project.

Keep the :mod:`pyspelling_review` namespace clean: tests and other modules
should import ``from pyspelling_review.models import ReportFragment, Platform``.
"""

from __future__ import annotations

from .check_configuration import CheckConfiguration
from .enums import Platform
from .spelling_issue import ConfirmedMisspelling, ReportFragment, ReportRow

__all__ = [
    "CheckConfiguration",
    "ConfirmedMisspelling",
    "Platform",
    "ReportFragment",
    "ReportRow",
]
