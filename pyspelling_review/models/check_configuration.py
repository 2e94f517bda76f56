"""User-facing configuration for a spell-check run.

A missing or empty ``profile_name`` is accepted here; the orchestrator
rejects it with ``SpellCheckConfigurationError``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Environment variables read by ``CheckConfiguration.from_env``
PROFILE_ENV_VAR = "PYSPELLING_MATRIX"
IGNORED_WORDS_ENV_VAR = "SPELLING_IGNORED_WORDS"
IGNORED_FILES_ENV_VAR = "SPELLING_IGNORED_FILES"


def _split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [chunk.strip() for chunk in value.split(",") if chunk.strip()]


class CheckConfiguration(BaseModel):
    """Settings consumed by the pipeline orchestrator.

    - profile_name: name of the matrix entry in ``.pyspelling.yml`` (required
      before any check runs)
    - ignored_words: tokens never reported, compared after trimming
    - ignored_files: paths removed from the resolved file list
    - files_pattern: optional glob; changed files are used when omitted
    - base_ref: git ref the change set is compared against
    - require_all_backends: demand both aspell and hunspell instead of either
    """

    model_config = ConfigDict(extra="forbid")

    profile_name: str | None = None
    ignored_words: List[str] = Field(default_factory=list)
    ignored_files: List[str] = Field(default_factory=list)
    files_pattern: str | None = None
    base_ref: str | None = None
    require_all_backends: bool = False

    @field_validator("profile_name", "files_pattern", "base_ref", mode="before")
    def _strip_optional(cls, value: object) -> str | None:
        if value is None:
            return None
        return str(value).strip()

    @field_validator("ignored_words", "ignored_files", mode="before")
    def _normalise_list(cls, value: object) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return _split_list(value)
        return [str(item).strip() for item in value if item is not None and str(item).strip()]

    def merged(self, **overrides: object) -> "CheckConfiguration":
        """Return a copy where non-empty ``overrides`` replace current values.

        List values are appended to the existing lists.
        """
        data = self.model_dump()
        for key, value in overrides.items():
            if value is None:
                continue
            if key in ("ignored_words", "ignored_files"):
                data[key] = list(data[key]) + list(value)  # type: ignore[arg-type]
            else:
                data[key] = value
        return CheckConfiguration(**data)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        dotenv_path: str | Path | None = None,
    ) -> "CheckConfiguration":
        """Build a configuration from environment variables.

        When ``environ`` is omitted the process environment is used, after
        loading ``dotenv_path`` (or a ``.env`` in the working directory).
        """
        if environ is None:
            if dotenv_path is not None:
                load_dotenv(dotenv_path=Path(dotenv_path))
            else:
                load_dotenv()
            environ = os.environ

        return cls(
            profile_name=environ.get(PROFILE_ENV_VAR),
            ignored_words=_split_list(environ.get(IGNORED_WORDS_ENV_VAR)),
            ignored_files=_split_list(environ.get(IGNORED_FILES_ENV_VAR)),
        )
