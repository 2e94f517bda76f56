"""Models describing located misspellings and the report built from them.

These are kept apart from the parsing and rendering code so that the report
builder, the publishers and the tests can share them without import cycles.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConfirmedMisspelling(BaseModel):
    """A token flagged by the checker and the lines where it stands alone.

    ``line_numbers`` may be empty when the checker flagged a token that the
    standalone-word matcher could not find in the file.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    file_path: str
    token: str
    line_numbers: List[int] = Field(default_factory=list)

    @field_validator("token", mode="before")
    def _strip_token(cls, value: object) -> str:
        return str(value or "").strip()

    @field_validator("line_numbers")
    def _positive_lines(cls, value: List[int]) -> List[int]:
        if any(number < 1 for number in value):
            raise ValueError("line numbers are 1-based and must be positive")
        return value


class ReportRow(BaseModel):
    """One ``line | typo`` row of a report table."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    line_number: int = Field(ge=1)
    token: str


class ReportFragment(BaseModel):
    """The portion of the report that belongs to a single file."""

    model_config = ConfigDict(extra="forbid")

    file_path: str
    location_url: str
    rows: List[ReportRow] = Field(default_factory=list)
    # Set when the file could not be read while locating tokens
    error: str | None = None

    @field_validator("file_path")
    def _require_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("file_path must not be empty")
        return value

    def add_misspelling(self, misspelling: ConfirmedMisspelling) -> None:
        """Append one row per located line of ``misspelling``."""
        for line_number in misspelling.line_numbers:
            self.rows.append(ReportRow(line_number=line_number, token=misspelling.token))
