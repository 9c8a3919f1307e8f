"""Data models for mapping diagnostics.

Summarizes the field errors left on nodes after a write, in a form that can
be serialized and logged.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ProcessingStatus(str, Enum):
    """Status of a reconciliation."""

    SUCCESS = "success"  # No field reported an error
    FAILED = "failed"  # At least one field reported an error


class FieldDiagnostic(BaseModel):
    """A serializable view of a single field error."""

    field: str
    message: str
    message_template: str | None = None
    cause_type: str | None = None
    cause_message: str | None = None


class MappingDiagnostic(BaseModel):
    """Diagnostics for one reconciliation over a set of fields."""

    status: ProcessingStatus
    fields_total: int = 0
    fields_with_errors: int = 0
    errors: list[FieldDiagnostic] = Field(default_factory=list)
