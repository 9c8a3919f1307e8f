"""Diagnostics for field errors produced while writing records."""

from strict_form.diagnostics.collector import collect_errors
from strict_form.diagnostics.models import (
    FieldDiagnostic,
    MappingDiagnostic,
    ProcessingStatus,
)

__all__ = [
    "collect_errors",
    "FieldDiagnostic",
    "MappingDiagnostic",
    "ProcessingStatus",
]
