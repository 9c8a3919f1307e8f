"""Collector for field errors left on nodes after reconciliation."""

from collections.abc import Iterable

from strict_form.core.models import FieldNode
from strict_form.diagnostics.models import (
    FieldDiagnostic,
    MappingDiagnostic,
    ProcessingStatus,
)


def collect_errors(forms: Iterable[FieldNode]) -> MappingDiagnostic:
    """Build a diagnostic report from the errors attached to each node.

    Args:
        forms: The nodes passed to the mapper.

    Returns:
        MappingDiagnostic with one entry per field error, in node order.
    """
    errors: list[FieldDiagnostic] = []
    fields_total = 0
    fields_with_errors = 0

    for form in forms:
        fields_total += 1
        form_errors = form.errors
        if form_errors:
            fields_with_errors += 1

        for error in form_errors:
            errors.append(
                FieldDiagnostic(
                    field=error.origin or form.name,
                    message=error.message,
                    message_template=error.message_template,
                    cause_type=type(error.cause).__name__ if error.cause is not None else None,
                    cause_message=str(error.cause) if error.cause is not None else None,
                )
            )

    return MappingDiagnostic(
        status=ProcessingStatus.FAILED if errors else ProcessingStatus.SUCCESS,
        fields_total=fields_total,
        fields_with_errors=fields_with_errors,
        errors=errors,
    )
