"""Strict mapper reconciling field nodes with a mutable record.

Fields that declare accessors are read and written through them; every other
field is deferred, as one batch, to a fallback data mapper. Accessor type
failures never escape: on the read path they empty the field, on the write
path they are either ignored (when the record itself was rejected) or turned
into a translated field error.
"""

import logging
from collections.abc import Sequence
from typing import Any

from strict_form.accessors.invoke import AccessorFailure, FailureKind, invoke_accessor
from strict_form.core.models import FieldError, FieldNode
from strict_form.core.protocols import DataMapper, Translator, VoterSet
from strict_form.mapping.diff import EqualityPolicy, as_keyed, get_extra_values, is_identical

logger = logging.getLogger(__name__)


class StrictFormMapper:
    """Maps data to forms and forms to data using per-field accessors.

    The mapper is strict about what it owns:
    - Only fields with accessors are handled here
    - Everything else goes to the fallback mapper, untouched
    - Collections are reconciled with add/remove calls, never replaced
    """

    def __init__(
        self,
        default_mapper: DataMapper,
        voters: VoterSet | None = None,
        translator: Translator | None = None,
        is_equal: EqualityPolicy = is_identical,
    ) -> None:
        """Initialize the mapper.

        Args:
            default_mapper: Fallback for fields without accessors.
            voters: Value voters carried for conditional reconciliation.
            translator: Renders write error message keys. Defaults to
                returning the key unchanged.
            is_equal: Equality policy for collection diffs.
        """
        if translator is None:
            from strict_form.translation.catalog import IdentityTranslator

            translator = IdentityTranslator()

        self.default_mapper = default_mapper
        self.voters = voters if voters is not None else VoterSet()
        self.translator = translator
        self.is_equal = is_equal

    def map_data_to_forms(self, data: Any, forms: Sequence[FieldNode]) -> None:
        """Populate field values from the record.

        A reader failure leaves the field empty; a record whose field is not
        populated yet is a normal state.
        """
        unmapped_forms: list[FieldNode] = []

        for form in forms:
            reader = form.options.get_value
            if reader is None:
                unmapped_forms.append(form)
                continue

            outcome = invoke_accessor(reader, data, reading=True)
            form.data = outcome.value if outcome.ok else None

        logger.debug(f"Deferring {len(unmapped_forms)} of {len(forms)} fields to default mapper (read)")
        self.default_mapper.map_data_to_forms(data, unmapped_forms)

    def map_forms_to_data(self, forms: Sequence[FieldNode], data: Any) -> Any:
        """Write submitted field values into the record.

        Args:
            forms: Field nodes in declaration order.
            data: The record. If None, nothing is written.

        Returns:
            The record, as passed in.
        """
        if data is None:
            return data

        unmapped_forms: list[FieldNode] = []
        for form in forms:
            if not self._write_form_value_to_data(form, data):
                unmapped_forms.append(form)

        logger.debug(f"Deferring {len(unmapped_forms)} of {len(forms)} fields to default mapper (write)")
        result = self.default_mapper.map_forms_to_data(unmapped_forms, data)
        return data if result is None else result

    def _write_form_value_to_data(self, form: FieldNode, data: Any) -> bool:
        """Try to write a field's submitted value to the record.

        Returns:
            False if the field declares no write accessors and the default
            mapper should handle it, True otherwise (even on failure).
        """
        options = form.options
        if not options.is_writable:
            return False

        original_values = self._read_original(form, data)
        submitted_value = form.data

        if options.update_value is not None:
            failure = invoke_accessor(options.update_value, submitted_value, data).failure
        else:
            failure = self._reconcile_collection(form, original_values, submitted_value, data)

        if failure is not None:
            self._report_failure(form, failure)

        return True

    def _read_original(self, form: FieldNode, data: Any) -> Any:
        empty = [] if form.options.multiple else None
        reader = form.options.get_value
        if reader is None:
            return empty

        outcome = invoke_accessor(reader, data, reading=True)
        return outcome.value if outcome.ok else empty

    def _reconcile_collection(
        self,
        form: FieldNode,
        original_values: Any,
        submitted_values: Any,
        data: Any,
    ) -> AccessorFailure | None:
        """Apply add/remove calls so the record matches the submitted collection.

        Stops at the first failing call.
        """
        try:
            # Lazy collections can only be iterated once; both diffs need them.
            original_values = as_keyed(original_values)
            submitted_values = as_keyed(submitted_values)
            added_values = get_extra_values(original_values, submitted_values, self.is_equal)
            removed_values = get_extra_values(submitted_values, original_values, self.is_equal)
        except TypeError as e:
            return AccessorFailure(kind=FailureKind.VALUE, argument=0, error=e)

        logger.debug(
            f"Field {form.name!r}: adding {len(added_values)}, removing {len(removed_values)}"
        )

        for value in added_values.values():
            failure = invoke_accessor(form.options.add_value, value, data).failure
            if failure is not None:
                return failure

        for value in removed_values.values():
            failure = invoke_accessor(form.options.remove_value, value, data).failure
            if failure is not None:
                return failure

        return None

    def _report_failure(self, form: FieldNode, failure: AccessorFailure) -> None:
        # A rejected record is reported by whichever ancestor built it.
        if failure.kind is FailureKind.RECORD:
            logger.debug(f"Field {form.name!r}: record rejected by accessor, left to parent")
            return

        error_message = form.options.write_error_message
        if not error_message:
            logger.debug(f"Field {form.name!r}: write failed without error message: {failure.error}")
            return

        form.add_error(
            FieldError(
                message=self.translator.translate(error_message),
                message_template=error_message,
                origin=form.name,
                cause=failure.error,
            )
        )
