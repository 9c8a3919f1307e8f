"""Default data mapper using property paths.

Reads and writes each field through a dotted path (``address.city``)
resolved against the record: item access for mappings, attribute access for
everything else. Used as the fallback for fields without accessors.
"""

import logging
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from strict_form.core.models import FieldNode

logger = logging.getLogger(__name__)

_MISSING = object()


class PropertyPathMapper:
    """Maps fields to record properties by path.

    Never raises for a field it cannot map: unreadable paths populate None,
    unwritable paths are skipped.
    """

    def map_data_to_forms(self, data: Any, forms: Sequence[FieldNode]) -> None:
        for form in forms:
            if not form.options.mapped:
                continue
            if data is None:
                form.data = None
                continue
            value = self.get_value(data, self._path(form))
            form.data = None if value is _MISSING else value

    def map_forms_to_data(self, forms: Sequence[FieldNode], data: Any) -> Any:
        if data is None:
            return data

        for form in forms:
            if not form.options.mapped:
                continue

            path = self._path(form)
            current = self.get_value(data, path)
            if current is not _MISSING and current is form.data:
                continue

            try:
                self.set_value(data, path, form.data)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.debug(f"Skipping field {form.name!r}: cannot write {path!r}: {e}")

        return data

    @staticmethod
    def _path(form: FieldNode) -> list[str]:
        return (form.options.property_path or form.name).split(".")

    @staticmethod
    def _get_step(target: Any, step: str) -> Any:
        if isinstance(target, Mapping):
            return target.get(step, _MISSING)
        return getattr(target, step, _MISSING)

    def get_value(self, data: Any, path: list[str]) -> Any:
        """Resolve a path; returns a private sentinel when it is missing."""
        target = data
        for step in path:
            if target is None or target is _MISSING:
                return _MISSING
            target = self._get_step(target, step)
        return target

    def set_value(self, data: Any, path: list[str], value: Any) -> None:
        """Assign ``value`` at ``path``.

        Raises:
            KeyError: If an intermediate path segment is missing.
            AttributeError: If the target does not accept the attribute.
        """
        parent = self.get_value(data, path[:-1]) if len(path) > 1 else data
        if parent is _MISSING or parent is None:
            raise KeyError(".".join(path[:-1]))

        leaf = path[-1]
        if isinstance(parent, MutableMapping):
            parent[leaf] = value
        else:
            setattr(parent, leaf, value)
