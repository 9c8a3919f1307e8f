"""One-directional collection diff.

``get_extra_values(a, b)`` answers "what in ``b`` is not accounted for in
``a``?". The write path calls it twice, once per direction, to find the
elements to add and the elements to remove.

An element of ``b`` is accounted for only when the first identical element
of ``a`` sits at the same key. A value that moved to another key therefore
counts as both added and removed.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

EqualityPolicy = Callable[[Any, Any], bool]

SCALAR_TYPES: tuple[type, ...] = (str, bytes, int, float, complex, bool, type(None))

_MISSING = object()


def is_identical(first: Any, second: Any) -> bool:
    """Strict equality: same type and value for scalars, identity otherwise.

    ``1`` and ``True`` differ, as do ``1`` and ``1.0``. Two distinct objects
    with equal contents differ.
    """
    if first is second:
        return True
    if type(first) is not type(second):
        return False
    if isinstance(first, SCALAR_TYPES):
        return first == second
    return False


def is_same_value(first: Any, second: Any) -> bool:
    """Value equality that still tells types apart (``1`` is not ``True``)."""
    return type(first) is type(second) and first == second


def as_keyed(values: Iterable[Any] | Mapping[Any, Any] | None) -> dict[Any, Any]:
    """Materialize a collection into a key-ordered dict.

    Mappings keep their keys; other iterables (including generators) are
    keyed by position. ``None`` becomes an empty dict.
    """
    if values is None:
        return {}
    if isinstance(values, Mapping):
        return dict(values)
    if isinstance(values, (str, bytes)):
        raise TypeError(f"Expected a collection, got {type(values).__name__}")
    return dict(enumerate(values))


def _search(value: Any, haystack: dict[Any, Any], is_equal: EqualityPolicy) -> Any:
    for key, candidate in haystack.items():
        if is_equal(candidate, value):
            return key
    return _MISSING


def get_extra_values(
    original: Iterable[Any] | Mapping[Any, Any] | None,
    submitted: Iterable[Any] | Mapping[Any, Any] | None,
    is_equal: EqualityPolicy = is_identical,
) -> dict[Any, Any]:
    """Return the elements of ``submitted`` not matched in ``original``.

    Args:
        original: Reference collection.
        submitted: Collection whose extra elements are returned.
        is_equal: Equality policy used for the search.

    Returns:
        Dict of extra elements keyed by their key in ``submitted``.

    Raises:
        TypeError: If either argument is not a collection.
    """
    original_values = as_keyed(original)
    submitted_values = as_keyed(submitted)

    extra_values: dict[Any, Any] = {}
    for key, value in submitted_values.items():
        search_key = _search(value, original_values, is_equal)

        if (
            search_key is _MISSING
            or key != search_key
            or not is_equal(submitted_values.get(search_key, _MISSING), value)
        ):
            extra_values[key] = value

    return extra_values
