"""Accessor invocation with structured failure classification.

Accessors are caller-supplied callables. Instead of letting their type
errors unwind through the reconcilers, every call goes through
``invoke_accessor`` which returns an ``AccessorOutcome`` holding either the
result or an ``AccessorFailure``. The failure records *which* argument
position was at fault, so callers can tell a bad record from a bad value
without looking at exception messages.

Arguments are checked against the accessor's class-typed annotations before
the call. An accessor may also raise ``ArgumentTypeError`` itself to point at
the offending argument.
"""

import inspect
import logging
import typing
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class ArgumentTypeError(TypeError):
    """Raised when an accessor argument does not have the expected type.

    Attributes:
        argument: Zero-based position of the offending argument.
        expected: The expected type, when known.
    """

    def __init__(self, argument: int, expected: type | None = None, message: str | None = None) -> None:
        self.argument = argument
        self.expected = expected
        if message is None:
            expected_name = expected.__name__ if expected is not None else "another type"
            message = f"Argument {argument} must be of type {expected_name}"
        super().__init__(message)


class FailureKind(str, Enum):
    """Classification of an accessor failure."""

    READ = "read"  # Reader failed; the field is treated as not yet populated
    RECORD = "record"  # The record argument failed the type check
    VALUE = "value"  # The value or element argument failed the type check


class AccessorFailure(BaseModel):
    """A classified accessor failure."""

    kind: FailureKind
    argument: int | None = None
    error: Exception

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)


class AccessorOutcome(BaseModel):
    """Result of invoking an accessor: a value or a failure, never both."""

    value: Any = None
    failure: AccessorFailure | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @property
    def ok(self) -> bool:
        return self.failure is None


def _annotation_target(accessor: Callable[..., Any]) -> Any:
    if inspect.isfunction(accessor) or inspect.ismethod(accessor):
        return accessor
    return getattr(accessor, "__call__", accessor)


def _positional_hints(accessor: Callable[..., Any]) -> list[Any]:
    """Return the resolved annotation of each positional parameter.

    Parameters without a usable annotation yield ``None``.
    """
    target = _annotation_target(accessor)
    try:
        signature = inspect.signature(target)
        hints = typing.get_type_hints(target)
    except (TypeError, ValueError, NameError):
        return []

    positional = (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )
    return [
        hints.get(param.name)
        for param in signature.parameters.values()
        if param.kind in positional
    ]


def _matches(value: Any, hint: Any) -> bool:
    if not isinstance(hint, type) or hint is object:
        return True
    if hint is float and isinstance(value, int) and not isinstance(value, bool):
        return True
    if hint is complex and isinstance(value, (int, float)) and not isinstance(value, bool):
        return True
    try:
        return isinstance(value, hint)
    except TypeError:
        # Parameterized generics and non-runtime protocols cannot be checked
        return True


def check_arguments(accessor: Callable[..., Any], args: tuple[Any, ...]) -> None:
    """Check positional arguments against the accessor's class annotations.

    Only plain class annotations are enforced; generics, unions and
    unannotated parameters are accepted as-is.

    Raises:
        ArgumentTypeError: For the first argument that does not match.
    """
    for position, (value, hint) in enumerate(zip(args, _positional_hints(accessor))):
        if hint is not None and not _matches(value, hint):
            raise ArgumentTypeError(position, expected=hint)


def _classify(error: Exception, record_position: int, reading: bool) -> AccessorFailure:
    argument = getattr(error, "argument", None)
    if reading:
        kind = FailureKind.READ
    elif argument is not None and argument == record_position:
        kind = FailureKind.RECORD
    else:
        kind = FailureKind.VALUE
    return AccessorFailure(kind=kind, argument=argument, error=error)


def invoke_accessor(
    accessor: Callable[..., Any],
    *args: Any,
    reading: bool = False,
) -> AccessorOutcome:
    """Invoke an accessor and capture type failures as an outcome.

    The record is always the last positional argument. ``TypeError`` (which
    includes ``ArgumentTypeError``) and pydantic ``ValidationError`` are
    captured; anything else propagates as a programming error.

    Args:
        accessor: The reader, updater, adder or remover.
        *args: Positional arguments, record last.
        reading: True when invoking a reader; every failure is then
            classified as ``FailureKind.READ``.

    Returns:
        AccessorOutcome carrying the accessor's return value or the failure.
    """
    try:
        check_arguments(accessor, args)
        return AccessorOutcome(value=accessor(*args))
    except (TypeError, ValidationError) as e:
        failure = _classify(e, record_position=len(args) - 1, reading=reading)
        logger.debug(f"Accessor {getattr(accessor, '__name__', accessor)!r} failed ({failure.kind.value}): {e}")
        return AccessorOutcome(failure=failure)
