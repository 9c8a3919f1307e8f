"""Accessor invocation and failure classification."""

from strict_form.accessors.invoke import (
    AccessorFailure,
    AccessorOutcome,
    ArgumentTypeError,
    FailureKind,
    check_arguments,
    invoke_accessor,
)

__all__ = [
    "AccessorFailure",
    "AccessorOutcome",
    "ArgumentTypeError",
    "FailureKind",
    "check_arguments",
    "invoke_accessor",
]
