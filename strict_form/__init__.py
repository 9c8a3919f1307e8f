"""strict-form: accessor-driven reconciliation of form fields and records."""

__version__ = "0.1.0"

from strict_form.core import FieldError, FieldNode, FieldOptions
from strict_form.core.factory import create_mapper
from strict_form.mapping import PropertyPathMapper, StrictFormMapper, get_extra_values

__all__ = [
    "__version__",
    "FieldError",
    "FieldNode",
    "FieldOptions",
    "PropertyPathMapper",
    "StrictFormMapper",
    "create_mapper",
    "get_extra_values",
]
