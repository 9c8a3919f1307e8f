"""Reconciliation of field nodes with records."""

from strict_form.mapping.diff import as_keyed, get_extra_values, is_identical, is_same_value
from strict_form.mapping.mapper import StrictFormMapper
from strict_form.mapping.property_path import PropertyPathMapper

__all__ = [
    "StrictFormMapper",
    "PropertyPathMapper",
    "as_keyed",
    "get_extra_values",
    "is_identical",
    "is_same_value",
]
