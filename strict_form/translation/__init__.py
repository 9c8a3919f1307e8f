"""Translation of field error messages."""

from strict_form.translation.catalog import (
    CatalogError,
    CatalogTranslator,
    IdentityTranslator,
    MessageCatalog,
    flatten_messages,
)

__all__ = [
    "CatalogError",
    "CatalogTranslator",
    "IdentityTranslator",
    "MessageCatalog",
    "flatten_messages",
]
