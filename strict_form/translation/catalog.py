"""Message catalogs and translators for field error messages.

Catalogs are YAML files, one per locale:
    <catalog_dir>/messages.<locale>.yaml

Nested keys are flattened with dots, so

    tags:
      invalid: "This tag is not valid."

provides the key ``tags.invalid``. Messages may contain ``{placeholder}``
parameters.
"""

from pathlib import Path
from typing import Any

import jsonschema
import yaml

CATALOG_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "additionalProperties": {
        "anyOf": [
            {"type": "string"},
            {"$ref": "#"},
        ]
    },
}


class CatalogError(Exception):
    """Raised when a message catalog cannot be loaded."""

    pass


def flatten_messages(messages: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten a nested message dict into dotted keys."""
    flat: dict[str, str] = {}
    for key, value in messages.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(flatten_messages(value, prefix=f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


class MessageCatalog:
    """A locale's flat mapping of message keys to templates."""

    def __init__(self, locale: str, messages: dict[str, str] | None = None) -> None:
        self.locale = locale
        self.messages: dict[str, str] = dict(messages or {})

    @classmethod
    def from_file(cls, path: Path | str, locale: str | None = None) -> "MessageCatalog":
        """Load and validate a YAML catalog.

        Args:
            path: Path to the YAML file.
            locale: Catalog locale; derived from ``messages.<locale>.yaml``
                when omitted.

        Raises:
            CatalogError: If the file is missing, unparsable or invalid.
        """
        path = Path(path)
        if not path.exists():
            raise CatalogError(f"Message catalog not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML in message catalog {path}: {e}") from e

        try:
            jsonschema.validate(data, CATALOG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise CatalogError(f"Message catalog validation failed for {path}: {e.message}") from e

        if locale is None:
            locale = path.stem.split(".", 1)[1] if "." in path.stem else "en"

        return cls(locale, flatten_messages(data))

    @classmethod
    def from_directory(cls, catalog_dir: Path | str, locale: str) -> "MessageCatalog":
        """Load ``messages.<locale>.yaml`` from a directory."""
        return cls.from_file(Path(catalog_dir) / f"messages.{locale}.yaml", locale=locale)

    def get(self, key: str) -> str | None:
        return self.messages.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)


class CatalogTranslator:
    """Translates message keys using a message catalog.

    Unknown keys are returned unchanged so a missing translation still
    produces a readable error.
    """

    def __init__(self, catalog: MessageCatalog) -> None:
        self.catalog = catalog

    def translate(self, key: str, parameters: dict[str, Any] | None = None) -> str:
        template = self.catalog.get(key)
        if template is None:
            return key
        if parameters:
            try:
                return template.format(**parameters)
            except (KeyError, IndexError, ValueError):
                return template
        return template


class IdentityTranslator:
    """Translator that returns the key itself."""

    def translate(self, key: str, parameters: dict[str, Any] | None = None) -> str:
        return key
