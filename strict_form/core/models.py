"""Field node and accessor configuration models.

A field's behavior is entirely described by its ``FieldOptions``: which
accessors it declares and how failures are reported. Different fields are
different configurations of the same ``FieldNode`` class.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Accessor(str, Enum):
    """Accessor capability tags."""

    GET = "get_value"
    UPDATE = "update_value"
    ADD = "add_value"
    REMOVE = "remove_value"


class FieldOptions(BaseModel):
    """Accessor configuration attached to a field node.

    Attributes:
        get_value: ``(record) -> value`` reader.
        update_value: ``(value, record) -> None`` scalar writer.
        add_value: ``(element, record) -> None`` collection adder.
        remove_value: ``(element, record) -> None`` collection remover.
        multiple: True for collection-valued fields.
        write_error_message: Translatable key attached as a field error when a
            write accessor rejects the submitted value.
        property_path: Path used by the fallback mapper (defaults to the
            node name).
        mapped: False to make the fallback mapper ignore the field.
    """

    get_value: Callable[..., Any] | None = None
    update_value: Callable[..., Any] | None = None
    add_value: Callable[..., Any] | None = None
    remove_value: Callable[..., Any] | None = None
    multiple: bool = False
    write_error_message: str | None = None
    property_path: str | None = None
    mapped: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def capabilities(self) -> frozenset[Accessor]:
        """The set of accessors this field declares."""
        return frozenset(tag for tag in Accessor if getattr(self, tag.value) is not None)

    @property
    def is_readable(self) -> bool:
        return self.get_value is not None

    @property
    def is_writable(self) -> bool:
        """True if the field can be written without the fallback mapper."""
        if self.update_value is not None:
            return True
        return self.add_value is not None and self.remove_value is not None


class FieldError(BaseModel):
    """A field-level error produced while writing to the record."""

    message: str
    message_template: str | None = None
    origin: str | None = None
    cause: Exception | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True)


class FieldNode:
    """A single bindable unit of a form.

    Holds the current value (populated from a record or submitted by the
    user) and the errors attached to it.
    """

    def __init__(
        self,
        name: str,
        options: FieldOptions | None = None,
        data: Any = None,
    ) -> None:
        self.name = name
        self.options = options if options is not None else FieldOptions()
        self._data = data
        self._errors: list[FieldError] = []

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, value: Any) -> None:
        self._data = value

    @property
    def errors(self) -> list[FieldError]:
        return list(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def add_error(self, error: FieldError) -> None:
        """Attach an error to this field."""
        if error.origin is None:
            error = error.model_copy(update={"origin": self.name})
        self._errors.append(error)

    def clear_errors(self) -> None:
        self._errors.clear()

    def __repr__(self) -> str:
        return f"FieldNode(name={self.name!r}, data={self._data!r})"

