"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Any

import pytest

from strict_form.core.models import FieldNode


class Tag:
    """A collection element with value-like contents but object identity."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Tag({self.name!r})"


class Article:
    """A record with a scalar title and a tag collection."""

    def __init__(self, title: str = "", tags: list[Tag] | None = None) -> None:
        self.title = title
        self.tags: list[Tag] = list(tags or [])
        self.calls: list[tuple[str, Any]] = []

    def set_title(self, title: str) -> None:
        self.calls.append(("set_title", title))
        self.title = title

    def add_tag(self, tag: Tag) -> None:
        self.calls.append(("add_tag", tag))
        self.tags.append(tag)

    def remove_tag(self, tag: Tag) -> None:
        self.calls.append(("remove_tag", tag))
        self.tags.remove(tag)


class RecordingMapper:
    """Fallback mapper that records the batches it receives."""

    def __init__(self) -> None:
        self.read_batches: list[list[FieldNode]] = []
        self.write_batches: list[list[FieldNode]] = []

    def map_data_to_forms(self, data: Any, forms: list[FieldNode]) -> None:
        self.read_batches.append(list(forms))

    def map_forms_to_data(self, forms: list[FieldNode], data: Any) -> Any:
        self.write_batches.append(list(forms))
        return data


@pytest.fixture
def fallback() -> RecordingMapper:
    """Create a recording fallback mapper."""
    return RecordingMapper()


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Write an English and a French message catalog."""
    catalog = tmp_path / "translations"
    catalog.mkdir()
    (catalog / "messages.en.yaml").write_text(
        "article:\n"
        "  title_invalid: \"The title is not valid.\"\n"
        "  tags_invalid: \"One of the tags is not valid.\"\n"
        "greeting: \"Hello {name}\"\n"
    )
    (catalog / "messages.fr.yaml").write_text(
        "article:\n"
        "  title_invalid: \"Le titre n'est pas valide.\"\n"
    )
    return catalog
