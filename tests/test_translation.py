"""Tests for message catalogs and translators."""

from pathlib import Path

import pytest

from strict_form.translation import (
    CatalogError,
    CatalogTranslator,
    IdentityTranslator,
    MessageCatalog,
    flatten_messages,
)


class TestFlattenMessages:
    """Tests for nested key flattening."""

    def test_nested_keys_use_dots(self) -> None:
        messages = {"article": {"title": {"blank": "Required"}}, "ok": "Fine"}

        assert flatten_messages(messages) == {"article.title.blank": "Required", "ok": "Fine"}


class TestMessageCatalog:
    """Tests for loading catalogs."""

    def test_load_from_directory(self, catalog_dir: Path) -> None:
        catalog = MessageCatalog.from_directory(catalog_dir, "en")

        assert catalog.locale == "en"
        assert catalog.get("article.title_invalid") == "The title is not valid."
        assert "greeting" in catalog
        assert len(catalog) == 3

    def test_locale_is_derived_from_filename(self, catalog_dir: Path) -> None:
        catalog = MessageCatalog.from_file(catalog_dir / "messages.fr.yaml")

        assert catalog.locale == "fr"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError) as exc_info:
            MessageCatalog.from_directory(tmp_path, "de")

        assert "messages.de.yaml" in str(exc_info.value)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "messages.en.yaml"
        path.write_text("article: [unclosed\n")

        with pytest.raises(CatalogError):
            MessageCatalog.from_file(path)

    def test_non_mapping_catalog_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "messages.en.yaml"
        path.write_text("- one\n- two\n")

        with pytest.raises(CatalogError, match="validation failed"):
            MessageCatalog.from_file(path)

    def test_non_string_message_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "messages.en.yaml"
        path.write_text("article:\n  count: 3\n")

        with pytest.raises(CatalogError, match="validation failed"):
            MessageCatalog.from_file(path)

    def test_empty_file_is_an_empty_catalog(self, tmp_path: Path) -> None:
        path = tmp_path / "messages.en.yaml"
        path.write_text("")

        assert len(MessageCatalog.from_file(path)) == 0


class TestTranslators:
    """Tests for translator implementations."""

    def test_catalog_translator(self, catalog_dir: Path) -> None:
        translator = CatalogTranslator(MessageCatalog.from_directory(catalog_dir, "fr"))

        assert translator.translate("article.title_invalid") == "Le titre n'est pas valide."

    def test_unknown_key_is_returned(self, catalog_dir: Path) -> None:
        translator = CatalogTranslator(MessageCatalog.from_directory(catalog_dir, "fr"))

        assert translator.translate("article.tags_invalid") == "article.tags_invalid"

    def test_parameters_are_substituted(self, catalog_dir: Path) -> None:
        translator = CatalogTranslator(MessageCatalog.from_directory(catalog_dir, "en"))

        assert translator.translate("greeting", {"name": "Ada"}) == "Hello Ada"

    def test_missing_parameter_keeps_template(self, catalog_dir: Path) -> None:
        translator = CatalogTranslator(MessageCatalog.from_directory(catalog_dir, "en"))

        assert translator.translate("greeting", {"other": "x"}) == "Hello {name}"

    def test_identity_translator(self) -> None:
        assert IdentityTranslator().translate("article.title_invalid") == "article.title_invalid"
