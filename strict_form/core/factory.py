"""Factory functions for creating pre-configured mappers."""

from strict_form.config import MapperSettings, load_settings
from strict_form.core.protocols import DataMapper, Translator, ValueVoter, VoterSet
from strict_form.mapping.mapper import StrictFormMapper
from strict_form.mapping.property_path import PropertyPathMapper
from strict_form.translation.catalog import CatalogTranslator, IdentityTranslator, MessageCatalog


def create_translator(settings: MapperSettings) -> Translator:
    """Create a translator for the configured catalog and locale.

    Returns an IdentityTranslator when no catalog is configured.

    Raises:
        CatalogError: If the configured catalog cannot be loaded.
    """
    if settings.catalog_path is None:
        return IdentityTranslator()

    if settings.catalog_path.is_dir():
        catalog = MessageCatalog.from_directory(settings.catalog_path, settings.locale)
    else:
        catalog = MessageCatalog.from_file(settings.catalog_path, locale=settings.locale)
    return CatalogTranslator(catalog)


def create_mapper(
    settings: MapperSettings | None = None,
    default_mapper: DataMapper | None = None,
    voters: list[ValueVoter] | None = None,
) -> StrictFormMapper:
    """Create a StrictFormMapper wired from settings.

    Args:
        settings: Mapper settings. Loaded from the global config if omitted.
        default_mapper: Fallback mapper. Defaults to PropertyPathMapper.
        voters: Value voters to inject.

    Returns:
        A configured StrictFormMapper.
    """
    if settings is None:
        settings = load_settings()

    return StrictFormMapper(
        default_mapper=default_mapper if default_mapper is not None else PropertyPathMapper(),
        voters=VoterSet(voters or ()),
        translator=create_translator(settings),
    )
