"""Global configuration for strict-form.

Settings live in a YAML file:
    ~/.config/strict-form/config.yaml

The home directory can be moved with STRICT_FORM_HOME and the config file
pointed to directly with STRICT_FORM_CONFIG.
"""

import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ValidationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(Exception):
    """Raised when the configuration file cannot be loaded."""

    pass


class MapperSettings(BaseModel):
    """Settings used to build a mapper."""

    catalog_path: Path | None = None
    locale: str = "en"
    log_level: LogLevel = "WARNING"

    model_config = {"extra": "forbid"}


def get_strict_form_home() -> Path:
    """Return the strict-form configuration directory."""
    env_home = os.environ.get("STRICT_FORM_HOME")
    if env_home:
        return Path(env_home)
    return Path.home() / ".config" / "strict-form"


def get_config_path() -> Path:
    env_path = os.environ.get("STRICT_FORM_CONFIG")
    if env_path:
        return Path(env_path)
    return get_strict_form_home() / "config.yaml"


def load_settings(path: Path | str | None = None) -> MapperSettings:
    """Load settings from YAML.

    Args:
        path: Explicit config file. Defaults to ``get_config_path()``.

    Returns:
        The loaded settings, or defaults if the file does not exist.

    Raises:
        ConfigError: If the file is not valid YAML or has invalid settings.
    """
    config_path = Path(path) if path is not None else get_config_path()
    if not config_path.exists():
        return MapperSettings()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    try:
        settings = MapperSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e

    # Relative catalog paths are relative to the config file
    if settings.catalog_path is not None and not settings.catalog_path.is_absolute():
        settings = settings.model_copy(
            update={"catalog_path": config_path.parent / settings.catalog_path}
        )
    return settings


def save_settings(settings: MapperSettings, path: Path | str | None = None) -> Path:
    """Write settings as YAML, creating the parent directory."""
    config_path = Path(path) if path is not None else get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(settings.model_dump(mode="json", exclude_none=True), f, sort_keys=False)
    return config_path


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger for command-line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
