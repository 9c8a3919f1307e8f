"""Input utilities for reading collection values from JSON or YAML files."""

import json
from pathlib import Path
from typing import Any

import yaml


def read_collection(path: Path | str) -> list[Any] | dict[Any, Any]:
    """Read a list or mapping from a JSON or YAML file.

    Files ending in ``.yaml``/``.yml`` are parsed as YAML, everything else as
    JSON. An empty file reads as an empty list.

    Raises:
        ValueError: If the file cannot be parsed or holds a scalar.
    """
    path = Path(path)
    with open(path) as f:
        text = f.read()

    if not text.strip():
        return []

    try:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid collection file {path}: {e}") from e

    if not isinstance(data, (list, dict)):
        raise ValueError(f"Expected a list or mapping in {path}, got {type(data).__name__}")
    return data
