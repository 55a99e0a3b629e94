"""Gallery configuration loader.

This module turns the pre-supplied gallery configuration value into
strongly-typed models. The value normally arrives already deserialized
(the embedded configuration of the hosting page); file helpers read that
value from YAML, JSON or a ``config.js`` embed file.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cl_gallery.config.defaults import CONFIG_SUFFIXES
from cl_gallery.config.exceptions import ConfigurationError
from cl_gallery.config.validators import FieldValidator, as_text
from cl_gallery.logging_config import get_logger
from cl_gallery.models.gallery import (
    Benchmark,
    GalleryConfig,
    Method,
    ProjectInfo,
    Stat,
)

__all__ = [
    "ConfigLoader",
    "load_gallery_config",
    "parse_gallery_config",
    "read_embedded_config",
]

logger = get_logger(__name__)

_EMBED_ASSIGNMENT = re.compile(
    r"^\s*(?:window\.|(?:var|let|const)\s+)?embeddedConfig\s*=\s*(?P<body>.*?)\s*;?\s*$",
    re.DOTALL,
)


class ConfigLoader:
    """Obtains the gallery configuration from the hosting environment.

    The loader performs no I/O: it wraps a value that was already
    deserialized by whoever prepared the page and converts it into a
    GalleryConfig. Leaf values are kept as given.

    Example:
        loader = ConfigLoader(embedded_value)
        config = loader.load()

    """

    def __init__(self, value: Any, context: str = "embedded configuration") -> None:
        self._value = value
        self._context = context

    def load(self) -> GalleryConfig:
        """Convert the wrapped value into a GalleryConfig.

        Raises:
            ConfigurationError: If the value is absent or malformed.

        """
        if self._value is None:
            raise ConfigurationError(f"No {self._context} available")
        config = parse_gallery_config(self._value, self._context)
        logger.debug(
            "config_loaded",
            benchmarks=len(config.benchmarks),
            target_classes=config.target_classes,
        )
        return config


def parse_gallery_config(data: Any, context: str = "configuration") -> GalleryConfig:
    """Parse a raw mapping into a GalleryConfig.

    Leaf values are kept as given (converted to text where they are
    displayed). Only an unusable structure is rejected.

    Args:
        data: The deserialized configuration value.
        context: Context string for error messages.

    Returns:
        GalleryConfig: The parsed configuration.

    Raises:
        ConfigurationError: If the root, project, class count or one of the
            iterated lists is missing or has the wrong shape.

    """
    v = FieldValidator(data, context)
    v.require_mapping()

    if data.get("project") is None:
        raise ConfigurationError(f"Missing required field 'project' in {context}")
    project = _parse_project(data["project"], f"project in {context}")

    class_names = [as_text(item) if item else None for item in v.sequence("class_names")]

    benchmarks = [
        _parse_benchmark(item, index, context)
        for index, item in enumerate(v.records("benchmarks", required=True))
    ]

    try:
        return GalleryConfig(
            project=project,
            target_classes=v.count("target_classes"),
            class_names=class_names,
            benchmarks=benchmarks,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {context}: {e}") from e


def _parse_project(data: Any, context: str) -> ProjectInfo:
    """Parse the project metadata block. Every field is optional."""
    v = FieldValidator(data, context)
    v.require_mapping()

    authors = None
    if data.get("authors") is not None:
        authors = [as_text(author) or "" for author in v.sequence("authors")]

    return ProjectInfo(
        title=v.text("title"),
        authors=authors,
        paper_url=v.text("paper_url"),
        code_url=v.text("code_url"),
    )


def _parse_benchmark(data: dict[str, Any], index: int, parent_context: str) -> Benchmark:
    context = f"benchmark[{index}] in {parent_context}"
    v = FieldValidator(data, context)

    return Benchmark(
        name=v.text("name") or "",
        dataset=v.text("dataset"),
        cil_methods=[
            _parse_method(item, method_index, context)
            for method_index, item in enumerate(v.records("cil_methods"))
        ],
    )


def _parse_method(data: dict[str, Any], index: int, parent_context: str) -> Method:
    context = f"method[{index}] in {parent_context}"
    v = FieldValidator(data, context)

    stats = []
    for stat_data in v.records("stat"):
        sv = FieldValidator(stat_data, context)
        stats.append(Stat(name=sv.text("name") or "", value=sv.scalar("value")))

    return Method(
        name=v.text("name") or "",
        # joined as data/<results_path>/class_<i>.<ext>
        results_path=v.require_text("results_path").strip("/"),
        stat=stats,
    )


def read_embedded_config(path: Path | str) -> dict[str, Any]:
    """Read the raw configuration value from a file.

    Supports YAML (``.yaml``/``.yml``), JSON (``.json``) and JavaScript embed
    files (``.js``) of the form ``window.embeddedConfig = {...};``.

    Args:
        path: Path to the configuration file.

    Returns:
        The deserialized configuration mapping.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the suffix is unsupported, the content cannot
            be parsed, or it is not a mapping.

    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in CONFIG_SUFFIXES:
        raise ConfigurationError(
            f"Unsupported configuration file type '{suffix}': {path}. "
            f"Expected one of: {', '.join(CONFIG_SUFFIXES)}"
        )

    text = path.read_text(encoding="utf-8")

    try:
        if suffix == ".json":
            data = json.loads(text)
        elif suffix == ".js":
            data = _parse_embed_script(text, path)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

    if data is None:
        raise ConfigurationError(f"Empty configuration file: {path}")

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration structure: expected mapping, "
            f"got {type(data).__name__} in {path}"
        )

    return data


def _parse_embed_script(text: str, path: Path) -> Any:
    """Extract the object literal assigned to ``embeddedConfig``.

    The literal is parsed as YAML flow content, which accepts JSON as well
    as unquoted object keys.
    """
    match = _EMBED_ASSIGNMENT.match(text)
    if match is None:
        raise ConfigurationError(f"No embeddedConfig assignment found in {path}")
    body = match.group("body")
    try:
        return json.loads(body)
    except json.JSONDecodeError:
        return yaml.safe_load(body)


def load_gallery_config(path: Path | str) -> GalleryConfig:
    """Load and validate a gallery configuration from a file.

    Example:
        >>> config = load_gallery_config("gallery.yaml")
        >>> config.target_classes
        10

    """
    path = Path(path)
    data = read_embedded_config(path)
    return ConfigLoader(data, context=f"configuration: {path}").load()
