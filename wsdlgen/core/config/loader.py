"""
Configuration loader — reads wsdl.yml into a WsdlExtension.

This is the primary entry point for loading generator configuration.
It reads YAML, validates against Pydantic schemas, and returns a
populated extension whose tasks are ready to compile.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from wsdlgen.core.config.schema import ConfigFile, GeneratorEntry
from wsdlgen.core.models.axis import AxisConfig
from wsdlgen.core.models.extension import WsdlExtension
from wsdlgen.core.models.layout import BuildLayout

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "wsdl.yml"

# Options holding local paths, resolved against the config file's directory
_PATH_OPTIONS = ("wsdl_file", "namespace_package_mapping_file", "output_dir")


class ConfigError(Exception):
    """Raised when generator configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for wsdl.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to wsdl.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_extension(path: Path | None = None) -> WsdlExtension:
    """Load and validate generator configuration.

    Args:
        path: Explicit path to wsdl.yml. If None, searches upward.

    Returns:
        WsdlExtension with every declared task.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(f"No {CONFIG_FILE} found. Create one, or specify --config.")

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config_file = ConfigFile.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator configuration in {path}: {e}") from e

    project_dir = path.parent.resolve()
    extension = WsdlExtension(BuildLayout(project_dir, config_file.build_dir))
    extension.classpath = {name: list(entries) for name, entries in config_file.classpath.items()}

    for family, entries in (("axis1", config_file.axis1), ("axis2", config_file.axis2)):
        for entry in entries:
            _add_task(extension, family, entry, project_dir)

    logger.info(
        "Loaded %d Axis1 and %d Axis2 tasks from %s",
        len(extension.axis1),
        len(extension.axis2),
        path,
    )
    return extension


def _add_task(
    extension: WsdlExtension,
    family: str,
    entry: GeneratorEntry,
    project_dir: Path,
) -> AxisConfig:
    """Create one task from its file entry."""
    if entry.wsdl_properties and family != "axis1":
        raise ConfigError(f"{family} task '{entry.name}': wsdl_properties is an axis1 option")

    options = {
        key: _resolve_path(value, project_dir) if key in _PATH_OPTIONS else value
        for key, value in entry.options.items()
    }
    add = extension.add_axis1 if family == "axis1" else extension.add_axis2
    try:
        config: AxisConfig = add(entry.name, **options)
    except ValueError as e:
        raise ConfigError(f"Duplicate {family} task '{entry.name}': {e}") from e
    except AttributeError as e:
        raise ConfigError(f"{family} task '{entry.name}': {e}") from e

    config.args.extend(_text(arg) for arg in entry.args)
    for namespace, package in entry.namespace_package_mapping.items():
        config.namespace_package_mapping[namespace] = _text(package)
    for name, value in entry.wsdl_properties.items():
        config.add_wsdl_property(name, _text(value))

    logger.debug("Configured %s (%d options)", config.task_name, len(options))
    return config


def _text(value: Any) -> str:
    """YAML scalars as the generator reads them: true/false, numbers as written."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _resolve_path(value: Any, project_dir: Path) -> Any:
    """Resolve a local path against the project dir; URLs stay as they are."""
    if not value or not isinstance(value, str) or "://" in value:
        return value
    path = Path(value)
    return str(path if path.is_absolute() else project_dir / path)
