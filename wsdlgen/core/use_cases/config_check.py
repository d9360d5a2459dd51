"""
Config check use case — validate wsdl.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from wsdlgen.core.config.loader import ConfigError, find_config_file, load_extension
from wsdlgen.core.models.extension import WsdlExtension


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    extension: WsdlExtension | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "axis1_count": len(self.extension.axis1) if self.extension else 0,
            "axis2_count": len(self.extension.axis2) if self.extension else 0,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator configuration and report issues.

    Args:
        config_path: Optional explicit path to wsdl.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.errors.append("No wsdl.yml found.")
        return result

    result.config_path = config_path

    try:
        extension = load_extension(config_path)
        result.extension = extension
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    if not len(extension.axis1) and not len(extension.axis2):
        result.warnings.append("No generator tasks defined. Nothing will be generated.")

    for config in extension.configs():
        wsdl_file = str(config.wsdl_file or "")
        if not wsdl_file:
            result.warnings.append(f"Task '{config.task_name}' has no wsdl_file.")
        elif "://" not in wsdl_file and not Path(wsdl_file).exists():
            result.warnings.append(
                f"Task '{config.task_name}' WSDL file does not exist: {wsdl_file}"
            )

        if not config.package_name:
            result.warnings.append(
                f"Task '{config.task_name}' has no package_name; "
                "the generator derives one from the target namespace."
            )

    # Result
    result.valid = len(result.errors) == 0
    return result
