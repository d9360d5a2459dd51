"""
Prepare use case — build the generator invocation for one task.

Loads the config, finds the task by name, compiles its arguments and
resolves the generator classpath. The result is a ready-to-run
``Invocation``; launching it is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from wsdlgen.core.compiler import Invocation, compiler_for
from wsdlgen.core.config.loader import ConfigError, load_extension
from wsdlgen.core.services.classpath import resolve_classpath

logger = logging.getLogger(__name__)


@dataclass
class PrepareResult:
    """Result of preparing a generator task."""

    task_name: str = ""
    family: str = ""
    invocation: Invocation | None = None
    error: str | None = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        result: dict = {"task_name": self.task_name}
        if self.error:
            result["error"] = self.error
            return result

        result["family"] = self.family
        if self.invocation:
            result.update(self.invocation.to_dict())
        result["warnings"] = self.warnings
        return result


def prepare_task(task_name: str, config_path: Path | None = None) -> PrepareResult:
    """Compile the invocation of a configured generator task.

    Args:
        task_name: Task identifier, e.g. 'axis2Wsdl2javaOrders'.
        config_path: Optional explicit path to wsdl.yml.

    Returns:
        PrepareResult with the invocation, or an error.
    """
    result = PrepareResult(task_name=task_name)

    try:
        extension = load_extension(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    config = extension.find_task(task_name)
    if config is None:
        known = ", ".join(extension.task_names()) or "none"
        result.error = f"Unknown task '{task_name}'. Known tasks: {known}"
        return result

    compiler = compiler_for(config)
    result.family = config.family

    classpath = resolve_classpath(extension, compiler.configuration_name)
    if not classpath:
        result.warnings.append(
            f"No classpath configured for '{compiler.configuration_name}'"
        )

    def warn(message: str) -> None:
        logger.warning(message)
        result.warnings.append(message)

    result.invocation = compiler.invocation(config, classpath, warn=warn)
    return result
