"""
Tasks use case — list every configured generator task.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from wsdlgen.core.config.loader import ConfigError, load_extension


@dataclass
class TaskInfo:
    """Summary of one generator task."""

    task_name: str
    name: str
    family: str
    wsdl_file: str
    output_dir: str

    def to_dict(self) -> dict:
        return {
            "task_name": self.task_name,
            "name": self.name,
            "family": self.family,
            "wsdl_file": self.wsdl_file,
            "output_dir": self.output_dir,
        }


@dataclass
class TaskListResult:
    """All tasks of a config file."""

    tasks: list[TaskInfo] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {"tasks": [t.to_dict() for t in self.tasks], "total": len(self.tasks)}


def list_tasks(config_path: Path | None = None) -> TaskListResult:
    """List configured generator tasks in declaration order."""
    result = TaskListResult()

    try:
        extension = load_extension(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    for config in extension.configs():
        result.tasks.append(
            TaskInfo(
                task_name=config.task_name,
                name=config.name,
                family=config.family,
                wsdl_file=str(config.wsdl_file or ""),
                output_dir=str(config.output_dir),
            )
        )
    return result
