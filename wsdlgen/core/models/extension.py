"""
WSDL extension — every configured generator task of a project.
"""

from __future__ import annotations

from typing import Any, Iterator, TypeVar

from wsdlgen.core.models.axis import AxisConfig
from wsdlgen.core.models.axis1 import Axis1Config
from wsdlgen.core.models.axis2 import Axis2Config
from wsdlgen.core.models.container import NamedContainer
from wsdlgen.core.models.layout import BuildLayout

# Classpath configuration names, one per generator family
WSDLAXIS1_CONFIGURATION_NAME = "wsdlAxis1"
WSDLAXIS2_CONFIGURATION_NAME = "wsdlAxis2"

C = TypeVar("C", bound=AxisConfig)


class WsdlExtension:
    """Container of Axis1 and Axis2 generator tasks sharing one layout.

    ``classpath`` maps a configuration name to classpath entries
    (paths or glob patterns, relative to the project directory).
    """

    def __init__(self, layout: BuildLayout | None = None):
        self.layout = layout or BuildLayout()
        self.axis1: NamedContainer[Axis1Config] = NamedContainer(
            lambda name: Axis1Config(name, self.layout)
        )
        self.axis2: NamedContainer[Axis2Config] = NamedContainer(
            lambda name: Axis2Config(name, self.layout)
        )
        self.classpath: dict[str, list[str]] = {}

    def add_axis1(self, name: str, **options: Any) -> Axis1Config:
        return self._add(self.axis1, name, options)

    def add_axis2(self, name: str, **options: Any) -> Axis2Config:
        return self._add(self.axis2, name, options)

    def _add(self, container: NamedContainer[C], name: str, options: dict[str, Any]) -> C:
        """Build and configure a task; register it only if both succeed.

        Raises:
            ValueError: If the name, or the task name derived from it, is taken.
            AttributeError: If an option name is unknown.
        """
        config = container.build(name)
        if config.task_name in self.task_names():
            raise ValueError(f"Duplicate task name: '{config.task_name}'")
        config.configure(**options)
        return container.add(name, config)

    def configs(self) -> Iterator[AxisConfig]:
        """All tasks: Axis1 first, then Axis2, each in insertion order."""
        yield from self.axis1
        yield from self.axis2

    def find_task(self, task_name: str) -> AxisConfig | None:
        for config in self.configs():
            if config.task_name == task_name:
                return config
        return None

    def task_names(self) -> list[str]:
        return [config.task_name for config in self.configs()]
