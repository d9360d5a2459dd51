"""
Axis generator configuration — options shared by both generator families.

Each configured generator task is an ``AxisConfig`` subclass instance.
The options here map to flags understood by both the Axis1 and the
Axis2 ``WSDL2Java`` tools; family-specific options live in
``axis1.py`` and ``axis2.py``.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from wsdlgen.core.models.layout import BuildLayout
from wsdlgen.core.models.provider import Configurable, Option

# Output root for generated code, relative to the build directory
CODEGEN_OUTPUTPATH = "generated/wsdl2java"


class Databinding(StrEnum):
    """Axis2 databinding frameworks."""

    ADB = "adb"
    XMLBEANS = "xmlbeans"
    JIBX = "jibx"
    JAXBRI = "jaxbri"
    NONE = "none"


def to_camel_case(name: str) -> str:
    """'my service' → 'MyService'. Only the first letter of each word changes."""
    return "".join(part[:1].upper() + part[1:] for part in name.split(" "))


class AxisConfig(Configurable):
    """Base configuration of a single WSDL2Java generator task.

    Subclasses set ``family`` ('axis1' or 'axis2'), which names the
    output subdirectory and prefixes the task name.
    """

    family = ""

    wsdl_file = Option("", doc="WSDL file or URI to generate code from.")
    package_name = Option("", doc="Target package for the generated code.")
    generate_testcase = Option(False, doc="Generate a test case for the client code.")
    namespace_package_mapping_file = Option(
        "", doc="Properties file with namespace to package mappings."
    )
    output_dir = Option(None, convert=Path, doc="Output directory for the generated code.")

    def __init__(self, name: str, layout: BuildLayout | None = None):
        super().__init__()
        self.name = name
        self.layout = layout or BuildLayout()

        # Free-form arguments appended verbatim after all other flags
        self.args: list[str] = []
        self.namespace_package_mapping: dict[str, str] = {}

        self.output_dir = self.layout.build_directory.map(
            lambda build_dir: build_dir / CODEGEN_OUTPUTPATH / self.family / self.dir_name
        )

    @property
    def dir_name(self) -> str:
        """The config name as a path segment (spaces → underscores)."""
        return self.name.replace(" ", "_")

    @property
    def task_name(self) -> str:
        return f"{self.family}Wsdl2java{to_camel_case(self.name)}"

    def resolve(self) -> dict[str, Any]:
        values = super().resolve()
        values["name"] = self.name
        values["args"] = tuple(self.args)
        values["namespace_package_mapping"] = tuple(self.namespace_package_mapping.items())
        return values

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
