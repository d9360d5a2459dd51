"""
Axis1 configuration — options of org.apache.axis.wsdl.WSDL2Java.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from wsdlgen.core.models.axis import AxisConfig
from wsdlgen.core.models.container import NamedContainer
from wsdlgen.core.models.layout import BuildLayout
from wsdlgen.core.models.provider import Option

# Default timeout in seconds
TIMEOUT = 240


def _flag_text(value: object) -> str:
    """Booleans as the generator spells them ('true'/'false')."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class WsdlProperty(BaseModel):
    """Name and value of a property for a custom generator factory."""

    name: str
    value: str = ""


class Axis1Config(AxisConfig):
    """A single Axis1 code generation task.

    String options left empty are not passed to the generator, which
    then applies its own default.
    """

    family = "axis1"

    timeout = Option(TIMEOUT, doc="Timeout in seconds. Use -1 to disable.")

    no_imports = Option(
        False, doc="Only generate code for the WSDL document given, not for imported ones."
    )
    no_wrapped = Option(
        False, doc="Turn off the special treatment of 'wrapped' document/literal operations."
    )
    server_side = Option(False, doc="Emit the server-side bindings for the web service.")
    skeleton_deploy = Option(
        "",
        convert=_flag_text,
        doc=(
            "Deploy the skeleton ('true') or the implementation ('false') in "
            "deploy.wsdd. Implies server_side."
        ),
    )
    deploy_scope = Option(
        "", doc="Scope added to deploy.wsdd: 'Application', 'Request' or 'Session'."
    )
    generate_all_classes = Option(
        False, doc="Generate code for all elements, even unreferenced ones."
    )
    type_mapping_version = Option("1.2", doc="Type mapping version, '1.1' or '1.2'.")
    factory = Option("", doc="Class name of a JavaWriterFactory extending the emitter.")
    helper_gen = Option(False, doc="Emit separate helper classes for meta data.")
    user_name = Option("", doc="Username used to resolve the WSDL URI.")
    password = Option("", doc="Password used to resolve the WSDL URI.")
    implementation_class_name = Option("", doc="Name of the implementation class.")
    wrap_arrays = Option(
        False, doc="Generate wrapper beans (e.g. ArrayOfString) instead of Java arrays."
    )
    allow_invalid_url = Option(
        False, doc="Generate stubs even if the WSDL endpoint URL is not a valid URL."
    )
    ns_include = Option("", doc="Namespace to include in the generated code.")
    ns_exclude = Option("", doc="Namespace to exclude from the generated code.")

    def __init__(self, name: str, layout: BuildLayout | None = None):
        super().__init__(name, layout)
        # Passed to the generator factory as --property name=value
        self.wsdl_properties: NamedContainer[WsdlProperty] = NamedContainer(
            lambda prop_name: WsdlProperty(name=prop_name)
        )

    def add_wsdl_property(self, name: str, value: str) -> WsdlProperty:
        """Register a generator factory property. Names must be unique."""
        return self.wsdl_properties.create(name, value=value)

    def resolve(self) -> dict[str, Any]:
        values = super().resolve()
        values["wsdl_properties"] = tuple((p.name, p.value) for p in self.wsdl_properties)
        return values
