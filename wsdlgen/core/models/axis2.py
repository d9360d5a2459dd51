"""
Axis2 configuration — options of org.apache.axis2.wsdl.WSDL2Java.
"""

from __future__ import annotations

from wsdlgen.core.models.axis import AxisConfig, Databinding
from wsdlgen.core.models.provider import Option


class Axis2Config(AxisConfig):
    """A single Axis2 code generation task.

    ``async_only`` and ``sync_only`` select the stub invocation style.
    When both are true, async wins.
    """

    family = "axis2"

    async_only = Option(False, doc="Generate only asynchronous invocation methods.")
    sync_only = Option(False, doc="Generate only synchronous invocation methods.")
    server_side = Option(False, doc="Generate server side code (skeletons).")
    service_description = Option(
        False, doc="Generate the service descriptor (services.xml). Needs server_side."
    )
    databinding_method = Option(
        Databinding.ADB.value, doc="Databinding framework: adb, xmlbeans, jibx, jaxbri or none."
    )
    generate_all_classes = Option(
        False, doc="With server_side, also generate the client stubs."
    )
    unpack_classes = Option(False, doc="Generate separate classes for the databinders.")
    service_name = Option("", doc="Service to generate code for (default: the first one).")
    port_name = Option("", doc="Port to generate code for (default: the first one).")
    serverside_interface = Option(False, doc="Generate an interface for the service skeleton.")
    wsdl_version = Option("", doc="WSDL version: '2', '2.0' or '1.1'.")
    source_folder = Option("", doc="Directory for generated sources, relative to output_dir.")
    resource_folder = Option("", doc="Directory for generated resources, relative to output_dir.")
    flatten_files = Option(False, doc="Flatten the generated files.")
    unwrap_params = Option(False, doc="Switch on un-wrapping of parameters.")
    xsdconfig = Option(False, doc="Use an XMLBeans .xsdconfig file. Only with xmlbeans.")
    all_ports = Option(False, doc="Generate code for all ports.")
    backward_compatible = Option(False, doc="Generate Axis 1.x backward compatible code.")
    suppress_prefixes = Option(False, doc="Suppress namespace prefixes in messages.")
    no_message_receiver = Option(False, doc="Do not generate a MessageReceiver.")
