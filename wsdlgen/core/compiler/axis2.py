"""
Axis2 argument table — org.apache.axis2.wsdl.WSDL2Java.

``--over-ride``, ``--noBuildXML`` and ``--noWSDL`` are always passed:
generated sources are overwritten on every run, and the generator never
writes an Ant build file or a copy of the WSDL next to them.
"""

from __future__ import annotations

from wsdlgen.core.compiler.base import ArgumentCompiler
from wsdlgen.core.compiler.rules import (
    Attribute,
    Constant,
    Exclusive,
    Flag,
    Forced,
    JoinedMapping,
    Passthrough,
)
from wsdlgen.core.models.axis import Databinding
from wsdlgen.core.models.extension import WSDLAXIS2_CONFIGURATION_NAME

MAIN_CLASS_NAME = "org.apache.axis2.wsdl.WSDL2Java"


def _uses_xmlbeans(values) -> bool:
    return values["databinding_method"] == Databinding.XMLBEANS.value


AXIS2_COMPILER = ArgumentCompiler(
    family="axis2",
    main_class=MAIN_CLASS_NAME,
    configuration_name=WSDLAXIS2_CONFIGURATION_NAME,
    rules=(
        Attribute("-uri", "wsdl_file"),
        Constant("--language", "java"),
        Attribute("--package", "package_name"),
        Exclusive(
            preferred=Flag("--async", "async_only"),
            other=Flag("--sync", "sync_only"),
            message=(
                "{name}: generating code only for async style, "
                "because async_only and sync_only are both set"
            ),
        ),
        Flag("--test-case", "generate_testcase"),
        Flag("--server-side", "server_side"),
        Flag("--service-description", "service_description"),
        Attribute("--databinding-method", "databinding_method"),
        Flag("--generate-all", "generate_all_classes"),
        Flag("--unpack-classes", "unpack_classes"),
        Attribute("--service-name", "service_name"),
        Attribute("--port-name", "port_name"),
        JoinedMapping("--namespace2package", "namespace_package_mapping"),
        Flag("--serverside-interface", "serverside_interface"),
        Attribute("--wsdl-version", "wsdl_version"),
        Attribute("--output", "output_dir"),
        Attribute("--source-folder", "source_folder"),
        Attribute("--resource-folder", "resource_folder"),
        Attribute("--external-mapping", "namespace_package_mapping_file"),
        Flag("--flatten-files", "flatten_files"),
        Flag("--unwrap-params", "unwrap_params"),
        Flag("-xsdconfig", "xsdconfig", when=_uses_xmlbeans),
        Flag("--all-ports", "all_ports"),
        Forced("--over-ride"),
        Flag("--backword-compatible", "backward_compatible"),
        Flag("--suppress-prefixes", "suppress_prefixes"),
        Forced("--noBuildXML"),
        Forced("--noWSDL"),
        Flag("--noMessageReceiver", "no_message_receiver"),
        Passthrough("args"),
    ),
)
