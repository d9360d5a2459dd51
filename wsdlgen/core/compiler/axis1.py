"""
Axis1 argument table — org.apache.axis.wsdl.WSDL2Java.

The WSDL URI is the tool's only positional argument. The timeout is
always passed because the configured default (240s) differs from the
tool's own.
"""

from __future__ import annotations

from wsdlgen.core.compiler.base import ArgumentCompiler
from wsdlgen.core.compiler.rules import Attribute, Flag, Pairs, Passthrough, Positional
from wsdlgen.core.models.extension import WSDLAXIS1_CONFIGURATION_NAME

MAIN_CLASS_NAME = "org.apache.axis.wsdl.WSDL2Java"


AXIS1_COMPILER = ArgumentCompiler(
    family="axis1",
    main_class=MAIN_CLASS_NAME,
    configuration_name=WSDLAXIS1_CONFIGURATION_NAME,
    rules=(
        Positional("wsdl_file"),
        Attribute("--package", "package_name"),
        Flag("--testCase", "generate_testcase"),
        # skeletonDeploy only makes sense for server-side bindings
        Flag("--server-side", "server_side", implied_by=("skeleton_deploy",)),
        Attribute("--skeletonDeploy", "skeleton_deploy"),
        Attribute("--deployScope", "deploy_scope"),
        Flag("--all", "generate_all_classes"),
        Flag("--helperGen", "helper_gen"),
        Flag("--wrapArrays", "wrap_arrays"),
        Attribute("--implementationClassName", "implementation_class_name"),
        Attribute("--output", "output_dir"),
        Attribute("--fileNStoPkg", "namespace_package_mapping_file"),
        Flag("--noImports", "no_imports"),
        Flag("--noWrapped", "no_wrapped"),
        Flag("--allowInvalidURL", "allow_invalid_url"),
        Attribute("--timeout", "timeout"),
        Attribute("--typeMappingVersion", "type_mapping_version"),
        Attribute("--factory", "factory"),
        Attribute("--user", "user_name"),
        Attribute("--password", "password"),
        Attribute("--nsInclude", "ns_include"),
        Attribute("--nsExclude", "ns_exclude"),
        Pairs("--property", "wsdl_properties"),
        Passthrough("args"),
    ),
)
