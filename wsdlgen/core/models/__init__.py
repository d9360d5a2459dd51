"""
Domain models — generator configurations and their building blocks.

All models are re-exported here for convenient access:

    from wsdlgen.core.models import Axis1Config, Axis2Config, WsdlExtension
"""

from wsdlgen.core.models.axis import (
    CODEGEN_OUTPUTPATH,
    AxisConfig,
    Databinding,
    to_camel_case,
)
from wsdlgen.core.models.axis1 import Axis1Config, WsdlProperty
from wsdlgen.core.models.axis2 import Axis2Config
from wsdlgen.core.models.container import NamedContainer
from wsdlgen.core.models.extension import (
    WSDLAXIS1_CONFIGURATION_NAME,
    WSDLAXIS2_CONFIGURATION_NAME,
    WsdlExtension,
)
from wsdlgen.core.models.layout import BuildLayout
from wsdlgen.core.models.provider import Configurable, Option, Property, Provider

__all__ = [
    # axis.py
    "CODEGEN_OUTPUTPATH",
    "AxisConfig",
    "Databinding",
    "to_camel_case",
    # axis1.py / axis2.py
    "Axis1Config",
    "WsdlProperty",
    "Axis2Config",
    # container.py
    "NamedContainer",
    # extension.py
    "WSDLAXIS1_CONFIGURATION_NAME",
    "WSDLAXIS2_CONFIGURATION_NAME",
    "WsdlExtension",
    # layout.py
    "BuildLayout",
    # provider.py
    "Configurable",
    "Option",
    "Property",
    "Provider",
]
