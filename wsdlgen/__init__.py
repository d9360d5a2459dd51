"""wsdlgen — typed configuration and command lines for Axis WSDL2Java generators."""

__version__ = "0.1.0"
