"""Config loading — wsdl.yml into a WsdlExtension."""

from wsdlgen.core.config.loader import ConfigError, find_config_file, load_extension

__all__ = ["ConfigError", "find_config_file", "load_extension"]
