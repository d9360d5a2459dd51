"""Argument compilers — one rule table per generator family."""

from wsdlgen.core.compiler.axis1 import AXIS1_COMPILER
from wsdlgen.core.compiler.axis2 import AXIS2_COMPILER
from wsdlgen.core.compiler.base import ArgumentCompiler, Invocation
from wsdlgen.core.models.axis import AxisConfig

COMPILERS: dict[str, ArgumentCompiler] = {
    AXIS1_COMPILER.family: AXIS1_COMPILER,
    AXIS2_COMPILER.family: AXIS2_COMPILER,
}


def compiler_for(config: AxisConfig) -> ArgumentCompiler:
    """Look up the compiler for a config's generator family."""
    try:
        return COMPILERS[config.family]
    except KeyError:
        raise LookupError(f"No compiler for generator family '{config.family}'") from None


__all__ = [
    "AXIS1_COMPILER",
    "AXIS2_COMPILER",
    "COMPILERS",
    "ArgumentCompiler",
    "Invocation",
    "compiler_for",
]
