"""
Config file schema — Pydantic types for wsdl.yml.

Generator entries accept any option name as an extra field. Option
names are checked when the entry is applied to a config. Option
values, mapped packages and wsdl property values are passed through
unvalidated; scalars become strings where the model stores text.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GeneratorEntry(BaseModel):
    """One generator task declared under ``axis1:`` or ``axis2:``."""

    model_config = ConfigDict(extra="allow")

    name: str
    args: list[Any] = Field(default_factory=list)
    namespace_package_mapping: dict[str, Any] = Field(default_factory=dict)
    wsdl_properties: dict[str, Any] = Field(default_factory=dict)

    @property
    def options(self) -> dict[str, Any]:
        """Scalar options, in file order."""
        return dict(self.model_extra or {})


class ConfigFile(BaseModel):
    """Root of wsdl.yml."""

    model_config = ConfigDict(extra="forbid")

    version: int = 1
    build_dir: str = "build"
    classpath: dict[str, list[str]] = Field(default_factory=dict)
    axis1: list[GeneratorEntry] = Field(default_factory=list)
    axis2: list[GeneratorEntry] = Field(default_factory=list)
