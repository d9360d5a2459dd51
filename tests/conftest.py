"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from wsdlgen.core.models import BuildLayout


@pytest.fixture
def layout(tmp_path: Path) -> BuildLayout:
    """Return a build layout rooted in a temporary project directory."""
    return BuildLayout(project_dir=tmp_path, build_dir="build")


@pytest.fixture
def codegen_root(tmp_path: Path) -> Path:
    """Return the generated-code root of the ``layout`` fixture."""
    return tmp_path / "build" / "generated" / "wsdl2java"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes a dedented wsdl.yml into tmp_path."""

    def _write(content: str) -> Path:
        path = tmp_path / "wsdl.yml"
        path.write_text(textwrap.dedent(content))
        return path

    return _write
