"""
Build layout — where the build writes its outputs.

The build directory is resolved late: configs derive their default
output directories from ``build_directory``, a provider that reads the
layout's current value when asked. Changing the build directory after
a config was created therefore still moves that config's default
output, until the config's own ``output_dir`` is set.
"""

from __future__ import annotations

from pathlib import Path

from wsdlgen.core.models.provider import Provider

DEFAULT_BUILD_DIR = "build"


class BuildLayout:
    """Project directory plus a (possibly deferred) build directory."""

    def __init__(
        self,
        project_dir: Path | str | None = None,
        build_dir: Path | str | Provider[Path] | None = None,
    ):
        self.project_dir = Path(project_dir) if project_dir is not None else Path.cwd()
        self._build_dir: Path | str | Provider[Path] = (
            build_dir if build_dir is not None else DEFAULT_BUILD_DIR
        )

    def set_build_dir(self, build_dir: Path | str | Provider[Path]) -> None:
        self._build_dir = build_dir

    def _current_build_dir(self) -> Path:
        value = self._build_dir
        if isinstance(value, Provider):
            value = value.get()
        path = Path(value)
        if not path.is_absolute():
            path = self.project_dir / path
        return path

    @property
    def build_directory(self) -> Provider[Path]:
        """Deferred build directory, resolved against the project dir."""
        return Provider(self._current_build_dir)

    def __repr__(self) -> str:
        return f"<BuildLayout project_dir={str(self.project_dir)!r} build_dir={self._build_dir!r}>"
