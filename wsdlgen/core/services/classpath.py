"""
Classpath resolution — generator jars for a classpath configuration.

Entries are paths or glob patterns relative to the project directory.
Patterns expand to their matches in sorted order; plain entries are
kept as given, whether or not they exist, so the JVM reports a missing
jar itself.
"""

from __future__ import annotations

import glob
import logging
from pathlib import Path

from wsdlgen.core.models.extension import WsdlExtension

logger = logging.getLogger(__name__)

_GLOB_CHARS = ("*", "?", "[")


def resolve_classpath(extension: WsdlExtension, configuration_name: str) -> tuple[Path, ...]:
    """Resolve the classpath entries of a configuration.

    Returns:
        Resolved paths, or an empty tuple for an unknown configuration.
    """
    entries = extension.classpath.get(configuration_name)
    if not entries:
        logger.debug("No classpath entries for configuration %s", configuration_name)
        return ()

    project_dir = extension.layout.project_dir
    resolved: list[Path] = []
    for entry in entries:
        path = Path(entry)
        if not path.is_absolute():
            path = project_dir / path
        if any(ch in entry for ch in _GLOB_CHARS):
            matches = sorted(glob.glob(str(path)))
            if not matches:
                logger.warning("Classpath pattern matched nothing: %s", entry)
            resolved.extend(Path(m) for m in matches)
        else:
            resolved.append(path)

    logger.debug("Classpath %s: %d entries", configuration_name, len(resolved))
    return tuple(resolved)
