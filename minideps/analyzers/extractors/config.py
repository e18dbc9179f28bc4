"""Page/component config (.json) reference extraction.

Only ``usingComponents`` is read. Each component path expands to every
sibling file (.js/.wxs/.json/.wxml/.wxss) that exists.
"""

import json
from pathlib import Path
from typing import Any

from minideps.analyzers.extractors.base import read_text
from minideps.analyzers.paths import SIBLING_EXTENSIONS, PathResolver, with_extension
from minideps.errors import ConfigParseError
from minideps.logging import logger


def load_config(file: Path) -> Any:
    """Parse a config file.

    Raises:
        ConfigParseError: If the file is not valid JSON.
    """
    try:
        return json.loads(read_text(file))
    except json.JSONDecodeError as e:
        raise ConfigParseError(file, str(e)) from e


def component_paths(config: Any) -> list[str]:
    """Component path strings declared under ``usingComponents``."""
    if not isinstance(config, dict):
        return []
    using = config.get("usingComponents")
    if not isinstance(using, dict):
        return []
    return [value for value in using.values() if isinstance(value, str) and value]


def config_deps(file: Path, paths: PathResolver) -> list[Path]:
    """Resolve component declarations of a config file to existing files."""
    deps: list[Path] = []

    for component in component_paths(load_config(file)):
        base = paths.resolve_reference(file.parent, component)
        found = False
        for ext in SIBLING_EXTENSIONS:
            candidate = with_extension(base, ext)
            if candidate.is_file():
                deps.append(candidate)
                found = True
        if not found:
            logger.debug("  Unresolved component %r in %s", component, file)

    return deps
