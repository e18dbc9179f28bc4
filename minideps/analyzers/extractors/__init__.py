"""Format-specific reference extractors.

Dispatch is closed over the five sibling extensions. ``.wxs`` files are
leaves: they are reached through script resolution but never scanned.
"""

from collections.abc import Callable
from pathlib import Path

from minideps.analyzers.extractors.config import component_paths, config_deps, load_config
from minideps.analyzers.extractors.markup import extract_markup_references, markup_deps
from minideps.analyzers.extractors.script import (
    extract_script_references,
    parse_script,
    script_deps,
)
from minideps.analyzers.extractors.stylesheet import (
    extract_stylesheet_references,
    stylesheet_deps,
)
from minideps.analyzers.paths import PathResolver

Extractor = Callable[[Path, PathResolver], list[Path]]

EXTENSION_TO_EXTRACTOR: dict[str, Extractor | None] = {
    ".js": script_deps,
    ".wxs": None,
    ".json": config_deps,
    ".wxml": markup_deps,
    ".wxss": stylesheet_deps,
}


def get_deps(file: Path, paths: PathResolver) -> list[Path]:
    """Return the existing files ``file`` references, in reference order.

    Raises:
        ScriptParseError: For a malformed script.
        ConfigParseError: For a malformed config file.
    """
    extractor = EXTENSION_TO_EXTRACTOR.get(file.suffix)
    if extractor is None:
        return []
    return extractor(file, paths)


__all__ = [
    "EXTENSION_TO_EXTRACTOR",
    "component_paths",
    "config_deps",
    "extract_markup_references",
    "extract_script_references",
    "extract_stylesheet_references",
    "get_deps",
    "load_config",
    "markup_deps",
    "parse_script",
    "script_deps",
    "stylesheet_deps",
]
