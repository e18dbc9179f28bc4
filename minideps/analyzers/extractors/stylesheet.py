"""Stylesheet (.wxss) reference extraction."""

import re
from pathlib import Path

from minideps.analyzers.extractors.base import read_text
from minideps.analyzers.paths import PathResolver
from minideps.logging import logger

# @import "a.wxss"; / @import 'a.wxss'  (trailing semicolons optional)
IMPORT_PATTERN = re.compile(r"""@import\s*['"]([^'"\n]+)['"]\s*;*""")


def extract_stylesheet_references(content: str) -> list[str]:
    """Raw targets of every ``@import`` directive."""
    return [match.group(1) for match in IMPORT_PATTERN.finditer(content)]


def stylesheet_deps(file: Path, paths: PathResolver) -> list[Path]:
    """Resolve ``@import`` targets to existing files."""
    deps: list[Path] = []

    for ref in extract_stylesheet_references(read_text(file)):
        target = paths.resolve_reference(file.parent, ref)
        if target.is_file():
            deps.append(target)
        else:
            logger.debug("  Unresolved stylesheet import %r in %s", ref, file)

    return deps
