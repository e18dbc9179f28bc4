"""Template (.wxml) reference extraction.

Streams the markup through ``html.parser`` and reads the ``src`` attribute
of every <import>, <require> and <wxs> opening tag.
"""

from html.parser import HTMLParser
from pathlib import Path

from minideps.analyzers.extractors.base import read_text
from minideps.analyzers.paths import PathResolver
from minideps.logging import logger

REFERENCE_TAGS = frozenset({"import", "require", "wxs"})


class _TemplateRefParser(HTMLParser):
    """Collect ``src`` values from reference tags, in document order."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.sources: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag not in REFERENCE_TAGS:
            return
        src = dict(attrs).get("src")
        if src:
            self.sources.append(src)


def extract_markup_references(content: str) -> list[str]:
    """Raw ``src`` values referenced by a template."""
    parser = _TemplateRefParser()
    parser.feed(content)
    parser.close()
    return parser.sources


def markup_deps(file: Path, paths: PathResolver) -> list[Path]:
    """Resolve template references to existing files."""
    deps: list[Path] = []

    for src in extract_markup_references(read_text(file)):
        target = paths.resolve_reference(file.parent, src)
        if target.is_file():
            deps.append(target)
        else:
            logger.debug("  Unresolved template reference %r in %s", src, file)

    return deps
