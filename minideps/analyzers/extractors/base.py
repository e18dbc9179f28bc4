"""Tree-sitter helpers and shared file reading for the extractors."""

from pathlib import Path

from tree_sitter import Language, Node, Parser

# Lazy imports for tree-sitter language bindings
_LANGUAGES: dict[str, Language] = {}


def _get_language(name: str) -> Language | None:
    """Lazily load tree-sitter language bindings."""
    if name in _LANGUAGES:
        return _LANGUAGES[name]

    if name == "javascript":
        import tree_sitter_javascript as ts_javascript

        _LANGUAGES[name] = Language(ts_javascript.language())
    else:
        return None

    return _LANGUAGES.get(name)


def _get_parser(name: str) -> Parser:
    language = _get_language(name)
    if language is None:
        raise ValueError(f"No tree-sitter grammar for {name!r}")
    return Parser(language)


# =============================================================================
# Tree-sitter Helper Functions
# =============================================================================


def _find_nodes(node: Node, types: set[str]) -> list[Node]:
    """Find all nodes of given types, in document order.

    Walks with an explicit stack; minified code nests far deeper than the
    interpreter's recursion limit.
    """
    results = []
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in types:
            results.append(current)
        stack.extend(reversed(current.children))
    return results


def _first_error(node: Node) -> Node | None:
    """Return the first ERROR or MISSING node under ``node``, if any."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        if current.has_error:
            stack.extend(reversed(current.children))
    return None


def _get_child_by_field(node: Node, field_name: str) -> Node | None:
    """Get child by field name."""
    return node.child_by_field_name(field_name)


def _extract_string_value(node: Node) -> str:
    """Extract string value, removing quotes."""
    text = node.text.decode()
    if text.startswith(("'", '"', "`")):
        return text[1:-1]
    return text


def read_text(path: Path) -> str:
    """Read a project file as UTF-8.

    A byte-order mark is dropped and undecodable bytes (GBK stylesheets and
    templates) become U+FFFD instead of failing the run.
    """
    return path.read_text(encoding="utf-8-sig", errors="replace")
