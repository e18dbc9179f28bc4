"""Script (.js) reference extraction.

Parses the file with tree-sitter and collects, in document order:
- import ... from "X" / import "X"
- export ... from "X", including export-default-from (export v from "X")
- require("X") where ``require`` is a bare identifier
"""

import re
from pathlib import Path

from tree_sitter import Node

from minideps.analyzers.extractors.base import (
    _extract_string_value,
    _find_nodes,
    _first_error,
    _get_child_by_field,
    _get_parser,
    read_text,
)
from minideps.analyzers.paths import PathResolver
from minideps.analyzers.resolver import resolve_module
from minideps.errors import ScriptParseError
from minideps.logging import logger

_REFERENCE_NODE_TYPES = {"import_statement", "export_statement", "call_expression"}


# export v from "mod" / export v, { a } from "mod" / export v, * as ns from "mod"
EXPORT_DEFAULT_FROM = re.compile(
    r"""(?<![\w$.])export(?=\s+(?!default\b)[A-Za-z_$][\w$]*\s*"""
    r"""(?:,\s*(?:\{[^}]*\}|\*\s*as\s+[A-Za-z_$][\w$]*)\s*)?from\s*['"])"""
)


def _rewrite_export_default_from(source: str) -> str:
    """Spell ``export v from "mod"`` as the equivalent-length import.

    The grammar has no export-default-from form; as an import the module
    specifier sits at the same offsets and is still collected.
    """
    return EXPORT_DEFAULT_FROM.sub("import", source)


def parse_script(source: str, path: Path) -> Node:
    """Parse script source into a tree-sitter AST.

    Raises:
        ScriptParseError: If the source has any syntax error.
    """
    source = _rewrite_export_default_from(source)
    tree = _get_parser("javascript").parse(source.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        error = _first_error(root) or root
        line, column = error.start_point
        raise ScriptParseError(path, line + 1, column + 1)
    return root


def _require_argument(node: Node) -> str | None:
    """Return the string argument of ``require("X")`` calls, else None."""
    func = _get_child_by_field(node, "function")
    if func is None or func.type != "identifier" or func.text != b"require":
        return None
    args = _get_child_by_field(node, "arguments")
    if args is None:
        return None
    first = next((arg for arg in args.named_children if arg.type != "comment"), None)
    if first is None or first.type != "string":
        return None
    return _extract_string_value(first) or None


def extract_script_references(root: Node) -> list[str]:
    """Collect raw module specifiers from a parsed script."""
    refs: list[str] = []

    for node in _find_nodes(root, _REFERENCE_NODE_TYPES):
        if node.type == "call_expression":
            value = _require_argument(node)
            if value:
                refs.append(value)
            continue

        # import_statement always has a source; export_statement only for re-exports
        source = _get_child_by_field(node, "source")
        if source is not None:
            value = _extract_string_value(source)
            if value:
                refs.append(value)

    return refs


def script_deps(file: Path, paths: PathResolver) -> list[Path]:
    """Resolve every module a script file references to files on disk."""
    root = parse_script(read_text(file), file)
    deps: list[Path] = []

    for ref in extract_script_references(root):
        resolved = resolve_module(file.parent, ref, paths)
        if resolved is None:
            logger.debug("  Unresolved script reference %r in %s", ref, file)
            continue
        deps.append(resolved)

    return deps
