"""Analyzers for mini-program dependency trees."""

from minideps.analyzers.builder import (
    TraversalContext,
    analyze_project,
    build_dependency_tree,
    create_package,
    insert,
    register_entry_point,
)
from minideps.analyzers.extractors import get_deps
from minideps.analyzers.manifest import (
    entry_points,
    load_manifest,
    make_subpackage_filter,
    selected_packages,
)
from minideps.analyzers.paths import SIBLING_EXTENSIONS, PathResolver, size_kib, with_extension
from minideps.analyzers.resolver import resolve_module, resolve_script
from minideps.analyzers.trace import dependents, entry_files, explain, reference_chain

__all__ = [
    "SIBLING_EXTENSIONS",
    "PathResolver",
    "TraversalContext",
    "analyze_project",
    "build_dependency_tree",
    "create_package",
    "dependents",
    "entry_files",
    "entry_points",
    "explain",
    "get_deps",
    "insert",
    "load_manifest",
    "make_subpackage_filter",
    "reference_chain",
    "register_entry_point",
    "resolve_module",
    "resolve_script",
    "selected_packages",
    "size_kib",
    "with_extension",
]
