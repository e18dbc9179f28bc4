"""Dependency tree builder.

Walks every file reachable from the declared pages, buckets each file into a
package tree with per-directory size totals, and records the reference graph.

Package assignment
------------------
Only files reached directly as a page of a sub-package (and the page's
sibling files) can land in that sub-package's bucket, and only when they sit
under its root. Everything discovered through a reference is inserted with
the default package, "main", whichever page pulled it in.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

import networkx as nx

from minideps.analyzers.extractors import get_deps
from minideps.analyzers.manifest import (
    entry_points,
    load_manifest,
    make_subpackage_filter,
    selected_packages,
)
from minideps.analyzers.paths import SIBLING_EXTENSIONS, PathResolver, size_kib, with_extension
from minideps.logging import log_operation, logger
from minideps.models.tree import MAIN_PACKAGE, AnalysisResult, EntryPoint, PackageNode


@dataclass
class TraversalContext:
    """Mutable state for a single run.

    ``visited`` spans all packages: a file is inserted into exactly one
    bucket, once.
    """

    paths: PathResolver
    tree: dict[str, PackageNode] = field(default_factory=dict)
    visited: set[Path] = field(default_factory=set)
    graph: nx.DiGraph = field(default_factory=nx.DiGraph)

    @classmethod
    def for_root(cls, root: str | Path) -> "TraversalContext":
        return cls(paths=PathResolver(root))

    def sorted_files(self) -> list[str]:
        return sorted(self.paths.relative(path) for path in self.visited)


def _package_prefix(package: str) -> str:
    return package.rstrip("/") + "/"


def create_package(ctx: TraversalContext, name: str) -> PackageNode:
    """Create an empty bucket for ``name`` (no-op if it already exists)."""
    if name not in ctx.tree:
        ctx.tree[name] = PackageNode(size=0.0, children={})
    return ctx.tree[name]


def register_entry_point(ctx: TraversalContext, page: str, package: str = MAIN_PACKAGE) -> None:
    """Insert every existing sibling file of a logical page."""
    base = ctx.paths.absolute(page)
    for ext in SIBLING_EXTENSIONS:
        candidate = with_extension(base, ext)
        if not candidate.is_file():
            continue
        ctx.graph.add_node(ctx.paths.relative(candidate), entry=True)
        insert(ctx, candidate, package)


def _add_to_bucket(bucket: PackageNode, segments: list[str], size: float) -> None:
    """Add a file under ``bucket``, growing every ancestor's size by ``size``."""
    bucket.size += size
    point = bucket.children
    last = len(segments) - 1

    for idx, name in enumerate(segments):
        if idx == last:
            point[name] = PackageNode(size=size)
            return
        node = point.get(name)
        if node is None:
            node = PackageNode(size=size, children={})
            point[name] = node
        else:
            node.size += size
        point = node.children


def insert(ctx: TraversalContext, file: Path, package: str = MAIN_PACKAGE) -> None:
    """Insert ``file`` into a package bucket, then everything it references.

    References are inserted without a package, so they default to "main".

    Raises:
        ScriptParseError: A reachable script does not parse.
        ConfigParseError: A reachable config file is not valid JSON.
        FileNotFoundError: The file vanished before its size was read.
    """
    if file in ctx.visited:
        return

    rel = ctx.paths.relative(file)
    if package != MAIN_PACKAGE and not rel.startswith(_package_prefix(package)):
        # Outside the sub-package root, so it cannot belong to it
        package = MAIN_PACKAGE

    size = size_kib(file)
    _add_to_bucket(create_package(ctx, package), rel.split("/"), size)
    ctx.visited.add(file)
    ctx.graph.add_node(rel, package=package, size=size)
    logger.debug("  + %s [%s] %.2f KiB", rel, package, size)

    for dep in get_deps(file, ctx.paths):
        ctx.graph.add_edge(rel, ctx.paths.relative(dep))
        insert(ctx, dep)


def build_dependency_tree(
    root: str | Path,
    entries: Iterable[EntryPoint],
    packages: Iterable[str] = (),
) -> AnalysisResult:
    """Traverse from ``entries`` and return the tree, flat list and graph.

    The main bucket always exists, followed by one bucket per name in
    ``packages`` (even if no entry targets it). Any other package named by an
    entry gets a bucket when that entry is registered.
    """
    ctx = TraversalContext.for_root(root)
    create_package(ctx, MAIN_PACKAGE)
    for name in packages:
        create_package(ctx, name)

    for entry in entries:
        create_package(ctx, entry.package)
        register_entry_point(ctx, entry.page, entry.package)

    for name, node in ctx.tree.items():
        logger.info("  Package %s: %d files, %.2f KiB", name, node.count_files(), node.size)

    return AnalysisResult(tree=ctx.tree, files=ctx.sorted_files(), graph=ctx.graph)


def analyze_project(
    root: str | Path,
    manifest_name: str = "app.json",
    subpackages: Iterable[str] | None = None,
    select: Callable[[str], bool] | None = None,
) -> AnalysisResult:
    """Load the manifest under ``root`` and build the dependency tree.

    Args:
        root: Project root directory.
        manifest_name: Manifest filename relative to ``root``.
        subpackages: Allow-list of sub-package roots (empty/None = all).
        select: Custom predicate on sub-package roots; overrides ``subpackages``.

    Returns:
        AnalysisResult with the tree, sorted file list and reference graph.
    """
    root = Path(root)
    if select is None:
        select = make_subpackage_filter(subpackages or [])

    with log_operation("analyze_project", {"root": root, "manifest": manifest_name}):
        manifest = load_manifest(root, manifest_name)
        entries = entry_points(manifest, select)
        return build_dependency_tree(root, entries, selected_packages(manifest, select))
