"""Data models for the dependency tree and its inputs.

Includes Pydantic models for the manifest, the size-annotated tree and the
final analysis result, plus serialization helpers for both artifacts.
"""

from typing import Any

import networkx as nx
from pydantic import BaseModel, ConfigDict, Field

MAIN_PACKAGE = "main"


class PackageNode(BaseModel):
    """A node in a package's file hierarchy.

    A node without ``children`` is a file; a node with ``children`` is a
    directory whose ``size`` is the sum of every file beneath it.
    """

    size: float = Field(default=0.0, description="Size in KiB")
    children: dict[str, "PackageNode"] | None = Field(
        default=None, description="Path segment -> child node (absent on files)"
    )

    def leaf_total(self) -> float:
        """Re-sum the sizes of every file beneath this node."""
        if self.children is None:
            return self.size
        return sum(child.leaf_total() for child in self.children.values())

    def count_files(self) -> int:
        if self.children is None:
            return 1
        return sum(child.count_files() for child in self.children.values())


PackageNode.model_rebuild()


class SubPackage(BaseModel):
    """A sub-package declaration from the manifest."""

    root: str = Field(description="Directory prefix, e.g. 'pkgA/'")
    pages: list[str] = Field(default_factory=list, description="Pages relative to root")

    model_config = ConfigDict(extra="ignore")


class AppManifest(BaseModel):
    """The subset of the application manifest the analyzer reads."""

    pages: list[str] = Field(description="Main package page paths")
    sub_packages: list[SubPackage] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class EntryPoint(BaseModel):
    """A logical page path to seed into a package bucket."""

    page: str = Field(description="Logical page path, without extension")
    package: str = Field(default=MAIN_PACKAGE, description="Package bucket name")

    model_config = ConfigDict(frozen=True)


class PackageSummary(BaseModel):
    """Per-package totals reported by the CLI."""

    package: str
    size: float = Field(description="Total size in KiB")
    file_count: int


class AnalysisResult(BaseModel):
    """Finished traversal: the tree artifact, the flat list and the reference graph."""

    tree: dict[str, PackageNode] = Field(description="Package name -> root node")
    files: list[str] = Field(description="Sorted project-relative file paths")
    graph: Any = Field(default=None, exclude=True, description="networkx.DiGraph of references")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def tree_dict(self) -> dict[str, Any]:
        """Tree artifact as plain dicts, with ``children`` omitted on files."""
        return {
            name: node.model_dump(exclude_none=True)
            for name, node in self.tree.items()
        }

    def summaries(self) -> list[PackageSummary]:
        return [
            PackageSummary(
                package=name,
                size=round(node.size, 3),
                file_count=node.count_files(),
            )
            for name, node in self.tree.items()
        ]

    @property
    def reference_graph(self) -> nx.DiGraph:
        if self.graph is None:
            return nx.DiGraph()
        return self.graph
