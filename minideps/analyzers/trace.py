"""Explain why a file is part of the build.

Uses the reference graph recorded during traversal: nodes are
project-relative paths, edges point from referrer to referenced file, and
page files carry ``entry=True``.
"""

import posixpath

import networkx as nx

from minideps.models.tree import AnalysisResult


def entry_files(G: nx.DiGraph) -> list[str]:
    """Files registered directly as page siblings, sorted."""
    return sorted(node for node, attrs in G.nodes(data=True) if attrs.get("entry"))


def reference_chain(G: nx.DiGraph, target: str) -> list[str] | None:
    """Shortest chain of references from any entry file to ``target``.

    Args:
        G: Reference graph from an AnalysisResult.
        target: Project-relative POSIX path.

    Returns:
        List of paths starting at an entry file and ending at ``target``,
        or None if ``target`` is not reachable.
    """
    sources = entry_files(G)
    if target not in G or not sources:
        return None
    try:
        _, path = nx.multi_source_dijkstra(G, sources, target=target)
    except nx.NetworkXNoPath:
        return None
    return path


def dependents(G: nx.DiGraph, target: str) -> list[str]:
    """Files that reference ``target`` directly, sorted."""
    if target not in G:
        return []
    return sorted(G.predecessors(target))


def explain(result: AnalysisResult, target: str) -> list[str] | None:
    """Reference chain that pulls ``target`` into ``result``."""
    target = posixpath.normpath(target.replace("\\", "/")).lstrip("/")
    return reference_chain(result.reference_graph, target)
