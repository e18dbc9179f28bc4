"""Tests for reference chain explanation."""

from pathlib import Path

from minideps.analyzers.builder import analyze_project
from minideps.analyzers.trace import dependents, entry_files, explain, reference_chain


class TestExplain:
    """Tests for explaining why a file is included."""

    def test_entry_files_are_marked(self, sample_project: Path) -> None:
        """Page siblings are entries; discovered files are not."""
        result = analyze_project(sample_project)
        entries = entry_files(result.reference_graph)
        assert "pages/index/index.js" in entries
        assert "utils/format.js" not in entries

    def test_chain_through_template(self, sample_project: Path) -> None:
        """math.wxs is reached via the page template and item template."""
        result = analyze_project(sample_project)
        assert explain(result, "utils/math.wxs") == [
            "pages/index/index.wxml",
            "templates/item.wxml",
            "utils/math.wxs",
        ]

    def test_entry_chain_is_itself(self, sample_project: Path) -> None:
        """An entry file explains itself."""
        result = analyze_project(sample_project)
        assert explain(result, "./pages/index/index.js") == ["pages/index/index.js"]

    def test_unreachable_file(self, sample_project: Path) -> None:
        """Unused files have no chain."""
        result = analyze_project(sample_project)
        assert explain(result, "unused/dead.js") is None

    def test_dependents(self, sample_project: Path) -> None:
        """Direct referrers of a shared module are listed."""
        result = analyze_project(sample_project)
        assert dependents(result.reference_graph, "utils/format.js") == [
            "components/card/card.js",
            "pages/index/index.js",
        ]


def test_reference_chain_on_empty_graph() -> None:
    """An empty graph explains nothing."""
    import networkx as nx

    assert reference_chain(nx.DiGraph(), "a.js") is None
