"""Tests for path arithmetic helpers."""

from pathlib import Path

import pytest

from minideps.analyzers.paths import (
    SIBLING_EXTENSIONS,
    PathResolver,
    normalize,
    size_kib,
    with_extension,
)


class TestPathResolver:
    """Tests for absolute/relative conversion against the root."""

    def test_absolute_joins_relative_ref(self, tmp_path: Path) -> None:
        """Relative refs are joined onto the root."""
        paths = PathResolver(tmp_path)
        assert paths.absolute("pages/a/a") == tmp_path / "pages" / "a" / "a"

    def test_absolute_keeps_path_under_root(self, tmp_path: Path) -> None:
        """Paths already under the root are returned unchanged."""
        paths = PathResolver(tmp_path)
        inside = tmp_path / "x" / "y.js"
        assert paths.absolute(inside) == inside

    def test_absolute_leading_slash_stays_under_root(self, tmp_path: Path) -> None:
        """A leading slash does not escape the project root."""
        paths = PathResolver(tmp_path)
        assert paths.absolute("/components/c/c") == tmp_path / "components" / "c" / "c"

    def test_absolute_does_not_check_existence(self, tmp_path: Path) -> None:
        """No filesystem access is required."""
        paths = PathResolver(tmp_path)
        assert not paths.absolute("missing/file").exists()

    def test_relative_is_posix(self, tmp_path: Path) -> None:
        """Relative paths use forward slashes."""
        paths = PathResolver(tmp_path)
        assert paths.relative(tmp_path / "a" / "b" / "c.js") == "a/b/c.js"

    def test_resolve_reference_relative_to_dir(self, tmp_path: Path) -> None:
        """Plain references resolve against the referring directory."""
        paths = PathResolver(tmp_path)
        base = tmp_path / "pages" / "home"
        assert paths.resolve_reference(base, "../shared/x") == tmp_path / "pages" / "shared" / "x"

    def test_resolve_reference_root_relative(self, tmp_path: Path) -> None:
        """References starting with / resolve against the root."""
        paths = PathResolver(tmp_path)
        base = tmp_path / "pages" / "home"
        assert paths.resolve_reference(base, "/utils/x") == tmp_path / "utils" / "x"


class TestWithExtension:
    """Tests for extension substitution."""

    @pytest.mark.parametrize(
        ("source", "ext", "expected"),
        [
            ("a/b/page", ".js", "a/b/page.js"),
            ("a/b/page.json", ".wxml", "a/b/page.wxml"),
            ("a/b/page.js", "", "a/b/page"),
        ],
    )
    def test_replaces_extension(self, source: str, ext: str, expected: str) -> None:
        """Extension is replaced while directory and stem are kept."""
        assert with_extension(Path(source), ext) == Path(expected)

    def test_sibling_extension_order(self) -> None:
        """Siblings are tried script first, stylesheet last."""
        assert SIBLING_EXTENSIONS == (".js", ".wxs", ".json", ".wxml", ".wxss")


class TestSizeKib:
    """Tests for file size lookup."""

    def test_size_in_kib(self, tmp_path: Path) -> None:
        """Size is bytes / 1024 as a float."""
        f = tmp_path / "f.js"
        f.write_bytes(b"x" * 512)
        assert size_kib(f) == 0.5

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Missing files surface as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            size_kib(tmp_path / "gone.js")


def test_normalize_collapses_parent_segments() -> None:
    """normalize removes '..' without touching the filesystem."""
    assert normalize("/a/b/../c") == Path("/a/c")
