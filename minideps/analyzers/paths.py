"""Path arithmetic against the project root.

All traversal paths are absolute and normalized (``..`` collapsed, symlinks
left alone) so the visited set deduplicates every spelling of a file.
"""

import os
from pathlib import Path, PurePosixPath

# Sibling extensions tried for every page and component path, in this order
SIBLING_EXTENSIONS: tuple[str, ...] = (".js", ".wxs", ".json", ".wxml", ".wxss")


def normalize(path: str | Path) -> Path:
    """Collapse ``.``/``..`` segments without touching the filesystem."""
    return Path(os.path.normpath(path))


class PathResolver:
    """Converts between project-relative and absolute paths."""

    def __init__(self, root: str | Path):
        self.root = normalize(Path(root).absolute())

    def absolute(self, ref: str | Path) -> Path:
        """Return ``ref`` unchanged if it lies under the root, else join it onto the root.

        A leading separator does not escape the root: ``/pages/a`` becomes
        ``<root>/pages/a``.
        """
        path = Path(ref)
        if path.is_relative_to(self.root):
            return normalize(path)
        return normalize(self.root / str(ref).lstrip("/\\"))

    def relative(self, path: str | Path) -> str:
        """Project-relative POSIX form, used for tree keys and the flat list."""
        rel = os.path.relpath(path, self.root)
        return PurePosixPath(*Path(rel).parts).as_posix()

    def resolve_reference(self, base_dir: Path, ref: str) -> Path:
        """Resolve a raw reference found in a file living in ``base_dir``.

        References starting with ``/`` are project-root relative; everything
        else is relative to the referring file's directory.
        """
        if ref.startswith("/"):
            return self.absolute(ref)
        return normalize(base_dir / ref)


def with_extension(path: str | Path, ext: str) -> Path:
    """Replace the extension of ``path`` (possibly empty) with ``ext``."""
    path = Path(path)
    return path.with_name(path.stem + ext)


def size_kib(path: str | Path) -> float:
    """File size in KiB. Raises FileNotFoundError if the file is gone."""
    return os.stat(path).st_size / 1024
