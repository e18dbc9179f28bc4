"""Copy the files a build uses into a staging directory."""

import shutil
from collections.abc import Iterable
from pathlib import Path

from minideps.errors import StagingError
from minideps.logging import log_operation


def stage_files(
    files: Iterable[str],
    source_root: str | Path,
    dest_root: str | Path,
) -> int:
    """Copy each project-relative file from ``source_root`` to ``dest_root``.

    Directory structure is recreated and file metadata preserved.

    Returns:
        Number of files copied.

    Raises:
        StagingError: A listed file does not exist under ``source_root``.
    """
    source_root = Path(source_root)
    dest_root = Path(dest_root)
    files = list(files)

    with log_operation("stage_files", {"from": source_root, "to": dest_root, "files": len(files)}):
        copied = 0
        for rel in files:
            src = source_root / rel
            if not src.is_file():
                raise StagingError(f"Missing source file: {src}")
            dest = dest_root / rel
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dest)
            copied += 1

    return copied
