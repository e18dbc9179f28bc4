"""Artifact writing for minideps.

Writes ``tree.json`` (package -> size-annotated file hierarchy) and
``files.json`` (sorted, deduplicated, project-relative paths).
"""

import json
from pathlib import Path
from typing import Any

from minideps.logging import logger
from minideps.models.tree import AnalysisResult

TREE_FILENAME = "tree.json"
FILES_FILENAME = "files.json"


def _write_json(path: Path, payload: Any) -> None:
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
        f.write("\n")


def write_outputs(result: AnalysisResult, output_dir: str | Path) -> tuple[Path, Path]:
    """Write both artifacts into ``output_dir``.

    Args:
        result: Finished analysis.
        output_dir: Destination directory (created if needed).

    Returns:
        Paths of the tree artifact and the file list artifact.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    tree_path = output_dir / TREE_FILENAME
    files_path = output_dir / FILES_FILENAME
    _write_json(tree_path, result.tree_dict())
    _write_json(files_path, result.files)

    logger.info("  Wrote %s and %s (%d files)", tree_path, files_path, len(result.files))
    return tree_path, files_path


def load_file_list(path: str | Path) -> list[str]:
    """Read a ``files.json`` artifact."""
    with Path(path).open("r", encoding="utf-8") as f:
        files = json.load(f)
    if not isinstance(files, list) or not all(isinstance(item, str) for item in files):
        raise ValueError(f"{path} is not a list of file paths")
    return files
