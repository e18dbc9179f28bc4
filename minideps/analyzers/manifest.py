"""Application manifest loading.

Turns ``app.json`` into the ordered list of (page, package) entry points the
builder consumes: main pages first, then each selected sub-package's pages.
"""

import json
from collections.abc import Callable, Iterable
from pathlib import Path

from pydantic import ValidationError

from minideps.errors import ManifestError
from minideps.logging import logger
from minideps.models.tree import MAIN_PACKAGE, AppManifest, EntryPoint, SubPackage


def load_manifest(root: str | Path, manifest_name: str = "app.json") -> AppManifest:
    """Read the manifest from the project root.

    Both ``subPackages`` and ``subpackages`` are accepted; the former wins.

    Raises:
        ManifestError: Missing file, invalid JSON, or an invalid page list.
    """
    path = Path(root) / manifest_name
    try:
        with path.open("r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestError(f"Manifest not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in manifest {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} must be a JSON object")

    subs = data.get("subPackages")
    if subs is None:
        subs = data.get("subpackages")

    try:
        return AppManifest(pages=data.get("pages"), sub_packages=subs or [])
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest {path}: {e}") from e


def _normalize_root(root: str) -> str:
    return root.strip().rstrip("/")


def make_subpackage_filter(allowed: Iterable[str]) -> Callable[[str], bool]:
    """Predicate selecting sub-package roots in ``allowed`` (all when empty)."""
    allowed_roots = {_normalize_root(root) for root in allowed if root.strip()}
    if not allowed_roots:
        return lambda root: True
    return lambda root: _normalize_root(root) in allowed_roots


def _subpackage_page(sub: SubPackage, page: str) -> str:
    return f"{sub.root.rstrip('/')}/{page.lstrip('/')}"


def _is_selected(sub: SubPackage, select: Callable[[str], bool] | None) -> bool:
    return select is None or select(sub.root)


def selected_packages(
    manifest: AppManifest,
    select: Callable[[str], bool] | None = None,
) -> list[str]:
    """Roots of the selected sub-packages, in manifest order, pages or not."""
    return [sub.root for sub in manifest.sub_packages if _is_selected(sub, select)]


def entry_points(
    manifest: AppManifest,
    select: Callable[[str], bool] | None = None,
) -> list[EntryPoint]:
    """Expand the manifest into ordered entry points."""
    entries = [EntryPoint(page=page, package=MAIN_PACKAGE) for page in manifest.pages]

    for sub in manifest.sub_packages:
        if not _is_selected(sub, select):
            logger.info("  Skipping sub-package %s", sub.root)
            continue
        entries.extend(
            EntryPoint(page=_subpackage_page(sub, page), package=sub.root)
            for page in sub.pages
        )

    return entries
