"""Script module resolution.

Script references may omit the extension or point at a directory, so they
are resolved against a fixed precedence list rather than by exact match.
"""

from pathlib import Path

from minideps.analyzers.paths import PathResolver, normalize

SCRIPT_EXTENSIONS: frozenset[str] = frozenset({".js", ".wxs"})


def resolve_script(target: str | Path) -> Path | None:
    """Resolve a joined script reference to a file on disk.

    Precedence, first hit wins:
        1. ``target`` itself when it already ends in .js/.wxs
        2. ``target`` + ".js"
        3. ``target`` + ".wxs"
        4. ``target``/index.js

    Args:
        target: Reference already joined onto its base directory.

    Returns:
        The resolved file, or None if nothing matches.
    """
    target = normalize(target)
    if target.suffix in SCRIPT_EXTENSIONS and target.is_file():
        return target

    for candidate in (
        target.with_name(target.name + ".js"),
        target.with_name(target.name + ".wxs"),
        target / "index.js",
    ):
        if candidate.is_file():
            return candidate

    return None


def resolve_module(
    base_dir: str | Path,
    ref: str,
    paths: PathResolver | None = None,
) -> Path | None:
    """Join ``ref`` onto ``base_dir`` and resolve it (see resolve_script).

    With a PathResolver, root-relative references (leading "/") are joined
    onto the project root instead of ``base_dir``.
    """
    if not ref:
        return None
    if paths is not None:
        return resolve_script(paths.resolve_reference(Path(base_dir), ref))
    return resolve_script(Path(base_dir) / ref)
