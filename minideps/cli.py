"""CLI interface for minideps.

Provides commands to analyze a project, stage the files a build uses, and
explain why a given file is included.
"""

import json
import sys
from pathlib import Path

import click

from minideps import __version__
from minideps.config import Settings, load_settings
from minideps.errors import MinidepsError
from minideps.logging import set_log_level


@click.group()
@click.version_option(version=__version__, prog_name="minideps")
@click.option("--log-level", default=None, help="Log level (default: MINIDEPS_LOG_LEVEL or INFO)")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """minideps - dependency tree and file list for mini-program builds."""
    settings = load_settings()
    set_log_level(log_level or settings.log_level)
    ctx.obj = settings


def _fail(command: str, error: Exception) -> None:
    click.echo(f"{command} failed: {error}", err=True)
    sys.exit(1)


@cli.command()
@click.argument("project_root", type=click.Path(exists=True, file_okay=False, resolve_path=True))
@click.option("--manifest", default=None, help="Manifest filename (default: app.json)")
@click.option(
    "--subpackage",
    "subpackages",
    multiple=True,
    help="Sub-package root to include. Repeatable; default is every sub-package.",
)
@click.option("--output-dir", type=click.Path(file_okay=False), default=None, help="Artifact directory (default: out)")
@click.pass_obj
def analyze(
    settings: Settings,
    project_root: str,
    manifest: str | None,
    subpackages: tuple[str, ...],
    output_dir: str | None,
) -> None:
    """Build tree.json and files.json for a project.

    PROJECT_ROOT: Directory containing the application manifest.
    """
    from minideps.analyzers import analyze_project
    from minideps.utils.output import write_outputs

    try:
        result = analyze_project(
            project_root,
            manifest_name=manifest or settings.manifest,
            subpackages=list(subpackages) or settings.subpackages,
        )
    except (MinidepsError, OSError) as e:
        _fail("analyze", e)

    tree_path, files_path = write_outputs(result, output_dir or settings.output_dir)
    summary = {
        "packages": [s.model_dump() for s in result.summaries()],
        "file_count": len(result.files),
        "tree": str(tree_path),
        "files": str(files_path),
    }
    click.echo(json.dumps(summary, indent=2))


@cli.command()
@click.argument("files_json", type=click.Path(exists=True, dir_okay=False))
@click.argument("source_root", type=click.Path(exists=True, file_okay=False))
@click.argument("dest_root", type=click.Path(file_okay=False))
def stage(files_json: str, source_root: str, dest_root: str) -> None:
    """Copy the files listed in FILES_JSON from SOURCE_ROOT to DEST_ROOT."""
    from minideps.utils.output import load_file_list
    from minideps.utils.staging import stage_files

    try:
        copied = stage_files(load_file_list(files_json), source_root, dest_root)
    except (MinidepsError, OSError, ValueError) as e:
        _fail("stage", e)

    click.echo(f"Copied {copied} files to {Path(dest_root)}")


@cli.command()
@click.argument("project_root", type=click.Path(exists=True, file_okay=False, resolve_path=True))
@click.argument("target")
@click.option("--manifest", default=None, help="Manifest filename (default: app.json)")
@click.option("--subpackage", "subpackages", multiple=True, help="Sub-package root to include.")
@click.pass_obj
def explain(
    settings: Settings,
    project_root: str,
    target: str,
    manifest: str | None,
    subpackages: tuple[str, ...],
) -> None:
    """Show the reference chain that pulls TARGET into the build.

    TARGET: Project-relative file path.
    """
    from minideps.analyzers import analyze_project
    from minideps.analyzers import explain as explain_target

    try:
        result = analyze_project(
            project_root,
            manifest_name=manifest or settings.manifest,
            subpackages=list(subpackages) or settings.subpackages,
        )
    except (MinidepsError, OSError) as e:
        _fail("explain", e)

    chain = explain_target(result, target)
    if chain is None:
        click.echo(f"{target} is not reachable from any page", err=True)
        sys.exit(1)

    click.echo(" -> ".join(chain))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
