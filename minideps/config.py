"""Runtime settings for minideps.

Values come from environment variables (a `.env` file in the working
directory is loaded on package import). CLI options override them.

Configuration:
    - MINIDEPS_MANIFEST: Manifest filename relative to the project root (default: app.json)
    - MINIDEPS_OUTPUT_DIR: Directory for tree.json/files.json (default: out)
    - MINIDEPS_SUBPACKAGES: Comma-separated sub-package roots to analyze (default: all)
    - MINIDEPS_LOG_LEVEL: Log level for the minideps logger (default: INFO)
"""

import os

from pydantic import BaseModel, Field

DEFAULT_MANIFEST = "app.json"
DEFAULT_OUTPUT_DIR = "out"


class Settings(BaseModel):
    """Effective configuration for one run."""

    manifest: str = Field(default=DEFAULT_MANIFEST, description="Manifest filename")
    output_dir: str = Field(default=DEFAULT_OUTPUT_DIR, description="Artifact directory")
    subpackages: list[str] = Field(
        default_factory=list,
        description="Allow-list of sub-package roots; empty selects all",
    )
    log_level: str = Field(default="INFO", description="Log level name")


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_settings() -> Settings:
    """Build settings from MINIDEPS_* environment variables."""
    return Settings(
        manifest=os.getenv("MINIDEPS_MANIFEST", DEFAULT_MANIFEST),
        output_dir=os.getenv("MINIDEPS_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        subpackages=_split_list(os.getenv("MINIDEPS_SUBPACKAGES", "")),
        log_level=os.getenv("MINIDEPS_LOG_LEVEL", "INFO").upper(),
    )
