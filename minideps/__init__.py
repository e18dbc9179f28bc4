"""minideps - build-time dependency analyzer for multi-package mini-program projects."""

# Load .env so MINIDEPS_* settings are visible to every entry point
# (CLI, pytest, scripts) that imports minideps.
from dotenv import load_dotenv

load_dotenv()

# Keep in sync with pyproject.toml [project] version.
__version__ = "0.1.0"
