"""Exceptions raised by minideps.

Unresolvable references are never errors; they are dropped during
extraction. Everything here aborts a run before any artifact is written.
"""

from pathlib import Path


class MinidepsError(Exception):
    """Base class for fatal analysis errors."""

    pass


class ManifestError(MinidepsError):
    """The application manifest is missing or malformed."""

    pass


class ConfigParseError(MinidepsError):
    """A page/component config file reached during traversal is not valid JSON."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse config {path}: {reason}")


class ScriptParseError(MinidepsError):
    """A script file reached during traversal has syntax errors."""

    def __init__(self, path: Path, line: int, column: int):
        self.path = path
        self.line = line
        self.column = column
        super().__init__(f"Syntax error in {path} at line {line}, column {column}")


class StagingError(MinidepsError):
    """The copy step could not stage a listed file."""

    pass
