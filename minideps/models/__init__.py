"""Pydantic models for minideps artifacts."""

from minideps.models.tree import (
    MAIN_PACKAGE,
    AnalysisResult,
    AppManifest,
    EntryPoint,
    PackageNode,
    PackageSummary,
    SubPackage,
)

__all__ = [
    "MAIN_PACKAGE",
    "AnalysisResult",
    "AppManifest",
    "EntryPoint",
    "PackageNode",
    "PackageSummary",
    "SubPackage",
]
