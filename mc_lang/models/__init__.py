"""
Data Models Layer.

This package contains Pydantic models and dataclasses that define the core data
structures used throughout the application: configuration, the launcher
metadata documents, and run statistics.
"""

from .config import LanguageSelection, LayoutStrategy, ReleaseErrorPolicy, UpdateConfig
from .manifest import (
    AssetIndex,
    AssetIndexEntry,
    ReleaseDescriptor,
    ReleaseMetadata,
    ReleaseType,
    VersionManifest,
)
from .stats import ReleaseResult, RunStats

__all__ = [
    "AssetIndex",
    "AssetIndexEntry",
    "LanguageSelection",
    "LayoutStrategy",
    "ReleaseDescriptor",
    "ReleaseErrorPolicy",
    "ReleaseMetadata",
    "ReleaseResult",
    "ReleaseType",
    "RunStats",
    "UpdateConfig",
    "VersionManifest",
]
