"""
Dataclasses for tracking the outcome of a release and of a whole run.
"""

from dataclasses import dataclass, field


@dataclass
class ReleaseResult:
    """What processing a single release produced."""

    version: str
    extracted_primary: bool = False
    resources_downloaded: int = 0
    resources_skipped_exists: int = 0
    resource_mismatches: list[str] = field(default_factory=list)
    bytes_downloaded: int = 0


@dataclass
class RunStats:
    """Tracks statistics for an update run."""

    releases_selected: int = 0
    releases_processed: int = 0
    releases_failed: int = 0
    resources_downloaded: int = 0
    resources_skipped_exists: int = 0
    resource_mismatches: int = 0
    bytes_downloaded: int = 0
    dry_run: bool = False
    failed_versions: list[str] = field(default_factory=list)

    def record(self, result: ReleaseResult) -> None:
        self.releases_processed += 1
        self.resources_downloaded += result.resources_downloaded
        self.resources_skipped_exists += result.resources_skipped_exists
        self.resource_mismatches += len(result.resource_mismatches)
        self.bytes_downloaded += result.bytes_downloaded

    def record_failure(self, version: str) -> None:
        self.releases_failed += 1
        self.failed_versions.append(version)
