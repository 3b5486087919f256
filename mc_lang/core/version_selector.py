"""
Chooses which releases of the manifest a run processes.

The manifest lists versions newest first. Selection walks them oldest first,
starts at the configured version and keeps full releases only.
"""

from itertools import dropwhile
from typing import Iterable, Iterator, Optional

from mc_lang.models.manifest import ReleaseDescriptor


def oldest_first(descriptors: Iterable[ReleaseDescriptor]) -> Iterator[ReleaseDescriptor]:
    return reversed(list(descriptors))


def drop_until(
    descriptors: Iterable[ReleaseDescriptor], start_version: str
) -> Iterator[ReleaseDescriptor]:
    """Skips descriptors until one has the id start_version, then yields it and the rest."""
    return dropwhile(lambda d: d.id != start_version, descriptors)


def releases_only(descriptors: Iterable[ReleaseDescriptor]) -> Iterator[ReleaseDescriptor]:
    return (d for d in descriptors if d.is_release)


def select_versions(
    descriptors: Iterable[ReleaseDescriptor], start_version: str
) -> Iterator[ReleaseDescriptor]:
    """
    Lazily yields the releases to process, oldest to newest.

    Args:
        descriptors: Manifest entries in manifest order (newest first).
        start_version: Id of the first version to consider.

    Returns:
        An iterator over release-type descriptors at or after start_version. It
        is empty when no descriptor has that id.
    """
    return releases_only(drop_until(oldest_first(descriptors), start_version))


def find_version(
    descriptors: Iterable[ReleaseDescriptor], version_id: str
) -> Optional[ReleaseDescriptor]:
    return next((d for d in descriptors if d.id == version_id), None)
