"""
Handles the processing of a single release, from metadata to locale files on disk.
"""

import asyncio
import logging
import zipfile
from pathlib import Path
from typing import List

from rich.markup import escape

from mc_lang.api.client import LauncherMetaClient
from mc_lang.exceptions import ChecksumMismatchError, ReleaseProcessingError
from mc_lang.media import PRIMARY_LOCALE_ENTRY, Downloader, FileIntegrityChecker, extract_entry
from mc_lang.models.config import LanguageSelection, UpdateConfig
from mc_lang.models.manifest import AssetIndex, AssetIndexEntry, ReleaseDescriptor, ReleaseMetadata
from mc_lang.models.stats import ReleaseResult
from mc_lang.storage.layout import LayoutWriter

log = logging.getLogger(__name__)

ARCHIVE_SCRATCH_NAME = "client.jar"
PRIMARY_LOCALE_FILENAME = "en_us.json"
LANG_PATH_PREFIX = "minecraft/lang/"
LANG_PATH_SUFFIX = ".json"


def is_language_resource(logical_path: str) -> bool:
    return logical_path.startswith(LANG_PATH_PREFIX) and logical_path.endswith(
        LANG_PATH_SUFFIX
    )


def select_resources(
    index: AssetIndex, selection: LanguageSelection, languages: List[str]
) -> List[AssetIndexEntry]:
    """
    Picks the locale resources to download from an asset index.

    In FULL mode every entry under minecraft/lang/ ending in .json is taken, in
    index order. In ALLOWLIST mode the configured codes are looked up in order;
    codes the index does not have are skipped.
    """
    if selection is LanguageSelection.FULL:
        return [entry for entry in index.values() if is_language_resource(entry.logical_path)]

    entries = []
    for code in languages:
        entry = index.get(f"{LANG_PATH_PREFIX}{code}{LANG_PATH_SUFFIX}")
        if entry is not None:
            entries.append(entry)
        else:
            log.debug(f"Language '{code}' not in asset index.")
    return entries


def resource_url(resource_host: str, content_hash: str) -> str:
    """Content-addressed download URL: <host>/<first two hex chars>/<hash>."""
    return f"{resource_host}/{content_hash[:2]}/{content_hash}"


class ReleaseProcessor:
    """
    Orchestrates metadata lookup, archive verification, extraction and locale
    downloads for one release.
    """

    def __init__(
        self,
        config: UpdateConfig,
        client: LauncherMetaClient,
        downloader: Downloader,
        layout_writer: LayoutWriter,
    ):
        self.config = config
        self.client = client
        self.downloader = downloader
        self.layout_writer = layout_writer

    async def process(self, descriptor: ReleaseDescriptor) -> ReleaseResult:
        """
        Runs every stage for one release.

        Raises:
            ChecksumMismatchError: If the client archive fails verification. No
                locale files are written in that case.
            ReleaseProcessingError: If the archive cannot be opened.
            aiohttp.ClientError: On network failures.
            SchemaMismatchError: If a metadata document has an unexpected shape.
        """
        metadata = await self.client.fetch_release_metadata(descriptor)
        index = await self.client.fetch_asset_index(metadata.asset_index_url)
        layout = self.layout_writer.prepare(descriptor.id)

        result = ReleaseResult(version=descriptor.id)
        await self._fetch_primary_locale(metadata, layout.output_dir, result)
        await self._fetch_resources(index, layout.output_dir, result)
        return result

    async def _fetch_primary_locale(
        self, metadata: ReleaseMetadata, output_dir: Path, result: ReleaseResult
    ) -> None:
        """Downloads and verifies the client archive, then extracts en_us.json from it."""
        archive_path = output_dir / ARCHIVE_SCRATCH_NAME
        try:
            log.debug(f"Downloading {ARCHIVE_SCRATCH_NAME} for {result.version}")
            result.bytes_downloaded += await self.downloader.download_file(
                metadata.archive_url, archive_path
            )

            actual = await asyncio.to_thread(FileIntegrityChecker.sha1_file, archive_path)
            if actual != metadata.archive_checksum.lower():
                log.error(f"  [red]✗ {ARCHIVE_SCRATCH_NAME} SHA1 mismatch![/red]")
                raise ChecksumMismatchError(
                    ARCHIVE_SCRATCH_NAME, metadata.archive_checksum, actual
                )

            try:
                result.extracted_primary = await asyncio.to_thread(
                    extract_entry,
                    archive_path,
                    PRIMARY_LOCALE_ENTRY,
                    output_dir / PRIMARY_LOCALE_FILENAME,
                )
            except zipfile.BadZipFile as e:
                raise ReleaseProcessingError(
                    f"{ARCHIVE_SCRATCH_NAME} for {result.version} is not a valid archive"
                ) from e
            if result.extracted_primary:
                log.info(f"  [green]✓[/green] Extracted {PRIMARY_LOCALE_FILENAME}")
        finally:
            archive_path.unlink(missing_ok=True)

    async def _fetch_resources(
        self, index: AssetIndex, output_dir: Path, result: ReleaseResult
    ) -> None:
        entries = select_resources(
            index, self.config.language_selection, self.config.languages
        )
        log.debug(f"{len(entries)} locale resources selected for {result.version}")

        for entry in entries:
            filename = f"{entry.code}{LANG_PATH_SUFFIX}"
            destination = output_dir / filename

            if destination.exists():
                result.resources_skipped_exists += 1
                log.info(
                    f"  [yellow]○ Skipping:[/] [dim]{escape(filename)}[/dim] (already exists)"
                )
                continue

            url = resource_url(self.config.resource_host, entry.content_hash)
            result.bytes_downloaded += await self.downloader.download_to_path(
                url, destination
            )
            result.resources_downloaded += 1

            # A mismatching locale file is reported but kept
            actual = await asyncio.to_thread(FileIntegrityChecker.sha1_file, destination)
            if actual != entry.content_hash:
                result.resource_mismatches.append(entry.code)
                log.warning(f"  [yellow]⚠ {escape(filename)} SHA1 mismatch![/yellow]")
            else:
                log.debug(f"Verified {filename}")
