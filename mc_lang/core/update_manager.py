"""
The main orchestrator: fetches the manifest, selects releases and processes them in order.
"""

import logging
from typing import List, Optional

from rich.markup import escape

from mc_lang.api.client import LauncherMetaClient
from mc_lang.exceptions import ChecksumMismatchError, ConfigurationError
from mc_lang.media import Downloader
from mc_lang.models.config import ReleaseErrorPolicy, UpdateConfig
from mc_lang.models.manifest import ReleaseDescriptor
from mc_lang.models.stats import RunStats
from mc_lang.storage.layout import LayoutWriter, write_version_marker

from .release_processor import ReleaseProcessor
from .version_selector import find_version, select_versions

log = logging.getLogger(__name__)


class UpdateManager:
    """Orchestrates an entire update run."""

    def __init__(
        self,
        config: UpdateConfig,
        client: LauncherMetaClient,
        processor: Optional[ReleaseProcessor] = None,
    ):
        self.config = config
        self.client = client
        self.stats = RunStats(dry_run=config.dry_run)
        self.layout_writer = LayoutWriter(config.output_root, config.layout)
        self.processor = processor or ReleaseProcessor(
            config, client, Downloader(client), self.layout_writer
        )

    async def resolve_versions(self) -> List[ReleaseDescriptor]:
        """
        Fetches the manifest and returns the releases this run should process.

        Raises:
            ManifestError: If the manifest cannot be fetched or parsed.
        """
        manifest = await self.client.fetch_manifest()
        log.debug(f"Manifest lists {len(manifest.versions)} versions.")

        if self.config.only_version:
            descriptor = find_version(manifest.versions, self.config.only_version)
            if descriptor is None:
                log.warning("[yellow]Version not found.[/yellow]")
                return []
            return [descriptor]

        selected = list(select_versions(manifest.versions, self.config.start_version))
        if not selected:
            log.info(
                f"No releases at or after '{escape(self.config.start_version)}'. "
                "Nothing to do."
            )
        return selected

    async def execute(self) -> RunStats:
        """Processes every selected release, applying the configured error policy."""
        versions = await self.resolve_versions()
        self.stats.releases_selected = len(versions)

        if self.config.dry_run:
            for descriptor in versions:
                try:
                    layout = self.layout_writer.resolve(descriptor.id)
                except ConfigurationError as e:
                    self.stats.record_failure(descriptor.id)
                    log.error(f"  [red]✗ Failed:[/] {escape(descriptor.id)} ({escape(str(e))})")
                    continue
                log.info(
                    f"  [cyan]→ (Dry Run)[/] Would process {escape(descriptor.id)} "
                    f"into [dim]{escape(str(layout.output_dir))}[/dim]"
                )
            return self.stats

        if self.config.only_version and versions:
            write_version_marker(self.config.output_root, versions[0].id)

        for descriptor in versions:
            log.info(f"[bold cyan]Processing {escape(descriptor.id)}...[/bold cyan]")
            try:
                result = await self.processor.process(descriptor)
            except ChecksumMismatchError as e:
                # Never fatal, whatever the policy
                self.stats.record_failure(descriptor.id)
                log.warning(
                    f"  [yellow]○ Skipping release:[/] {escape(descriptor.id)} ({escape(str(e))})"
                )
                continue
            except Exception as e:
                if self.config.error_policy is ReleaseErrorPolicy.ABORT:
                    raise
                self.stats.record_failure(descriptor.id)
                log.error(
                    f"  [red]✗ Failed:[/] {escape(descriptor.id)} ({escape(str(e))})",
                    exc_info=log.getEffectiveLevel() == logging.DEBUG,
                )
                continue
            self.stats.record(result)

        log.info("[bold green]Done.[/bold green]")
        return self.stats
