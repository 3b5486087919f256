"""
Async client for Mojang's launcher metadata service.
"""

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp

from mc_lang.exceptions import ManifestError, SchemaMismatchError
from mc_lang.models.config import UpdateConfig
from mc_lang.models.manifest import (
    AssetIndex,
    ReleaseDescriptor,
    ReleaseMetadata,
    VersionManifest,
    parse_document,
)

log = logging.getLogger(__name__)


class LauncherMetaClient:
    """
    Client for the version manifest, per-version metadata and asset indexes.

    One session is created lazily and reused for every request of a run,
    including the file downloads issued through the Downloader. Requests are
    awaited one at a time; the connector still keeps connections alive between
    them.
    """

    def __init__(
        self,
        config: UpdateConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initializes the client.

        Args:
            config: The validated run configuration (URLs and timeouts).
            session: An existing session to use instead of creating one.
        """
        self.config = config
        self._session = session

    async def __aenter__(self) -> "LauncherMetaClient":
        await self._initialize_session()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _initialize_session(self) -> None:
        """Ensures an active aiohttp session is available."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=4,
                ttl_dns_cache=300,
                keepalive_timeout=30,
                enable_cleanup_closed=True,
            )
            self._session = aiohttp.ClientSession(
                connector=connector,
                headers={"Accept-Encoding": "gzip, deflate"},
                timeout=aiohttp.ClientTimeout(
                    total=None,
                    sock_connect=self.config.connect_timeout,
                    sock_read=self.config.read_timeout,
                ),
            )
            log.debug("Created launcher metadata session.")

    async def get_session(self) -> aiohttp.ClientSession:
        await self._initialize_session()
        return self._session

    async def close(self) -> None:
        """Gracefully closes the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            log.debug("Launcher metadata session closed.")

    async def get_json(self, url: str, document: str) -> Any:
        """
        Fetches a URL and decodes its body as JSON.

        Raises:
            aiohttp.ClientError: On connection problems or a non-2xx status.
            SchemaMismatchError: If the body is not valid JSON.
        """
        session = await self.get_session()
        log.debug(f"Fetching {document} from {url}")
        async with session.get(url) as r:
            r.raise_for_status()
            try:
                # Mojang's CDN does not always label JSON as application/json
                return await r.json(content_type=None)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise SchemaMismatchError(document, f"body is not valid JSON ({e})") from e

    async def fetch_manifest(self) -> VersionManifest:
        """
        Fetches the top-level version manifest. Any failure here is fatal for the run.
        """
        url = self.config.manifest_url
        try:
            payload = await self.get_json(url, "version manifest")
            return parse_document(VersionManifest, payload, "version manifest")
        except SchemaMismatchError as e:
            raise ManifestError(str(e)) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ManifestError(f"Could not fetch version manifest from {url}: {e}") from e

    async def fetch_release_metadata(
        self, descriptor: ReleaseDescriptor
    ) -> ReleaseMetadata:
        payload = await self.get_json(descriptor.metadata_url, "version metadata")
        return ReleaseMetadata.from_version_json(payload)

    async def fetch_asset_index(self, url: str) -> AssetIndex:
        payload = await self.get_json(url, "asset index")
        return AssetIndex.from_index_json(payload)
