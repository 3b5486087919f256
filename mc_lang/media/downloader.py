"""
Handles the low-level downloading of files over HTTP, streaming the body to disk
in fixed-size chunks.
"""

import logging
import os
from pathlib import Path

import aiofiles

from mc_lang.api.client import LauncherMetaClient

log = logging.getLogger(__name__)


class Downloader:
    """A sequential file downloader sharing the metadata client's session."""

    CHUNK_SIZE = 131072  # 128 KB

    def __init__(self, client: LauncherMetaClient, chunk_size: int = CHUNK_SIZE):
        self.client = client
        self.chunk_size = chunk_size

    async def download_file(self, url: str, destination_path: Path) -> int:
        """
        Streams a URL to a file, overwriting it. Returns the number of bytes written.

        A failed transfer may leave a partial file behind; callers that need an
        all-or-nothing result use download_to_path.
        """
        session = await self.client.get_session()
        bytes_downloaded = 0
        async with session.get(url, allow_redirects=True) as response:
            response.raise_for_status()
            async with aiofiles.open(destination_path, "wb") as f:
                async for chunk in response.content.iter_chunked(self.chunk_size):
                    await f.write(chunk)
                    bytes_downloaded += len(chunk)
        log.debug(f"Downloaded {bytes_downloaded} bytes to '{destination_path.name}'")
        return bytes_downloaded

    async def download_to_path(self, url: str, destination_path: Path) -> int:
        """
        Downloads into a temporary sibling file and renames it into place, so the
        destination only ever appears complete.
        """
        temp_path = destination_path.with_name(f"{destination_path.name}.part")
        try:
            size = await self.download_file(url, temp_path)
            os.replace(temp_path, destination_path)
            return size
        finally:
            if temp_path.exists():
                try:
                    os.remove(temp_path)
                except OSError:
                    log.debug(f"Could not remove temporary file '{temp_path}'")
