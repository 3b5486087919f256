"""Tests for the launcher metadata client and the downloader."""

from __future__ import annotations

from pathlib import Path

import aiohttp
import pytest

from mc_lang.api.client import LauncherMetaClient
from mc_lang.exceptions import ManifestError, SchemaMismatchError
from mc_lang.media import Downloader
from mc_lang.models.manifest import ReleaseType
from tests.fakes import MANIFEST_URL, FakeSession


class TestLauncherMetaClient:
    @pytest.mark.asyncio
    async def test_fetch_manifest(self, client: LauncherMetaClient, session: FakeSession) -> None:
        session.add_json(
            MANIFEST_URL,
            {
                "latest": {"release": "1.13"},
                "versions": [
                    {"id": "1.13", "type": "release", "url": "https://meta.test/1.13.json"},
                    {"id": "b1.0", "type": "old_beta", "url": "https://meta.test/b1.0.json"},
                ],
            },
        )
        manifest = await client.fetch_manifest()
        assert [v.id for v in manifest.versions] == ["1.13", "b1.0"]
        assert manifest.versions[1].type is ReleaseType.OLD_BETA

    @pytest.mark.asyncio
    async def test_invalid_json_manifest_raises_manifest_error(
        self, client: LauncherMetaClient, session: FakeSession
    ) -> None:
        session.add_bytes(MANIFEST_URL, b"<html>maintenance</html>")
        with pytest.raises(ManifestError, match="not valid JSON"):
            await client.fetch_manifest()

    @pytest.mark.asyncio
    async def test_undecodable_manifest_raises_manifest_error(
        self, client: LauncherMetaClient, session: FakeSession
    ) -> None:
        session.add_bytes(MANIFEST_URL, b'{"versions": ["\xff\xfe"]}')
        with pytest.raises(ManifestError, match="not valid JSON"):
            await client.fetch_manifest()

    @pytest.mark.asyncio
    async def test_http_error_manifest_raises_manifest_error(
        self, client: LauncherMetaClient
    ) -> None:
        with pytest.raises(ManifestError, match="Could not fetch"):
            await client.fetch_manifest()

    @pytest.mark.asyncio
    async def test_get_json_invalid_body(self, client: LauncherMetaClient, session: FakeSession) -> None:
        session.add_bytes("https://meta.test/x.json", b"{broken")
        with pytest.raises(SchemaMismatchError, match="asset index"):
            await client.get_json("https://meta.test/x.json", "asset index")

    @pytest.mark.asyncio
    async def test_context_manager_closes_session(self, config, session: FakeSession) -> None:
        async with LauncherMetaClient(config, session=session) as client:
            assert await client.get_session() is session
        assert session.closed


class TestDownloader:
    @pytest.mark.asyncio
    async def test_streams_body_in_chunks(
        self, client: LauncherMetaClient, session: FakeSession, tmp_path: Path
    ) -> None:
        body = b"x" * 1000 + b"y" * 1000
        session.add_bytes("https://data.test/blob", body)
        destination = tmp_path / "blob"

        size = await Downloader(client, chunk_size=333).download_file(
            "https://data.test/blob", destination
        )

        assert size == len(body)
        assert destination.read_bytes() == body

    @pytest.mark.asyncio
    async def test_download_to_path_replaces_atomically(
        self, client: LauncherMetaClient, session: FakeSession, tmp_path: Path
    ) -> None:
        session.add_bytes("https://data.test/blob", b"fresh")
        destination = tmp_path / "blob.json"

        await Downloader(client).download_to_path("https://data.test/blob", destination)

        assert destination.read_bytes() == b"fresh"
        assert not (tmp_path / "blob.json.part").exists()

    @pytest.mark.asyncio
    async def test_http_error_raises(
        self, client: LauncherMetaClient, tmp_path: Path
    ) -> None:
        with pytest.raises(aiohttp.ClientError):
            await Downloader(client).download_to_path(
                "https://data.test/missing", tmp_path / "missing.json"
            )
        assert list(tmp_path.iterdir()) == []
