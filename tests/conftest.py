"""Shared fixtures for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from mc_lang.api.client import LauncherMetaClient
from mc_lang.models.config import LayoutStrategy, UpdateConfig
from tests.fakes import MANIFEST_URL, RESOURCE_HOST, FakeMojang, FakeSession


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def mojang(session: FakeSession) -> FakeMojang:
    return FakeMojang(session)


@pytest.fixture
def config(tmp_path: Path) -> UpdateConfig:
    return UpdateConfig(
        output_root=tmp_path,
        layout=LayoutStrategy.FLAT,
        manifest_url=MANIFEST_URL,
        resource_host=RESOURCE_HOST,
    )


@pytest.fixture
def client(config: UpdateConfig, session: FakeSession) -> LauncherMetaClient:
    return LauncherMetaClient(config, session=session)
