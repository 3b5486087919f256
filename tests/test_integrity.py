"""Tests for SHA-1 verification and archive extraction."""

from __future__ import annotations

import hashlib
import zipfile
from pathlib import Path

import pytest

from mc_lang.media import PRIMARY_LOCALE_ENTRY, FileIntegrityChecker, extract_entry
from tests.fakes import make_jar

PAYLOAD = bytes(range(256)) * 1000


class TestFileIntegrityChecker:
    @pytest.mark.parametrize("chunk_size", [1, 7, 4096, 8192, 1 << 20])
    def test_chunk_size_does_not_change_digest(self, tmp_path: Path, chunk_size: int) -> None:
        path = tmp_path / "blob.bin"
        path.write_bytes(PAYLOAD)
        assert FileIntegrityChecker.sha1_file(path, chunk_size) == hashlib.sha1(PAYLOAD).hexdigest()

    def test_digest_is_deterministic(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.bin"
        path.write_bytes(PAYLOAD)
        assert FileIntegrityChecker.sha1_file(path) == FileIntegrityChecker.sha1_file(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty"
        path.write_bytes(b"")
        assert FileIntegrityChecker.sha1_file(path) == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


class TestExtractEntry:
    def test_writes_entry_bytes(self, tmp_path: Path) -> None:
        jar = tmp_path / "client.jar"
        jar.write_bytes(make_jar(b'{"a": "b"}'))
        destination = tmp_path / "en_us.json"
        assert extract_entry(jar, PRIMARY_LOCALE_ENTRY, destination) is True
        assert destination.read_bytes() == b'{"a": "b"}'

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        jar = tmp_path / "client.jar"
        jar.write_bytes(make_jar(b"new"))
        destination = tmp_path / "en_us.json"
        destination.write_bytes(b"old content")
        extract_entry(jar, PRIMARY_LOCALE_ENTRY, destination)
        assert destination.read_bytes() == b"new"

    def test_missing_entry_is_a_silent_no_op(self, tmp_path: Path) -> None:
        jar = tmp_path / "client.jar"
        jar.write_bytes(make_jar(en_us=None))
        destination = tmp_path / "en_us.json"
        assert extract_entry(jar, PRIMARY_LOCALE_ENTRY, destination) is False
        assert not destination.exists()

    def test_not_a_zip_raises(self, tmp_path: Path) -> None:
        jar = tmp_path / "client.jar"
        jar.write_bytes(b"definitely not a zip")
        with pytest.raises(zipfile.BadZipFile):
            extract_entry(jar, PRIMARY_LOCALE_ENTRY, tmp_path / "en_us.json")

    def test_corrupt_entry_keeps_previous_file(self, tmp_path: Path) -> None:
        good = make_jar(b'{"menu.quit": "Quit Game"}')
        corrupt = good.replace(b"Quit Game", b"Quit Gamf")
        jar = tmp_path / "client.jar"
        jar.write_bytes(corrupt)
        destination = tmp_path / "en_us.json"
        destination.write_bytes(b"previous release")

        with pytest.raises(zipfile.BadZipFile):
            extract_entry(jar, PRIMARY_LOCALE_ENTRY, destination)

        assert destination.read_bytes() == b"previous release"
        assert not (tmp_path / "en_us.json.part").exists()
