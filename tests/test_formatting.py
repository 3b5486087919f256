from __future__ import annotations

import pytest

from mc_lang.utils.formatting import format_duration, format_size


@pytest.mark.parametrize(
    ("byte_count", "expected"),
    [(0, "0 B"), (512, "512.0 B"), (1536, "1.5 KB"), (5 * 1024 * 1024, "5.0 MB")],
)
def test_format_size(byte_count: int, expected: str) -> None:
    assert format_size(byte_count) == expected


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0.4, "0s"), (59, "59s"), (192, "3m 12s"), (3600, "1h"), (3725, "1h 2m 5s")],
)
def test_format_duration(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected
