from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture()
def make_table(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Write raw bytes to ``tmp_path/<relative>`` and return the path."""

    def _make(relative: str, data: bytes) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _make
