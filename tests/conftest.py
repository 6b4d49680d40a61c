# tests/conftest.py

"""Shared pytest fixtures for the catalog test suite."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Write run logs under a temporary ``logs/`` directory."""
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")


@pytest.fixture(autouse=True)
def offline_session() -> Generator[MagicMock, None, None]:
    """Replace the curl_cffi session so no test reaches the network."""
    with patch("src.api.client.curl_requests.Session") as session_cls:
        yield session_cls
