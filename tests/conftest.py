"""Pytest fixtures for directcloud_uploader tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from helpers import PNG_BYTES, FakeDirectCloud, build_tree

from directcloud_uploader import Credentials, DirectCloudClient, Session


@pytest.fixture
def credentials() -> Credentials:
    """Credentials used for every token exchange in tests."""
    return Credentials(
        service="svc", service_key="svc-key", code="company", id="user", password="secret"
    )


@pytest.fixture
def session() -> Session:
    """An already authenticated session."""
    return Session(cookie=("sid=abc; Path=/; HttpOnly", "lb=node1; Path=/"), access_token="tok")


@pytest.fixture
def fake_api() -> FakeDirectCloud:
    """Fake remote API."""
    return FakeDirectCloud()


@pytest.fixture
def api_client(fake_api: FakeDirectCloud) -> Any:
    """DirectCloudClient wired to the fake remote API."""
    with DirectCloudClient(transport=fake_api.transport) as client:
        yield client


@pytest.fixture
def env(tmp_path: Path) -> dict[str, str]:
    """Complete set of DIRECTCLOUDBOX_* variables."""
    return {
        "DIRECTCLOUDBOX_SERVICE": "svc",
        "DIRECTCLOUDBOX_SERVICE_KEY": "svc-key",
        "DIRECTCLOUDBOX_CODE": "company",
        "DIRECTCLOUDBOX_ID": "user",
        "DIRECTCLOUDBOX_PASSWORD": "secret",
        "DIRECTCLOUDBOX_NODE": "42",
        "DIRECTCLOUDBOX_FILE_PATH": str(tmp_path / "root"),
    }


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """root/{a.txt, sub/{b.png}}"""
    return build_tree(tmp_path / "root", {"a.txt": "hello", "sub": {"b.png": PNG_BYTES}})


@pytest.fixture
def mock_client() -> MagicMock:
    """Mock DirectCloudClient that hands out sequential node ids."""
    client = MagicMock()
    counter = iter(range(99, 10_000))
    client.create_folder.side_effect = lambda session, parent, name: str(next(counter))
    return client
