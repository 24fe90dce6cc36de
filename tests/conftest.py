"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from vra_cli.client.vra import VraClient
from vra_cli.config.manager import ConfigManager
from vra_cli.config.models import VraProfile

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(*parts: str) -> dict[str, Any]:
    return json.loads(FIXTURES.joinpath(*parts).read_text())


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> VraProfile:
    """Return a sample vRA profile for testing."""
    return VraProfile(
        name="test-vra",
        url="https://vra.corp.local",
        username="user@corp.local",
        password="password",
        tenant="vsphere.local",
    )


@pytest.fixture
def mock_client() -> MagicMock:
    """A stand-in for VraClient that records calls without any HTTP."""
    return MagicMock(spec=VraClient)


@pytest.fixture
def vm_payload() -> dict[str, Any]:
    return load_fixture("resource", "vm_resource.json")


@pytest.fixture
def vm_payload_no_ops() -> dict[str, Any]:
    return load_fixture("resource", "vm_resource_no_operations.json")


@pytest.fixture
def non_vm_payload() -> dict[str, Any]:
    return load_fixture("resource", "non_vm_resource.json")


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep commands away from the user's real config file."""
    path = tmp_path / "isolated" / "config.toml"
    monkeypatch.setattr("vra_cli.config.manager.CONFIG_FILE", path)
    return path
