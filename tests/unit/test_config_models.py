"""Tests for config models."""

import pytest
from pydantic import ValidationError

from vra_cli.config.models import CLIConfig, VraProfile


class TestVraProfile:
    def test_create_with_credentials(self):
        p = VraProfile(
            name="test", url="https://vra.corp.local",
            username="user@corp.local", password="secret", tenant="vsphere.local",
        )
        assert p.name == "test"
        assert p.tenant == "vsphere.local"
        assert p.auth_configured is True

    def test_partial_credentials(self):
        p = VraProfile(name="test", url="https://vra.corp.local", username="user@corp.local")
        assert p.auth_configured is False

    def test_defaults(self):
        p = VraProfile(name="test", url="https://vra.corp.local")
        assert p.verify_ssl is True
        assert p.timeout == 30.0
        assert p.username is None
        assert p.password is None
        assert p.tenant is None

    def test_url_must_start_with_http(self):
        with pytest.raises(ValidationError, match="URL must start with http"):
            VraProfile(name="test", url="ftp://vra.corp.local")

    def test_url_strips_trailing_slash(self):
        p = VraProfile(name="test", url="https://vra.corp.local/")
        assert p.url == "https://vra.corp.local"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            VraProfile(name="test", url="https://vra.corp.local", timeout=0)

    def test_timeout_max_600(self):
        with pytest.raises(ValidationError):
            VraProfile(name="test", url="https://vra.corp.local", timeout=601)


class TestCLIConfig:
    def test_empty_config(self):
        c = CLIConfig()
        assert c.default_profile is None
        assert c.default_format == "table"
        assert c.profiles == {}

    def test_config_with_profiles(self):
        p = VraProfile(name="dev", url="https://dev.corp.local")
        c = CLIConfig(default_profile="dev", profiles={"dev": p})
        assert c.default_profile == "dev"
        assert "dev" in c.profiles

    def test_default_format_must_be_known(self):
        with pytest.raises(ValidationError, match="default_format must be one of"):
            CLIConfig(default_format="xml")
