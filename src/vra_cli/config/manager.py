"""Configuration manager — read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from vra_cli.client.errors import ConfigurationError
from vra_cli.config.constants import (
    CONFIG_FILE,
    DEFAULT_TIMEOUT,
    ENV_VRA_PASSWORD,
    ENV_VRA_PROFILE,
    ENV_VRA_TENANT,
    ENV_VRA_URL,
    ENV_VRA_USERNAME,
    OUTPUT_FORMATS,
)
from vra_cli.config.models import CLIConfig, VraProfile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk and resolves vRA profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        with self.config_path.open("rb") as fh:
            data = tomllib.load(fh)
        # Profile names live in the table headers, not in the tables
        for name, section in data.get("profiles", {}).items():
            section["name"] = name
        return CLIConfig.model_validate(data)

    def _to_toml(self) -> dict[str, Any]:
        data = self.config.model_dump(exclude={"profiles"}, exclude_defaults=True)
        profiles = {
            name: profile.model_dump(exclude={"name"}, exclude_defaults=True)
            for name, profile in self.config.profiles.items()
        }
        if profiles:
            data["profiles"] = profiles
        return data

    def save(self) -> None:
        """Write the config atomically; the file holds passwords so it is 0600."""
        self.config_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(temp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "wb") as fh:
            tomli_w.dump(self._to_toml(), fh)
        temp.replace(self.config_path)

    def add_profile(self, profile: VraProfile) -> None:
        self.config.profiles[profile.name] = profile
        self.config.default_profile = self.config.default_profile or profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if self.config.profiles.pop(name, None) is None:
            return False
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def set_default_format(self, fmt: str) -> None:
        if fmt not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format '{fmt}'. Choose from: {', '.join(OUTPUT_FORMATS)}"
            )
        self.config.default_format = fmt
        self.save()

    def get_profile(self, name: str | None = None) -> VraProfile | None:
        """Look up *name*, or the default profile when no name is given."""
        name = name or self.config.default_profile
        return self.config.profiles.get(name) if name else None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        tenant: str | None = None,
    ) -> VraProfile:
        """Resolve the vRA connection.

        Precedence: CLI flags > env vars > config profile.
        """
        profile = self.get_profile(profile_name or os.environ.get(ENV_VRA_PROFILE))

        def pick(flag: str | None, env_name: str, attr: str) -> str | None:
            if flag:
                return flag
            env_value = os.environ.get(env_name)
            if env_value:
                return env_value
            return getattr(profile, attr) if profile else None

        resolved_url = pick(url, ENV_VRA_URL, "url")
        if not resolved_url:
            raise ConfigurationError(
                "No vRA URL configured. Use 'vra-cli config add' or set "
                f"{ENV_VRA_URL} or pass --url."
            )

        return VraProfile(
            name=profile.name if profile else "cli",
            url=resolved_url.rstrip("/"),
            username=pick(username, ENV_VRA_USERNAME, "username"),
            password=pick(password, ENV_VRA_PASSWORD, "password"),
            tenant=pick(tenant, ENV_VRA_TENANT, "tenant"),
            verify_ssl=profile.verify_ssl if profile else True,
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
        )
