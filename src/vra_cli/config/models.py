"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from vra_cli.config.constants import OUTPUT_FORMATS


class VraProfile(BaseModel):
    """A named vRA connection profile."""

    name: str
    url: str = Field(description="vRA appliance base URL, e.g. https://vra.corp.local")
    username: str | None = Field(default=None, description="Login user, e.g. user@corp.local")
    password: str | None = Field(default=None, description="Login password")
    tenant: str | None = Field(default=None, description="vRA tenant, e.g. vsphere.local")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=30.0, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def auth_configured(self) -> bool:
        return all(
            value is not None
            for value in (self.username, self.password, self.tenant)
        )


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, VraProfile] = Field(default_factory=dict)

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"default_format must be one of: {', '.join(OUTPUT_FORMATS)}")
        return v
