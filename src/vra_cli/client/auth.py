"""Bearer token authentication for the vRA identity service."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import httpx

from vra_cli.client.errors import AuthenticationError, ConfigurationError
from vra_cli.config.constants import TOKENS_PATH
from vra_cli.config.models import VraProfile


class VraTokenAuth(httpx.Auth):
    """Authenticate with a vRA bearer token.

    The token is requested from ``POST /identity/api/tokens`` on first use
    and requested again once if the server answers 401 (expired token).
    """

    requires_response_body = True

    def __init__(self, username: str, password: str, tenant: str) -> None:
        self.username = username
        self.password = password
        self.tenant = tenant
        self.token: str | None = None
        self.expires: str | None = None

    def token_payload(self) -> dict[str, str]:
        return {
            "username": self.username,
            "password": self.password,
            "tenant": self.tenant,
        }

    def build_token_request(self, request: httpx.Request) -> httpx.Request:
        return httpx.Request(
            "POST",
            request.url.join(TOKENS_PATH),
            json=self.token_payload(),
            headers={"Accept": "application/json"},
        )

    def update_token(self, response: httpx.Response) -> None:
        if response.status_code not in (200, 201):
            raise AuthenticationError(
                f"Unable to get a bearer token for {self.username}"
                f" in tenant {self.tenant} (HTTP {response.status_code})."
            )
        body: dict[str, Any] = response.json()
        self.token = body["id"]
        self.expires = body.get("expires")

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        if self.token is None:
            token_response = yield self.build_token_request(request)
            self.update_token(token_response)
        request.headers["Authorization"] = f"Bearer {self.token}"
        response = yield request
        if response.status_code == 401:
            token_response = yield self.build_token_request(request)
            self.update_token(token_response)
            request.headers["Authorization"] = f"Bearer {self.token}"
            yield request


def resolve_auth(profile: VraProfile) -> VraTokenAuth:
    """Resolve authentication from a vRA profile."""
    if not profile.auth_configured:
        missing = [
            field for field in ("username", "password", "tenant")
            if getattr(profile, field) is None
        ]
        raise ConfigurationError(
            f"Missing vRA credentials: {', '.join(missing)}. Use 'vra-cli config add'"
            " or pass --username/--password/--tenant."
        )
    return VraTokenAuth(
        profile.username or "", profile.password or "", profile.tenant or "",
    )
