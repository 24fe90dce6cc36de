"""vRA HTTP client."""

from __future__ import annotations

import json
from typing import Any

import httpx

from vra_cli.client.auth import resolve_auth
from vra_cli.client.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
    VraAPIError,
    VraConnectionError,
    err_console,
)
from vra_cli.config.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_PAGE_SIZE,
    TOKENS_PATH,
)
from vra_cli.config.models import VraProfile
from vra_cli.models.common import ErrorDetail, PagedResponse


def _error_detail(response: httpx.Response) -> str:
    """Pull the most useful message out of a vRA error body."""
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text
    if not isinstance(body, dict):
        return response.text
    errors = body.get("errors")
    if errors and isinstance(errors, list) and isinstance(errors[0], dict):
        first = ErrorDetail.model_validate(errors[0])
        return first.system_message or first.message or response.text
    return str(body.get("message", response.text))


class VraClient:
    """Synchronous HTTP client for the vRA catalog and identity REST APIs."""

    def __init__(self, profile: VraProfile) -> None:
        self.profile = profile
        self.base_url = profile.url
        self.auth = resolve_auth(profile)
        if not profile.verify_ssl:
            err_console.print(
                "[yellow]Warning:[/] TLS certificate verification is disabled"
            )
        transport = httpx.HTTPTransport(retries=DEFAULT_MAX_RETRIES)
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=self.auth,
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> VraClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response
        status = response.status_code
        detail = _error_detail(response)
        if status in (401, 403):
            raise AuthenticationError(
                f"Authentication failed for {self.profile.username}"
                f" in tenant {self.profile.tenant}: {detail}"
            )
        if status == 404:
            raise NotFoundError(f"Not found: {detail}")
        if status == 409:
            raise ConflictError(f"Conflict: {detail}")
        if status in (400, 422):
            raise ValidationError(detail)
        raise VraAPIError(status, detail)

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._client.request(method, path, **kwargs)
        except httpx.ConnectError as exc:
            raise VraConnectionError(
                f"Cannot connect to vRA at {self.profile.url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise VraConnectionError(
                f"Request to {self.profile.url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise VraConnectionError(
                f"Invalid URL for vRA at {self.profile.url}: {exc}"
            ) from exc

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        return self._handle_response(self._send(method, path, **kwargs))

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def get_json(self, path: str, **kwargs: Any) -> Any:
        """GET *path* and decode the body; any non-2xx status raises."""
        resp = self.get(path, **kwargs)
        try:
            return resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            text = resp.content.decode("utf-8", errors="replace")
            return json.loads(text)

    def get_all_items(
        self,
        path: str,
        *,
        limit: int = DEFAULT_PAGE_SIZE,
        **kwargs: Any,
    ) -> list[Any]:
        """Walk every page of a vRA list endpoint, returning all ``content`` items."""
        all_items: list[Any] = []
        page = 1
        caller_params = kwargs.pop("params", {})
        while True:
            params = {**caller_params, "page": page, "limit": limit}
            data = self.get_json(path, params=params, **kwargs)
            if isinstance(data, list):
                all_items.extend(data)
                break  # non-paginated response
            response = PagedResponse.model_validate(data)
            all_items.extend(response.content)
            total_pages = response.metadata.total_pages if response.metadata else None
            if total_pages is None or page >= total_pages or not response.content:
                break
            page += 1
        return all_items

    def authorize(self) -> None:
        """Request a new bearer token now rather than on the first call."""
        response = self._send(
            "POST", TOKENS_PATH, json=self.auth.token_payload(), auth=None,
        )
        self.auth.update_token(response)

    @property
    def authorized(self) -> bool:
        """True when the current bearer token is still accepted by vRA."""
        if self.auth.token is None:
            return False
        response = self._send(
            "HEAD", f"{TOKENS_PATH}/{self.auth.token}", auth=None,
        )
        return response.status_code == 204
