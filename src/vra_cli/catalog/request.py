"""Catalog request — the asynchronous handle returned when an action is submitted."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vra_cli.config.constants import REQUESTS_PATH

if TYPE_CHECKING:
    from vra_cli.catalog.resource import Resource
    from vra_cli.client.vra import VraClient


class Request:
    """A submitted catalog request, tracked by ID.

    Nothing is fetched on construction; the first accessor that needs the
    request payload calls :meth:`refresh`, and callers polling for
    completion call it again themselves.
    """

    def __init__(self, client: VraClient, id: str) -> None:
        self.client = client
        self.id = id
        self.data: dict[str, Any] | None = None

    def __repr__(self) -> str:
        return f"<Request id={self.id!r}>"

    def refresh(self) -> None:
        self.data = self.client.get_json(f"{REQUESTS_PATH}/{self.id}")

    def _payload(self) -> dict[str, Any]:
        if self.data is None:
            self.refresh()
        return self.data or {}

    @property
    def status(self) -> str | None:
        return self._payload().get("phase")

    @property
    def completion_state(self) -> str | None:
        return (self._payload().get("requestCompletion") or {}).get(
            "requestCompletionState"
        )

    @property
    def completion_details(self) -> str | None:
        return (self._payload().get("requestCompletion") or {}).get(
            "completionDetails"
        )

    @property
    def successful(self) -> bool:
        return self.status == "SUCCESSFUL"

    @property
    def failed(self) -> bool:
        return self.status == "FAILED"

    @property
    def completed(self) -> bool:
        return self.successful or self.failed

    def resources(self) -> list[Resource]:
        """Resources provisioned (or affected) by this request."""
        from vra_cli.catalog.resource import Resource

        items = self.client.get_all_items(f"{REQUESTS_PATH}/{self.id}/resources")
        return [Resource(self.client, data=item) for item in items]
