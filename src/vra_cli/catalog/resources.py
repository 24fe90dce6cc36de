"""Catalog resource listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vra_cli.catalog.resource import Resource
from vra_cli.config.constants import RESOURCES_PATH

if TYPE_CHECKING:
    from vra_cli.client.vra import VraClient


class Resources:
    """Entry point for finding the resources visible to the current user."""

    def __init__(self, client: VraClient) -> None:
        self.client = client

    def all(self) -> list[Resource]:
        """Every resource, across all pages.

        Listing payloads carry no ``operations``; calling ``actions`` on one
        of these resources fetches the full payload first.
        """
        items = self.client.get_all_items(RESOURCES_PATH)
        return [Resource(self.client, data=item) for item in items]

    def by_id(self, id: str) -> Resource:
        return Resource(self.client, id=id)
