"""Catalog resource — a provisioned item such as a virtual machine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vra_cli.catalog.request import Request
from vra_cli.client.errors import NotFoundError
from vra_cli.config.constants import REQUESTS_PATH, RESOURCES_PATH
from vra_cli.models.request import ActionRequestPayload, Organization, Ref

if TYPE_CHECKING:
    from vra_cli.client.vra import VraClient

VM_RESOURCE_TYPES = ("Infrastructure.Virtual", "Infrastructure.Cloud")


class Resource:
    """A catalog resource backed by its raw JSON payload.

    Build it either from an ID, which fetches the payload immediately, or
    from a payload already retrieved elsewhere (e.g. a resource listing).
    Every accessor reads from :attr:`data`; missing keys yield ``None``.
    """

    def __init__(
        self,
        client: VraClient,
        id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        if id is None and data is None:
            raise ValueError("Must supply either an id or resource data")
        if id is not None and data is not None:
            raise ValueError("Must supply an id OR resource data, not both")

        self.client = client
        self.id = id
        self.data: dict[str, Any] = data if data is not None else {}
        if data is None:
            self.fetch_resource_data()
        self.id = self.data.get("id", id)

    def __repr__(self) -> str:
        return f"<Resource id={self.id!r} name={self.name!r}>"

    def fetch_resource_data(self) -> None:
        self.data = self.client.get_json(f"{RESOURCES_PATH}/{self.id}")

    refresh = fetch_resource_data

    @property
    def loaded(self) -> bool:
        """True once the payload carries the ``operations`` section."""
        return "operations" in self.data

    def _organization(self, key: str) -> Any:
        return (self.data.get("organization") or {}).get(key)

    def _resource_data_entry(self, key: str) -> Any:
        entries = (self.data.get("resourceData") or {}).get("entries") or []
        return next((e for e in entries if e.get("key") == key), None)

    @property
    def name(self) -> str | None:
        return self.data.get("name")

    @property
    def description(self) -> str | None:
        return self.data.get("description")

    @property
    def status(self) -> str | None:
        return self.data.get("status")

    @property
    def tenant_id(self) -> str | None:
        return self._organization("tenantRef")

    @property
    def tenant_name(self) -> str | None:
        return self._organization("tenantLabel")

    @property
    def subtenant_id(self) -> str | None:
        return self._organization("subtenantRef")

    @property
    def subtenant_name(self) -> str | None:
        return self._organization("subtenantLabel")

    @property
    def catalog_id(self) -> str | None:
        return (self.data.get("catalogItem") or {}).get("id")

    @property
    def catalog_name(self) -> str | None:
        return (self.data.get("catalogItem") or {}).get("label")

    @property
    def owner_ids(self) -> list[str]:
        return [owner.get("ref") for owner in self.data.get("owners") or []]

    @property
    def owner_names(self) -> list[str]:
        return [owner.get("value") for owner in self.data.get("owners") or []]

    @property
    def vm(self) -> bool:
        type_id = (self.data.get("resourceTypeRef") or {}).get("id")
        return type_id in VM_RESOURCE_TYPES

    @property
    def machine_status(self) -> str | None:
        entry = self._resource_data_entry("MachineStatus")
        if entry is None:
            return None
        return (entry.get("value") or {}).get("value")

    @property
    def machine_on(self) -> bool:
        return self.machine_status == "On"

    @property
    def machine_off(self) -> bool:
        return self.machine_status == "Off"

    @property
    def machine_turning_on(self) -> bool:
        return self.machine_status in ("TurningOn", "MachineActivated")

    @property
    def machine_turning_off(self) -> bool:
        return self.machine_status in ("TurningOff", "ShuttingDown")

    @property
    def network_interfaces(self) -> list[dict[str, Any]] | None:
        """NIC descriptors keyed by vRA property name (``NETWORK_ADDRESS`` etc.).

        ``None`` when the resource is not a VM or carries no network list;
        an empty list when the VM has a network list with no NICs.
        """
        if not self.vm:
            return None
        network_list = self._resource_data_entry("NETWORK_LIST")
        if network_list is None:
            return None

        nics = []
        for item in (network_list.get("value") or {}).get("items") or []:
            entries = (item.get("values") or {}).get("entries") or []
            nics.append({
                entry["key"]: (entry.get("value") or {}).get("value")
                for entry in entries
                if "key" in entry
            })
        return nics

    @property
    def ip_addresses(self) -> list[str] | None:
        nics = self.network_interfaces
        if nics is None:
            return None
        return [nic["NETWORK_ADDRESS"] for nic in nics if "NETWORK_ADDRESS" in nic]

    @property
    def actions(self) -> list[dict[str, Any]] | None:
        # Payloads from resource listings omit operations
        if not self.loaded:
            self.fetch_resource_data()
        return self.data.get("operations")

    def action_id_by_name(self, name: str) -> str | None:
        actions = self.actions
        if actions is None:
            return None
        action = next((a for a in actions if a.get("name") == name), None)
        if action is None:
            return None
        return action.get("id")

    def action_request_payload(self, action_id: str) -> dict[str, Any]:
        payload = ActionRequestPayload(
            resource_ref=Ref(id=self.id),
            resource_action_ref=Ref(id=action_id),
            organization=Organization(
                tenant_ref=self.tenant_id,
                tenant_label=self.tenant_name,
                subtenant_ref=self.subtenant_id,
                subtenant_label=self.subtenant_name,
            ),
        )
        return payload.to_api()

    def submit_action_request(self, action_id: str) -> Request:
        response = self.client.post(
            REQUESTS_PATH, json=self.action_request_payload(action_id),
        )
        location = response.headers["location"]
        return Request(self.client, location.rstrip("/").split("/")[-1])

    def submit_action_by_name(self, name: str) -> Request:
        action_id = self.action_id_by_name(name)
        if action_id is None:
            raise NotFoundError(
                f"No {name} action found for resource {self.id}"
            )
        return self.submit_action_request(action_id)

    def destroy(self) -> Request:
        return self.submit_action_by_name("Destroy")

    def shutdown(self) -> Request:
        return self.submit_action_by_name("Shutdown")

    def poweroff(self) -> Request:
        return self.submit_action_by_name("Power Off")

    def poweron(self) -> Request:
        return self.submit_action_by_name("Power On")

    def reboot(self) -> Request:
        return self.submit_action_by_name("Reboot")
