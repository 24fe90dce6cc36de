"""Request payload models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Ref(BaseModel):
    """A ``{"id": ...}`` reference to another catalog object."""

    id: str | None = None


class Organization(BaseModel):
    """Tenant and business group a request is filed under."""

    tenant_ref: str | None = Field(default=None, alias="tenantRef")
    tenant_label: str | None = Field(default=None, alias="tenantLabel")
    subtenant_ref: str | None = Field(default=None, alias="subtenantRef")
    subtenant_label: str | None = Field(default=None, alias="subtenantLabel")

    model_config = ConfigDict(populate_by_name=True)


class RequestData(BaseModel):
    entries: list[dict[str, Any]] = Field(default_factory=list)


class ActionRequestPayload(BaseModel):
    """Body of ``POST /catalog-service/api/consumer/requests`` for a resource action.

    Serialise with :meth:`to_api` so field names match the API's camelCase keys.
    """

    type: Literal["ResourceActionRequest"] = Field(
        default="ResourceActionRequest", alias="@type",
    )
    resource_ref: Ref = Field(alias="resourceRef")
    resource_action_ref: Ref = Field(alias="resourceActionRef")
    organization: Organization = Field(default_factory=Organization)
    state: str = "SUBMITTED"
    request_number: int = Field(default=0, alias="requestNumber")
    request_data: RequestData = Field(default_factory=RequestData, alias="requestData")

    model_config = ConfigDict(populate_by_name=True)

    def to_api(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
