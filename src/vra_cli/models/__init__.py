"""Pydantic data models for the vRA REST API."""

from vra_cli.models.common import ErrorDetail, PagedResponse, PageMetadata
from vra_cli.models.request import ActionRequestPayload, Organization, Ref, RequestData

__all__ = [
    "ActionRequestPayload",
    "ErrorDetail",
    "Organization",
    "PageMetadata",
    "PagedResponse",
    "Ref",
    "RequestData",
]
