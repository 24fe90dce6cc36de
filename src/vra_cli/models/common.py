"""Common response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """One entry of the ``errors`` list vRA returns on failure."""

    code: int | str | None = None
    message: str | None = None
    system_message: str | None = Field(default=None, alias="systemMessage")

    model_config = ConfigDict(populate_by_name=True)


class PageMetadata(BaseModel):
    """Pagination metadata from the vRA catalog API."""

    size: int | None = None
    total_elements: int | None = Field(default=None, alias="totalElements")
    total_pages: int | None = Field(default=None, alias="totalPages")
    number: int | None = None
    offset: int = 0

    model_config = ConfigDict(populate_by_name=True)


class PagedResponse(BaseModel):
    """Paged list response wrapper.

    Format: ``{"links": [...], "content": [...], "metadata": {"size", "totalElements", "totalPages", "number", "offset"}}``
    """

    links: list[Any] = Field(default_factory=list)
    content: list[Any] = Field(default_factory=list)
    metadata: PageMetadata | None = None
