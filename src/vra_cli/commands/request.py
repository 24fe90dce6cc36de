"""Request commands — follow up on submitted catalog requests."""

from __future__ import annotations

from typing import Annotated

import typer

from vra_cli.catalog.request import Request
from vra_cli.client.errors import error_handler
from vra_cli.commands._common import (
    RESOURCE_COLUMNS,
    FormatOpt,
    PasswordOpt,
    ProfileOpt,
    TenantOpt,
    UrlOpt,
    UsernameOpt,
    make_client,
    resolve_format,
    resource_rows,
)
from vra_cli.output.formatter import output

app = typer.Typer(name="request", help="Inspect submitted catalog requests.")

RequestIdArg = Annotated[str, typer.Argument(help="Request ID")]


@app.command()
@error_handler
def show(
    request_id: RequestIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    tenant: TenantOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show the state of a request."""
    fmt = resolve_format(fmt)
    with make_client(profile, url, username, password, tenant) as client:
        request = Request(client, request_id)
        request.refresh()
        if fmt in ("json", "yaml"):
            output(request.data, fmt)
            return
        summary = {
            "id": request.id,
            "status": request.status,
            "completed": request.completed,
            "completion state": request.completion_state,
            "completion details": request.completion_details,
        }
        output(summary, fmt, kv=True, title=f"Request {request.id}")


@app.command()
@error_handler
def resources(
    request_id: RequestIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    tenant: TenantOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List the resources a request produced."""
    fmt = resolve_format(fmt)
    with make_client(profile, url, username, password, tenant) as client:
        items = Request(client, request_id).resources()
        output(
            [r.data for r in items], fmt,
            columns=RESOURCE_COLUMNS, rows=resource_rows(items),
            title=f"Resources for request {request_id}",
        )
