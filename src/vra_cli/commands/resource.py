"""Resource commands — inspect catalog resources and run their actions."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Confirm

from vra_cli.catalog.resource import Resource
from vra_cli.catalog.resources import Resources
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
    resource_summary,
)
from vra_cli.output.formatter import output

app = typer.Typer(
    name="resource",
    help="Inspect catalog resources and submit actions against them.",
)
console = Console()

ResourceIdArg = Annotated[str, typer.Argument(help="Resource ID")]


@app.command("list")
@error_handler
def list_resources(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    tenant: TenantOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List every resource visible to the current user."""
    fmt = resolve_format(fmt)
    with make_client(profile, url, username, password, tenant) as client:
        resources = Resources(client).all()
        output(
            [r.data for r in resources], fmt,
            columns=RESOURCE_COLUMNS, rows=resource_rows(resources),
            title="Resources",
        )


@app.command()
@error_handler
def show(
    resource_id: ResourceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    tenant: TenantOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show a resource. json/yaml print the full payload."""
    fmt = resolve_format(fmt)
    with make_client(profile, url, username, password, tenant) as client:
        resource = Resource(client, id=resource_id)
        if fmt in ("json", "yaml"):
            output(resource.data, fmt)
        else:
            output(
                resource_summary(resource), fmt,
                kv=True, title=f"Resource {resource.name or resource.id}",
            )


@app.command()
@error_handler
def actions(
    resource_id: ResourceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    tenant: TenantOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List the actions available on a resource."""
    fmt = resolve_format(fmt)
    with make_client(profile, url, username, password, tenant) as client:
        resource = Resource(client, id=resource_id)
        available = resource.actions or []
        rows = [
            [a.get("name"), a.get("id"), a.get("description")]
            for a in available
        ]
        output(
            available, fmt,
            columns=["Name", "ID", "Description"], rows=rows,
            title=f"Actions: {resource.name or resource.id}",
        )


@app.command()
@error_handler
def ips(
    resource_id: ResourceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    tenant: TenantOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show the network interfaces and IP addresses of a VM resource."""
    fmt = resolve_format(fmt)
    with make_client(profile, url, username, password, tenant) as client:
        resource = Resource(client, id=resource_id)
        nics = resource.network_interfaces
        if nics is None:
            console.print(
                f"[yellow]No network information available for '{resource.name}'.[/]"
            )
            return
        rows = [
            [nic.get("NETWORK_NAME"), nic.get("NETWORK_ADDRESS"), nic.get("NETWORK_MAC_ADDRESS")]
            for nic in nics
        ]
        output(
            nics, fmt,
            columns=["Network", "Address", "MAC"], rows=rows,
            title=f"Network interfaces: {resource.name}",
        )


@app.command()
@error_handler
def action(
    resource_id: ResourceIdArg,
    name: Annotated[str, typer.Argument(help="Action name, exactly as listed by 'resource actions'")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    tenant: TenantOpt = None,
) -> None:
    """Submit a named action against a resource."""
    with make_client(profile, url, username, password, tenant) as client:
        resource = Resource(client, id=resource_id)
        request = resource.submit_action_by_name(name)
        console.print(
            f"[green]{name} request {request.id} submitted for '{resource.name}'.[/]"
        )


@app.command()
@error_handler
def destroy(
    resource_id: ResourceIdArg,
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    tenant: TenantOpt = None,
) -> None:
    """Destroy a resource."""
    with make_client(profile, url, username, password, tenant) as client:
        resource = Resource(client, id=resource_id)
        if not force:
            if not Confirm.ask(f"Destroy resource '{resource.name}' ({resource.id})?"):
                console.print("Cancelled.")
                return
        request = resource.destroy()
        console.print(
            f"[green]Destroy request {request.id} submitted for '{resource.name}'.[/]"
        )
