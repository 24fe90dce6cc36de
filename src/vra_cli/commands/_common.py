"""Shared helpers for CLI commands — client factory, options, resource rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any

import typer

from vra_cli.catalog.resource import Resource
from vra_cli.client.vra import VraClient
from vra_cli.config.manager import ConfigManager

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Connection profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="vRA URL override"),
]
UsernameOpt = Annotated[
    str | None,
    typer.Option("--username", "-u", help="vRA username override"),
]
PasswordOpt = Annotated[
    str | None,
    typer.Option("--password", help="vRA password override"),
]
TenantOpt = Annotated[
    str | None,
    typer.Option("--tenant", "-t", help="vRA tenant override"),
]
FormatOpt = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv); defaults to the configured format"),
]

RESOURCE_COLUMNS = ["ID", "Name", "Status", "Subtenant", "IP Addresses"]


def make_client(
    profile: str | None,
    url: str | None,
    username: str | None,
    password: str | None,
    tenant: str | None,
) -> VraClient:
    """Create a VraClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    resolved = mgr.resolve_profile(
        profile_name=profile,
        url=url,
        username=username,
        password=password,
        tenant=tenant,
    )
    return VraClient(resolved)


def resource_rows(resources: Iterable[Resource]) -> list[list[Any]]:
    return [
        [r.id, r.name, r.status, r.subtenant_name, r.ip_addresses]
        for r in resources
    ]


def resource_summary(resource: Resource) -> dict[str, Any]:
    """Flatten the interesting parts of a resource payload for display."""
    summary: dict[str, Any] = {
        "id": resource.id,
        "name": resource.name,
        "description": resource.description,
        "status": resource.status,
        "vm": resource.vm,
        "tenant": resource.tenant_name,
        "subtenant": resource.subtenant_name,
        "catalog item": resource.catalog_name,
        "owners": resource.owner_names,
    }
    if resource.vm:
        summary["machine status"] = resource.machine_status
        ips = resource.ip_addresses
        summary["ip addresses"] = ips if ips is not None else "(no network information)"
    return summary


def resolve_format(fmt: str | None, mgr: ConfigManager | None = None) -> str:
    """An explicit ``--format`` wins over the configured ``default_format``."""
    if fmt:
        return fmt
    return (mgr or ConfigManager()).config.default_format
