"""Config commands — manage vRA connection profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from vra_cli.client.errors import error_handler
from vra_cli.commands._common import FormatOpt, resolve_format
from vra_cli.config.manager import ConfigManager
from vra_cli.config.models import VraProfile
from vra_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage vRA connection profiles and CLI configuration.")
console = Console()

ProfileNameArg = Annotated[str, typer.Argument(help="Profile name")]


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _existing_profile(mgr: ConfigManager, name: str) -> VraProfile:
    profile = mgr.get_profile(name)
    if profile is None:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)
    return profile


@app.command()
@error_handler
def init() -> None:
    """Interactive setup wizard — create your first vRA profile."""
    mgr = _get_manager()
    console.print("[bold]vRA CLI Setup Wizard[/]\n")

    profile = VraProfile(
        name=Prompt.ask("Profile name", default="default"),
        url=Prompt.ask("vRA URL (e.g. https://vra.corp.local)"),
        username=Prompt.ask("Username (e.g. user@corp.local)"),
        password=Prompt.ask("Password", password=True),
        tenant=Prompt.ask("Tenant", default="vsphere.local"),
        verify_ssl=Confirm.ask("Verify SSL certificates?", default=True),
    )
    mgr.add_profile(profile)
    console.print(f"\n[green]Profile '{profile.name}' saved to {mgr.config_path}.[/]")


@app.command()
@error_handler
def add(
    name: ProfileNameArg,
    url: Annotated[str, typer.Option("--url", help="vRA URL")],
    username: Annotated[Optional[str], typer.Option("--username", "-u", help="vRA username")] = None,
    password: Annotated[Optional[str], typer.Option("--password", help="vRA password")] = None,
    tenant: Annotated[Optional[str], typer.Option("--tenant", "-t", help="vRA tenant")] = None,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    make_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a vRA profile."""
    mgr = _get_manager()
    mgr.add_profile(VraProfile(
        name=name, url=url,
        username=username, password=password, tenant=tenant,
        verify_ssl=not no_verify_ssl,
    ))
    if make_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(fmt: FormatOpt = None) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'vra-cli config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    output(
        {"profiles": [p.model_dump(exclude={"password"}, exclude_none=True) for p in profiles.values()]},
        resolve_format(fmt, mgr),
        columns=["Name", "URL", "Tenant", "User", "Default"],
        rows=[
            [name, p.url, p.tenant, p.username, "*" if name == default else ""]
            for name, p in profiles.items()
        ],
        title="vRA Profiles",
    )


@app.command()
@error_handler
def show(name: ProfileNameArg, fmt: FormatOpt = None) -> None:
    """Show profile details with the password masked."""
    mgr = _get_manager()
    data = _existing_profile(mgr, name).model_dump(exclude_none=True)
    if "password" in data:
        data["password"] = "***"
    output(data, resolve_format(fmt, mgr), kv=True, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(name: ProfileNameArg) -> None:
    """Set the default vRA profile."""
    mgr = _get_manager()
    _existing_profile(mgr, name)
    mgr.set_default(name)
    console.print(f"[green]Default profile set to '{name}'.[/]")


@app.command("set-format")
@error_handler
def set_format(
    fmt: Annotated[str, typer.Argument(help="table, json, yaml or csv")],
) -> None:
    """Set the output format used when --format is not given."""
    _get_manager().set_default_format(fmt)
    console.print(f"[green]Default output format set to '{fmt}'.[/]")


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Test the credentials of a profile by requesting a bearer token."""
    from vra_cli.client.vra import VraClient

    profile = _get_manager().resolve_profile(profile_name=name)
    console.print(f"Requesting a token from [bold]{profile.url}[/]...")

    with VraClient(profile) as client:
        client.authorize()
        expires = client.auth.expires or "unknown"
        console.print(
            f"[green]Authenticated![/] {profile.username} in tenant {profile.tenant}"
            f" (token expires {expires})"
        )


@app.command()
@error_handler
def remove(
    name: ProfileNameArg,
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a vRA profile."""
    mgr = _get_manager()
    _existing_profile(mgr, name)
    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return
    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
