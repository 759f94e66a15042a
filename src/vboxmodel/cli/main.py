"""CLI entry point for vboxmodel.

Invoked as::

    vboxmodel [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m vboxmodel.cli.main

Commands
--------
inspect     Show the storage tree of a VM dump or a registered VM
platform    Show the detected host platform
version     Show version information
"""
from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
import yaml
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from vboxmodel.models import VirtualMachine

console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    """Read a dump file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_or_exit(file: str | None, vm_name: str | None) -> "VirtualMachine":
    """Load a VM from a dump file or from VBoxManage, exiting on failure."""
    from vboxmodel import load_dump
    from vboxmodel.exceptions import VirtualBoxError
    from vboxmodel.models import VirtualMachine

    if file is not None:
        return load_dump(_read_source(file))
    try:
        return VirtualMachine.find(vm_name or "")
    except VirtualBoxError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="vboxmodel")
@click.option(
    "--vboxmanage",
    "vboxmanage_path",
    envvar="VBOXMANAGE",
    default=None,
    help="Path to the VBoxManage executable (env: VBOXMANAGE)",
)
def cli(vboxmanage_path: str | None) -> None:
    """VirtualBox configuration models: inspect VMs and their storage."""
    from vboxmodel.command import VBOXMANAGE_ENV_VAR

    if vboxmanage_path:
        os.environ[VBOXMANAGE_ENV_VAR] = vboxmanage_path


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from vboxmodel import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]vboxmodel[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# platform command
# ---------------------------------------------------------------------------


@cli.command(name="platform")
def platform_command() -> None:
    """Show which host platform VirtualBox is being driven on."""
    from vboxmodel.command import Command
    from vboxmodel.platform import Platform

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Identifier[/bold]", Platform.platform())
    for label, detected in (
        ("mac", Platform.mac()),
        ("windows", Platform.windows()),
        ("linux", Platform.linux()),
        ("solaris", Platform.solaris()),
    ):
        table.add_row(label, "[green]yes[/green]" if detected else "[dim]no[/dim]")
    table.add_row("[bold]VBoxManage[/bold]", Command.vboxmanage_binary())
    console.print(table)


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


@cli.command(name="inspect")
@click.argument("file", type=click.Path(exists=False), required=False)
@click.option("--vm", "vm_name", default=None, help="Query a registered VM by name instead of a file")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
def inspect_command(file: str | None, vm_name: str | None, output_format: str) -> None:
    """Show a VM's storage controllers and attached devices.

    FILE is a saved `VBoxManage showvminfo --machinereadable` dump.
    """
    if (file is None) == (vm_name is None):
        err_console.print("[red]Error:[/red] Pass exactly one of FILE or --vm.")
        sys.exit(2)

    vm = _load_or_exit(file, vm_name)
    output_format = output_format.lower()

    if output_format == "json":
        console.print(Syntax(json.dumps(vm.to_dict(), indent=2), "json"))
        return
    if output_format == "yaml":
        text = yaml.dump(vm.to_dict(), default_flow_style=False, allow_unicode=True, sort_keys=False)
        console.print(Syntax(text, "yaml"))
        return

    table = Table(title=f"VM: {vm.name}", show_lines=True)
    table.add_column("Controller", style="bold", min_width=14)
    table.add_column("Type", min_width=8)
    table.add_column("Port", justify="right")
    table.add_column("Medium")
    table.add_column("UUID")

    controllers = vm.storage_controllers or []
    for controller in controllers:
        devices = controller.devices or []
        if not devices:
            table.add_row(controller.name, controller.type or "", "", "[dim]empty[/dim]", "")
        for device in devices:
            table.add_row(
                controller.name,
                controller.type or "",
                str(device.port),
                device.medium or "",
                device.uuid or "",
            )

    console.print(table)
    console.print(f"\n[bold]{len(controllers)}[/bold] storage controller(s)")


if __name__ == "__main__":
    cli()
