"""List command — display managed images and live containers.

Flags:
  --json: Output results as JSON object with "images" and "containers"

Text output is one table: type (I for image, C for container), name, size
and published SSH port.
"""

from __future__ import annotations

import json

import click

from dri.commands._helpers import reports_errors, run_command
from dri.lifecycle import Inventory, ListEntities
from dri.utils import BOLD, RESET, format_size, format_table_row


def _format_inventory(inventory: Inventory) -> list[str]:
    lines = [f"{BOLD}{format_table_row('TYPE', 'NAME', 'SIZE', 'PORT')}{RESET}"]
    for image in inventory.images:
        lines.append(format_table_row("I", image.name, format_size(image.size)))
    for container in inventory.containers:
        port = str(container.port) if container.port is not None else "-"
        lines.append(
            format_table_row("C", container.name, format_size(container.size), port)
        )
    return lines


@click.command("list")
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
@reports_errors
def list_cmd(ctx: click.Context, json_output: bool) -> None:
    """List managed images and running containers."""
    inventory: Inventory = run_command(ctx, ListEntities())

    if json_output:
        click.echo(json.dumps({
            "images": [image.model_dump() for image in inventory.images],
            "containers": [container.model_dump() for container in inventory.containers],
        }))
        return

    for line in _format_inventory(inventory):
        click.echo(line)
