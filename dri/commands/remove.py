"""Remove command — delete a saved image."""

from __future__ import annotations

import click

from dri.commands._helpers import reports_errors, run_command
from dri.lifecycle import Remove
from dri.utils import log_info


@click.command()
@click.argument("name")
@click.pass_context
@reports_errors
def remove(ctx: click.Context, name: str) -> None:
    """Delete image NAME (refused while container NAME is running)."""
    run_command(ctx, Remove(name))
    log_info(f"Removed image {name}")
