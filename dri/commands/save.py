"""Save command — snapshot a running sandbox into an image of the same name."""

from __future__ import annotations

import click

from dri.commands._helpers import reports_errors, run_command
from dri.lifecycle import Save
from dri.utils import log_info


@click.command()
@click.argument("name")
@click.pass_context
@reports_errors
def save(ctx: click.Context, name: str) -> None:
    """Commit container NAME to image NAME and keep it running."""
    run_command(ctx, Save(name))
    log_info(f"Saved {name}")
