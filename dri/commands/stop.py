"""Stop command — stop a running sandbox, optionally saving it first.

The engine removes a container as soon as it stops, so anything not saved
is lost.
"""

from __future__ import annotations

import click

from dri.commands._helpers import reports_errors, run_command
from dri.lifecycle import Stop
from dri.utils import log_info


@click.command()
@click.argument("name")
@click.option("--save", is_flag=True, help="Commit the container to image NAME before stopping")
@click.pass_context
@reports_errors
def stop(ctx: click.Context, name: str, save: bool) -> None:
    """Stop container NAME."""
    if save:
        log_info(f"Saving {name}...")
    run_command(ctx, Stop(name, save))
    log_info(f"Stopped {name}")
