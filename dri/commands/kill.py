"""Kill command — stop a running sandbox immediately, without saving."""

from __future__ import annotations

import click

from dri.commands._helpers import reports_errors, run_command
from dri.lifecycle import Kill
from dri.utils import log_info, log_warn


@click.command()
@click.argument("name")
@click.pass_context
@reports_errors
def kill(ctx: click.Context, name: str) -> None:
    """Stop container NAME with no grace period."""
    run_command(ctx, Kill(name))
    log_warn(f"Unsaved changes in {name} were discarded")
    log_info(f"Killed {name}")
