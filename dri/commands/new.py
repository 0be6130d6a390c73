"""New command — start a fresh sandbox from the base image."""

from __future__ import annotations

import click

from dri.commands._helpers import reports_errors, run_command
from dri.lifecycle import New
from dri.utils import log_info


@click.command()
@click.argument("name")
@click.argument("port", type=int)
@click.pass_context
@reports_errors
def new(ctx: click.Context, name: str, port: int) -> None:
    """Start container NAME from the base image with SSH on 127.0.0.1:PORT."""
    run_command(ctx, New(name, port))
    log_info(f"Started {name} (ssh -p {port} root@127.0.0.1)")
