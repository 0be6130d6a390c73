"""Run command — start a sandbox from a saved image."""

from __future__ import annotations

from typing import Optional

import click

from dri.commands._helpers import reports_errors, run_command
from dri.lifecycle import Run
from dri.utils import log_info


@click.command()
@click.argument("name")
@click.argument("port", type=int)
@click.option("--image", "-i", default=None, help="Image to start from (default: base image)")
@click.pass_context
@reports_errors
def run(ctx: click.Context, name: str, port: int, image: Optional[str]) -> None:
    """Start container NAME from an image with SSH on 127.0.0.1:PORT."""
    run_command(ctx, Run(name, port, image))
    log_info(f"Started {name} from {image or 'default'} (ssh -p {port} root@127.0.0.1)")
