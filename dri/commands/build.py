"""Build command — print the base image recipe and how to build it.

Nothing is executed: the operator saves the recipe next to an
``authorized_keys`` file and runs the printed command.
"""

from __future__ import annotations

import click

from dri.commands._helpers import reports_errors, run_command
from dri.lifecycle import Build, BuildPlan
from dri.recipe import CONTAINERFILE_NAME


@click.command()
@click.option(
    "--recipe-only", is_flag=True, help="Print only the recipe (for redirecting to a file)"
)
@click.pass_context
@reports_errors
def build(ctx: click.Context, recipe_only: bool) -> None:
    """Show the base image recipe and build command."""
    plan: BuildPlan = run_command(ctx, Build())

    if recipe_only:
        click.echo(plan.recipe, nl=False)
        return

    click.echo(f"# {CONTAINERFILE_NAME}")
    click.echo(plan.recipe)
    click.echo(f"# Save the above as {CONTAINERFILE_NAME} next to an authorized_keys file, then run:")
    click.echo(plan.command)
