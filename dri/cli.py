"""Click-based CLI entrypoint for dri.

All commands are implemented as Click subcommands with lazy loading.
Unknown commands raise an error.
"""

from __future__ import annotations

import importlib
import sys

import click

from dri import __version__
from dri.engine import SubprocessEngine

# ---------------------------------------------------------------------------
# Custom Click Group
# ---------------------------------------------------------------------------


_LAZY_COMMANDS: dict[str, tuple[str, str]] = {
    "build": ("dri.commands.build", "build"),
    "kill": ("dri.commands.kill", "kill"),
    "list": ("dri.commands.list_cmd", "list_cmd"),
    "new": ("dri.commands.new", "new"),
    "remove": ("dri.commands.remove", "remove"),
    "run": ("dri.commands.run", "run"),
    "save": ("dri.commands.save", "save"),
    "stop": ("dri.commands.stop", "stop"),
}


class DriGroup(click.Group):
    """Custom Click group that loads command modules on first access."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return all available command names (eager + lazy)."""
        eager = set(self.commands or {})
        return sorted(eager | _LAZY_COMMANDS.keys())

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Look up a command, importing lazily if needed."""
        cmd = self.commands.get(cmd_name)
        if cmd is not None:
            return cmd

        entry = _LAZY_COMMANDS.get(cmd_name)
        if entry is None:
            return None

        module_path, attr_name = entry
        mod = importlib.import_module(module_path)
        loaded_cmd: click.Command = getattr(mod, attr_name)
        # Cache so subsequent lookups skip the import
        self.add_command(loaded_cmd, cmd_name)
        return loaded_cmd

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if not args:
            return super().resolve_command(ctx, args)

        cmd_name = args[0]
        cmd_obj = self.get_command(ctx, cmd_name)
        if cmd_obj is not None:
            return cmd_name, cmd_obj, list(args[1:])

        ctx.fail(f"Unknown command '{cmd_name}'. Run 'dri --help' for available commands.")


# ---------------------------------------------------------------------------
# Main CLI Group
# ---------------------------------------------------------------------------


@click.group(cls=DriGroup, invoke_without_command=True)
@click.version_option(__version__, prog_name="dri")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """dri - manage SSH sandbox containers built from one base image."""
    ctx.ensure_object(dict)

    # Tests inject a scripted engine through obj.
    if "engine" not in ctx.obj:
        ctx.obj["engine"] = SubprocessEngine()

    if ctx.invoked_subcommand is None and not ctx.args:
        click.echo(ctx.get_help())


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the CLI.

    Uses ``standalone_mode=False`` so that exit codes are managed here.
    Usage errors (bad flags, missing required args) are normalised to
    exit code 1; Click's default for ``UsageError`` is exit code 2.
    """
    try:
        cli(standalone_mode=False)
    except click.UsageError as exc:
        click.echo(f"Error: {exc.format_message()}", err=True)
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        sys.exit(1 if code == 2 else code)


if __name__ == "__main__":
    main()
