"""Shared helper functions for dri commands."""
from __future__ import annotations

import functools
import sys
from typing import Any, Callable, TypeVar

import click

from dri.engine import Engine, SubprocessEngine
from dri.errors import DriError
from dri.lifecycle import Command, execute
from dri.utils import log_error

F = TypeVar("F", bound=Callable[..., Any])


def get_engine(ctx: click.Context) -> Engine:
    """Return the engine stored on the root context, creating one if needed.

    Commands invoked on their own (outside the ``dri`` group) have no
    context object, so fall back to a subprocess engine.
    """
    obj = ctx.find_object(dict)
    if obj is None:
        return SubprocessEngine()
    if "engine" not in obj:
        obj["engine"] = SubprocessEngine()
    return obj["engine"]


def run_command(ctx: click.Context, command: Command) -> Any:
    """Execute a lifecycle command with the context's engine."""
    return execute(command, get_engine(ctx))


def reports_errors(func: F) -> F:
    """Turn dri errors raised by a command into ``Error: ...`` and exit 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DriError as exc:
            log_error(str(exc))
            sys.exit(1)

    return wrapper  # type: ignore[return-value]
