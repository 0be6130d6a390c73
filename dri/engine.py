"""Container engine operations for dri.

Wraps the engine CLI (podman by default) via subprocess. Each operation
builds one argument vector; every non-zero exit becomes an EngineError
carrying the captured streams.
"""

from __future__ import annotations

import json
import subprocess
import sys
from typing import Any, NamedTuple, Optional, Protocol, Sequence

from dri.constants import (
    PUBLISH_HOST_IP,
    SSH_PORT,
    get_dri_verbose,
    get_engine_executable,
)
from dri.errors import EngineError, EngineUnavailableError
from dri.utils import log_debug


class EngineResult(NamedTuple):
    """Captured outcome of one engine invocation.

    Attributes:
        stdout: Captured standard output.
        stderr: Captured standard error.
        returncode: Exit status of the engine process.
    """

    stdout: str
    stderr: str
    returncode: int


class Engine(Protocol):
    """Anything that can run one engine command and capture its output."""

    def invoke(self, args: Sequence[str]) -> EngineResult: ...


class SubprocessEngine:
    """Engine adapter that spawns the engine CLI for each invocation."""

    def __init__(self, executable: Optional[str] = None) -> None:
        self.executable = executable or get_engine_executable()

    def invoke(self, args: Sequence[str]) -> EngineResult:
        """Run ``<executable> <args...>`` and capture its output.

        Raises:
            EngineUnavailableError: If the process cannot be spawned or its
                output is not readable text.
        """
        cmd = [self.executable, *args]
        if get_dri_verbose():
            print(f"+ {' '.join(cmd)}", file=sys.stderr)

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
            )
        except (OSError, UnicodeDecodeError) as exc:
            raise EngineUnavailableError(
                f"Could not run '{self.executable}': {exc}"
            ) from exc

        return EngineResult(result.stdout or "", result.stderr or "", result.returncode)


# ============================================================================
# Internal Helpers
# ============================================================================


def run_engine(engine: Engine, args: Sequence[str]) -> str:
    """Invoke the engine and fail on a non-zero exit status.

    Args:
        engine: Engine adapter.
        args: Arguments after the executable name.

    Returns:
        Captured stdout.

    Raises:
        EngineError: If the engine exits non-zero.
    """
    result = engine.invoke(list(args))
    if result.returncode != 0:
        raise EngineError(args, result.returncode, result.stdout, result.stderr)
    return result.stdout


def parse_json_output(args: Sequence[str], stdout: str) -> list[Any]:
    """Parse a JSON list printed by an engine listing command.

    Empty output is treated as an empty list.

    Raises:
        EngineError: If the output is not a JSON list.
    """
    if not stdout.strip():
        return []
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise EngineError(
            args, 0, stdout, "", message=f"Could not parse engine output as JSON: {exc}"
        ) from exc
    if data is None:
        return []
    if not isinstance(data, list):
        raise EngineError(args, 0, stdout, "", message="Engine output is not a JSON list")
    return data


# ============================================================================
# Listing
# ============================================================================


def image_list(engine: Engine) -> list[Any]:
    """Return the raw image records reported by the engine."""
    args = ["image", "list", "--format", "json"]
    return parse_json_output(args, run_engine(engine, args))


def container_list(engine: Engine) -> list[Any]:
    """Return the raw records of running containers, with sizes and ports."""
    args = ["container", "list", "--size", "--format", "json"]
    return parse_json_output(args, run_engine(engine, args))


# ============================================================================
# Mutations
# ============================================================================


def container_run(engine: Engine, image_ref: str, container: str, port: int) -> None:
    """Start a detached, auto-removed container publishing SSH on loopback."""
    log_debug(f"Starting {container} from {image_ref} on port {port}")
    run_engine(
        engine,
        [
            "container", "run",
            "--rm",
            "--detach",
            "--publish", f"{PUBLISH_HOST_IP}:{port}:{SSH_PORT}",
            "--name", container,
            image_ref,
        ],
    )


def container_commit(engine: Engine, container: str, image_ref: str) -> None:
    """Commit a container to an image, pausing it for the duration."""
    log_debug(f"Committing {container} to {image_ref}")
    run_engine(engine, ["container", "commit", "--pause", container, image_ref])


def container_stop(engine: Engine, container: str, grace: int) -> None:
    """Stop a container, giving it ``grace`` seconds before it is killed."""
    log_debug(f"Stopping {container} (grace {grace}s)")
    run_engine(engine, ["container", "stop", "--time", str(grace), container])


def image_remove(engine: Engine, image_ref: str) -> None:
    """Delete an image."""
    log_debug(f"Removing {image_ref}")
    run_engine(engine, ["image", "rm", image_ref])
