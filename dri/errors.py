"""Exception hierarchy for dri.

Provides a structured exception tree so callers can catch broad
categories (``DriError``) or specific failure modes.

This module is a base-layer module: it must NOT import from any
other ``dri`` submodule.
"""

from __future__ import annotations

from typing import Sequence


class DriError(Exception):
    """Base exception for all dri errors."""


class ValidationError(DriError):
    """Input validation failures (bad names, reserved names, bad ports)."""


class DecodeError(ValidationError):
    """An engine name could not be decoded back into a user name."""


class PreconditionError(DriError):
    """A required image/container presence (or absence) was not met."""


class EngineUnavailableError(DriError):
    """The engine process could not be spawned or its output read."""


class EngineError(DriError):
    """An engine invocation exited with a non-zero status.

    Carries both captured streams so the CLI can show them to the operator.
    """

    def __init__(
        self,
        args: Sequence[str],
        returncode: int,
        stdout: str = "",
        stderr: str = "",
        message: str = "",
    ) -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.message = message or (
            f"engine command failed with exit status {returncode}: "
            f"{' '.join(self.command)}"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message}\nstdout:\n{self.stdout}\nstderr:\n{self.stderr}"
