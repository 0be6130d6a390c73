"""Command handlers for dri.

Every user command is one variant of a closed set of NamedTuples. Each
handler checks its preconditions against a fresh catalog, then issues its
engine operations in a fixed order. The first failure aborts the command;
earlier steps are not rolled back.
"""

from __future__ import annotations

from typing import Any, Callable, NamedTuple, Optional, Union

from dri.catalog import Catalog
from dri.codec import container_name, image_reference, validate_user_name
from dri.constants import (
    KILL_GRACE_SECONDS,
    RESERVED_NAME,
    STOP_GRACE_SECONDS,
    get_engine_executable,
)
from dri.engine import (
    Engine,
    container_commit,
    container_run,
    container_stop,
    image_remove,
)
from dri.errors import PreconditionError, ValidationError
from dri.models import Container, Image
from dri.recipe import CONTAINERFILE, build_command
from dri.utils import log_debug


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class ListEntities(NamedTuple):
    pass


class Build(NamedTuple):
    pass


class New(NamedTuple):
    name: str
    port: int


class Run(NamedTuple):
    name: str
    port: int
    image: Optional[str] = None


class Stop(NamedTuple):
    name: str
    save: bool = False


class Kill(NamedTuple):
    name: str


class Save(NamedTuple):
    name: str


class Remove(NamedTuple):
    name: str


Command = Union[ListEntities, Build, New, Run, Stop, Kill, Save, Remove]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class Inventory(NamedTuple):
    images: list[Image]
    containers: list[Container]


class BuildPlan(NamedTuple):
    recipe: str
    command: str


# ---------------------------------------------------------------------------
# Precondition helpers
# ---------------------------------------------------------------------------


def _validate_port(port: int) -> None:
    if not 1 <= port <= 65535:
        raise ValidationError(f"Port {port} is outside 1-65535")


def _require_container(catalog: Catalog, name: str) -> None:
    if not catalog.container_exists(name):
        raise PreconditionError(f"Container '{name}' is not running")


def _require_no_container(catalog: Catalog, name: str) -> None:
    if catalog.container_exists(name):
        raise PreconditionError(f"Container '{name}' is already running")


def _require_free_port(catalog: Catalog, port: int) -> None:
    if catalog.port_in_use(port):
        raise PreconditionError(f"Port {port} is already published by another container")


def _require_image(catalog: Catalog, image: str) -> None:
    if image == RESERVED_NAME:
        if not catalog.base_image_exists():
            raise PreconditionError(
                "Base image has not been built; run 'dri build' for instructions"
            )
        return
    validate_user_name(image)
    if not catalog.image_exists(image):
        raise PreconditionError(f"Image '{image}' does not exist")


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _list(command: ListEntities, engine: Engine) -> Inventory:
    catalog = Catalog(engine)
    images = catalog.list_images()
    containers = catalog.list_containers()
    return Inventory(images, containers)


def _build(command: Build, engine: Engine) -> BuildPlan:
    return BuildPlan(CONTAINERFILE, build_command(get_engine_executable()))


def _new(command: New, engine: Engine) -> None:
    validate_user_name(command.name)
    _validate_port(command.port)
    catalog = Catalog(engine)
    _require_no_container(catalog, command.name)
    _require_free_port(catalog, command.port)
    container_run(
        engine, image_reference(RESERVED_NAME), container_name(command.name), command.port
    )


def _run(command: Run, engine: Engine) -> None:
    validate_user_name(command.name)
    _validate_port(command.port)
    image = command.image or RESERVED_NAME
    catalog = Catalog(engine)
    _require_image(catalog, image)
    _require_no_container(catalog, command.name)
    _require_free_port(catalog, command.port)
    container_run(engine, image_reference(image), container_name(command.name), command.port)


def _stop(command: Stop, engine: Engine) -> None:
    validate_user_name(command.name)
    catalog = Catalog(engine)
    _require_container(catalog, command.name)
    if command.save:
        container_commit(engine, container_name(command.name), image_reference(command.name))
    container_stop(engine, container_name(command.name), STOP_GRACE_SECONDS)


def _kill(command: Kill, engine: Engine) -> None:
    validate_user_name(command.name)
    catalog = Catalog(engine)
    _require_container(catalog, command.name)
    container_stop(engine, container_name(command.name), KILL_GRACE_SECONDS)


def _save(command: Save, engine: Engine) -> None:
    validate_user_name(command.name)
    catalog = Catalog(engine)
    _require_container(catalog, command.name)
    container_commit(engine, container_name(command.name), image_reference(command.name))


def _remove(command: Remove, engine: Engine) -> None:
    validate_user_name(command.name)
    catalog = Catalog(engine)
    if not catalog.image_exists(command.name):
        raise PreconditionError(f"Image '{command.name}' does not exist")
    if catalog.container_exists(command.name):
        raise PreconditionError(
            f"Image '{command.name}' is in use by a running container of the same name"
        )
    image_remove(engine, image_reference(command.name))


_HANDLERS: dict[type, Callable[[Any, Engine], Any]] = {
    ListEntities: _list,
    Build: _build,
    New: _new,
    Run: _run,
    Stop: _stop,
    Kill: _kill,
    Save: _save,
    Remove: _remove,
}


def execute(command: Command, engine: Engine) -> Any:
    """Run one command against the engine.

    Args:
        command: One of the command variants defined in this module.
        engine: Engine adapter used for every query and mutation.

    Returns:
        ``Inventory`` for ListEntities, ``BuildPlan`` for Build, otherwise None.

    Raises:
        ValidationError: Bad name or port.
        PreconditionError: Required image/container presence not met.
        EngineError: An engine invocation failed.
        TypeError: ``command`` is not a known command variant.
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unknown command: {command!r}")
    log_debug(f"Executing {command!r}")
    return handler(command, engine)
