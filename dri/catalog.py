"""Typed view of the images and containers that belong to dri.

Each query asks the engine afresh; nothing is cached between calls. Engine
records outside the dri namespace, or whose names do not decode, are
skipped rather than reported: they belong to other tools.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from dri.codec import parse_container_name, parse_image_reference
from dri.constants import BASE_IMAGE, RESERVED_NAME
from dri.engine import Engine, container_list, image_list
from dri.models import Container, Image, RawContainer, RawImage
from dri.utils import log_debug


def image_from_record(record: Any) -> Optional[Image]:
    """Convert one raw engine image record, or return None if it is not ours."""
    try:
        raw = RawImage.model_validate(record)
    except PydanticValidationError:
        log_debug(f"Skipping malformed image record: {record!r}")
        return None

    reference = raw.primary_name
    if reference is None:
        return None
    name = parse_image_reference(reference)
    if name is None or name == RESERVED_NAME:
        return None
    return Image(name=name, size=raw.size)


def container_from_record(record: Any) -> Optional[Container]:
    """Convert one raw engine container record, or return None if it is not ours."""
    try:
        raw = RawContainer.model_validate(record)
    except PydanticValidationError:
        log_debug(f"Skipping malformed container record: {record!r}")
        return None

    engine_name = raw.primary_name
    if engine_name is None:
        return None
    name = parse_container_name(engine_name)
    if name is None or name == RESERVED_NAME:
        return None
    return Container(
        name=name,
        size=raw.size.root_fs_size if raw.size else 0,
        port=raw.first_host_port,
    )


class Catalog:
    """Queries the engine for managed images and containers."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def list_images(self) -> list[Image]:
        """Managed images, in engine report order. The base image is hidden."""
        images = []
        for record in image_list(self.engine):
            image = image_from_record(record)
            if image is not None:
                images.append(image)
        return images

    def list_containers(self) -> list[Container]:
        """Live managed containers, in engine report order."""
        containers = []
        for record in container_list(self.engine):
            container = container_from_record(record)
            if container is not None:
                containers.append(container)
        return containers

    def image_exists(self, name: str) -> bool:
        return any(image.name == name for image in self.list_images())

    def container_exists(self, name: str) -> bool:
        return any(container.name == name for container in self.list_containers())

    def base_image_exists(self) -> bool:
        """Whether the base image has been built.

        The base image never shows up in :meth:`list_images`, so this looks
        at the raw records directly.
        """
        for record in image_list(self.engine):
            if isinstance(record, dict) and BASE_IMAGE in (record.get("Names") or []):
                return True
        return False

    def port_in_use(self, port: int) -> bool:
        """Whether a live managed container already publishes ``port``."""
        return any(container.port == port for container in self.list_containers())
