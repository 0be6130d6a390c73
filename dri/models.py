from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class Image(BaseModel):
    """A managed image, as shown to the operator."""

    name: str
    """Decoded user name."""

    size: int = Field(default=0, ge=0)
    """Image size in bytes."""


class Container(BaseModel):
    """A live managed container, as shown to the operator."""

    name: str
    """Decoded user name."""

    size: int = Field(default=0, ge=0)
    """Root filesystem size in bytes."""

    port: Optional[int] = Field(default=None, ge=1, le=65535)
    """First published host port, if any."""


# ---------------------------------------------------------------------------
# Raw engine records
# ---------------------------------------------------------------------------
# Field aliases follow the engine's ``--format json`` output. Unknown keys
# are ignored.


class RawImage(BaseModel):
    """One record of ``image list --format json``."""

    model_config = ConfigDict(populate_by_name=True)

    names: Optional[list[str]] = Field(default=None, alias="Names")
    size: int = Field(default=0, alias="Size", ge=0)

    @property
    def primary_name(self) -> Optional[str]:
        return self.names[0] if self.names else None


class RawContainerSize(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    root_fs_size: int = Field(default=0, alias="rootFsSize", ge=0)
    rw_size: int = Field(default=0, alias="rwSize", ge=0)


class RawPort(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    host_ip: str = ""
    container_port: int = 0
    host_port: Optional[int] = Field(default=None, ge=0, le=65535)
    protocol: str = "tcp"


class RawContainer(BaseModel):
    """One record of ``container list --size --format json``."""

    model_config = ConfigDict(populate_by_name=True)

    names: Optional[list[str]] = Field(default=None, alias="Names")
    size: Optional[RawContainerSize] = Field(default=None, alias="Size")
    ports: Optional[list[RawPort]] = Field(default=None, alias="Ports")

    # Unreadable size or port details must not hide a live container.
    @field_validator("size", mode="before")
    @classmethod
    def _lenient_size(cls, value: Any) -> Any:
        if value is None:
            return None
        try:
            return RawContainerSize.model_validate(value)
        except ValidationError:
            return None

    @field_validator("ports", mode="before")
    @classmethod
    def _lenient_ports(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return None
        ports = []
        for entry in value:
            try:
                ports.append(RawPort.model_validate(entry))
            except ValidationError:
                continue
        return ports

    @property
    def primary_name(self) -> Optional[str]:
        return self.names[0] if self.names else None

    @property
    def first_host_port(self) -> Optional[int]:
        for port in self.ports or []:
            if port.host_port:
                return port.host_port
        return None
