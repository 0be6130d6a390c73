"""Reversible mapping between user names and engine-safe names.

Every byte of a user name becomes two letters in ``a``..``p``: the low
nibble first, then the high nibble. The result is always lowercase ASCII,
so it is valid anywhere the engine accepts a container or image name.

The naming scheme here is shared with images and containers created by
earlier runs; changing it orphans them.
"""

from __future__ import annotations

from typing import Optional

from dri.constants import (
    BASE_IMAGE,
    CONTAINER_PREFIX,
    ENCODED_MAX_LENGTH,
    IMAGE_PREFIX,
    IMAGE_TAG_SUFFIX,
    NAME_MAX_LENGTH,
    RESERVED_NAME,
)
from dri.errors import DecodeError, ValidationError

_ALPHABET_BASE = 0x61  # 'a'
_NIBBLE_SPAN = 16


def encode(name: str) -> str:
    """Encode a user name into its engine-safe form.

    Args:
        name: User-chosen name.

    Returns:
        Encoded name, exactly twice as long as the UTF-8 form of ``name``.

    Raises:
        ValidationError: If the name is longer than NAME_MAX_LENGTH.
    """
    data = name.encode("utf-8")
    if len(data) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"Name '{name}' is too long ({len(data)} > {NAME_MAX_LENGTH})"
        )

    out = []
    for b in data:
        out.append(chr((b & 0x0F) + _ALPHABET_BASE))
        out.append(chr(((b & 0xF0) >> 4) + _ALPHABET_BASE))
    return "".join(out)


def decode(code: str) -> str:
    """Decode an engine-safe name back into the user name.

    Args:
        code: Encoded name as produced by :func:`encode`.

    Returns:
        The original user name.

    Raises:
        ValidationError: If the input is too long or has odd length.
        DecodeError: If a character lies outside ``a``..``p`` or the
            decoded bytes are not valid UTF-8.
    """
    if len(code) > ENCODED_MAX_LENGTH:
        raise ValidationError(
            f"Encoded name is too long ({len(code)} > {ENCODED_MAX_LENGTH})"
        )
    if len(code) % 2 != 0:
        raise ValidationError(f"Encoded name '{code}' has odd length")

    out = bytearray()
    for i in range(0, len(code), 2):
        low = ord(code[i]) - _ALPHABET_BASE
        high = ord(code[i + 1]) - _ALPHABET_BASE
        if not (0 <= low < _NIBBLE_SPAN and 0 <= high < _NIBBLE_SPAN):
            raise DecodeError(f"Encoded name '{code}' is outside the a-p alphabet")
        out.append(low | (high << 4))

    try:
        return out.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Encoded name '{code}' is not valid text") from exc


def validate_user_name(name: str) -> None:
    """Validate a name supplied by the operator.

    Raises:
        ValidationError: If the name is empty, not ASCII, too long, or the
            reserved base-image name.
    """
    if not name:
        raise ValidationError("Name must not be empty")
    if not name.isascii():
        raise ValidationError(f"Name '{name}' must be ASCII")
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"Name '{name}' is too long ({len(name)} > {NAME_MAX_LENGTH})"
        )
    if name == RESERVED_NAME:
        raise ValidationError(f"Name '{RESERVED_NAME}' is reserved for the base image")


def container_name(name: str) -> str:
    """Return the engine container name for a user name."""
    return f"{CONTAINER_PREFIX}{encode(name)}"


def image_reference(name: str) -> str:
    """Return the engine image reference for a user name.

    The reserved name maps to the fixed base image and skips encoding.
    """
    if name == RESERVED_NAME:
        return BASE_IMAGE
    return f"{IMAGE_PREFIX}{encode(name)}{IMAGE_TAG_SUFFIX}"


def parse_container_name(engine_name: str) -> Optional[str]:
    """Return the user name behind an engine container name, if it is ours."""
    if not engine_name.startswith(CONTAINER_PREFIX):
        return None
    try:
        return decode(engine_name.removeprefix(CONTAINER_PREFIX)) or None
    except ValidationError:
        return None


def parse_image_reference(reference: str) -> Optional[str]:
    """Return the user name behind an engine image reference, if it is ours."""
    if not (reference.startswith(IMAGE_PREFIX) and reference.endswith(IMAGE_TAG_SUFFIX)):
        return None
    code = reference.removeprefix(IMAGE_PREFIX).removesuffix(IMAGE_TAG_SUFFIX)
    try:
        return decode(code) or None
    except ValidationError:
        return None
