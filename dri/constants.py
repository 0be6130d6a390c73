"""Configuration defaults for dri.

Naming-scheme constants are fixed: they must match what earlier runs left
in the engine. Runtime flags are read from the environment at call time.
"""

from __future__ import annotations

import os


def _env_int(key: str, default: int) -> int:
    """Read an integer from an environment variable, returning default on parse failure."""
    try:
        return int(os.environ.get(key, str(default)))
    except (ValueError, TypeError):
        return default


# ============================================================================
# Naming Scheme
# ============================================================================

NAME_MAX_LENGTH: int = 20
"""Maximum length of a user-chosen image/container name."""

ENCODED_MAX_LENGTH: int = 2 * NAME_MAX_LENGTH
"""Maximum length of an encoded engine name."""

RESERVED_NAME: str = "default"
"""Display name of the base image; never a managed image or container."""

CONTAINER_PREFIX: str = "dri-"
"""Engine container names are ``dri-<encoded name>``."""

IMAGE_PREFIX: str = "localhost/dri/"
"""Engine image references are ``localhost/dri/<encoded name>:latest``."""

IMAGE_TAG_SUFFIX: str = ":latest"

BASE_IMAGE: str = "localhost/drix/default:latest"
"""Fixed reference of the base image built from the recipe."""

# ============================================================================
# Container Runtime Constants
# ============================================================================

PUBLISH_HOST_IP: str = "127.0.0.1"
"""Published SSH ports are only bound to loopback."""

SSH_PORT: int = 22

STOP_GRACE_SECONDS: int = 2
"""Grace period handed to the engine's stop operation."""

KILL_GRACE_SECONDS: int = 0

# ============================================================================
# Runtime Flag Defaults (read from environment)
# ============================================================================


def get_engine_executable() -> str:
    """Get the container engine executable from environment.

    Only podman-compatible CLIs work: dri relies on podman's
    ``--format json`` record shapes and on ``container commit --pause``.

    Returns:
        Executable name or path (default: "podman")
    """
    return os.environ.get("DRI_ENGINE", "podman") or "podman"


def get_dri_debug() -> int:
    """Get DRI_DEBUG flag from environment.

    Returns:
        1 if enabled, 0 if disabled (default)
    """
    return _env_int("DRI_DEBUG", 0)


def get_dri_verbose() -> int:
    """Get DRI_VERBOSE flag from environment.

    Returns:
        1 if enabled, 0 if disabled (default)
    """
    return _env_int("DRI_VERBOSE", 0)
