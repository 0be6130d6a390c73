"""dri - manage a small fleet of SSH sandbox containers."""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("dri")
except PackageNotFoundError:
    __version__ = "0.1.0"  # fallback for editable installs / dev
