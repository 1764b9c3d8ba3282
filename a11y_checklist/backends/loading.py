"""Resolve measurement backends registered by installed distributions."""

import logging
from importlib.metadata import entry_points
from typing import Any

from a11y_checklist.backends.manifest import BackendManifest

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "a11y_checklist.backends"


class BackendNotFoundError(Exception):
    """Raised when no installed distribution registers the backend key."""


class InvalidBackendError(Exception):
    """Raised when a backend entry point does not resolve to a manifest."""


def available_backends() -> list[str]:
    """Return the sorted keys of every registered backend."""
    return sorted(entry.name for entry in entry_points(group=ENTRY_POINT_GROUP))


def load_backend_manifest(key: str) -> BackendManifest[Any]:
    """Resolve the manifest registered under ``key``.

    Raises:
        BackendNotFoundError: If no backend is registered under the key
        InvalidBackendError: If the entry point resolves to something else

    """
    matches = entry_points(group=ENTRY_POINT_GROUP, name=key)
    if not matches:
        raise BackendNotFoundError(
            f"Backend '{key}' not found. Available backends: {available_backends()}"
        )

    (entry, *duplicates) = matches
    if duplicates:
        log.warning("Backend '%s' is registered more than once, using %s", key, entry)

    manifest = entry.load()
    if not isinstance(manifest, BackendManifest):
        raise InvalidBackendError(
            f"Backend '{key}' entry point {entry.value} resolves to "
            f"{type(manifest).__name__}, expected BackendManifest"
        )
    return manifest
