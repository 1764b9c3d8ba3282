"""Backend manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from a11y_checklist.backends.base import MeasurementBackend

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class BackendManifest(Generic[ConfigT]):
    """Manifest describing a measurement backend plugin.

    The manifest contains references to the configuration class and the
    backend factory function for lazy loading of backends based on their key.
    """

    config_cls: type[ConfigT]
    backend_factory: Callable[[ConfigT], MeasurementBackend]
