"""Placeholder backend used until a rendering layer is wired in."""

import logging
from dataclasses import dataclass
from typing import Self

from a11y_checklist.backends.base import MeasurementBackend
from a11y_checklist.backends.stub.config import StubBackendConfig
from a11y_checklist.models.screen import Screen

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class StubBackend(MeasurementBackend):
    """Backend whose checks always pass."""

    @classmethod
    def from_config(cls, config: StubBackendConfig) -> Self:
        """Create backend from configuration."""
        return cls()

    def check_accessibility_labels(self, screen: Screen) -> bool:
        log.debug("Stub label check for %s", screen.id)
        return True

    def check_touch_targets(self, screen: Screen) -> bool:
        log.debug("Stub touch target check for %s", screen.id)
        return True
