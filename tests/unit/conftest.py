"""Shared fixtures for unit tests."""

from dataclasses import dataclass, field

import pytest

from a11y_checklist.backends.base import (
    MeasurementBackend,
    MeasurementUnavailableError,
)
from a11y_checklist.catalog import get_screen
from a11y_checklist.models.screen import Screen
from a11y_checklist.store import ResultStore


@dataclass(frozen=True, kw_only=True)
class FakeBackend(MeasurementBackend):
    """Backend with configurable verdicts per screen id."""

    missing_labels: frozenset[str] = frozenset()
    small_targets: frozenset[str] = frozenset()
    unavailable: frozenset[str] = frozenset()
    broken: frozenset[str] = frozenset()
    calls: list[tuple[str, str]] = field(default_factory=list)

    def check_accessibility_labels(self, screen: Screen) -> bool:
        self.calls.append(("labels", screen.id))
        if screen.id in self.broken:
            raise RuntimeError("renderer crashed")
        if screen.id in self.unavailable:
            raise MeasurementUnavailableError("no rendered tree available")
        return screen.id not in self.missing_labels

    def check_touch_targets(self, screen: Screen) -> bool:
        self.calls.append(("touch-targets", screen.id))
        if screen.id in self.unavailable:
            raise MeasurementUnavailableError("no rendered tree available")
        return screen.id not in self.small_targets


@pytest.fixture
def store() -> ResultStore:
    """Create an empty result store."""
    return ResultStore()


@pytest.fixture
def dashboard() -> Screen:
    return get_screen("Dashboard")


@pytest.fixture
def tracking() -> Screen:
    return get_screen("Tracking")
