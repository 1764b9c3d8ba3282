"""Checklist session: owns the result store and applies user actions."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Literal, Self

from a11y_checklist import checks
from a11y_checklist.backends.base import MeasurementBackend
from a11y_checklist.backends.loading import load_backend_manifest
from a11y_checklist.catalog import SCREENS, find_screen
from a11y_checklist.models.config import ChecklistConfig, DebugSettings
from a11y_checklist.models.result import TestResult
from a11y_checklist.models.screen import Screen
from a11y_checklist.store import ResultStore

log = logging.getLogger(__name__)

ActionKind = Literal[
    "run-all",
    "clear",
    "toggle-touch-targets",
    "toggle-labels",
    "labels",
    "touch-targets",
    "dynamic-type",
    "contrast",
]

SCREEN_ACTIONS: frozenset[str] = frozenset(
    {"labels", "touch-targets", "dynamic-type", "contrast"}
)
GLOBAL_ACTIONS: frozenset[str] = frozenset(
    {"run-all", "clear", "toggle-touch-targets", "toggle-labels"}
)


@dataclass(frozen=True, kw_only=True)
class Action:
    """A single user action; screen actions carry the target screen id."""

    kind: ActionKind
    screen_id: str | None = None


def parse_action(token: str) -> Action:
    """Parse an action token such as "run-all" or "labels=Dashboard".

    Raises:
        ValueError: If the token is not a known action

    """
    kind, sep, screen_id = token.strip().partition("=")
    kind = kind.strip()
    screen_id = screen_id.strip()

    if kind in GLOBAL_ACTIONS and not sep:
        return Action(kind=kind)  # type: ignore[arg-type]
    if kind in SCREEN_ACTIONS and screen_id:
        return Action(kind=kind, screen_id=screen_id)  # type: ignore[arg-type]

    raise ValueError(
        f"Invalid action '{token}'. Expected one of {sorted(GLOBAL_ACTIONS)} "
        f"or <{'|'.join(sorted(SCREEN_ACTIONS))}>=<screen>"
    )


@dataclass(frozen=True, kw_only=True)
class Snapshot:
    """Immutable view of the session state handed to the presentation layer."""

    screens: Sequence[Screen]
    settings: DebugSettings
    results: Mapping[str, TestResult]

    @property
    def clear_enabled(self) -> bool:
        return bool(self.results)


@dataclass(kw_only=True)
class ChecklistSession:
    """State of one opened checklist.

    The result store starts empty and is discarded with the session.
    Actions run synchronously, one at a time.
    """

    backend: MeasurementBackend
    screens: Sequence[Screen] = SCREENS
    settings: DebugSettings = field(default_factory=DebugSettings)
    store: ResultStore = field(default_factory=ResultStore)

    @classmethod
    def from_config(cls, config: ChecklistConfig) -> Self:
        """Open a session using the backend named in the configuration."""
        log.info("Loading backend: %s", config.backend)
        manifest = load_backend_manifest(config.backend)
        backend_config = manifest.config_cls(**config.backend_config)
        return cls(
            backend=manifest.backend_factory(backend_config),
            settings=config.settings,
        )

    def screen(self, screen_id: str) -> Screen:
        """Look up a screen of this session's catalog.

        Raises:
            ScreenNotFoundError: If the id is not in the catalog

        """
        return find_screen(self.screens, screen_id)

    def snapshot(self) -> Snapshot:
        """Return the current state for the presentation layer."""
        return Snapshot(
            screens=self.screens,
            settings=self.settings,
            results=self.store.as_mapping(),
        )

    def test_accessibility_labels(self, screen_id: str) -> TestResult:
        """Run the label check on a screen and record the verdict."""
        return checks.test_accessibility_labels(
            self.store, self.backend, self.screen(screen_id)
        )

    def test_touch_targets(self, screen_id: str) -> TestResult:
        """Run the touch target check on a screen and record the verdict."""
        return checks.test_touch_targets(
            self.store, self.backend, self.screen(screen_id)
        )

    def test_dynamic_type(self, screen_id: str) -> TestResult:
        """Record dynamic type support for a screen."""
        return checks.test_dynamic_type(self.store, self.screen(screen_id))

    def test_color_contrast(self, screen_id: str) -> TestResult:
        """Record color contrast compliance for a screen."""
        return checks.test_color_contrast(self.store, self.screen(screen_id))

    def run_all_tests(self) -> Sequence[tuple[Screen, TestResult]]:
        """Run the combined check for every screen of the session."""
        return checks.run_all_tests(self.store, self.backend, self.screens)

    def clear_results(self) -> None:
        """Remove every stored result."""
        log.info("Clearing %d result(s)", len(self.store))
        self.store.clear()

    def toggle_touch_targets(self) -> None:
        """Flip the touch target overlay setting."""
        self.settings = self.settings.model_copy(
            update={"show_touch_targets": not self.settings.show_touch_targets}
        )

    def toggle_accessibility_labels(self) -> None:
        """Flip the accessibility label overlay setting."""
        self.settings = self.settings.model_copy(
            update={
                "show_accessibility_labels": not self.settings.show_accessibility_labels
            }
        )

    def apply(self, action: Action) -> Snapshot:
        """Execute one action and return the resulting snapshot.

        Raises:
            ScreenNotFoundError: If a screen action targets an unknown screen

        """
        log.debug("Applying action %s", action)
        match action.kind:
            case "run-all":
                self.run_all_tests()
            case "clear":
                self.clear_results()
            case "toggle-touch-targets":
                self.toggle_touch_targets()
            case "toggle-labels":
                self.toggle_accessibility_labels()
            case "labels":
                self.test_accessibility_labels(_require_screen_id(action))
            case "touch-targets":
                self.test_touch_targets(_require_screen_id(action))
            case "dynamic-type":
                self.test_dynamic_type(_require_screen_id(action))
            case "contrast":
                self.test_color_contrast(_require_screen_id(action))
        return self.snapshot()


def _require_screen_id(action: Action) -> str:
    if action.screen_id is None:
        raise ValueError(f"Action '{action.kind}' requires a screen id")
    return action.screen_id
