"""Pure formatting of a session snapshot for display."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from a11y_checklist.models.result import TestResult
from a11y_checklist.models.screen import Screen
from a11y_checklist.session import Snapshot

TITLE = "Accessibility Testing"
RUN_ALL_LABEL = "Run All Tests"
CLEAR_LABEL = "Clear Test Results"
LAST_RESULT_HEADER = "Last Test Result"

STATUS_SYMBOLS = {
    "success": "✓",
    "warning": "⚠",
    "error": "✗",
}


@dataclass(frozen=True, kw_only=True)
class Toggle:
    """A settings panel switch with its accessible label and hint."""

    title: str
    is_on: bool
    accessibility_label: str
    accessibility_hint: str


@dataclass(frozen=True, kw_only=True)
class CheckButton:
    """A check button of the screen detail view."""

    action: str
    title: str
    icon: str
    color: str


CHECK_BUTTONS: Sequence[CheckButton] = (
    CheckButton(
        action="labels",
        title="Test VoiceOver Labels",
        icon="speaker.wave.2.fill",
        color="blue",
    ),
    CheckButton(
        action="touch-targets",
        title="Test Touch Targets",
        icon="hand.tap.fill",
        color="green",
    ),
    CheckButton(
        action="dynamic-type",
        title="Test Dynamic Type",
        icon="textformat.size",
        color="orange",
    ),
    CheckButton(
        action="contrast",
        title="Test Color Contrast",
        icon="circle.righthalf.filled",
        color="purple",
    ),
)


@dataclass(frozen=True, kw_only=True)
class ScreenRow:
    """Entry of the screen list, annotated with the last result if any."""

    screen: Screen
    result: TestResult | None


@dataclass(frozen=True, kw_only=True)
class DetailView:
    """Per-screen view with the check buttons and the last result."""

    screen: Screen
    buttons: Sequence[CheckButton]
    last_result: TestResult | None


def toggles(snapshot: Snapshot) -> Sequence[Toggle]:
    """Build the two switches of the settings panel."""
    return (
        Toggle(
            title="Show Touch Targets",
            is_on=snapshot.settings.show_touch_targets,
            accessibility_label="Show touch targets overlay",
            accessibility_hint="Visualizes 44x44 minimum touch target areas",
        ),
        Toggle(
            title="Show A11y Labels",
            is_on=snapshot.settings.show_accessibility_labels,
            accessibility_label="Show accessibility labels overlay",
            accessibility_hint="Highlights elements with accessibility labels",
        ),
    )


def screen_rows(snapshot: Snapshot) -> Sequence[ScreenRow]:
    """Return one row per screen, in catalog order."""
    return [
        ScreenRow(screen=screen, result=snapshot.results.get(screen.id))
        for screen in snapshot.screens
    ]


def summary(snapshot: Snapshot) -> Sequence[tuple[Screen, TestResult]]:
    """Return (screen, result) pairs sorted by screen id.

    The order is lexicographic on the id, not catalog order. Results for ids
    outside the snapshot's catalog are skipped.
    """
    screens = {screen.id: screen for screen in snapshot.screens}
    return [
        (screens[screen_id], snapshot.results[screen_id])
        for screen_id in sorted(snapshot.results)
        if screen_id in screens
    ]


def detail_view(snapshot: Snapshot, screen: Screen) -> DetailView:
    """Build the detail view of a screen with its last result."""
    return DetailView(
        screen=screen,
        buttons=CHECK_BUTTONS,
        last_result=snapshot.results.get(screen.id),
    )


def _on_off(value: bool) -> str:
    return "on" if value else "off"


def render_text(snapshot: Snapshot) -> Sequence[str]:
    """Render the settings panel, screen list and summary as text lines."""
    lines = [TITLE, "", "Debug Settings"]
    for toggle in toggles(snapshot):
        lines.append(f"  [{_on_off(toggle.is_on)}] {toggle.title}")
    clear_state = "enabled" if snapshot.clear_enabled else "disabled"
    lines.append(f"  {CLEAR_LABEL} ({clear_state})")

    lines += ["", "App Screens"]
    for row in screen_rows(snapshot):
        marker = STATUS_SYMBOLS[row.result.status] if row.result else " "
        lines.append(f"  {marker} {row.screen.display_name}: {row.screen.description}")

    entries = summary(snapshot)
    if entries:
        lines += ["", "Test Results"]
        for screen, result in entries:
            symbol = STATUS_SYMBOLS[result.status]
            lines.append(f"  {symbol} {screen.display_name}: {result.message}")

    return lines


def render_detail(view: DetailView) -> Sequence[str]:
    """Render a screen detail view as text lines."""
    lines = [view.screen.display_name, view.screen.description, ""]
    lines += [f"  ({button.action}) {button.title}" for button in view.buttons]
    if view.last_result is not None:
        symbol = STATUS_SYMBOLS[view.last_result.status]
        lines += ["", f"{symbol} {LAST_RESULT_HEADER}", view.last_result.message]
    return lines


def log_results_summary(log: logging.Logger, snapshot: Snapshot) -> None:
    """Log a formatted summary of the stored results."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for screen, result in summary(snapshot):
        log.info(
            "%s %s: %s",
            STATUS_SYMBOLS.get(result.status, "?"),
            screen.id,
            result.status,
        )
        log.info("  Message: %s", result.message)


def format_output(snapshot: Snapshot) -> dict[str, Any]:
    """Format the snapshot for JSON output."""
    results: list[dict[str, Any]] = [
        {
            "screen": screen.id,
            "status": result.status,
            "message": result.message,
            "icon": result.icon,
            "color": result.color,
        }
        for screen, result in summary(snapshot)
    ]

    return {
        "settings": snapshot.settings.model_dump(),
        "total": len(results),
        "passed": sum(1 for r in results if r["status"] == "success"),
        "warnings": sum(1 for r in results if r["status"] == "warning"),
        "errors": sum(1 for r in results if r["status"] == "error"),
        "results": results,
    }
