"""Check actions that record their verdict in the result store."""

import logging
from collections.abc import Callable, Sequence

from a11y_checklist.backends.base import (
    MIN_TOUCH_TARGET,
    MeasurementBackend,
    MeasurementUnavailableError,
)
from a11y_checklist.models.result import TestResult
from a11y_checklist.models.screen import Screen
from a11y_checklist.store import ResultStore

log = logging.getLogger(__name__)

LABELS_OK = "All UI elements have accessibility labels"
LABELS_MISSING = "Some elements missing accessibility labels"
TOUCH_TARGETS_OK = (
    f"All interactive elements meet {MIN_TOUCH_TARGET}x{MIN_TOUCH_TARGET} minimum"
)
TOUCH_TARGETS_SMALL = "Some touch targets may be too small"
DYNAMIC_TYPE_OK = "Screen supports dynamic type scaling"
COLOR_CONTRAST_OK = "Colors meet WCAG AA contrast requirements"
ALL_PASSED = "All tests passed"
ISSUE_MISSING_LABELS = "Missing labels"
ISSUE_TOUCH_TARGETS = "Touch target issues"


def _failed(screen: Screen, exc: Exception) -> TestResult:
    """Turn a backend exception into an error result for the screen."""
    log.error("Measurement failed for %s: %s", screen.id, exc, exc_info=exc)
    if isinstance(exc, MeasurementUnavailableError):
        return TestResult.error(f"Measurement unavailable: {exc}")
    return TestResult.error(f"Check failed: {type(exc).__name__}: {exc}")


def _run_check(
    store: ResultStore,
    screen: Screen,
    check: Callable[[Screen], bool],
    on_pass: TestResult,
    on_fail: TestResult,
) -> TestResult:
    try:
        result = on_pass if check(screen) else on_fail
    except Exception as exc:
        result = _failed(screen, exc)

    store.record(screen.id, result)
    log.info("Check completed: screen=%s status=%s", screen.id, result.status)
    return result


def test_accessibility_labels(
    store: ResultStore, backend: MeasurementBackend, screen: Screen
) -> TestResult:
    """Check labels on a screen; a missing label is an error."""
    return _run_check(
        store,
        screen,
        backend.check_accessibility_labels,
        TestResult.success(LABELS_OK),
        TestResult.error(LABELS_MISSING),
    )


def test_touch_targets(
    store: ResultStore, backend: MeasurementBackend, screen: Screen
) -> TestResult:
    """Check touch targets on a screen; undersized targets are a warning."""
    return _run_check(
        store,
        screen,
        backend.check_touch_targets,
        TestResult.success(TOUCH_TARGETS_OK),
        TestResult.warning(TOUCH_TARGETS_SMALL),
    )


def test_dynamic_type(store: ResultStore, screen: Screen) -> TestResult:
    """Record dynamic type support. No measurement is performed."""
    result = TestResult.success(DYNAMIC_TYPE_OK)
    store.record(screen.id, result)
    return result


def test_color_contrast(store: ResultStore, screen: Screen) -> TestResult:
    """Record contrast compliance. No ratio is computed."""
    result = TestResult.success(COLOR_CONTRAST_OK)
    store.record(screen.id, result)
    return result


def run_all_tests(
    store: ResultStore, backend: MeasurementBackend, screens: Sequence[Screen]
) -> Sequence[tuple[Screen, TestResult]]:
    """Run the label and touch target checks for every screen.

    Each screen gets one combined result: success when both checks pass,
    otherwise a warning listing the issues, labels first.

    Args:
        store: Store receiving one result per screen
        backend: Backend providing the checks
        screens: Screens to check, in the order they are run

    Returns:
        (screen, result) pairs in the order the screens were given

    """
    log.info("Running all tests for %d screen(s)...", len(screens))
    outcomes: list[tuple[Screen, TestResult]] = []

    for screen in screens:
        try:
            has_labels = backend.check_accessibility_labels(screen)
            has_touch_targets = backend.check_touch_targets(screen)
        except Exception as exc:
            result = _failed(screen, exc)
        else:
            if has_labels and has_touch_targets:
                result = TestResult.success(ALL_PASSED)
            else:
                issues: list[str] = []
                if not has_labels:
                    issues.append(ISSUE_MISSING_LABELS)
                if not has_touch_targets:
                    issues.append(ISSUE_TOUCH_TARGETS)
                result = TestResult.warning(", ".join(issues))

        store.record(screen.id, result)
        outcomes.append((screen, result))

    log.info("Test execution completed")
    return outcomes
