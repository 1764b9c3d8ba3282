"""Tests for TestResult presentation mappings."""

import pytest

from a11y_checklist.models.result import TestResult


def test_constructors_set_status_and_message() -> None:
    """Each constructor produces the matching variant."""
    assert TestResult.success("ok") == TestResult(status="success", message="ok")
    assert TestResult.warning("hmm") == TestResult(status="warning", message="hmm")
    assert TestResult.error("bad") == TestResult(status="error", message="bad")


@pytest.mark.parametrize(
    ("result", "icon", "color"),
    [
        (TestResult.success("x"), "checkmark.circle.fill", "green"),
        (TestResult.warning("x"), "exclamationmark.triangle.fill", "orange"),
        (TestResult.error("x"), "xmark.circle.fill", "red"),
    ],
)
def test_icon_and_color_follow_status(result: TestResult, icon: str, color: str) -> None:
    """Icon and color depend only on the variant."""
    assert result.icon == icon
    assert result.color == color


def test_only_success_passes() -> None:
    """Warnings and errors do not count as passed."""
    assert TestResult.success("x").passed
    assert not TestResult.warning("x").passed
    assert not TestResult.error("x").passed
