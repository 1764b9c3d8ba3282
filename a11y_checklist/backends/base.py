"""Abstract base class for accessibility measurement backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from a11y_checklist.models.screen import Screen

MIN_TOUCH_TARGET = 44


class MeasurementUnavailableError(Exception):
    """Raised when a backend cannot inspect the rendered screen."""


@dataclass(frozen=True, kw_only=True)
class MeasurementBackend(ABC):
    """Source of the boolean checks run against a screen.

    A backend stands in for the host UI rendering layer. Checks are
    synchronous and must return promptly; a backend that cannot measure a
    screen raises MeasurementUnavailableError instead of returning False.
    """

    @abstractmethod
    def check_accessibility_labels(self, screen: Screen) -> bool:
        """Report whether every interactive element has a non-empty label.

        Args:
            screen: Screen to inspect

        Returns:
            True when no interactive element is missing a label

        Raises:
            MeasurementUnavailableError: If the screen cannot be inspected

        """

    @abstractmethod
    def check_touch_targets(self, screen: Screen) -> bool:
        """Report whether every interactive element meets the minimum hit area.

        The minimum is MIN_TOUCH_TARGET x MIN_TOUCH_TARGET device-independent
        units.

        Args:
            screen: Screen to inspect

        Returns:
            True when every touch target is large enough

        Raises:
            MeasurementUnavailableError: If the screen cannot be inspected

        """
