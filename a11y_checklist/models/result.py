"""Models for check results."""

from dataclasses import dataclass
from typing import Literal, Self

ResultStatus = Literal["success", "warning", "error"]

RESULT_ICONS: dict[ResultStatus, str] = {
    "success": "checkmark.circle.fill",
    "warning": "exclamationmark.triangle.fill",
    "error": "xmark.circle.fill",
}

RESULT_COLORS: dict[ResultStatus, str] = {
    "success": "green",
    "warning": "orange",
    "error": "red",
}


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Outcome of a check or of an aggregate run for one screen."""

    __test__ = False

    status: ResultStatus
    message: str

    @classmethod
    def success(cls, message: str) -> Self:
        """Create a passing result."""
        return cls(status="success", message=message)

    @classmethod
    def warning(cls, message: str) -> Self:
        """Create a result for an issue that does not block the screen."""
        return cls(status="warning", message=message)

    @classmethod
    def error(cls, message: str) -> Self:
        """Create a failing result."""
        return cls(status="error", message=message)

    @property
    def icon(self) -> str:
        """Symbol name shown next to the result."""
        return RESULT_ICONS[self.status]

    @property
    def color(self) -> str:
        """Color category of the result icon."""
        return RESULT_COLORS[self.status]

    @property
    def passed(self) -> bool:
        """Whether the result is a success."""
        return self.status == "success"
