"""Session-scoped store of the last result per screen."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from a11y_checklist.models.result import TestResult


@dataclass(kw_only=True)
class ResultStore:
    """Mutable mapping from screen id to its most recent result.

    Lives only as long as the session that owns it; nothing is persisted.
    Display ordering belongs to the presentation layer.
    """

    _results: dict[str, TestResult] = field(default_factory=dict, init=False)

    def record(self, screen_id: str, result: TestResult) -> None:
        """Insert or overwrite the result for a screen."""
        self._results[screen_id] = result

    def get(self, screen_id: str) -> TestResult | None:
        return self._results.get(screen_id)

    def clear(self) -> None:
        """Remove every result. Clearing an empty store is a no-op."""
        self._results.clear()

    def as_mapping(self) -> Mapping[str, TestResult]:
        """Return a copy of the current contents."""
        return dict(self._results)

    def __len__(self) -> int:
        return len(self._results)
