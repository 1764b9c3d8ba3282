"""Configuration models for the checklist tool."""

from typing import Any

from pydantic import Field

from a11y_checklist.models.base import Model


class DebugSettings(Model):
    """Display toggles of the settings panel."""

    show_touch_targets: bool = Field(
        default=False, description="Overlay 44x44 minimum touch target areas"
    )
    show_accessibility_labels: bool = Field(
        default=False, description="Highlight elements with accessibility labels"
    )


class ChecklistConfig(Model):
    """Top-level configuration loaded from a YAML file or the command line."""

    backend: str = Field(default="stub", description="Measurement backend key")
    backend_config: dict[str, Any] = Field(
        default_factory=dict, description="Configuration passed to the backend"
    )
    settings: DebugSettings = Field(
        default_factory=DebugSettings, description="Initial display toggles"
    )
