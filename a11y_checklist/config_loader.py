"""Load checklist configuration from YAML files."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from a11y_checklist.models.config import ChecklistConfig

log = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


def load_config(path: Path) -> ChecklistConfig:
    """Load and validate a checklist configuration file.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Parsed configuration

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is empty, not valid YAML, or fails validation

    """
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    log.info("Loading config from %s", path)
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ConfigError(f"Empty config file: {path}")

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config schema in {path}: expected a mapping")

    try:
        return ChecklistConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config schema in {path}: {e}") from e
