"""Settings for the toolkit commands.

Resolution order (highest first):
- Environment variables (SAFEINPUT_OUTPUT_DIR, SAFEINPUT_START_DIR)
- Project settings file (.safeinput/settings.yaml in the working directory)
- Built-in defaults
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = Path(".safeinput") / "settings.yaml"

ENV_OVERRIDES = {
    "output_dir": "SAFEINPUT_OUTPUT_DIR",
    "start_dir": "SAFEINPUT_START_DIR",
}


class SettingsError(Exception):
    """Raised when settings are present but cannot be used."""


class ToolkitSettings(BaseModel):
    """Settings shared by the datasaver and file inspection commands."""

    output_dir: Path = Field(default=Path("src"), description="Directory datasaver writes CSV files into")
    start_dir: Path = Field(default=Path("src"), description="Initial directory of the file selection dialog")


def _read_settings(path: Path) -> dict[str, Any]:
    """Read settings from a YAML file.

    Returns an empty dict when the file is missing, empty or unreadable.
    """
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read settings from {path}: {e}")
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings in {path}: expected a mapping, got {type(data).__name__}")
        return {}
    return data


def load_settings(settings_file: Path | None = None) -> ToolkitSettings:
    """Load settings from YAML and apply environment overrides.

    Args:
        settings_file: Settings file to read (for testing).
                       If None, uses .safeinput/settings.yaml in the current directory.

    Raises:
        SettingsError: If the merged values fail validation
    """
    path = settings_file if settings_file is not None else DEFAULT_SETTINGS_FILE
    values = _read_settings(path)

    for field_name, env_var in ENV_OVERRIDES.items():
        override = os.environ.get(env_var)
        if override:
            values[field_name] = override

    try:
        return ToolkitSettings.model_validate(values)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {path}: {e}") from e
