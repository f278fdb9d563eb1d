"""Click entry points for the toolkit commands."""

import click

from ..settings import SettingsError
from ..settings import ToolkitSettings
from ..settings import load_settings


def load_settings_or_fail() -> ToolkitSettings:
    """Load settings, turning a bad settings file into a clean CLI error."""
    try:
        return load_settings()
    except SettingsError as e:
        raise click.ClickException(str(e)) from e
