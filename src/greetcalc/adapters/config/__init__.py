"""Configuration adapter - loading, deployment, display, overrides and settings.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.deploy` - Configuration deployment to target locations
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - Pydantic models for the application sections
"""

from __future__ import annotations

from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import AppSettings, load_app_settings

__all__ = [
    "AppSettings",
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_app_settings",
]
