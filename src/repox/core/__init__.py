"""Core services for RepoX."""

from repox.core.app_config import AppConfigManager, get_config
from repox.core.options_store import OptionsStore

__all__ = [
    "AppConfigManager",
    "OptionsStore",
    "get_config",
]
