"""Access control services."""

from .policy import (
    INSTALL_PLUGINS,
    INSTALL_THEMES,
    MANAGE_NETWORK_OPTIONS,
    MANAGE_NETWORK_PLUGINS,
    MANAGE_NETWORK_THEMES,
    MANAGE_OPTIONS,
    AccessPolicy,
)

__all__ = [
    "AccessPolicy",
    "INSTALL_PLUGINS",
    "INSTALL_THEMES",
    "MANAGE_NETWORK_OPTIONS",
    "MANAGE_NETWORK_PLUGINS",
    "MANAGE_NETWORK_THEMES",
    "MANAGE_OPTIONS",
]
