"""Capability checks for repository operations."""

from repox.models.context import Actor
from repox.models.options import TenantScope
from repox.models.repository import ItemKind

INSTALL_PLUGINS = "install_plugins"
INSTALL_THEMES = "install_themes"
MANAGE_NETWORK_PLUGINS = "manage_network_plugins"
MANAGE_NETWORK_THEMES = "manage_network_themes"
MANAGE_OPTIONS = "manage_options"
MANAGE_NETWORK_OPTIONS = "manage_network_options"

_INSTALL_CAPABILITIES: dict[tuple[TenantScope, ItemKind], str] = {
    (TenantScope.SINGLE_SITE, ItemKind.PLUGIN): INSTALL_PLUGINS,
    (TenantScope.SINGLE_SITE, ItemKind.THEME): INSTALL_THEMES,
    (TenantScope.NETWORK, ItemKind.PLUGIN): MANAGE_NETWORK_PLUGINS,
    (TenantScope.NETWORK, ItemKind.THEME): MANAGE_NETWORK_THEMES,
}


class AccessPolicy:
    """Pure predicates over (actor capabilities, scope, kind).

    Callers must evaluate the relevant check before acting for an actor and
    stop without side effects when it returns False.
    """

    @staticmethod
    def required_capability(kind: ItemKind, scope: TenantScope) -> str:
        """Capability needed to search or install items of a kind in a scope."""
        return _INSTALL_CAPABILITIES[(scope, kind)]

    def can_search(self, actor: Actor, kind: ItemKind, scope: TenantScope) -> bool:
        return actor.can(self.required_capability(kind, scope))

    def can_install(self, actor: Actor, kind: ItemKind, scope: TenantScope) -> bool:
        return actor.can(self.required_capability(kind, scope))

    def can_manage_settings(self, actor: Actor, scope: TenantScope) -> bool:
        """Whether the actor may read or change the repository settings."""
        required = MANAGE_NETWORK_OPTIONS if scope is TenantScope.NETWORK else MANAGE_OPTIONS
        return actor.can(required)

    def can_network_activate(self, actor: Actor) -> bool:
        return actor.can(MANAGE_NETWORK_PLUGINS)
