"""Tests for capability checks."""

import pytest

from repox.models.context import Actor
from repox.models.options import TenantScope
from repox.models.repository import ItemKind
from repox.services.access import AccessPolicy


def actor_with(*capabilities: str) -> Actor:
    return Actor(id="tester", capabilities=frozenset(capabilities))


@pytest.mark.parametrize(
    ("scope", "kind", "capability"),
    [
        (TenantScope.SINGLE_SITE, ItemKind.PLUGIN, "install_plugins"),
        (TenantScope.SINGLE_SITE, ItemKind.THEME, "install_themes"),
        (TenantScope.NETWORK, ItemKind.PLUGIN, "manage_network_plugins"),
        (TenantScope.NETWORK, ItemKind.THEME, "manage_network_themes"),
    ],
)
def test_install_requires_scope_specific_capability(scope: TenantScope, kind: ItemKind, capability: str) -> None:
    policy = AccessPolicy()

    assert policy.can_install(actor_with(capability), kind, scope)
    assert policy.can_search(actor_with(capability), kind, scope)
    assert not policy.can_install(actor_with(), kind, scope)
    assert not policy.can_search(actor_with(), kind, scope)


def test_single_site_capability_does_not_grant_network_install() -> None:
    policy = AccessPolicy()
    actor = actor_with("install_plugins", "install_themes")

    assert not policy.can_install(actor, ItemKind.PLUGIN, TenantScope.NETWORK)
    assert not policy.can_install(actor, ItemKind.THEME, TenantScope.NETWORK)


def test_plugin_capability_does_not_grant_themes() -> None:
    policy = AccessPolicy()

    assert not policy.can_install(actor_with("install_plugins"), ItemKind.THEME, TenantScope.SINGLE_SITE)
    assert not policy.can_install(actor_with("manage_network_plugins"), ItemKind.THEME, TenantScope.NETWORK)


def test_settings_access_by_scope() -> None:
    policy = AccessPolicy()

    assert policy.can_manage_settings(actor_with("manage_options"), TenantScope.SINGLE_SITE)
    assert not policy.can_manage_settings(actor_with("manage_options"), TenantScope.NETWORK)
    assert policy.can_manage_settings(actor_with("manage_network_options"), TenantScope.NETWORK)


def test_anonymous_actor_has_no_capabilities() -> None:
    policy = AccessPolicy()
    anonymous = Actor()

    assert anonymous.id == "anonymous"
    assert not policy.can_network_activate(anonymous)
    assert not policy.can_manage_settings(anonymous, TenantScope.SINGLE_SITE)
