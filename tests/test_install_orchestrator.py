"""Tests for the install orchestrator."""

from pathlib import Path

import pytest

from repox.core.options_store import OptionsStore
from repox.models.context import Actor, RequestContext
from repox.models.install import ActivationFailurePolicy, InstallResult
from repox.models.options import TenantScope
from repox.models.repository import ItemKind
from repox.services.access import AccessPolicy
from repox.services.install import InstallOrchestrator
from repox.services.repository import RepositoryClient


class SpyInstaller:
    """Records calls and answers with canned results."""

    def __init__(
        self,
        result: InstallResult | None = None,
        activated: bool = True,
        install_exc: Exception | None = None,
        activate_exc: Exception | None = None,
    ) -> None:
        self.result = result or InstallResult(ok=True)
        self.activated = activated
        self.install_exc = install_exc
        self.activate_exc = activate_exc
        self.installs: list[tuple[ItemKind, str]] = []
        self.activations: list[tuple[ItemKind, str]] = []

    async def install(self, kind: ItemKind, download_url: str) -> InstallResult:
        self.installs.append((kind, download_url))
        if self.install_exc:
            raise self.install_exc
        return self.result

    async def activate_network(self, kind: ItemKind, slug: str) -> bool:
        self.activations.append((kind, slug))
        if self.activate_exc:
            raise self.activate_exc
        return self.activated


ALL_CAPABILITIES = frozenset(
    {"install_plugins", "install_themes", "manage_network_plugins", "manage_network_themes"}
)


def make_ctx(
    scope: TenantScope = TenantScope.SINGLE_SITE, capabilities: frozenset[str] = ALL_CAPABILITIES
) -> RequestContext:
    return RequestContext(actor=Actor(id="admin", capabilities=capabilities), scope=scope)


def make_orchestrator(
    tmp_path: Path,
    installer: SpyInstaller,
    repo_url: str = "https://x.test/",
    scope: TenantScope = TenantScope.SINGLE_SITE,
    activation_failure: ActivationFailurePolicy = ActivationFailurePolicy.IGNORE,
) -> InstallOrchestrator:
    store = OptionsStore(tmp_path / "options.yaml")
    store.save(scope, {"repo_url": repo_url})
    return InstallOrchestrator(
        store, RepositoryClient(), AccessPolicy(), installer, activation_failure=activation_failure
    )


@pytest.mark.asyncio
async def test_install_plugin_succeeds(tmp_path: Path) -> None:
    installer = SpyInstaller()
    orchestrator = make_orchestrator(tmp_path, installer)

    outcome = await orchestrator.install(make_ctx(), "plugin", "acme")

    assert outcome.success
    assert outcome.message == "Plugin installed successfully."
    assert installer.installs == [(ItemKind.PLUGIN, "https://x.test/plugins/download/acme")]
    assert installer.activations == []


@pytest.mark.asyncio
async def test_install_theme_succeeds(tmp_path: Path) -> None:
    installer = SpyInstaller()
    orchestrator = make_orchestrator(tmp_path, installer)

    outcome = await orchestrator.install(make_ctx(), "theme", "dark")

    assert outcome.success
    assert outcome.message == "Theme installed successfully."
    assert installer.installs == [(ItemKind.THEME, "https://x.test/themes/download/dark")]


@pytest.mark.asyncio
async def test_missing_repository_url_never_reaches_installer(tmp_path: Path) -> None:
    installer = SpyInstaller()
    orchestrator = make_orchestrator(tmp_path, installer, repo_url="")

    outcome = await orchestrator.install(make_ctx(), "plugin", "acme")

    assert not outcome.success
    assert outcome.message == "Could not determine download URL."
    assert installer.installs == []


@pytest.mark.asyncio
async def test_installer_error_is_reported(tmp_path: Path) -> None:
    installer = SpyInstaller(result=InstallResult(ok=False, error="disk full"))
    orchestrator = make_orchestrator(tmp_path, installer)

    outcome = await orchestrator.install(make_ctx(), "plugin", "acme")

    assert not outcome.success
    assert outcome.message == "disk full"


@pytest.mark.asyncio
async def test_installer_failure_without_message_is_generic(tmp_path: Path) -> None:
    installer = SpyInstaller(result=InstallResult(ok=False))
    orchestrator = make_orchestrator(tmp_path, installer)

    outcome = await orchestrator.install(make_ctx(), "plugin", "acme")

    assert not outcome.success
    assert outcome.message


@pytest.mark.asyncio
async def test_installer_exception_becomes_failed_outcome(tmp_path: Path) -> None:
    installer = SpyInstaller(install_exc=RuntimeError("unzip exploded"))
    orchestrator = make_orchestrator(tmp_path, installer)

    outcome = await orchestrator.install(make_ctx(), "plugin", "acme")

    assert not outcome.success
    assert outcome.message == "unzip exploded"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("item_type", "slug", "message"),
    [
        ("widget", "acme", "Invalid item type."),
        ("", "acme", "Invalid item type."),
        ("Plugin", "acme", "Invalid item type."),
        ("plugin", "", "Invalid item slug."),
        ("plugin", "   ", "Invalid item slug."),
        ("theme", "<b></b>", "Invalid item slug."),
    ],
)
async def test_invalid_input_rejected_before_any_side_effect(
    tmp_path: Path, item_type: str, slug: str, message: str
) -> None:
    installer = SpyInstaller()
    orchestrator = make_orchestrator(tmp_path, installer)

    outcome = await orchestrator.install(make_ctx(), item_type, slug)

    assert not outcome.success
    assert outcome.message == message
    assert installer.installs == []


@pytest.mark.asyncio
async def test_permission_denied_before_any_side_effect(tmp_path: Path) -> None:
    installer = SpyInstaller()
    orchestrator = make_orchestrator(tmp_path, installer)

    outcome = await orchestrator.install(make_ctx(capabilities=frozenset({"install_themes"})), "plugin", "acme")

    assert not outcome.success
    assert outcome.message == "You do not have permission to install plugins."
    assert installer.installs == []


@pytest.mark.asyncio
async def test_slug_is_sanitized_before_url_resolution(tmp_path: Path) -> None:
    installer = SpyInstaller()
    orchestrator = make_orchestrator(tmp_path, installer)

    await orchestrator.install(make_ctx(), " plugin ", "  <i>acme</i> ")

    assert installer.installs == [(ItemKind.PLUGIN, "https://x.test/plugins/download/acme")]


@pytest.mark.asyncio
async def test_network_plugin_install_activates_network_wide(tmp_path: Path) -> None:
    installer = SpyInstaller()
    orchestrator = make_orchestrator(tmp_path, installer, scope=TenantScope.NETWORK)

    outcome = await orchestrator.install(make_ctx(scope=TenantScope.NETWORK), "plugin", "acme")

    assert outcome.success
    assert installer.activations == [(ItemKind.PLUGIN, "acme")]


@pytest.mark.asyncio
async def test_network_theme_install_is_not_activated(tmp_path: Path) -> None:
    installer = SpyInstaller()
    orchestrator = make_orchestrator(tmp_path, installer, scope=TenantScope.NETWORK)

    outcome = await orchestrator.install(make_ctx(scope=TenantScope.NETWORK), "theme", "dark")

    assert outcome.success
    assert installer.activations == []


@pytest.mark.asyncio
async def test_network_scope_reads_network_options(tmp_path: Path) -> None:
    installer = SpyInstaller()
    orchestrator = make_orchestrator(tmp_path, installer, scope=TenantScope.SINGLE_SITE)

    outcome = await orchestrator.install(make_ctx(scope=TenantScope.NETWORK), "plugin", "acme")

    assert not outcome.success
    assert outcome.message == "Could not determine download URL."


@pytest.mark.asyncio
async def test_activation_failure_ignored_by_default(tmp_path: Path) -> None:
    installer = SpyInstaller(activated=False)
    orchestrator = make_orchestrator(tmp_path, installer, scope=TenantScope.NETWORK)

    outcome = await orchestrator.install(make_ctx(scope=TenantScope.NETWORK), "plugin", "acme")

    assert outcome.success
    assert installer.activations == [(ItemKind.PLUGIN, "acme")]


@pytest.mark.asyncio
async def test_activation_failure_fails_install_when_configured(tmp_path: Path) -> None:
    installer = SpyInstaller(activate_exc=RuntimeError("boom"))
    orchestrator = make_orchestrator(
        tmp_path, installer, scope=TenantScope.NETWORK, activation_failure=ActivationFailurePolicy.FAIL
    )

    outcome = await orchestrator.install(make_ctx(scope=TenantScope.NETWORK), "plugin", "acme")

    assert not outcome.success
    assert outcome.message == "Plugin installed, but network activation of acme failed."
