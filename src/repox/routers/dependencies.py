"""Service providers shared by the API routers.

Services are built once from the application config and injected into
endpoints with ``Depends`` so tests can override them.
"""

from functools import lru_cache
from pathlib import Path
from typing import cast

from fastapi import Request

from repox.core.app_config import get_config
from repox.core.options_store import OptionsStore
from repox.models.context import Actor, RequestContext
from repox.services.access import AccessPolicy
from repox.services.install import InstallOrchestrator
from repox.services.installer import PackageInstaller, WpCliInstaller
from repox.services.repository import RepositoryClient, RepositorySearchService


@lru_cache
def get_options_store() -> OptionsStore:
    """Get or initialize the options store (singleton)."""
    config = get_config()
    # PathsConfig.model_post_init always fills options_file
    return OptionsStore(cast(Path, config.paths.options_file))


@lru_cache
def get_access_policy() -> AccessPolicy:
    return AccessPolicy()


@lru_cache
def get_repository_client() -> RepositoryClient:
    """Get or initialize the repository client (singleton)."""
    return RepositoryClient(timeout=get_config().repository.request_timeout)


@lru_cache
def get_installer() -> PackageInstaller:
    """Get or initialize the package installer (singleton)."""
    install_config = get_config().install
    return WpCliInstaller(
        wp_cli_path=install_config.wp_cli_path,
        wp_path=install_config.wp_path,
        timeout=install_config.command_timeout,
    )


@lru_cache
def get_search_service() -> RepositorySearchService:
    return RepositorySearchService(get_options_store(), get_repository_client(), get_access_policy())


@lru_cache
def get_install_orchestrator() -> InstallOrchestrator:
    return InstallOrchestrator(
        get_options_store(),
        get_repository_client(),
        get_access_policy(),
        get_installer(),
        activation_failure=get_config().install.activation_failure,
    )


def get_request_context(request: Request) -> RequestContext:
    """Build the request context from the authenticated actor and the configured scope."""
    actor = getattr(request.state, "actor", None) or Actor()
    return RequestContext(actor=actor, scope=get_config().tenancy.scope)
