"""Data models for RepoX."""

from repox.models.app_config import AppConfig
from repox.models.context import Actor, RequestContext
from repox.models.install import (
    ActivationFailurePolicy,
    InstallerReport,
    InstallOutcome,
    InstallResult,
    InstallStage,
)
from repox.models.options import (
    AuthMethod,
    BasicAuth,
    NoAuth,
    RepositoryCredentials,
    RepositoryOptions,
    TenantScope,
    TokenAuth,
)
from repox.models.repository import ItemKind, RepositoryItem

__all__ = [
    "ActivationFailurePolicy",
    "Actor",
    "AppConfig",
    "AuthMethod",
    "BasicAuth",
    "InstallOutcome",
    "InstallResult",
    "InstallStage",
    "InstallerReport",
    "ItemKind",
    "NoAuth",
    "RepositoryCredentials",
    "RepositoryItem",
    "RepositoryOptions",
    "RequestContext",
    "TenantScope",
    "TokenAuth",
]
