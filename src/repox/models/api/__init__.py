"""API models package."""

from repox.models.api.repository import (
    InstallItemRequest,
    InstallResponse,
    InstallResponseData,
    RepositoryStatusResponse,
    SearchRequest,
)
from repox.models.api.settings import SettingsResponse, SettingsUpdateRequest

__all__ = [
    "InstallItemRequest",
    "InstallResponse",
    "InstallResponseData",
    "RepositoryStatusResponse",
    "SearchRequest",
    "SettingsResponse",
    "SettingsUpdateRequest",
]
