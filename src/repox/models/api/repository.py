"""API models for repository search and install operations."""

from pydantic import BaseModel

from repox.models.options import TenantScope


class SearchRequest(BaseModel):
    """Search the repository for plugins or themes."""

    search: str = ""


class InstallItemRequest(BaseModel):
    """Install one item. Values are validated by the orchestrator, not here."""

    type: str = ""
    slug: str = ""


class InstallResponseData(BaseModel):
    """Payload of an install response."""

    message: str


class InstallResponse(BaseModel):
    """Install result in the shape the admin front-end expects."""

    success: bool
    data: InstallResponseData


class RepositoryStatusResponse(BaseModel):
    """Whether the repository can be used in the current scope."""

    configured: bool
    scope: TenantScope
    message: str | None = None
