"""API models for repository settings."""

from pydantic import BaseModel

from repox.models.options import AuthMethod, RepositoryOptions, TenantScope


class SettingsUpdateRequest(BaseModel):
    """Raw settings form input; sanitized by the options store."""

    repo_url: str = ""
    auth_method: str = "none"
    auth_username: str = ""
    auth_password: str | None = None  # None keeps the stored secret


class SettingsResponse(BaseModel):
    """Stored settings with the secret withheld."""

    scope: TenantScope
    repo_url: str
    auth_method: AuthMethod
    auth_username: str
    has_password: bool

    @classmethod
    def from_options(cls, scope: TenantScope, options: RepositoryOptions) -> "SettingsResponse":
        return cls(
            scope=scope,
            repo_url=options.repo_url,
            auth_method=options.auth_method,
            auth_username=options.auth_username,
            has_password=bool(options.auth_password),
        )
