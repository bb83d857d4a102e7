"""Repository options and authentication models."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class TenantScope(str, Enum):
    """Deployment mode that selects the options record and the capability set."""

    SINGLE_SITE = "single_site"
    NETWORK = "network"

    @property
    def record_key(self) -> str:
        """Key of the options record persisted for this scope."""
        return "network" if self is TenantScope.NETWORK else "site"


class AuthMethod(str, Enum):
    """Authentication scheme configured for the repository."""

    NONE = "none"
    BASIC = "basic"
    TOKEN = "token"


class NoAuth(BaseModel):
    """Requests are sent without credentials."""

    model_config = ConfigDict(frozen=True)

    scheme: Literal["none"] = "none"


class BasicAuth(BaseModel):
    """HTTP basic authentication."""

    model_config = ConfigDict(frozen=True)

    scheme: Literal["basic"] = "basic"
    username: str
    secret: str


class TokenAuth(BaseModel):
    """Bearer token authentication. Tokens have no username."""

    model_config = ConfigDict(frozen=True)

    scheme: Literal["token"] = "token"
    secret: str


RepositoryCredentials = NoAuth | BasicAuth | TokenAuth


class RepositoryOptions(BaseModel):
    """Repository settings stored per tenant scope."""

    repo_url: str = ""
    auth_method: AuthMethod = AuthMethod.NONE
    auth_username: str = ""
    auth_password: str = ""  # Password for basic auth, token for token auth

    @property
    def is_configured(self) -> bool:
        """Whether a repository URL has been set."""
        return bool(self.repo_url)

    @property
    def credentials(self) -> RepositoryCredentials:
        """Credentials variant derived from the configured auth method."""
        if self.auth_method is AuthMethod.BASIC:
            return BasicAuth(username=self.auth_username, secret=self.auth_password)
        if self.auth_method is AuthMethod.TOKEN:
            return TokenAuth(secret=self.auth_password)
        return NoAuth()
