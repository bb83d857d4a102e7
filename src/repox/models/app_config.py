"""Configuration data models for RepoX."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from repox.models.install import ActivationFailurePolicy
from repox.models.options import TenantScope


class ServerConfig(BaseModel):
    """Server configuration."""

    port: int = 8000
    host: str = "127.0.0.1"
    # Only enable behind a proxy that authenticates users and sets the identity headers
    trusted_identity_headers: bool = False


class TenancyConfig(BaseModel):
    """Tenancy configuration. The scope is fixed for the lifetime of the process."""

    scope: TenantScope = TenantScope.SINGLE_SITE


class PathsConfig(BaseModel):
    """Paths configuration."""

    data_dir: Path = Field(default_factory=lambda: Path.home() / ".repox")
    options_file: Path | None = None
    logs_dir: Path | None = None

    @field_validator("data_dir", mode="before")
    @classmethod
    def expand_data_dir(cls, v: str | Path) -> Path:
        """Expand user path for data_dir."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    @field_validator("options_file", "logs_dir", mode="before")
    @classmethod
    def expand_optional_path(cls, v: str | Path | None) -> Path | None:
        """Expand user path for optional paths."""
        if v is None:
            return None
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    def model_post_init(self, __context: object) -> None:
        """Set default locations if not specified."""
        if self.options_file is None:
            self.options_file = self.data_dir / "options.yaml"
        if self.logs_dir is None:
            self.logs_dir = self.data_dir / "logs"


class RepositoryClientConfig(BaseModel):
    """Outbound repository request configuration."""

    request_timeout: float = 30.0


class InstallConfig(BaseModel):
    """Package installer configuration."""

    activation_failure: ActivationFailurePolicy = ActivationFailurePolicy.IGNORE
    wp_cli_path: str = "wp"
    wp_path: Path | None = None  # WordPress root passed to WP-CLI as --path
    command_timeout: int = 600  # Seconds before a hung installer command is killed

    @field_validator("wp_path", mode="before")
    @classmethod
    def expand_wp_path(cls, v: str | Path | None) -> Path | None:
        """Expand user path for wp_path."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


class AdvancedConfig(BaseModel):
    """Advanced configuration."""

    log_level: Literal["WARNING", "INFO", "DEBUG"] = "INFO"


class AppConfig(BaseModel):
    """Application configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    tenancy: TenancyConfig = Field(default_factory=TenancyConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    repository: RepositoryClientConfig = Field(default_factory=RepositoryClientConfig)
    install: InstallConfig = Field(default_factory=InstallConfig)
    advanced: AdvancedConfig = Field(default_factory=AdvancedConfig)
