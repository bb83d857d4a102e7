"""Configuration management for RepoX."""

import os
from pathlib import Path
from typing import Any

import yaml

from repox.models.app_config import AppConfig
from repox.models.install import ActivationFailurePolicy
from repox.models.options import TenantScope


class AppConfigManager:
    """Manages application configuration with YAML file and environment variable support."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_path: Path to config file. If None, uses REPOX_CONFIG_PATH
                        environment variable or defaults to ~/.config/repox/config.yaml
        """
        if config_path is None:
            env_path = os.getenv("REPOX_CONFIG_PATH")
            if env_path:
                config_path = Path(env_path).expanduser()
            else:
                config_path = Path.home() / ".config" / "repox" / "config.yaml"

        self.config_path = config_path
        self._config: AppConfig | None = None

    def load(self) -> AppConfig:
        """Load configuration from file and apply environment variable overrides.

        Returns:
            Loaded configuration
        """
        config_data: dict[str, Any] = {}

        # The logger depends on this config, so loading reports through print
        print(f"[CONFIG] Loading config from: {self.config_path}")

        # 1. Load from YAML file if it exists
        if self.config_path.exists():
            with open(self.config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

        # 2. Create config object (applies defaults)
        config = AppConfig(**config_data)

        # 3. Apply environment variable overrides
        config = self._apply_env_overrides(config)

        return config

    def _apply_env_overrides(self, config: AppConfig) -> AppConfig:
        """Apply environment variable overrides.

        Environment variables use the format: REPOX_<SECTION>_<KEY>
        Examples:
            - REPOX_SERVER_PORT=9000
            - REPOX_TENANCY_SCOPE=network

        Args:
            config: Base configuration

        Returns:
            Configuration with environment overrides applied
        """
        # Server overrides
        if port := os.getenv("REPOX_SERVER_PORT"):
            config.server.port = int(port)
        if host := os.getenv("REPOX_SERVER_HOST"):
            config.server.host = host
        if trusted := os.getenv("REPOX_SERVER_TRUSTED_IDENTITY_HEADERS"):
            config.server.trusted_identity_headers = trusted.lower() in ("true", "1", "yes")

        # Tenancy overrides
        if scope := os.getenv("REPOX_TENANCY_SCOPE"):
            if scope in (s.value for s in TenantScope):
                config.tenancy.scope = TenantScope(scope)

        # Path overrides
        if data_dir := os.getenv("REPOX_DATA_DIR"):
            config.paths.data_dir = Path(data_dir).expanduser()
            config.paths.options_file = None
            config.paths.logs_dir = None
            # Recalculate dependent paths
            config.paths.model_post_init(None)

        # Repository overrides
        if timeout := os.getenv("REPOX_REPOSITORY_REQUEST_TIMEOUT"):
            try:
                config.repository.request_timeout = float(timeout)
            except ValueError:
                pass  # Keep default if invalid

        # Install overrides
        if policy := os.getenv("REPOX_INSTALL_ACTIVATION_FAILURE"):
            if policy in (p.value for p in ActivationFailurePolicy):
                config.install.activation_failure = ActivationFailurePolicy(policy)
        if wp_cli := os.getenv("REPOX_INSTALL_WP_CLI_PATH"):
            config.install.wp_cli_path = wp_cli
        if wp_path := os.getenv("REPOX_INSTALL_WP_PATH"):
            config.install.wp_path = Path(wp_path).expanduser()

        # Advanced overrides
        if log_level := os.getenv("REPOX_ADVANCED_LOG_LEVEL"):
            if log_level in ("WARNING", "INFO", "DEBUG"):
                config.advanced.log_level = log_level  # type: ignore

        return config

    def get_config(self) -> AppConfig:
        """Get configuration, loading it on first use.

        Returns:
            Current configuration
        """
        if self._config is None:
            self._config = self.load()
        return self._config


# Process-wide configuration manager, read once at startup
_config_manager = AppConfigManager()


def get_config() -> AppConfig:
    """Get global application configuration.

    Returns:
        Application configuration
    """
    return _config_manager.get_config()
