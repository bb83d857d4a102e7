"""Persistence of repository options, one record per tenant scope."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from repox.logger import get_logger
from repox.models.options import AuthMethod, RepositoryOptions, TenantScope
from repox.utils.sanitize import sanitize_key, sanitize_text_field, sanitize_url

logger = get_logger(__name__)


class OptionsStore:
    """Reads and writes repository options in a YAML file keyed by scope.

    The file holds a ``site`` record and a ``network`` record. A deployment
    only ever touches the record of its own scope.
    """

    def __init__(self, options_file: Path) -> None:
        """
        Initialize the options store.

        Args:
            options_file: YAML file holding the scoped records
        """
        self.options_file = options_file

    def _read_records(self) -> dict[str, Any]:
        if not self.options_file.exists():
            return {}
        try:
            with open(self.options_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"Ignoring unreadable options file {self.options_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed options file: {self.options_file}")
            return {}
        return data

    def _write_records(self, records: dict[str, Any]) -> None:
        self.options_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.options_file, "w", encoding="utf-8") as f:
            yaml.dump(records, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    def load(self, scope: TenantScope) -> RepositoryOptions:
        """
        Load the options record for a scope.

        Args:
            scope: Tenant scope

        Returns:
            Stored options, or defaults if the record is unset
        """
        record = self._read_records().get(scope.record_key)
        if not isinstance(record, dict):
            return RepositoryOptions()
        # Stored records are re-sanitized so a hand-edited file cannot bypass validation
        return self.sanitize(record)

    def save(self, scope: TenantScope, raw: Mapping[str, Any]) -> RepositoryOptions:
        """
        Sanitize raw settings input and persist it as the record for a scope.

        Args:
            scope: Tenant scope
            raw: Unvalidated settings (repo_url, auth_method, auth_username, auth_password)

        Returns:
            The options as stored
        """
        options = self.sanitize(raw)
        records = self._read_records()
        records[scope.record_key] = options.model_dump(mode="json")
        self._write_records(records)
        logger.info(
            "Saved repository options",
            scope=scope.value,
            configured=options.is_configured,
            auth_method=options.auth_method.value,
        )
        return options

    def ensure_defaults(self, scope: TenantScope) -> bool:
        """
        Write the default record for a scope unless one already exists.

        Returns:
            True if defaults were written
        """
        records = self._read_records()
        if scope.record_key in records:
            return False
        records[scope.record_key] = RepositoryOptions().model_dump(mode="json")
        self._write_records(records)
        logger.info("Initialized default repository options", scope=scope.value)
        return True

    @staticmethod
    def sanitize(raw: Mapping[str, Any]) -> RepositoryOptions:
        """
        Build options from untrusted input. Never raises.

        Invalid URLs are stored empty and unknown auth methods fall back to ``none``.
        """
        method_key = sanitize_key(raw.get("auth_method", AuthMethod.NONE.value))
        try:
            auth_method = AuthMethod(method_key)
        except ValueError:
            auth_method = AuthMethod.NONE

        return RepositoryOptions(
            repo_url=sanitize_url(raw.get("repo_url", "")),
            auth_method=auth_method,
            auth_username=sanitize_text_field(raw.get("auth_username", "")),
            auth_password=sanitize_text_field(raw.get("auth_password", "")),
        )
