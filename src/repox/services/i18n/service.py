"""Internationalization service for RepoX."""

import json
from pathlib import Path
from typing import Any

from repox.logger import get_logger

logger = get_logger(__name__)


class I18nService:
    """
    Loads and provides localized strings from i18n.json.

    Messages are addressed by dot-path and hold one string per language:
    {
        "repox": {
            "install": {
                "invalid_slug": { "en": "Invalid item slug.", "zh": "..." }
            }
        }
    }
    """

    def __init__(self, i18n_file: Path) -> None:
        """
        Initialize I18n service.

        Args:
            i18n_file: Path to i18n.json file
        """
        self.i18n_file = i18n_file
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load i18n data from file."""
        try:
            if self.i18n_file.exists():
                with open(self.i18n_file, encoding="utf-8") as f:
                    self._data = json.load(f)
                logger.info(f"Loaded i18n data from {self.i18n_file}")
            else:
                logger.warning(f"I18n file not found: {self.i18n_file}")
                self._data = {}
        except Exception as e:
            logger.error(f"Failed to load i18n file: {e}")
            self._data = {}

    def get_block(self, path: str) -> dict[str, Any]:
        """
        Get the raw dictionary stored under a dot-path.

        Args:
            path: Dot-separated path (e.g., "repox.install")

        Returns:
            The dictionary at that path, or an empty dict
        """
        node: Any = self._data
        for part in path.split("."):
            if not isinstance(node, dict):
                return {}
            node = node.get(part)
        return node if isinstance(node, dict) else {}

    def translate(self, path: str, lang: str = "en", default: str | None = None, **params: object) -> str:
        """
        Translate a message by dot-path, falling back to English.

        Args:
            path: Dot-separated message path
            lang: Language code (e.g., "en", "zh")
            default: Value returned when the path is unknown
            **params: Values substituted into the message template

        Returns:
            Formatted message, the default, or the path itself
        """
        entry = self.get_block(path)
        text = entry.get(lang) or entry.get("en")
        if not isinstance(text, str):
            return default if default is not None else path

        try:
            return text.format(**params)
        except (KeyError, IndexError, ValueError):
            logger.warning(f"Failed to format message {path} with {sorted(params)}")
            return text
