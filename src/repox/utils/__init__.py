"""Utilities for RepoX."""

from repox.utils.paths import get_resources_dir
from repox.utils.sanitize import sanitize_key, sanitize_text_field, sanitize_url
from repox.utils.subprocess_executor import SubprocessExecutor

__all__ = ["SubprocessExecutor", "get_resources_dir", "sanitize_key", "sanitize_text_field", "sanitize_url"]
