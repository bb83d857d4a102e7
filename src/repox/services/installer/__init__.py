"""Package installer adapters."""

from .base import PackageInstaller, normalize_report
from .wp_cli import WpCliInstaller, parse_cli_output

__all__ = ["PackageInstaller", "WpCliInstaller", "normalize_report", "parse_cli_output"]
