"""Package installer that drives WordPress through WP-CLI."""

import asyncio
from pathlib import Path

from repox.logger import get_logger
from repox.models.install import InstallerReport, InstallResult
from repox.models.repository import ItemKind
from repox.utils.subprocess_executor import SubprocessExecutor

from .base import normalize_report

logger = get_logger(__name__)

ERROR_PREFIX = "Error:"
WARNING_PREFIX = "Warning:"


def parse_cli_output(returncode: int, stderr: str) -> InstallerReport:
    """
    Map a WP-CLI run onto the installer report channels.

    ``Error:`` lines become the structured error. ``Warning:`` lines are only
    treated as errors when the command failed.
    """
    errors: list[str] = []
    warnings: list[str] = []
    for raw_line in stderr.splitlines():
        line = raw_line.strip()
        if line.startswith(ERROR_PREFIX):
            errors.append(line[len(ERROR_PREFIX) :].strip())
        elif line.startswith(WARNING_PREFIX):
            warnings.append(line[len(WARNING_PREFIX) :].strip())

    if returncode == 0:
        return InstallerReport(success=True)

    return InstallerReport(
        success=False,
        error=errors[0] if errors else None,
        skin_errors=warnings,
    )


class WpCliInstaller:
    """Installs plugins and themes with ``wp <kind> install <url>``."""

    def __init__(self, wp_cli_path: str = "wp", wp_path: Path | None = None, timeout: float | None = 600) -> None:
        """
        Initialize WP-CLI installer.

        Args:
            wp_cli_path: WP-CLI executable
            wp_path: WordPress root directory, passed as --path
            timeout: Seconds before a command is killed
        """
        self.wp_cli_path = wp_cli_path
        self.wp_path = wp_path
        self.timeout = timeout

    def _command(self, *args: str) -> list[str]:
        command = [self.wp_cli_path, *args]
        if self.wp_path:
            command.append(f"--path={self.wp_path}")
        return command

    async def _run(self, *args: str) -> InstallerReport:
        command = self._command(*args)
        try:
            result = await SubprocessExecutor.run(*command, timeout=self.timeout)
        except asyncio.TimeoutError:
            return InstallerReport(success=False, error=f"WP-CLI timed out after {self.timeout}s")
        except OSError as e:
            return InstallerReport(success=False, error=f"Failed to run WP-CLI: {e}")

        stderr = result.stderr.decode("utf-8", errors="replace") if result.stderr else ""
        return parse_cli_output(result.returncode, stderr)

    async def install(self, kind: ItemKind, download_url: str) -> InstallResult:
        logger.info("Installing package with WP-CLI", kind=kind.value, url=download_url)
        return normalize_report(await self._run(kind.value, "install", download_url))

    async def activate_network(self, kind: ItemKind, slug: str) -> bool:
        logger.info("Network-activating package with WP-CLI", kind=kind.value, slug=slug)
        report = await self._run(kind.value, "activate", slug, "--network")
        if not report.success:
            logger.warning(f"Network activation failed: {report.error}", slug=slug)
        return report.success
