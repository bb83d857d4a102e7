"""Boundary to the host platform's package installer."""

from typing import Protocol

from repox.models.install import InstallerReport, InstallResult
from repox.models.repository import ItemKind
from repox.services.i18n import get_i18n_service


class PackageInstaller(Protocol):
    """Fetches, verifies and installs an artifact from a download URL.

    Implementations own the download, extraction and activation mechanics
    and report through :func:`normalize_report`, so callers see one error channel.
    """

    async def install(self, kind: ItemKind, download_url: str) -> InstallResult: ...

    async def activate_network(self, kind: ItemKind, slug: str) -> bool: ...


def normalize_report(report: InstallerReport) -> InstallResult:
    """
    Collapse an installer report into a single error channel.

    Channels are inspected in priority order: structured error, progress
    reporter error, accumulated error list, then the plain success flag.
    The first non-empty one wins.

    Args:
        report: Raw installer report

    Returns:
        Normalized result
    """
    if report.error:
        return InstallResult(ok=False, error=report.error)
    if report.skin_error:
        return InstallResult(ok=False, error=report.skin_error)
    errors = [e for e in report.skin_errors if e]
    if errors:
        return InstallResult(ok=False, error="; ".join(errors))
    if not report.success:
        return InstallResult(ok=False, error=get_i18n_service().translate("repox.install.failed"))
    return InstallResult(ok=True)
