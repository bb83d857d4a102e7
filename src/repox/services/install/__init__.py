"""Install orchestration services."""

from .orchestrator import InstallOrchestrator

__all__ = ["InstallOrchestrator"]
