"""Installation models."""

from enum import Enum

from pydantic import BaseModel, Field


class InstallStage(str, Enum):
    """Stages an install request moves through."""

    VALIDATING = "validating"
    AUTHORIZATION_CHECKED = "authorization_checked"
    URL_RESOLVED = "url_resolved"
    INSTALLING = "installing"
    COMPLETED = "completed"


class ActivationFailurePolicy(str, Enum):
    """What a failed network activation does to an otherwise successful install."""

    IGNORE = "ignore"
    FAIL = "fail"


class InstallerReport(BaseModel):
    """Raw result of a package installer run.

    An installer may report failure on any of these channels.
    """

    success: bool = False
    error: str | None = None  # Structured error from the installer itself
    skin_error: str | None = None  # Error captured by the progress reporter
    skin_errors: list[str] = Field(default_factory=list)  # Accumulated error messages


class InstallResult(BaseModel):
    """Normalized installer result with a single error channel."""

    ok: bool
    error: str | None = None


class InstallOutcome(BaseModel):
    """Final result returned to the caller of an install request."""

    success: bool
    message: str

    @classmethod
    def succeeded(cls, message: str) -> "InstallOutcome":
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, reason: str) -> "InstallOutcome":
        return cls(success=False, message=reason)
