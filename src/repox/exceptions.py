"""Centralized exception hierarchy for RepoX.

Every error carries an i18n key for the user-facing message; ``str(error)``
renders the English text for logging and for outcome payloads.
"""


class AppBaseError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(
        self,
        i18n_key: str,
        status_code: int = 500,
        retriable: bool = False,
        **params: object,
    ) -> None:
        """
        Initialize the error.

        Args:
            i18n_key: Dot-path in i18n.json (e.g., 'repox.install.invalid_slug')
            status_code: Recommended HTTP status code
            retriable: Whether the caller may retry the operation
            **params: Parameters for string formatting in translations
        """
        super().__init__(i18n_key)
        self.i18n_key = i18n_key
        self.status_code = status_code
        self.retriable = retriable
        self.params = params

    def __str__(self) -> str:
        """Returns the English version of the error message for logging."""
        try:
            # Lazy import to avoid circular dependencies
            from repox.services.i18n import get_i18n_service

            i18n = get_i18n_service()

            translated = i18n.translate(self.i18n_key, lang="en", **self.params)
            return str(translated) if translated else self.i18n_key
        except Exception:
            # Fallback if i18n service is not available or fails
            params_str = ", ".join(f"{k}={v}" for k, v in self.params.items())
            return f"[{self.i18n_key}] {params_str} (retriable: {self.retriable})"


class ConfigurationError(AppBaseError):
    """Raised when the repository is missing or misconfigured."""

    def __init__(self, i18n_key: str, **params: object) -> None:
        super().__init__(i18n_key, status_code=409, **params)


class PermissionDeniedError(AppBaseError):
    """Raised when the actor lacks the capability an operation requires."""

    def __init__(self, i18n_key: str, **params: object) -> None:
        super().__init__(i18n_key, status_code=403, **params)


class ValidationError(AppBaseError):
    """Raised when input validation fails."""

    def __init__(self, i18n_key: str, **params: object) -> None:
        super().__init__(i18n_key, status_code=400, **params)


class TransportError(AppBaseError):
    """Raised on network failures, timeouts and non-2xx repository responses."""

    def __init__(self, i18n_key: str, **params: object) -> None:
        super().__init__(i18n_key, status_code=502, retriable=True, **params)


class FormatError(AppBaseError):
    """Raised when the repository answers with a body that is not valid JSON."""

    def __init__(self, i18n_key: str, **params: object) -> None:
        super().__init__(i18n_key, status_code=502, **params)


class InstallError(AppBaseError):
    """Raised when the package installer reports a failure."""

    def __init__(self, i18n_key: str, **params: object) -> None:
        super().__init__(i18n_key, status_code=500, **params)
