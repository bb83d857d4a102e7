"""HTTP client for the external package repository."""

import base64
from typing import Any, assert_never

import httpx

from repox.exceptions import ConfigurationError, FormatError, TransportError
from repox.logger import get_logger
from repox.models.options import BasicAuth, NoAuth, RepositoryCredentials, RepositoryOptions, TokenAuth
from repox.models.repository import ItemKind

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


def _base_url(options: RepositoryOptions) -> str:
    return options.repo_url.rstrip("/") + "/"


class RepositoryClient:
    """Builds and issues requests against the configured repository.

    Options are passed to every call; the client holds no repository state.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """
        Initialize repository client.

        Args:
            timeout: Request timeout in seconds
            transport: Optional transport override (used by tests)
        """
        self.timeout = timeout
        self._transport = transport

    @staticmethod
    def build_auth_headers(credentials: RepositoryCredentials) -> dict[str, str]:
        """
        Build the Authorization header for a credentials variant.

        Args:
            credentials: Credentials derived from the repository options

        Returns:
            Header mapping, empty when no authentication is configured
        """
        match credentials:
            case NoAuth():
                return {}
            case BasicAuth(username=username, secret=secret):
                encoded = base64.b64encode(f"{username}:{secret}".encode()).decode("ascii")
                return {"Authorization": f"Basic {encoded}"}
            case TokenAuth(secret=secret):
                return {"Authorization": f"Bearer {secret}"}
            case _:
                assert_never(credentials)

    @staticmethod
    def build_search_url(options: RepositoryOptions, kind: ItemKind, query: str = "") -> str:
        """
        Build the search URL, e.g. ``https://repo.test/plugins/search?query=seo``.

        The query parameter is only added for a non-empty query.
        """
        url = f"{_base_url(options)}{kind.plural}/search"
        if query:
            return str(httpx.URL(url, params={"query": query}))
        return url

    @staticmethod
    def resolve_download_url(options: RepositoryOptions, kind: ItemKind, slug: str) -> str | None:
        """
        Compose the download URL for an item.

        Args:
            options: Repository options
            kind: Item kind
            slug: Item identifier

        Returns:
            Download URL, or None when no repository URL is configured
        """
        if not options.repo_url:
            return None
        return f"{_base_url(options)}{kind.plural}/download/{slug}"

    async def search(self, options: RepositoryOptions, kind: ItemKind, query: str = "") -> Any:  # noqa: ANN401
        """
        Search the repository.

        Args:
            options: Repository options
            kind: Item kind to search
            query: Search term, may be empty

        Returns:
            Parsed JSON body exactly as returned by the repository

        Raises:
            ConfigurationError: If no repository URL is configured or it cannot be parsed
            TransportError: On network failure, timeout or a non-2xx status
            FormatError: If the body is not valid JSON
        """
        if not options.is_configured:
            raise ConfigurationError("repox.repository.not_configured")

        try:
            url = self.build_search_url(options, kind, query)
            httpx.URL(url)
        except httpx.InvalidURL as e:
            logger.warning(f"Repository URL is invalid: {e}", repo_url=options.repo_url)
            raise ConfigurationError("repox.repository.invalid_url", error=str(e)) from e

        headers = {"Accept": "application/json", **self.build_auth_headers(options.credentials)}

        logger.info("Searching repository", url=url, kind=kind.value, auth_method=options.auth_method.value)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(url, headers=headers)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning(f"Repository request failed: {e}", url=url)
                raise TransportError("repox.repository.transport_error", error=str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning("Repository returned error status", url=url, status=response.status_code)
            raise TransportError("repox.repository.http_error", status=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Repository returned malformed JSON", url=url)
            raise FormatError("repox.repository.invalid_response") from e
