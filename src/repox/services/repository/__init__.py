"""Repository services."""

from .client import DEFAULT_TIMEOUT, RepositoryClient
from .search import RepositorySearchService

__all__ = ["DEFAULT_TIMEOUT", "RepositoryClient", "RepositorySearchService"]
