"""Permission-gated repository search."""

from typing import Any

from repox.core.options_store import OptionsStore
from repox.exceptions import AppBaseError, PermissionDeniedError
from repox.logger import get_logger
from repox.models.context import RequestContext
from repox.models.repository import ItemKind
from repox.services.access import AccessPolicy
from repox.utils.sanitize import sanitize_text_field

from .client import RepositoryClient

logger = get_logger(__name__)


class RepositorySearchService:
    """Searches the repository on behalf of an actor."""

    def __init__(self, options_store: OptionsStore, client: RepositoryClient, policy: AccessPolicy) -> None:
        self.options_store = options_store
        self.client = client
        self.policy = policy

    async def search(self, ctx: RequestContext, kind: ItemKind, query: str = "") -> Any:  # noqa: ANN401
        """
        Search plugins or themes.

        Args:
            ctx: Actor and tenant scope
            kind: Item kind to search
            query: Raw search term

        Returns:
            The repository payload as-is, or ``{"error": message}`` on any failure
        """
        try:
            if not self.policy.can_search(ctx.actor, kind, ctx.scope):
                raise PermissionDeniedError("repox.search.permission_denied", kind=kind.value)

            options = self.options_store.load(ctx.scope)
            return await self.client.search(options, kind, sanitize_text_field(query))
        except AppBaseError as e:
            logger.warning(f"Search failed: {e}", actor=ctx.actor.id, kind=kind.value, scope=ctx.scope.value)
            return {"error": str(e)}
