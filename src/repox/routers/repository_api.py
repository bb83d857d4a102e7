"""Repository search and install API endpoints."""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from repox.core.options_store import OptionsStore
from repox.logger import get_logger
from repox.models.api.repository import (
    InstallItemRequest,
    InstallResponse,
    InstallResponseData,
    RepositoryStatusResponse,
    SearchRequest,
)
from repox.models.context import RequestContext
from repox.models.repository import ItemKind, RepositoryItem
from repox.services.i18n import get_i18n_service
from repox.services.install import InstallOrchestrator
from repox.services.repository import RepositorySearchService

from .dependencies import (
    get_install_orchestrator,
    get_options_store,
    get_request_context,
    get_search_service,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/api/repox", tags=["repository"])

# Payload is forwarded verbatim; items usually look like RepositoryItem
SEARCH_RESPONSES: dict[int | str, dict[str, Any]] = {200: {"model": list[RepositoryItem]}}


@router.post("/plugins/search", response_model=None, responses=SEARCH_RESPONSES)
async def search_plugins(
    body: SearchRequest,
    ctx: RequestContext = Depends(get_request_context),
    service: RepositorySearchService = Depends(get_search_service),
) -> JSONResponse:
    """
    Search the repository for plugins.

    Returns:
        The repository payload unchanged, or {"error": message}
    """
    return JSONResponse(await service.search(ctx, ItemKind.PLUGIN, body.search))


@router.post("/themes/search", response_model=None, responses=SEARCH_RESPONSES)
async def search_themes(
    body: SearchRequest,
    ctx: RequestContext = Depends(get_request_context),
    service: RepositorySearchService = Depends(get_search_service),
) -> JSONResponse:
    """
    Search the repository for themes.

    Returns:
        The repository payload unchanged, or {"error": message}
    """
    return JSONResponse(await service.search(ctx, ItemKind.THEME, body.search))


@router.post("/install", response_model=InstallResponse)
async def install_item(
    body: InstallItemRequest,
    ctx: RequestContext = Depends(get_request_context),
    orchestrator: InstallOrchestrator = Depends(get_install_orchestrator),
) -> InstallResponse:
    """
    Install a plugin or theme from the repository.

    Failures are reported in the body with success=false, never as an HTTP error.
    """
    outcome = await orchestrator.install(ctx, body.type, body.slug)
    return InstallResponse(success=outcome.success, data=InstallResponseData(message=outcome.message))


@router.get("/status", response_model=RepositoryStatusResponse)
async def get_repository_status(
    ctx: RequestContext = Depends(get_request_context),
    options_store: OptionsStore = Depends(get_options_store),
) -> RepositoryStatusResponse:
    """Report whether a repository URL is configured for the current scope."""
    options = options_store.load(ctx.scope)
    message = None
    if not options.is_configured:
        message = get_i18n_service().translate("repox.repository.not_configured")
    return RepositoryStatusResponse(configured=options.is_configured, scope=ctx.scope, message=message)
