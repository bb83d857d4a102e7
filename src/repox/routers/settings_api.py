"""Repository settings API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from repox.core.options_store import OptionsStore
from repox.exceptions import PermissionDeniedError
from repox.logger import get_logger
from repox.models.api.settings import SettingsResponse, SettingsUpdateRequest
from repox.models.context import RequestContext
from repox.services.access import AccessPolicy

from .dependencies import get_access_policy, get_options_store, get_request_context

logger = get_logger(__name__)

router = APIRouter(prefix="/api/repox/settings", tags=["settings"])


def _require_settings_access(ctx: RequestContext, policy: AccessPolicy) -> None:
    if not policy.can_manage_settings(ctx.actor, ctx.scope):
        error = PermissionDeniedError("repox.settings.permission_denied")
        raise HTTPException(status_code=error.status_code, detail=str(error))


@router.get("", response_model=SettingsResponse)
async def get_settings(
    ctx: RequestContext = Depends(get_request_context),
    policy: AccessPolicy = Depends(get_access_policy),
    options_store: OptionsStore = Depends(get_options_store),
) -> SettingsResponse:
    """Get the repository settings of the current scope.

    Returns:
        Stored settings without the secret
    """
    _require_settings_access(ctx, policy)
    return SettingsResponse.from_options(ctx.scope, options_store.load(ctx.scope))


@router.put("", response_model=SettingsResponse)
async def update_settings(
    body: SettingsUpdateRequest,
    ctx: RequestContext = Depends(get_request_context),
    policy: AccessPolicy = Depends(get_access_policy),
    options_store: OptionsStore = Depends(get_options_store),
) -> SettingsResponse:
    """Sanitize and save the repository settings of the current scope.

    Args:
        body: Settings form input. Omitting auth_password keeps the stored secret.

    Returns:
        Settings as stored

    Raises:
        HTTPException: If the actor may not manage settings or the save fails
    """
    _require_settings_access(ctx, policy)

    raw = body.model_dump()
    if body.auth_password is None:
        raw["auth_password"] = options_store.load(ctx.scope).auth_password

    try:
        options = options_store.save(ctx.scope, raw)
    except OSError as e:
        logger.error(f"Failed to save repository settings: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to save settings: {str(e)}") from e

    logger.info("Repository settings updated", actor=ctx.actor.id, scope=ctx.scope.value)
    return SettingsResponse.from_options(ctx.scope, options)
