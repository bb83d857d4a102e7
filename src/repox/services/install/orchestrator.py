"""Install orchestration: validate, authorize, resolve, install, complete."""

from repox.core.options_store import OptionsStore
from repox.exceptions import (
    AppBaseError,
    ConfigurationError,
    InstallError,
    PermissionDeniedError,
    ValidationError,
)
from repox.logger import get_logger
from repox.models.context import RequestContext
from repox.models.install import ActivationFailurePolicy, InstallOutcome, InstallResult, InstallStage
from repox.models.options import TenantScope
from repox.models.repository import ItemKind
from repox.services.access import AccessPolicy
from repox.services.i18n import get_i18n_service
from repox.services.installer import PackageInstaller
from repox.services.repository import RepositoryClient
from repox.utils.sanitize import sanitize_text_field

logger = get_logger(__name__)


class InstallOrchestrator:
    """Drives one install request from validation to a final outcome.

    Stages run strictly in order and every failure is terminal: a request
    that fails validation or authorization never reaches the repository
    client or the installer. Nothing is retried.
    """

    def __init__(
        self,
        options_store: OptionsStore,
        client: RepositoryClient,
        policy: AccessPolicy,
        installer: PackageInstaller,
        activation_failure: ActivationFailurePolicy = ActivationFailurePolicy.IGNORE,
    ) -> None:
        """
        Initialize install orchestrator.

        Args:
            options_store: Source of the repository options for the request scope
            client: Repository client used to resolve download URLs
            policy: Access policy
            installer: Package installer adapter
            activation_failure: Whether a failed network activation fails the install
        """
        self.options_store = options_store
        self.client = client
        self.policy = policy
        self.installer = installer
        self.activation_failure = activation_failure

    async def install(self, ctx: RequestContext, item_type: str, slug: str) -> InstallOutcome:
        """
        Install a plugin or theme from the repository.

        Args:
            ctx: Actor and tenant scope
            item_type: Raw item type, must be "plugin" or "theme"
            slug: Raw item slug

        Returns:
            Success with a confirmation message, or failure with the reason
        """
        stage = InstallStage.VALIDATING
        try:
            kind, slug = self._validate(item_type, slug)

            self._authorize(ctx, kind)
            stage = self._advance(stage, InstallStage.AUTHORIZATION_CHECKED, kind, slug)

            download_url = self._resolve_download_url(ctx, kind, slug)
            stage = self._advance(stage, InstallStage.URL_RESOLVED, kind, slug)

            stage = self._advance(stage, InstallStage.INSTALLING, kind, slug)
            result = await self._run_installer(kind, download_url)
            if not result.ok:
                raise InstallError("repox.install.installer_error", error=result.error or "")

            await self._complete(ctx, kind, slug)
            stage = self._advance(stage, InstallStage.COMPLETED, kind, slug)
        except AppBaseError as e:
            logger.warning(
                f"Install failed: {e}",
                stage=stage.value,
                actor=ctx.actor.id,
                item_type=item_type,
                slug=slug,
            )
            return InstallOutcome.failed(str(e))

        message = get_i18n_service().translate("repox.install.succeeded", label=kind.label)
        logger.info("Install succeeded", actor=ctx.actor.id, kind=kind.value, slug=slug)
        return InstallOutcome.succeeded(message)

    def _advance(self, current: InstallStage, new: InstallStage, kind: ItemKind, slug: str) -> InstallStage:
        logger.debug(
            "Install stage transition", from_stage=current.value, to_stage=new.value, kind=kind.value, slug=slug
        )
        return new

    def _validate(self, item_type: str, slug: str) -> tuple[ItemKind, str]:
        item_type = sanitize_text_field(item_type)
        slug = sanitize_text_field(slug)

        if item_type not in (ItemKind.PLUGIN.value, ItemKind.THEME.value):
            raise ValidationError("repox.install.invalid_type")
        if not slug:
            raise ValidationError("repox.install.invalid_slug")

        return ItemKind(item_type), slug

    def _authorize(self, ctx: RequestContext, kind: ItemKind) -> None:
        if not self.policy.can_install(ctx.actor, kind, ctx.scope):
            raise PermissionDeniedError("repox.install.permission_denied", kind=kind.value)

    def _resolve_download_url(self, ctx: RequestContext, kind: ItemKind, slug: str) -> str:
        options = self.options_store.load(ctx.scope)
        download_url = self.client.resolve_download_url(options, kind, slug)
        if not download_url:
            raise ConfigurationError("repox.install.no_download_url")
        return download_url

    async def _run_installer(self, kind: ItemKind, download_url: str) -> InstallResult:
        try:
            return await self.installer.install(kind, download_url)
        except Exception as e:
            # Installer faults are reported to the caller as a failed install
            logger.error(f"Package installer raised: {e}", kind=kind.value, url=download_url)
            raise InstallError("repox.install.installer_error", error=str(e) or type(e).__name__) from e

    async def _complete(self, ctx: RequestContext, kind: ItemKind, slug: str) -> None:
        """Network-activate freshly installed plugins when the actor may do so."""
        if ctx.scope is not TenantScope.NETWORK or kind is not ItemKind.PLUGIN:
            return
        if not self.policy.can_network_activate(ctx.actor):
            return

        try:
            activated = await self.installer.activate_network(kind, slug)
        except Exception as e:
            logger.error(f"Network activation raised: {e}", slug=slug)
            activated = False

        if activated:
            return

        logger.warning("Network activation failed", slug=slug, policy=self.activation_failure.value)
        if self.activation_failure is ActivationFailurePolicy.FAIL:
            raise InstallError("repox.install.activation_failed", label=kind.label, slug=slug)
