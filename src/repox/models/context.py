"""Request context models."""

from pydantic import BaseModel, ConfigDict, Field

from repox.models.options import TenantScope


class Actor(BaseModel):
    """The identity on whose behalf an operation runs."""

    model_config = ConfigDict(frozen=True)

    id: str = "anonymous"
    capabilities: frozenset[str] = Field(default_factory=frozenset)

    def can(self, capability: str) -> bool:
        """Check whether the actor holds a capability."""
        return capability in self.capabilities


class RequestContext(BaseModel):
    """Actor and tenant scope passed explicitly to every public operation."""

    model_config = ConfigDict(frozen=True)

    actor: Actor = Field(default_factory=Actor)
    scope: TenantScope = TenantScope.SINGLE_SITE
