"""Repository item models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ItemKind(str, Enum):
    """Kind of artifact served by the repository."""

    PLUGIN = "plugin"
    THEME = "theme"

    @property
    def plural(self) -> str:
        """Path segment used by the repository API (e.g. "plugins")."""
        return f"{self.value}s"

    @property
    def label(self) -> str:
        """Capitalized name for user-facing messages (e.g. "Plugin")."""
        return self.value.capitalize()


class RepositoryItem(BaseModel):
    """A plugin or theme as listed by the remote repository.

    The payload is opaque: every field may be missing and unknown fields are kept.
    """

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    description: str | None = None
    version: str | None = None
    slug: str | None = None
