"""Service layer for RepoX."""
