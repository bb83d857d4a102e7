"""API routers for RepoX."""
