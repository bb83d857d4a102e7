"""Middleware for RepoX."""

from .identity import TrustedHeaderIdentityMiddleware

__all__ = ["TrustedHeaderIdentityMiddleware"]
