"""RepoX - install plugins and themes from an external package repository."""

__version__ = "1.0.0"
