"""Manage git worktrees linked into a repository through symlinks."""

__version__ = "0.1.0"
__all__ = ["__version__"]