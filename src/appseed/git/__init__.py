"""Git integration: identity lookup and repository init."""

from appseed.git.identity import Identity, resolve_identity
from appseed.git.operations import get_git_config, init_repository, is_git_available

__all__ = [
    "Identity",
    "get_git_config",
    "init_repository",
    "is_git_available",
    "resolve_identity",
]
