"""Author identity resolution for generated manifests."""

from __future__ import annotations

import getpass
import os
from dataclasses import dataclass

from appseed.config.schema import AppseedConfig
from appseed.git.operations import get_git_config


@dataclass(frozen=True)
class Identity:
    """Author name and email written into the manifest and docs."""

    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        """Convert to the ``author`` object shape used by package.json."""
        return {"name": self.name, "email": self.email}


def _host_user() -> str:
    """Return the login name of the current user, or "" if the host has none."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def resolve_identity(config: AppseedConfig | None = None) -> Identity:
    """Resolve the author identity.

    Precedence (highest to lowest):
    1. APPSEED_AUTHOR_NAME / APPSEED_AUTHOR_EMAIL env vars
    2. Config values (author_name / author_email)
    3. ``git config user.name`` / ``git config user.email``
    4. The host account name and an empty email
    """
    name = os.environ.get("APPSEED_AUTHOR_NAME")
    email = os.environ.get("APPSEED_AUTHOR_EMAIL")

    if config is not None:
        name = name or config.author_name
        email = email or config.author_email

    name = name or get_git_config("user.name") or _host_user()
    email = email or get_git_config("user.email") or ""

    return Identity(name=name, email=email)
