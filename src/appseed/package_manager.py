"""Detect the invoking package manager and its next-step commands."""

from __future__ import annotations

from dataclasses import dataclass

USER_AGENT_ENV = "npm_config_user_agent"
DEFAULT_PACKAGE_MANAGER = "npm"

# (install, dev) commands per package manager
COMMANDS: dict[str, tuple[str, str]] = {
    "npm": ("npm install", "npm run dev"),
    "pnpm": ("pnpm install", "pnpm dev"),
    "yarn": ("yarn", "yarn dev"),
    "bun": ("bun install", "bun run dev"),
}


@dataclass(frozen=True)
class PackageManagerInfo:
    """Package manager parsed from a user agent string."""

    name: str
    version: str


def pkg_from_user_agent(user_agent: str | None) -> PackageManagerInfo | None:
    """Parse ``"pnpm/8.6.0 npm/? node/v18.16.0 darwin arm64"``."""
    if not user_agent:
        return None
    token = user_agent.split(" ")[0]
    name, _, version = token.partition("/")
    if not name:
        return None
    return PackageManagerInfo(name=name, version=version)


def resolve_package_manager(
    user_agent: str | None, override: str | None = None
) -> str:
    """Pick the package manager used in the success message.

    An explicit override wins; unknown names fall back to npm.
    """
    if override:
        name = override
    else:
        info = pkg_from_user_agent(user_agent)
        name = info.name if info else DEFAULT_PACKAGE_MANAGER
    return name if name in COMMANDS else DEFAULT_PACKAGE_MANAGER


def next_step_commands(package_manager: str) -> tuple[str, str]:
    """Return the install and dev commands for a package manager."""
    return COMMANDS.get(package_manager, COMMANDS[DEFAULT_PACKAGE_MANAGER])
