"""Configuration schema for appseed."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class AppseedConfig:
    """appseed configuration schema.

    Fields mirror the options of the ``appseed`` command. None values mean
    "not set" and are inherited from a lower layer or the built-in defaults.
    """

    # Prompt defaults
    default_target_dir: str | None = None

    # Template lookup
    templates_dir: str | None = None

    # Post-scaffold behavior
    git_init: bool | None = None
    package_manager: str | None = None

    # Author identity (overrides git config)
    author_name: str | None = None
    author_email: str | None = None

    def merge(self, other: AppseedConfig) -> AppseedConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new AppseedConfig instance.
        """
        merged: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(other, f.name)
            merged[f.name] = value if value is not None else getattr(self, f.name)
        return AppseedConfig(**merged)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppseedConfig:
        """Create an AppseedConfig from a dictionary.

        Unknown keys are ignored. Values are coerced to the field types.
        """
        default_target_dir = data.get("default_target_dir")
        templates_dir = data.get("templates_dir")
        git_init_raw = data.get("git_init")
        git_init = bool(git_init_raw) if git_init_raw is not None else None
        package_manager = data.get("package_manager")
        author_name = data.get("author_name")
        author_email = data.get("author_email")

        return cls(
            default_target_dir=(
                str(default_target_dir) if default_target_dir is not None else None
            ),
            templates_dir=str(templates_dir) if templates_dir is not None else None,
            git_init=git_init,
            package_manager=(
                str(package_manager) if package_manager is not None else None
            ),
            author_name=str(author_name) if author_name is not None else None,
            author_email=str(author_email) if author_email is not None else None,
        )


# Default configuration values (used when not specified anywhere)
DEFAULT_CONFIG = AppseedConfig(
    default_target_dir="my-app",
    git_init=True,
)
