"""Shared fixtures for appseed tests."""

from pathlib import Path
from unittest.mock import patch

import pytest

from appseed.templates import get_package_templates_path


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the user's config files and environment."""
    for var in (
        "APPSEED_AUTHOR_NAME",
        "APPSEED_AUTHOR_EMAIL",
        "APPSEED_TEMPLATES_DIR",
        "npm_config_user_agent",
    ):
        monkeypatch.delenv(var, raising=False)

    config_dir = tmp_path / "_config"
    with (
        patch(
            "appseed.config.loader.get_home_config_path",
            return_value=config_dir / "home" / "config.yaml",
        ),
        patch(
            "appseed.config.loader.get_local_config_path",
            return_value=config_dir / "local" / "config.yaml",
        ),
    ):
        yield


@pytest.fixture
def templates_root() -> Path:
    """The templates bundled with the package."""
    return get_package_templates_path()
