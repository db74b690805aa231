"""Git commands used while scaffolding."""

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def is_git_available() -> bool:
    """Check if the git CLI is available in PATH."""
    return shutil.which("git") is not None


def get_git_config(key: str) -> str | None:
    """Read a value with ``git config --get``.

    Returns None when git is missing, the key is unset or the value is blank.
    """
    if not is_git_available():
        return None
    result = subprocess.run(
        ["git", "config", "--get", key],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        return None
    value = result.stdout.strip()
    return value or None


def init_repository(path: Path) -> bool:
    """Run ``git init`` inside ``path``.

    Returns True on success, False when git is missing or the command fails.
    """
    if not is_git_available():
        logger.info("git not found, skipping repository initialization")
        return False
    result = subprocess.run(
        ["git", "init"],
        cwd=path,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        logger.warning("git init failed in %s: %s", path, result.stderr.strip())
        return False
    logger.debug(result.stdout.strip())
    return True
