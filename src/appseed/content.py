"""Rewrite generated docs and compiler config after materialization."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

import json5

from appseed.git.identity import Identity
from appseed.prompts import ResolvedChoice
from appseed.templates.loader import TEMPLATE_PREFIX

logger = logging.getLogger(__name__)

DOCUMENT_FILES: tuple[str, ...] = ("LICENSE", "README.md", "README.zh_CN.md")
PRIMARY_README = "README.md"

USER_NAME_TOKEN = "{{user.name}}"
USER_EMAIL_TOKEN = "{{user.email}}"
BADGES_TOKEN = "{{badges}}"

TSCONFIG_PATTERN = re.compile(r"tsconfig(\.\w+)?\.json")
TSCONFIG_LIST_KEYS: tuple[str, ...] = ("include", "exclude")
TEST_MARKER = "test"


def badges(package_name: str) -> str:
    """Build the npm version, node version and license badges for a package."""
    path_name = package_name.replace("@", "%40")
    license_name = path_name.replace("/", "%2F")
    return " ".join(
        [
            f"![npm](https://img.shields.io/npm/v/{path_name})",
            f"![node-current (scoped)](https://img.shields.io/node/v/{path_name})",
            f"![NPM](https://img.shields.io/npm/l/{license_name})",
        ]
    )


def render_document(
    content: str,
    filename: str,
    template: str,
    package_name: str,
    identity: Identity,
) -> str:
    """Substitute template placeholders in a doc or license file."""
    content = (
        content.replace(f"{TEMPLATE_PREFIX}{template}", package_name)
        .replace(USER_NAME_TOKEN, identity.name)
        .replace(USER_EMAIL_TOKEN, identity.email)
    )
    if filename.startswith("README"):
        content = content.replace(BADGES_TOKEN, badges(package_name))
    return content


def rewrite_documents(root: Path, choice: ResolvedChoice, identity: Identity) -> None:
    """Rewrite or drop the license and READMEs depending on publishing.

    Without publishing, every document is removed and the primary README is
    replaced by a heading with the package name.
    """
    for name in DOCUMENT_FILES:
        path = root / name
        if not path.exists():
            continue

        if not choice.need_publish:
            path.unlink()
            if name == PRIMARY_README:
                path.write_text(f"# {choice.package_name}\n", encoding="utf-8")
            logger.debug("Removed %s", path)
            continue

        content = path.read_text(encoding="utf-8")
        path.write_text(
            render_document(
                content, name, choice.template, choice.package_name, identity
            ),
            encoding="utf-8",
        )


def find_tsconfig_files(root: Path) -> list[Path]:
    """Find tsconfig.json and tsconfig.<qualifier>.json in ``root``."""
    return sorted(
        p for p in root.iterdir() if p.is_file() and TSCONFIG_PATTERN.fullmatch(p.name)
    )


def prune_test_entries(config: dict) -> dict:
    """Drop include/exclude entries mentioning tests."""
    for key in TSCONFIG_LIST_KEYS:
        entries = config.get(key)
        if isinstance(entries, list):
            config[key] = [
                e for e in entries if not (isinstance(e, str) and TEST_MARKER in e)
            ]
    return config


def prune_test_config(root: Path) -> list[Path]:
    """Remove test paths from every tsconfig file in ``root``.

    Files are parsed as JSON5 and written back as strict JSON, so comments
    and trailing commas are not preserved.

    Returns the rewritten files.
    """
    rewritten: list[Path] = []
    for path in find_tsconfig_files(root):
        config = json5.loads(path.read_text(encoding="utf-8"))
        if not isinstance(config, dict):
            logger.warning("Skipping %s: not a JSON object", path)
            continue
        path.write_text(
            json.dumps(prune_test_entries(config), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        rewritten.append(path)
    return rewritten
