"""Scaffold a project from a resolved choice."""

from __future__ import annotations

import logging
from pathlib import Path

from appseed.config.schema import AppseedConfig
from appseed.content import prune_test_config, rewrite_documents
from appseed.git import Identity, init_repository, resolve_identity
from appseed.manifest import process_manifest
from appseed.prompts import ResolvedChoice
from appseed.templates import is_headless, materialize, prepare_target_dir, resolve_root

logger = logging.getLogger(__name__)

# Written into docs when no identity is looked up
PLACEHOLDER_IDENTITY = Identity(name="UserName", email="name@github.com")


def scaffold(
    choice: ResolvedChoice,
    cwd: Path,
    config: AppseedConfig,
    templates_root: Path | None = None,
) -> Path:
    """Materialize the project and post-process its files.

    Steps run strictly in order and any OSError aborts the run, leaving
    whatever was already written in place.

    Returns the project root.
    """
    root = resolve_root(cwd, choice.target_dir)
    prepare_target_dir(root, choice.overwrite)

    materialize(choice.template, root, templates_root)

    identity = resolve_identity(config) if choice.need_publish else PLACEHOLDER_IDENTITY
    logger.debug("Using identity %s <%s>", identity.name, identity.email)

    process_manifest(root, choice, identity)

    if is_headless(choice.template):
        rewrite_documents(root, choice, identity)
        if not choice.need_test:
            prune_test_config(root)

    if config.git_init:
        init_repository(root)

    return root
