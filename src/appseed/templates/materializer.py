"""Copy a template tree into the target project directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from appseed.templates.loader import get_config_template_dir, get_template_dir

logger = logging.getLogger(__name__)

# Files that can't be stored under their real name inside the package
RENAME_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
    "_lintstagedrc.cjs": ".lintstagedrc.cjs",
}

# Template ids containing this marker have no UI layer
HEADLESS_MARKER = "node"
STYLE_LINT_MARKER = "stylelint"

# Kept when an existing target directory is emptied
PRESERVED_ENTRIES = frozenset({".git"})


def is_headless(template: str) -> bool:
    """Check if a template id denotes a non-UI project."""
    return HEADLESS_MARKER in template


def format_target_dir(target_dir: str | None) -> str:
    """Trim whitespace and trailing slashes from a target dir argument."""
    if not target_dir:
        return ""
    return target_dir.strip().rstrip("/")


def is_empty_dir(path: Path) -> bool:
    """Check if a directory has no entries besides a ``.git`` folder."""
    entries = [p.name for p in path.iterdir()]
    return not entries or entries == [".git"]


def resolve_root(cwd: Path, target_dir: str) -> Path:
    """Resolve the directory the project is written to.

    A scoped target such as ``@scope/name`` is written to ``<cwd>/name``.
    """
    if target_dir.startswith("@") and "/" in target_dir:
        target_dir = target_dir.split("/", 1)[1]
    return cwd / target_dir


def empty_dir(path: Path) -> None:
    """Remove everything inside ``path`` except preserved entries."""
    for entry in path.iterdir():
        if entry.name in PRESERVED_ENTRIES:
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def prepare_target_dir(root: Path, overwrite: bool) -> None:
    """Make ``root`` ready to receive template files.

    If the user confirmed overwriting, existing contents are cleared.
    Otherwise the directory (and its parents) is created if missing.
    """
    if overwrite and root.exists():
        logger.debug("Emptying %s", root)
        empty_dir(root)
    else:
        root.mkdir(parents=True, exist_ok=True)


def destination_name(name: str) -> str:
    """Map a stored template file name to its real name."""
    return RENAME_FILES.get(name, name)


def copy_entry(src: Path, dest: Path) -> None:
    """Copy a file or directory, renaming entries at every level."""
    if src.is_dir():
        dest.mkdir(parents=True, exist_ok=True)
        for child in sorted(src.iterdir()):
            copy_entry(child, dest / destination_name(child.name))
    else:
        shutil.copyfile(src, dest)


def materialize(
    template: str,
    root: Path,
    templates_root: Path | None = None,
) -> list[Path]:
    """Copy the template and the shared config directory into ``root``.

    The template's own entries are copied first, then the config entries.
    For headless templates, style-lint config files are skipped.

    Returns the top-level destination paths that were written.
    """
    source_dirs = [
        get_template_dir(template, templates_root),
        get_config_template_dir(templates_root),
    ]
    headless = is_headless(template)

    written: list[Path] = []
    for source_dir in source_dirs:
        for entry in sorted(source_dir.iterdir()):
            if headless and STYLE_LINT_MARKER in entry.name:
                logger.debug("Skipping %s for headless template", entry.name)
                continue
            dest = root / destination_name(entry.name)
            copy_entry(entry, dest)
            written.append(dest)

    logger.debug("Copied %d entries into %s", len(written), root)
    return written
