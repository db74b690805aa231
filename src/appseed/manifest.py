"""Package manifest (package.json) transformation passes.

Each pass mutates the parsed manifest in place and is idempotent: removing
a field that is already gone is a no-op. ``transform_manifest`` composes the
passes in a fixed order based on the resolved choices.
"""

from __future__ import annotations

import json
import logging
import re
import shutil
from pathlib import Path
from typing import Any

from appseed.git.identity import Identity
from appseed.prompts import ResolvedChoice

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"

# Removed when the package won't be published
PUBLISH_FIELDS: tuple[str, ...] = ("author", "publishConfig", "repository")
PUBLISH_SCRIPTS: tuple[str, ...] = ("prepublish", "prepublishOnly")
PUBLISH_DEV_DEPENDENCIES: tuple[str, ...] = ("np",)

# Removed when the project has no tests
TEST_SCRIPT = "test"
TEST_RUNNER_MARKER = "jest"
TEST_PATHS: tuple[str, ...] = ("jest.config.js", "test")

# Alphanumeric runs; underscores and punctuation separate words
TOKEN_PATTERN = re.compile(r"[^\W_]+")

# Repository owner when the author name has no usable characters
DEFAULT_OWNER = "UserName"

Manifest = dict[str, Any]


class ManifestError(Exception):
    """Raised when the template manifest is missing or not a JSON object."""


def load_manifest(path: Path) -> Manifest:
    """Parse a package.json file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"Expected a JSON object in {path}")
    return data


def write_manifest(manifest: Manifest, path: Path) -> None:
    """Write the manifest as 2-space indented JSON with a trailing newline."""
    path.write_text(
        json.dumps(manifest, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )


def _is_word_boundary(prev: str, char: str, following: str) -> bool:
    """Check if a new word starts at ``char`` inside an alphanumeric run."""
    if prev.isdigit() != char.isdigit():
        return True
    if prev.islower() and char.isupper():
        return True
    # "XMLHttp": the last capital of an acronym starts the next word
    return prev.isupper() and char.isupper() and following.islower()


def split_words(value: str) -> list[str]:
    """Split ``value`` into words on separators and case changes.

    Letters are matched by Unicode category, so accented names stay whole.
    """
    words: list[str] = []
    for token in TOKEN_PATTERN.findall(value):
        start = 0
        for i in range(1, len(token)):
            following = token[i + 1] if i + 1 < len(token) else ""
            if _is_word_boundary(token[i - 1], token[i], following):
                words.append(token[start:i])
                start = i
        words.append(token[start:])
    return words


def camel_case(value: str) -> str:
    """Convert ``"Jane Doe"`` or ``"jane-doe"`` to ``"janeDoe"``."""
    words = split_words(value)
    if not words:
        return ""
    head, *tail = (w.lower() for w in words)
    return head + "".join(w.capitalize() for w in tail)


def strip_scope(package_name: str) -> str:
    """Return the package name without an ``@scope/`` prefix."""
    return package_name[package_name.find("/") + 1 :]


def repository_url(package_name: str, identity: Identity) -> str:
    """Build the GitHub repository URL for a package.

    The owner is the scope of a scoped package, otherwise the camel-cased
    author name, or ``UserName`` when that is empty.
    """
    if package_name.startswith("@"):
        owner = package_name.split("/")[0][1:]
    else:
        owner = camel_case(identity.name) or DEFAULT_OWNER
    return f"git+https://github.com/{owner}/{strip_scope(package_name)}.git"


def _section(manifest: Manifest, key: str) -> dict[str, Any]:
    """Return a nested object from the manifest, or an empty dict."""
    value = manifest.get(key)
    return value if isinstance(value, dict) else {}


def set_package_name(manifest: Manifest, package_name: str) -> None:
    """Always applied: set the manifest name."""
    manifest["name"] = package_name


def apply_publish_metadata(
    manifest: Manifest, package_name: str, identity: Identity
) -> None:
    """Applied when publishing: fill in author and repository."""
    author = manifest.get("author")
    if isinstance(author, dict):
        author.update(identity.to_dict())
    else:
        manifest["author"] = identity.to_dict()

    repository = manifest.get("repository")
    if not isinstance(repository, dict):
        repository = {"type": "git"}
        manifest["repository"] = repository
    repository["url"] = repository_url(package_name, identity)


def strip_publish_fields(manifest: Manifest) -> None:
    """Applied when not publishing: drop publish metadata and tooling."""
    for field in PUBLISH_FIELDS:
        manifest.pop(field, None)
    scripts = _section(manifest, "scripts")
    for script in PUBLISH_SCRIPTS:
        scripts.pop(script, None)
    dev_dependencies = _section(manifest, "devDependencies")
    for dep in PUBLISH_DEV_DEPENDENCIES:
        dev_dependencies.pop(dep, None)


def strip_test_fields(manifest: Manifest) -> None:
    """Applied when tests are declined: drop the test script and runner deps."""
    _section(manifest, "scripts").pop(TEST_SCRIPT, None)
    dev_dependencies = _section(manifest, "devDependencies")
    for dep in [d for d in dev_dependencies if TEST_RUNNER_MARKER in d]:
        del dev_dependencies[dep]


def remove_test_files(root: Path) -> list[Path]:
    """Delete the test runner config and the ``test`` directory under ``root``.

    Returns the paths that were removed.
    """
    removed: list[Path] = []
    for name in TEST_PATHS:
        path = root / name
        if path.is_dir():
            shutil.rmtree(path)
        elif path.exists():
            path.unlink()
        else:
            continue
        removed.append(path)
    return removed


def transform_manifest(
    manifest: Manifest, choice: ResolvedChoice, identity: Identity
) -> Manifest:
    """Run the manifest passes in order and return the same dict."""
    set_package_name(manifest, choice.package_name)
    if choice.need_publish:
        apply_publish_metadata(manifest, choice.package_name, identity)
    else:
        strip_publish_fields(manifest)
    if not choice.need_test:
        strip_test_fields(manifest)
    return manifest


def process_manifest(root: Path, choice: ResolvedChoice, identity: Identity) -> Path:
    """Load, transform and rewrite the materialized manifest.

    Test files are deleted from ``root`` when tests are declined.
    Returns the manifest path.
    """
    path = root / MANIFEST_FILENAME
    if not path.exists():
        raise ManifestError(f"No {MANIFEST_FILENAME} in {root}")
    manifest = transform_manifest(load_manifest(path), choice, identity)
    if not choice.need_test:
        for removed in remove_test_files(root):
            logger.debug("Removed %s", removed)
    write_manifest(manifest, path)
    return path
