"""npm package name validation."""

import re

PACKAGE_NAME_PATTERN = re.compile(
    r"^(?:@[a-z\d\-*~][a-z\d\-*._~]*/)?[a-z\d\-~][a-z\d\-._~]*$"
)


def is_valid_package_name(name: str) -> bool:
    """Check if ``name`` is a valid package.json name."""
    return PACKAGE_NAME_PATTERN.match(name) is not None


def to_valid_package_name(name: str) -> str:
    """Sanitize a project name into a package name suggestion."""
    name = re.sub(r"\s+", "-", name.strip().lower())
    name = re.sub(r"^[._]", "", name)
    return re.sub(r"[^a-z\d\-~]+", "-", name)
