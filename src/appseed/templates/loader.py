"""Template directory lookup and discovery."""

from __future__ import annotations

from pathlib import Path

# Constants
TEMPLATE_PREFIX = "template-"
CONFIG_TEMPLATE = "config"


class TemplateNotFoundError(Exception):
    """Raised when a template directory does not exist."""

    def __init__(self, template: str, path: Path) -> None:
        super().__init__(f"Template '{template}' not found at {path}")
        self.template = template
        self.path = path


def get_package_templates_path() -> Path:
    """Get path to the templates bundled with the package."""
    return Path(__file__).parent / "default"


def get_template_dir(template: str, templates_root: Path | None = None) -> Path:
    """Return the ``template-<id>`` directory for a template id.

    Raises TemplateNotFoundError if the directory is missing.
    """
    root = templates_root or get_package_templates_path()
    template_dir = root / f"{TEMPLATE_PREFIX}{template}"
    if not template_dir.is_dir():
        raise TemplateNotFoundError(template, template_dir)
    return template_dir


def get_config_template_dir(templates_root: Path | None = None) -> Path:
    """Return the shared ``template-config`` directory."""
    return get_template_dir(CONFIG_TEMPLATE, templates_root)


def discover_template_dirs(base_path: Path) -> dict[str, Path]:
    """Discover template directories within a base path.

    Returns dict mapping template id -> template directory path.
    The shared config directory is not a selectable template and is excluded.
    """
    templates: dict[str, Path] = {}
    if not base_path.exists():
        return templates

    for item in base_path.iterdir():
        if item.is_dir() and item.name.startswith(TEMPLATE_PREFIX):
            template_id = item.name[len(TEMPLATE_PREFIX) :]
            if template_id != CONFIG_TEMPLATE:
                templates[template_id] = item

    return templates
