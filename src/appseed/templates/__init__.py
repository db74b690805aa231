"""Project templates: lookup and materialization."""

from appseed.templates.loader import (
    TemplateNotFoundError,
    discover_template_dirs,
    get_config_template_dir,
    get_package_templates_path,
    get_template_dir,
)
from appseed.templates.materializer import (
    RENAME_FILES,
    format_target_dir,
    is_empty_dir,
    is_headless,
    materialize,
    prepare_target_dir,
    resolve_root,
)

__all__ = [
    "RENAME_FILES",
    "TemplateNotFoundError",
    "discover_template_dirs",
    "format_target_dir",
    "get_config_template_dir",
    "get_package_templates_path",
    "get_template_dir",
    "is_empty_dir",
    "is_headless",
    "materialize",
    "prepare_target_dir",
    "resolve_root",
]
