"""Template catalog: frameworks, variants and template ids."""

from appseed.catalog.base import Framework, Variant
from appseed.catalog.node import NODE
from appseed.catalog.react import REACT
from appseed.catalog.vue import VUE

__all__ = [
    "Framework",
    "Variant",
    "FRAMEWORKS",
    "NODE",
    "REACT",
    "VUE",
    "get_framework_by_name",
    "get_framework_for_template",
    "get_template_names",
    "is_known_template",
]

FRAMEWORKS: tuple[Framework, ...] = (
    VUE,
    REACT,
    NODE,
)


def get_template_names() -> list[str]:
    """Flatten the catalog into the list of selectable template ids."""
    names: list[str] = []
    for framework in FRAMEWORKS:
        names.extend(framework.template_names())
    return names


def is_known_template(template: str | None) -> bool:
    """Check if ``template`` is a selectable template id."""
    return bool(template) and template in get_template_names()


def get_framework_by_name(name: str) -> Framework | None:
    """Find a framework by name (case-insensitive)."""
    name_lower = name.lower()
    for framework in FRAMEWORKS:
        if framework.name == name_lower:
            return framework
    return None


def get_framework_for_template(template: str) -> Framework | None:
    """Find the framework that owns a template id."""
    for framework in FRAMEWORKS:
        if framework.owns_template(template):
            return framework
    return None
