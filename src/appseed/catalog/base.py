"""Base framework and variant definitions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Variant:
    """A selectable flavor of a framework (e.g. web vs. electron)."""

    name: str  # template id, e.g. "electron-vue"
    display: str
    color: str  # rich style used when listing the variant


@dataclass(frozen=True)
class Framework:
    """A top-level template family.

    A framework either owns variants, in which case only the variant names
    are selectable templates, or has none and is selectable by its own name.
    The ``publish`` and ``test`` capability flags enable the matching prompts.
    """

    name: str
    display: str
    color: str
    variants: tuple[Variant, ...] = ()
    publish: bool = False
    test: bool = False

    @property
    def has_variants(self) -> bool:
        """Whether the user must pick a variant after the framework."""
        return bool(self.variants)

    def template_names(self) -> tuple[str, ...]:
        """Return the template ids this framework contributes to the catalog."""
        if self.variants:
            return tuple(variant.name for variant in self.variants)
        return (self.name,)

    def owns_template(self, template: str) -> bool:
        """Check if ``template`` is one of this framework's template ids."""
        return template in self.template_names()
