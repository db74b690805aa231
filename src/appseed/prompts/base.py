"""Prompt flow data types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from appseed.catalog import Framework, get_framework_for_template


class OperationCancelledError(Exception):
    """Raised when the user declines or interrupts a prompt."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ResolvedChoice:
    """The user's final decisions for one scaffolding run."""

    target_dir: str
    package_name: str
    template: str  # variant name, or framework name when it has no variants
    need_publish: bool = False
    need_test: bool = False
    overwrite: bool = False


@dataclass(frozen=True)
class Answers:
    """Answers accumulated while walking the prompt steps.

    ``arg_*`` fields hold values supplied on the command line; the rest are
    filled in by the steps. None means "not asked (yet)".
    """

    cwd: Path
    target_dir: str
    default_target_dir: str = "my-app"
    arg_target_dir: str | None = None
    arg_template: str | None = None
    overwrite: bool | None = None
    package_name: str | None = None
    framework: Framework | None = None
    variant: str | None = None
    need_publish: bool | None = None
    need_test: bool | None = None

    def update(self, **changes: object) -> Answers:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)  # type: ignore[arg-type]

    @property
    def project_name(self) -> str:
        """The name derived from the target dir (cwd name for ``.``)."""
        if self.target_dir == ".":
            return self.cwd.resolve().name
        return self.target_dir

    @property
    def selected_framework(self) -> Framework | None:
        """The framework picked in the flow or implied by ``--template``."""
        if self.framework is not None:
            return self.framework
        if self.arg_template:
            return get_framework_for_template(self.arg_template)
        return None

    @property
    def template(self) -> str:
        """Template id resolved from the variant, framework or argument."""
        if self.variant:
            return self.variant
        if self.framework is not None:
            return self.framework.name
        return self.arg_template or ""

    def to_choice(self) -> ResolvedChoice:
        """Freeze the answers into a ResolvedChoice."""
        return ResolvedChoice(
            target_dir=self.target_dir,
            package_name=self.package_name or self.project_name,
            template=self.template,
            need_publish=bool(self.need_publish),
            need_test=bool(self.need_test),
            overwrite=bool(self.overwrite),
        )


@dataclass(frozen=True)
class PromptStep:
    """One question in the flow.

    ``applies`` decides from the answers so far whether the step is shown;
    ``ask`` asks the question and returns the updated answers.
    """

    name: str
    applies: Callable[[Answers], bool]
    ask: Callable[[Answers], Answers]
