"""Interactive question flow that resolves a ResolvedChoice."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import click

from appseed.catalog import FRAMEWORKS, is_known_template
from appseed.console import console
from appseed.prompts.base import (
    Answers,
    OperationCancelledError,
    PromptStep,
    ResolvedChoice,
)
from appseed.prompts.validation import is_valid_package_name, to_valid_package_name
from appseed.templates.materializer import format_target_dir, is_empty_dir, resolve_root

logger = logging.getLogger(__name__)


def _select(title: str, options: Sequence[tuple[str, str]]) -> int:
    """Show a numbered list of (label, color) options and return the index."""
    console.print(f"\n[bold]{title}[/bold]")
    for i, (label, color) in enumerate(options, 1):
        console.print(f"  {i}. [{color}]{label}[/{color}]")
    choice: int = click.prompt(
        "Select", type=click.IntRange(1, len(options)), default=1
    )
    return choice - 1


# 1. Project name


def _ask_project_name(answers: Answers) -> Answers:
    value: str = click.prompt("Project name", default=answers.default_target_dir)
    return answers.update(
        target_dir=format_target_dir(value) or answers.default_target_dir
    )


PROJECT_NAME = PromptStep(
    name="project_name",
    applies=lambda a: not a.arg_target_dir,
    ask=_ask_project_name,
)


# 2. Overwrite confirmation


def _needs_overwrite(answers: Answers) -> bool:
    root = resolve_root(answers.cwd, answers.target_dir)
    return root.is_dir() and not is_empty_dir(root)


def _ask_overwrite(answers: Answers) -> Answers:
    if answers.target_dir == ".":
        subject = "Current directory"
    else:
        subject = f'Target directory "{answers.target_dir}"'
    overwrite = click.confirm(
        f"{subject} is not empty. Remove existing files and continue?",
        default=False,
    )
    if not overwrite:
        raise OperationCancelledError()
    return answers.update(overwrite=True)


OVERWRITE = PromptStep(
    name="overwrite",
    applies=_needs_overwrite,
    ask=_ask_overwrite,
)


# 3. Package name


def _parse_package_name(value: str) -> str:
    value = value.strip()
    if not is_valid_package_name(value):
        raise click.BadParameter("Invalid package.json name")
    return value


def _ask_package_name(answers: Answers) -> Answers:
    name: str = click.prompt(
        "Package name",
        default=to_valid_package_name(answers.project_name),
        value_proc=_parse_package_name,
    )
    return answers.update(package_name=name)


PACKAGE_NAME = PromptStep(
    name="package_name",
    applies=lambda a: not is_valid_package_name(a.project_name),
    ask=_ask_package_name,
)


# 4. Framework


def _ask_framework(answers: Answers) -> Answers:
    if answers.arg_template:
        title = (
            f'"{answers.arg_template}" isn\'t a valid template. '
            "Please choose from below:"
        )
    else:
        title = "Select a framework:"
    index = _select(title, [(f.display or f.name, f.color) for f in FRAMEWORKS])
    return answers.update(framework=FRAMEWORKS[index])


FRAMEWORK = PromptStep(
    name="framework",
    applies=lambda a: not is_known_template(a.arg_template),
    ask=_ask_framework,
)


# 5. Variant


def _ask_variant(answers: Answers) -> Answers:
    framework = answers.framework
    if framework is None:
        return answers
    variants = framework.variants
    options = [(v.display or v.name, v.color) for v in variants]
    index = _select("Select a variant:", options)
    return answers.update(variant=variants[index].name)


VARIANT = PromptStep(
    name="variant",
    applies=lambda a: a.framework is not None and a.framework.has_variants,
    ask=_ask_variant,
)


# 6. Publish


def _ask_publish(answers: Answers) -> Answers:
    return answers.update(
        need_publish=click.confirm(
            "Whether to publish to the npm repository?", default=True
        )
    )


NEED_PUBLISH = PromptStep(
    name="need_publish",
    applies=lambda a: bool(a.selected_framework and a.selected_framework.publish),
    ask=_ask_publish,
)


# 7. Test


def _ask_test(answers: Answers) -> Answers:
    need_test = click.confirm("Whether to add tests?", default=True)
    return answers.update(need_test=need_test)


NEED_TEST = PromptStep(
    name="need_test",
    applies=lambda a: bool(a.selected_framework and a.selected_framework.test),
    ask=_ask_test,
)


STEPS: tuple[PromptStep, ...] = (
    PROJECT_NAME,
    OVERWRITE,
    PACKAGE_NAME,
    FRAMEWORK,
    VARIANT,
    NEED_PUBLISH,
    NEED_TEST,
)


def run_steps(answers: Answers, steps: Sequence[PromptStep] = STEPS) -> Answers:
    """Walk the steps in order, skipping those that don't apply.

    Ctrl-C or EOF at a prompt is reported as OperationCancelledError.
    """
    for step in steps:
        if not step.applies(answers):
            logger.debug("Skipping prompt step %s", step.name)
            continue
        try:
            answers = step.ask(answers)
        except click.Abort as e:
            raise OperationCancelledError() from e
    return answers


def run_prompt_flow(
    cwd: Path,
    arg_target_dir: str | None = None,
    arg_template: str | None = None,
    default_target_dir: str = "my-app",
) -> ResolvedChoice:
    """Ask every applicable question and return the resolved choice.

    Nothing is written to disk here; declining the overwrite question or
    interrupting any prompt raises OperationCancelledError.
    """
    target_dir = format_target_dir(arg_target_dir)
    answers = Answers(
        cwd=cwd,
        target_dir=target_dir or default_target_dir,
        default_target_dir=default_target_dir,
        arg_target_dir=target_dir or None,
        arg_template=arg_template or None,
    )
    return run_steps(answers).to_choice()
