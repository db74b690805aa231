"""Prompt flow: questions that resolve the user's choices."""

from appseed.prompts.base import (
    Answers,
    OperationCancelledError,
    PromptStep,
    ResolvedChoice,
)
from appseed.prompts.flow import STEPS, run_prompt_flow, run_steps
from appseed.prompts.validation import is_valid_package_name, to_valid_package_name

__all__ = [
    "Answers",
    "OperationCancelledError",
    "PromptStep",
    "ResolvedChoice",
    "STEPS",
    "is_valid_package_name",
    "run_prompt_flow",
    "run_steps",
    "to_valid_package_name",
]
