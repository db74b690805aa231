"""Command-line interface for appseed."""

import logging
import os
from pathlib import Path

import click
from rich.markup import escape

from appseed import __version__
from appseed.catalog import FRAMEWORKS
from appseed.config import AppseedConfig, load_config
from appseed.console import console, err_console
from appseed.logging import configure_logging
from appseed.manifest import ManifestError
from appseed.package_manager import (
    USER_AGENT_ENV,
    next_step_commands,
    resolve_package_manager,
)
from appseed.prompts import OperationCancelledError, run_prompt_flow
from appseed.runner import scaffold
from appseed.templates import (
    TemplateNotFoundError,
    discover_template_dirs,
    get_package_templates_path,
    resolve_root,
)

logger = logging.getLogger(__name__)


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"appseed [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


def _show_templates(templates_root: Path) -> None:
    """List frameworks and variants, flagging those missing on disk."""
    installed = discover_template_dirs(templates_root)
    location = escape(str(templates_root))
    console.print(f"[bold]Templates[/bold] [dim]({location})[/dim]\n")
    for framework in FRAMEWORKS:
        console.print(f"[{framework.color}]{framework.display}[/{framework.color}]")
        for template in framework.template_names():
            status = "" if template in installed else " [red](missing)[/red]"
            console.print(f"  - {template}{status}")


def _print_next_steps(root: Path, cwd: Path, config: AppseedConfig) -> None:
    """Print the cd and package manager commands to get started."""
    package_manager = resolve_package_manager(
        os.environ.get(USER_AGENT_ENV), config.package_manager
    )
    install, dev = next_step_commands(package_manager)

    console.print("\nDone. Now run:\n")
    if root != cwd:
        cd_path = os.path.relpath(root, cwd)
        console.print(f'  cd "{cd_path}"' if " " in cd_path else f"  cd {cd_path}")
    console.print(f"  {install}")
    console.print(f"  {dev}")
    console.print()


@click.command()
@click.argument("target_dir", required=False)
@click.option(
    "--template",
    "-t",
    help="Template to use (e.g. vue, electron-react, node).",
)
@click.option(
    "--templates-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    envvar="APPSEED_TEMPLATES_DIR",
    help="Directory holding template-<id> folders (default: bundled templates).",
)
@click.option(
    "--git/--no-git",
    default=True,
    help="Run git init in the new project (default: git).",
)
@click.option(
    "--list-templates",
    is_flag=True,
    help="List available templates and exit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.pass_context
def main(
    ctx: click.Context,
    target_dir: str | None,
    template: str | None,
    templates_dir: Path | None,
    git: bool,
    list_templates: bool,
    verbose: bool,
) -> None:
    """Scaffold a new project into TARGET_DIR."""
    configure_logging(verbose=verbose)
    config = load_config()

    def _from_cli(param_name: str) -> bool:
        """Check if a parameter was explicitly set on the command line."""
        source = ctx.get_parameter_source(param_name)
        return source == click.core.ParameterSource.COMMANDLINE

    if templates_dir is None and config.templates_dir:
        templates_dir = Path(config.templates_dir).expanduser()
    if _from_cli("git"):
        config = config.merge(AppseedConfig(git_init=git))

    if list_templates:
        _show_templates(templates_dir or get_package_templates_path())
        return

    cwd = Path.cwd()

    try:
        choice = run_prompt_flow(
            cwd,
            arg_target_dir=target_dir,
            arg_template=template,
            default_target_dir=config.default_target_dir or "my-app",
        )
    except OperationCancelledError as e:
        console.print(f"[red]✖[/red] {escape(str(e))}")
        raise SystemExit(1) from None

    logger.debug("Resolved choice: %s", choice)
    console.print(
        f"\nScaffolding project in {resolve_root(cwd, choice.target_dir)}..."
    )

    try:
        root = scaffold(choice, cwd, config, templates_dir)
    except (TemplateNotFoundError, ManifestError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1) from None
    except (OSError, ValueError) as e:
        logger.debug("Scaffolding failed", exc_info=True)
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1) from None

    _print_next_steps(root, cwd, config)
