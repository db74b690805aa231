"""Tests for the CLI."""

import json
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from appseed import __version__
from appseed.cli import main


def test_cli_help() -> None:
    """Test that --help exits cleanly."""
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "TARGET_DIR" in result.output


def test_cli_version() -> None:
    """Test that --version shows the version."""
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_list_templates() -> None:
    """Test --list-templates shows every template id."""
    runner = CliRunner()
    result = runner.invoke(main, ["--list-templates"])
    assert result.exit_code == 0
    for template in ("vue", "electron-vue", "react", "node-electron"):
        assert template in result.output
    assert "missing" not in result.output


def test_cli_node_library(tmp_path: Path) -> None:
    """Test scaffolding a node library without publish or tests."""
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(
            main, ["my-lib", "-t", "node", "--no-git"], input="n\nn\n"
        )

        assert result.exit_code == 0, result.output
        root = Path("my-lib")
        assert (root / "README.md").read_text() == "# my-lib\n"
        assert not (root / "LICENSE").exists()
        assert not (root / "test").exists()

        manifest = json.loads((root / "package.json").read_text())
        assert manifest["name"] == "my-lib"
        assert "author" not in manifest
        assert "repository" not in manifest
        assert "test" not in manifest["scripts"]

        assert "cd my-lib" in result.output
        assert "npm install" in result.output
        assert "npm run dev" in result.output


def test_cli_interactive_electron_vue(tmp_path: Path) -> None:
    """Test choosing name, framework and variant interactively."""
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(main, ["--no-git"], input="demo\n1\n2\n")

        assert result.exit_code == 0, result.output
        root = Path("demo")
        assert (root / ".gitignore").exists()
        assert not (root / "_gitignore").exists()
        assert (root / ".lintstagedrc.cjs").exists()
        assert (root / "stylelint.config.cjs").exists()
        assert (root / "electron").is_dir()
        assert json.loads((root / "package.json").read_text())["name"] == "demo"


def test_cli_invalid_template_falls_back(tmp_path: Path) -> None:
    """Test an unknown --template prompts for a framework."""
    runner = CliRunner()
    env = {"APPSEED_AUTHOR_NAME": "Jane Doe", "APPSEED_AUTHOR_EMAIL": "jane@doe.dev"}
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(
            main,
            ["app", "-t", "angular", "--no-git"],
            input="3\n1\ny\ny\n",
            env=env,
        )

        assert result.exit_code == 0, result.output
        assert "isn't a valid template" in result.output
        root = Path("app")
        manifest = json.loads((root / "package.json").read_text())
        assert manifest["repository"]["url"] == "git+https://github.com/janeDoe/app.git"
        assert manifest["author"]["email"] == "jane@doe.dev"
        assert "https://img.shields.io/npm/v/app" in (root / "README.md").read_text()
        assert (root / "test").is_dir()


def test_cli_declined_overwrite(tmp_path: Path) -> None:
    """Test declining overwrite exits 1 and leaves files intact."""
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("app").mkdir()
        Path("app", "keep.txt").write_text("mine")

        result = runner.invoke(main, ["app", "-t", "vue", "--no-git"], input="n\n")

        assert result.exit_code == 1
        assert "Operation cancelled" in result.output
        assert Path("app", "keep.txt").read_text() == "mine"
        assert not Path("app", "package.json").exists()


def test_cli_current_directory(tmp_path: Path) -> None:
    """Test scaffolding into the current directory skips the cd step."""
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(main, [".", "-t", "react", "--no-git"])

        assert result.exit_code == 0, result.output
        manifest = json.loads(Path("package.json").read_text())
        assert manifest["name"] == Path.cwd().resolve().name
        assert "  cd " not in result.output


def test_cli_yarn_next_steps(tmp_path: Path) -> None:
    """Test the next-step commands follow the invoking package manager."""
    runner = CliRunner()
    env = {"npm_config_user_agent": "yarn/1.22.19 npm/? node/v18.16.0 linux x64"}
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(main, ["web", "-t", "vue", "--no-git"], env=env)

        assert result.exit_code == 0, result.output
        assert "yarn dev" in result.output
        assert "npm install" not in result.output


def test_cli_git_init_flag(tmp_path: Path) -> None:
    """Test git init runs by default and is skipped by --no-git."""
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        with patch("appseed.runner.init_repository") as mock_init:
            result = runner.invoke(main, ["one", "-t", "vue"])
            assert result.exit_code == 0, result.output
            mock_init.assert_called_once()

            mock_init.reset_mock()
            result = runner.invoke(main, ["two", "-t", "vue", "--no-git"])
            assert result.exit_code == 0, result.output
            mock_init.assert_not_called()


def test_cli_missing_template_dir(tmp_path: Path) -> None:
    """Test a templates dir without the chosen template fails cleanly."""
    templates = tmp_path / "templates"
    templates.mkdir()
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(
            main,
            ["app", "-t", "vue", "--no-git", "--templates-dir", str(templates)],
        )

        assert result.exit_code == 1
        assert "not found" in result.output
