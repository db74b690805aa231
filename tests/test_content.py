"""Tests for doc rewriting and tsconfig pruning."""

import json
from pathlib import Path
from typing import Any

from appseed.content import (
    badges,
    find_tsconfig_files,
    prune_test_config,
    render_document,
    rewrite_documents,
)
from appseed.git import Identity
from appseed.prompts import ResolvedChoice

IDENTITY = Identity(name="Jane Doe", email="jane@example.com")


def _choice(**kwargs: Any) -> ResolvedChoice:
    values: dict[str, Any] = {
        "target_dir": "my-lib",
        "package_name": "my-lib",
        "template": "node",
    }
    values.update(kwargs)
    return ResolvedChoice(**values)


def _write_docs(root: Path) -> None:
    (root / "LICENSE").write_text("Copyright (c) {{user.name}} <{{user.email}}>\n")
    (root / "README.md").write_text("# template-node\n\n{{badges}}\n\n© {{user.name}}\n")
    (root / "README.zh_CN.md").write_text("# template-node\n\n{{badges}}\n")


class TestBadges:
    """Tests for badge generation."""

    def test_scoped_version_badge_keeps_slash(self) -> None:
        """Test path badges only encode the @."""
        text = badges("@scope/pkg")
        assert "![npm](https://img.shields.io/npm/v/%40scope/pkg)" in text
        assert (
            "![node-current (scoped)](https://img.shields.io/node/v/%40scope/pkg)"
            in text
        )

    def test_scoped_license_badge_encodes_slash(self) -> None:
        """Test the license badge also encodes the slash."""
        assert "![NPM](https://img.shields.io/npm/l/%40scope%2Fpkg)" in badges(
            "@scope/pkg"
        )

    def test_unscoped_badges(self) -> None:
        """Test unscoped names are used verbatim, space-joined."""
        assert badges("pkg") == (
            "![npm](https://img.shields.io/npm/v/pkg) "
            "![node-current (scoped)](https://img.shields.io/node/v/pkg) "
            "![NPM](https://img.shields.io/npm/l/pkg)"
        )


class TestRenderDocument:
    """Tests for placeholder substitution."""

    def test_replaces_tokens(self) -> None:
        """Test template name and user tokens are substituted everywhere."""
        content = "template-node / template-node by {{user.name}} {{user.email}}"
        result = render_document(content, "LICENSE", "node", "my-lib", IDENTITY)
        assert result == "my-lib / my-lib by Jane Doe jane@example.com"

    def test_badges_only_in_readme(self) -> None:
        """Test the badges token is left alone outside READMEs."""
        result = render_document("{{badges}}", "LICENSE", "node", "my-lib", IDENTITY)
        assert result == "{{badges}}"


class TestRewriteDocuments:
    """Tests for rewrite_documents."""

    def test_publish_declined_drops_docs(self, tmp_path: Path) -> None:
        """Test license and localized README go, README becomes a heading."""
        _write_docs(tmp_path)
        rewrite_documents(tmp_path, _choice(need_publish=False), IDENTITY)

        assert not (tmp_path / "LICENSE").exists()
        assert not (tmp_path / "README.zh_CN.md").exists()
        assert (tmp_path / "README.md").read_text() == "# my-lib\n"

    def test_publish_accepted_renders_docs(self, tmp_path: Path) -> None:
        """Test every doc is rendered in place."""
        _write_docs(tmp_path)
        rewrite_documents(tmp_path, _choice(need_publish=True), IDENTITY)

        readme = (tmp_path / "README.md").read_text()
        assert readme.startswith("# my-lib\n")
        assert "https://img.shields.io/npm/v/my-lib" in readme
        assert "{{" not in readme
        assert (tmp_path / "LICENSE").read_text() == (
            "Copyright (c) Jane Doe <jane@example.com>\n"
        )
        assert "npm/l/my-lib" in (tmp_path / "README.zh_CN.md").read_text()

    def test_missing_docs_are_not_created(self, tmp_path: Path) -> None:
        """Test absent docs stay absent, even the primary README."""
        rewrite_documents(tmp_path, _choice(need_publish=False), IDENTITY)
        assert list(tmp_path.iterdir()) == []


class TestPruneTestConfig:
    """Tests for tsconfig pruning."""

    def test_include_drops_test_entries(self, tmp_path: Path) -> None:
        """Test include ["src", "test/**"] becomes ["src"]."""
        path = tmp_path / "tsconfig.json"
        path.write_text('{"include": ["src", "test/**"]}')

        prune_test_config(tmp_path)

        assert json.loads(path.read_text())["include"] == ["src"]

    def test_relaxed_syntax_is_normalized(self, tmp_path: Path) -> None:
        """Test comments and trailing commas are accepted and dropped."""
        path = tmp_path / "tsconfig.build.json"
        path.write_text(
            "{\n"
            "  // build only\n"
            '  "compilerOptions": {"outDir": "dist",},\n'
            '  "exclude": ["test", "**/*.test.ts", "dist"],\n'
            "}\n"
        )

        assert prune_test_config(tmp_path) == [path]

        text = path.read_text()
        assert "//" not in text
        assert json.loads(text) == {
            "compilerOptions": {"outDir": "dist"},
            "exclude": ["dist"],
        }

    def test_only_tsconfig_files_match(self, tmp_path: Path) -> None:
        """Test the tsconfig naming pattern."""
        for name in (
            "tsconfig.json",
            "tsconfig.node.json",
            "jsconfig.json",
            "tsconfig.json.bak",
            "package.json",
        ):
            (tmp_path / name).write_text("{}")

        names = [p.name for p in find_tsconfig_files(tmp_path)]
        assert names == ["tsconfig.json", "tsconfig.node.json"]

    def test_missing_keys_untouched(self, tmp_path: Path) -> None:
        """Test files without include/exclude keep their other fields."""
        path = tmp_path / "tsconfig.json"
        path.write_text('{"compilerOptions": {"strict": true}}')

        prune_test_config(tmp_path)

        assert json.loads(path.read_text()) == {"compilerOptions": {"strict": True}}
