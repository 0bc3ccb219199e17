"""Tests for frontend template materialization and glue-file injection."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from taqyon.exceptions import ScaffoldError, TemplateError
from taqyon.scaffold.answers import ScaffoldAnswers
from taqyon.scaffold.frontend import patch_vite_base, scaffold_frontend
from taqyon.scaffold.templates import template_root


def _answers(framework: str, language: str) -> ScaffoldAnswers:
    return ScaffoldAnswers(
        project_name="demo", frontend_framework=framework, frontend_language=language,
    )


class TestPatchViteBase:
    def test_adds_base(self) -> None:
        text = "export default defineConfig({\n  plugins: [svelte()],\n})\n"
        assert patch_vite_base(text) == (
            "export default defineConfig({\n  base: './',\n  plugins: [svelte()],\n})\n"
        )

    def test_keeps_keys_before_plugins(self) -> None:
        text = "defineConfig({\n  root: 'web',\n  plugins: []\n})"
        patched = patch_vite_base(text)
        assert patched.startswith("defineConfig({\n  base: './',\n  root: 'web',\n  plugins:")

    def test_existing_base_untouched(self) -> None:
        text = "defineConfig({ base: '/app/', plugins: [] })"
        assert patch_vite_base(text) == text

    def test_no_define_config_untouched(self) -> None:
        text = "module.exports = {}"
        assert patch_vite_base(text) == text


class TestScaffoldFrontend:
    """Every framework and language combination."""

    @pytest.mark.parametrize("framework", ["react", "vue", "svelte"])
    @pytest.mark.parametrize("language", ["js", "ts"])
    def test_glue_files_injected(self, tmp_path: Path, framework: str, language: str) -> None:
        written = scaffold_frontend(_answers(framework, language), tmp_path, template_root())
        frontend = tmp_path / "frontend"
        assert (frontend / "package.json").is_file()
        assert (frontend / "public" / "qwebchannel-loader.js").is_file()
        bridge = frontend / "src" / f"qwebchannel-bridge.{language}"
        assert bridge.is_file()
        assert bridge in written

    def test_react_name_substituted(self, tmp_path: Path) -> None:
        scaffold_frontend(_answers("react", "js"), tmp_path, template_root())
        manifest = json.loads((tmp_path / "frontend" / "package.json").read_text())
        assert manifest["name"] == "demo-frontend"

    def test_svelte_name_substituted_and_base_patched(self, tmp_path: Path) -> None:
        scaffold_frontend(_answers("svelte", "js"), tmp_path, template_root())
        frontend = tmp_path / "frontend"
        assert "{{projectName}}" not in (frontend / "package.json").read_text()
        assert "base: './'" in (frontend / "vite.config.js").read_text()

    def test_vue_copied_verbatim(self, tmp_path: Path) -> None:
        scaffold_frontend(_answers("vue", "ts"), tmp_path, template_root())
        src = template_root() / "frontend" / "vue-ts" / "src" / "App.vue"
        dest = tmp_path / "frontend" / "src" / "App.vue"
        assert dest.read_bytes() == src.read_bytes()

    def test_existing_bridge_kept(self, tmp_path: Path) -> None:
        templates = tmp_path / "templates"
        tpl = templates / "frontend" / "react-js"
        (tpl / "src").mkdir(parents=True)
        (tpl / "package.json").write_text('{"name": "{{projectName}}"}')
        (tpl / "src" / "qwebchannel-bridge.js").write_text("// custom bridge\n")
        (templates / "qwebchannel-bridge.js").write_text("// stock bridge\n")
        (templates / "qwebchannel-loader.js").write_text("// loader\n")
        project = tmp_path / "project"
        scaffold_frontend(_answers("react", "js"), project, templates)
        bridge = project / "frontend" / "src" / "qwebchannel-bridge.js"
        assert bridge.read_text() == "// custom bridge\n"

    def test_missing_package_json_raises(self, tmp_path: Path) -> None:
        templates = tmp_path / "templates"
        (templates / "frontend" / "react-js").mkdir(parents=True)
        (templates / "frontend" / "react-js" / "index.html").write_text("<html></html>")
        (templates / "qwebchannel-bridge.js").write_text("")
        (templates / "qwebchannel-loader.js").write_text("")
        with pytest.raises(ScaffoldError, match="frontend/package.json"):
            scaffold_frontend(_answers("react", "js"), tmp_path / "project", templates)

    def test_missing_template_raises(self, tmp_path: Path) -> None:
        with pytest.raises(TemplateError):
            scaffold_frontend(_answers("react", "js"), tmp_path, tmp_path / "no-templates")
