"""Tests for the SPA and SSR frontend trees."""

from __future__ import annotations

import json

import pytest

from boots.scaffolder.engine import TemplateEngine
from boots.scaffolder.frontend_gen import FrontendGenerator
from boots.scaffolder.models import FrontendType
from boots.scaffolder.renderer import TemplateRenderer
from boots.scaffolder.templates import MemoryTemplateStore


pytestmark = pytest.mark.unit


@pytest.fixture
def engine() -> TemplateEngine:
    return TemplateEngine({"project_name": "shop", "project_name_snake": "shop"})


@pytest.fixture
def frontend_gen(bundled_store, engine) -> FrontendGenerator:
    return FrontendGenerator(TemplateRenderer(bundled_store), engine)


class TestSpa:
    def test_file_set(self, frontend_gen, tmp_path) -> None:
        written = frontend_gen.generate(tmp_path, FrontendType.SPA)

        relative = sorted(p.relative_to(tmp_path / "frontend").as_posix() for p in written)
        assert relative == [
            ".dockerignore",
            "Dockerfile",
            "index.html",
            "nginx.conf",
            "package.json",
            "src/App.tsx",
            "src/main.tsx",
            "src/vite-env.d.ts",
            "tsconfig.json",
            "vite.config.ts",
        ]

    def test_package_json_is_rendered_and_valid(self, frontend_gen, tmp_path) -> None:
        frontend_gen.generate(tmp_path, FrontendType.SPA)
        package = json.loads((tmp_path / "frontend" / "package.json").read_text(encoding="utf-8"))
        assert package["name"] == "shop-frontend"

    def test_tsconfig_is_valid_json(self, frontend_gen, tmp_path) -> None:
        frontend_gen.generate(tmp_path, FrontendType.SPA)
        json.loads((tmp_path / "frontend" / "tsconfig.json").read_text(encoding="utf-8"))

    def test_jsx_style_braces_survive(self, frontend_gen, tmp_path) -> None:
        frontend_gen.generate(tmp_path, FrontendType.SPA)
        app = (tmp_path / "frontend" / "src" / "App.tsx").read_text(encoding="utf-8")
        assert "style={{ padding: '2rem'" in app
        assert "<h1>shop</h1>" in app


class TestSsr:
    def test_file_set(self, frontend_gen, tmp_path) -> None:
        written = frontend_gen.generate(tmp_path, FrontendType.SSR)

        relative = sorted(p.relative_to(tmp_path / "frontend").as_posix() for p in written)
        assert relative == [
            ".dockerignore",
            "Dockerfile",
            "app/globals.css",
            "app/layout.tsx",
            "app/page.tsx",
            "next.config.ts",
            "package.json",
            "tsconfig.json",
        ]

    def test_layout_title(self, frontend_gen, tmp_path) -> None:
        frontend_gen.generate(tmp_path, FrontendType.SSR)
        layout = (tmp_path / "frontend" / "app" / "layout.tsx").read_text(encoding="utf-8")
        assert 'title: "shop"' in layout


class TestRawCopies:
    def test_copy_files_keep_tokens(self, engine, tmp_path) -> None:
        store = MemoryTemplateStore(
            {
                "frontend/ssr/next.config.ts": "// {{project_name}}",
                "frontend/ssr/app/page.tsx": "// {{project_name}}",
            }
        )
        FrontendGenerator(TemplateRenderer(store), engine).generate(tmp_path, FrontendType.SSR)

        assert (tmp_path / "frontend" / "next.config.ts").read_text() == "// {{project_name}}"
        assert (tmp_path / "frontend" / "app" / "page.tsx").read_text() == "// shop"

    def test_missing_templates_leave_empty_tree(self, engine, tmp_path) -> None:
        gen = FrontendGenerator(TemplateRenderer(MemoryTemplateStore({})), engine)
        assert gen.generate(tmp_path, FrontendType.SPA) == []
        assert (tmp_path / "frontend" / "src").is_dir()
