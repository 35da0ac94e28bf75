"""Tests for Dockerfile and Docker Compose generation.

Covers:
- Dockerfile and .dockerignore generation
- docker-compose.yml with the frontend fragment injected
- Sample compose override
- Template lookups through a mocked renderer
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from boots.scaffolder.assets import Asset
from boots.scaffolder.docker_gen import DockerGenerator
from boots.scaffolder.engine import TemplateEngine
from boots.scaffolder.models import FrontendType
from boots.scaffolder.renderer import TemplateRenderer
from boots.scaffolder.templates import MemoryTemplateStore


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def engine() -> TemplateEngine:
    return TemplateEngine({"project_name": "shop", "project_name_snake": "shop"})


@pytest.fixture
def docker_gen(bundled_store, engine) -> DockerGenerator:
    """A DockerGenerator over the bundled templates."""
    return DockerGenerator(TemplateRenderer(bundled_store), engine)


@pytest.fixture
def mock_renderer() -> MagicMock:
    """A mock TemplateRenderer that records render_to_file calls."""
    renderer = MagicMock(spec=TemplateRenderer)
    renderer.store = MemoryTemplateStore({})

    def mock_render_to_file(template_path, output_path: Path, engine) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(f"# Rendered from {template_path}\n", encoding="utf-8")
        return output_path

    renderer.render_to_file.side_effect = mock_render_to_file
    return renderer


# ---------------------------------------------------------------------------
# Build files
# ---------------------------------------------------------------------------


class TestBuildFiles:
    def test_writes_dockerfile_and_ignore(self, docker_gen, tmp_path) -> None:
        written = docker_gen.generate_build_files(tmp_path)

        assert written == [tmp_path / "Dockerfile", tmp_path / ".dockerignore"]
        dockerfile = (tmp_path / "Dockerfile").read_text(encoding="utf-8")
        assert "/app/target/release/shop" in dockerfile
        assert "target/" in (tmp_path / ".dockerignore").read_text(encoding="utf-8")

    def test_templates_used(self, mock_renderer, engine, tmp_path) -> None:
        DockerGenerator(mock_renderer, engine).generate_build_files(tmp_path)

        templates = [c.args[0] for c in mock_renderer.render_to_file.call_args_list]
        assert templates == [Asset.DOCKERFILE, Asset.DOCKERIGNORE]


# ---------------------------------------------------------------------------
# Compose
# ---------------------------------------------------------------------------


class TestCompose:
    @pytest.mark.parametrize("frontend", list(FrontendType))
    def test_frontend_service_injected(self, docker_gen, tmp_path, frontend) -> None:
        written = docker_gen.generate_compose(tmp_path, frontend)

        assert written == [tmp_path / "docker-compose.yml"]
        compose = yaml.safe_load(written[0].read_text(encoding="utf-8"))
        assert compose["services"]["backend"]["container_name"] == "shop-backend"
        assert compose["services"]["frontend"]["container_name"] == "shop-frontend"
        assert compose["services"]["frontend"]["build"]["context"] == "./frontend"

    def test_no_frontend(self, docker_gen, tmp_path) -> None:
        compose = yaml.safe_load(docker_gen.generate_compose(tmp_path, None)[0].read_text())
        assert set(compose["services"]) == {"backend"}

    def test_engine_is_not_mutated(self, docker_gen, engine, tmp_path) -> None:
        docker_gen.generate_compose(tmp_path, FrontendType.SPA)
        assert "frontend_service" not in engine.variables

    def test_fragment_is_not_rescanned(self, engine, tmp_path) -> None:
        store = MemoryTemplateStore(
            {
                "base/docker-compose.yml": "{{frontend_service}}",
                "frontend/spa/docker-compose.service.yml": "{{project_name}} {{frontend_service}}",
            }
        )
        gen = DockerGenerator(TemplateRenderer(store), engine)

        written = gen.generate_compose(tmp_path, FrontendType.SPA)

        assert written[0].read_text() == "shop {{frontend_service}}"

    def test_missing_compose_template(self, engine, tmp_path) -> None:
        gen = DockerGenerator(TemplateRenderer(MemoryTemplateStore({})), engine)
        assert gen.generate_compose(tmp_path, FrontendType.SPA) == []
        assert not (tmp_path / "docker-compose.yml").exists()


class TestSampleCompose:
    def test_overwrites_existing_compose(self, docker_gen, tmp_path) -> None:
        docker_gen.generate_compose(tmp_path, FrontendType.SPA)
        docker_gen.generate_sample_compose(tmp_path)

        compose = yaml.safe_load((tmp_path / "docker-compose.yml").read_text(encoding="utf-8"))
        assert {"postgres", "minio", "backend", "frontend"} == set(compose["services"])
        assert compose["services"]["postgres"]["environment"]["POSTGRES_DB"] == "shop"
        assert set(compose["volumes"]) == {"postgres-data", "minio-data"}
