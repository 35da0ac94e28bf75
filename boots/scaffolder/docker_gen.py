"""Container build and Docker Compose file generation.

Writes the root ``Dockerfile`` / ``.dockerignore`` for the workspace and the
``docker-compose.yml`` that wires a frontend service in when the project has
one.  Sample projects replace that compose file with their own (PostgreSQL +
MinIO + backend + frontend).
"""

from __future__ import annotations

from pathlib import Path

from .assets import Asset, frontend_template
from .engine import TemplateEngine
from .models import FrontendType
from .renderer import TemplateRenderer


class DockerGenerator:
    """Generates Dockerfiles and Docker Compose files."""

    # Template -> output file name
    _BUILD_FILES: dict[Asset, str] = {
        Asset.DOCKERFILE: "Dockerfile",
        Asset.DOCKERIGNORE: ".dockerignore",
    }

    def __init__(self, renderer: TemplateRenderer, engine: TemplateEngine) -> None:
        self.renderer = renderer
        self.engine = engine

    def generate_build_files(self, output_dir: Path) -> list[Path]:
        """Generate the workspace ``Dockerfile`` and ``.dockerignore``.

        Args:
            output_dir: Project root directory.

        Returns:
            List of written file paths.
        """
        written: list[Path] = []
        for asset, output_name in self._BUILD_FILES.items():
            path = self.renderer.render_to_file(asset, output_dir / output_name, self.engine)
            if path is not None:
                written.append(path)
        return written

    def generate_compose(
        self,
        output_dir: Path,
        frontend: FrontendType | None,
    ) -> list[Path]:
        """Generate ``docker-compose.yml`` with the frontend service stanza.

        The stanza comes from ``frontend/<type>/docker-compose.service.yml``
        and is rendered with the project variables before it is injected as
        ``{{frontend_service}}``.  A missing fragment, or no frontend at all,
        injects an empty string.
        """
        fragment = ""
        if frontend is not None:
            raw = self.renderer.store.get_template(
                frontend_template(frontend, "docker-compose.service.yml")
            )
            if raw is not None:
                fragment = self.engine.render(raw)

        engine = TemplateEngine(self.engine.variables).set("frontend_service", fragment)
        path = self.renderer.render_to_file(
            Asset.DOCKER_COMPOSE, output_dir / "docker-compose.yml", engine
        )
        return [path] if path is not None else []

    def generate_sample_compose(self, output_dir: Path) -> list[Path]:
        """Overwrite ``docker-compose.yml`` with the sample stack (adds MinIO)."""
        path = self.renderer.render_to_file(
            Asset.SAMPLE_DOCKER_COMPOSE, output_dir / "docker-compose.yml", self.engine
        )
        return [path] if path is not None else []
