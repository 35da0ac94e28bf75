"""Sample application layer.

The sample project is a board/forum service with roles layered on top of the
service module set.  On top of the regular tree it adds the board domain
module under ``crates/core/src/board/``, the Playwright ``e2e/`` tree, a
``docs/`` tree, and a docker-compose file with object storage that replaces
the one written for the frontend.
"""

from __future__ import annotations

from pathlib import Path

from .assets import Asset
from .docker_gen import DockerGenerator
from .engine import TemplateEngine
from .playwright_gen import PlaywrightGenerator
from .renderer import TemplateRenderer

_BOARD_FILES: dict[Asset, str] = {
    Asset.BOARD_MOD: "mod.rs",
    Asset.BOARD_MODELS: "models.rs",
    Asset.BOARD_PERMISSION: "permission.rs",
}

_DOC_FILES: dict[Asset, str] = {
    Asset.DOCS_API: "api.md",
    Asset.DOCS_ARCHITECTURE: "architecture.md",
    Asset.DOCS_E2E: "e2e-testing.md",
}


class SampleGenerator:
    """Generates the sample-only parts of a project."""

    def __init__(self, renderer: TemplateRenderer, engine: TemplateEngine) -> None:
        self.renderer = renderer
        self.engine = engine
        self.docker_gen = DockerGenerator(renderer, engine)
        self.playwright_gen = PlaywrightGenerator(renderer, engine)

    def generate(self, output_dir: Path) -> list[Path]:
        """Run every sample step in order and return the written paths."""
        written: list[Path] = []
        written.extend(self._render_all(_BOARD_FILES, output_dir / "crates" / "core" / "src" / "board"))
        written.extend(self.playwright_gen.generate(output_dir))
        written.extend(self._render_all(_DOC_FILES, output_dir / "docs"))
        written.extend(self.docker_gen.generate_sample_compose(output_dir))
        return written

    def _render_all(self, files: dict[Asset, str], target_dir: Path) -> list[Path]:
        target_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for asset, output_name in files.items():
            path = self.renderer.render_to_file(asset, target_dir / output_name, self.engine)
            if path is not None:
                written.append(path)
        return written
