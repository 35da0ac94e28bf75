"""Playwright end-to-end test tree for sample projects.

Generates:
- ``e2e/playwright.config.ts`` and ``e2e/package.json`` (rendered)
- ``e2e/helpers/auth.ts`` and ``e2e/tests/posts.spec.ts`` (copied verbatim)
- an empty ``e2e/fixtures/.gitkeep``
"""

from __future__ import annotations

from pathlib import Path

from .assets import Asset
from .engine import TemplateEngine
from .renderer import TemplateRenderer, write_file


class PlaywrightGenerator:
    """Generates Playwright configuration and base test files."""

    def __init__(self, renderer: TemplateRenderer, engine: TemplateEngine) -> None:
        self.renderer = renderer
        self.engine = engine

    def generate(self, output_dir: Path) -> list[Path]:
        """Generate the ``e2e/`` tree under *output_dir*.

        Returns:
            List of all written file paths.
        """
        e2e_dir = output_dir / "e2e"
        written: list[Path] = []

        for asset, output_name in (
            (Asset.E2E_CONFIG, "playwright.config.ts"),
            (Asset.E2E_PACKAGE, "package.json"),
        ):
            path = self.renderer.render_to_file(asset, e2e_dir / output_name, self.engine)
            if path is not None:
                written.append(path)

        # Spec and helper files contain `${...}` template literals; never substitute
        for asset, output_name in (
            (Asset.E2E_AUTH_HELPER, "helpers/auth.ts"),
            (Asset.E2E_POSTS_SPEC, "tests/posts.spec.ts"),
        ):
            path = self.renderer.copy_to_file(asset, e2e_dir / output_name)
            if path is not None:
                written.append(path)

        written.append(write_file(e2e_dir / "fixtures" / ".gitkeep", ""))
        return written
