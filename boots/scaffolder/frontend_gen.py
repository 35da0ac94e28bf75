"""Frontend tree generation.

SPA projects get a React + Vite app served by Nginx; SSR projects get a
Next.js App Router app.  Both share a package manifest, a TypeScript config
and container files.  Files carrying project-specific text are rendered; the
rest are copied verbatim.
"""

from __future__ import annotations

from pathlib import Path

from .assets import frontend_template
from .engine import TemplateEngine
from .models import FrontendType
from .renderer import TemplateRenderer

# (template file, output path relative to frontend/, rendered?)
_SHARED_FILES: list[tuple[str, str, bool]] = [
    ("package.json", "package.json", True),
    ("tsconfig.json", "tsconfig.json", False),
    ("Dockerfile", "Dockerfile", False),
    ("dockerignore", ".dockerignore", False),
]

_SPA_FILES: list[tuple[str, str, bool]] = [
    ("vite.config.ts", "vite.config.ts", False),
    ("index.html", "index.html", True),
    ("nginx.conf", "nginx.conf", False),
    ("src/main.tsx", "src/main.tsx", False),
    ("src/App.tsx", "src/App.tsx", True),
    ("src/vite-env.d.ts", "src/vite-env.d.ts", False),
]

_SSR_FILES: list[tuple[str, str, bool]] = [
    ("next.config.ts", "next.config.ts", False),
    ("app/layout.tsx", "app/layout.tsx", True),
    ("app/page.tsx", "app/page.tsx", True),
    ("app/globals.css", "app/globals.css", False),
]


class FrontendGenerator:
    """Generates the ``frontend/`` directory for SPA and SSR projects."""

    def __init__(self, renderer: TemplateRenderer, engine: TemplateEngine) -> None:
        self.renderer = renderer
        self.engine = engine

    def generate(self, output_dir: Path, frontend: FrontendType) -> list[Path]:
        """Generate ``<output_dir>/frontend``.

        Args:
            output_dir: Project root directory.
            frontend: Frontend flavour to generate.

        Returns:
            List of written file paths.
        """
        frontend_dir = output_dir / "frontend"
        frontend_dir.mkdir(parents=True, exist_ok=True)

        if frontend is FrontendType.SPA:
            (frontend_dir / "src").mkdir(exist_ok=True)
            files = _SHARED_FILES + _SPA_FILES
        else:
            (frontend_dir / "app").mkdir(exist_ok=True)
            files = _SHARED_FILES + _SSR_FILES

        written: list[Path] = []
        for template_name, output_name, rendered in files:
            template_path = frontend_template(frontend, template_name)
            out = frontend_dir / output_name
            if rendered:
                path = self.renderer.render_to_file(template_path, out, self.engine)
            else:
                path = self.renderer.copy_to_file(template_path, out)
            if path is not None:
                written.append(path)
        return written
