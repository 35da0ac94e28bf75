"""Template-to-file rendering for project scaffolding.

Provides the :class:`TemplateRenderer` which pulls raw templates from a
:class:`~boots.scaffolder.templates.TemplateStore`, substitutes variables
with a :class:`~boots.scaffolder.engine.TemplateEngine` and writes the
result to disk.  Optional templates that the store does not have are skipped
silently; mandatory ones go through :meth:`TemplateRenderer.require`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .engine import TemplateEngine
from .errors import TemplateError
from .templates import TemplateStore

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Renders store templates to files."""

    def __init__(self, store: TemplateStore) -> None:
        self.store = store

    def require(self, template_path: str) -> str:
        """Return the template at *template_path* or raise :class:`TemplateError`."""
        template_path = str(template_path)
        template = self.store.get_template(template_path)
        if template is None:
            name = template_path.rsplit("/", 1)[-1]
            raise TemplateError(f"{name} not found", template_path)
        return template

    def render_to_file(
        self,
        template_path: str,
        output_path: Path,
        engine: TemplateEngine,
    ) -> Path | None:
        """Render a template and write it to *output_path*.

        Returns the written path, or ``None`` when the template is absent.
        """
        template = self.store.get_template(template_path)
        if template is None:
            logger.debug("template %s not found, skipping %s", template_path, output_path)
            return None
        return write_file(output_path, engine.render(template))

    def copy_to_file(self, template_path: str, output_path: Path) -> Path | None:
        """Write a template to *output_path* verbatim, without substitution."""
        template = self.store.get_template(template_path)
        if template is None:
            logger.debug("template %s not found, skipping %s", template_path, output_path)
            return None
        return write_file(output_path, template)


def write_file(path: Path, content: str) -> Path:
    """Create parent dirs and write *content* as UTF-8."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
