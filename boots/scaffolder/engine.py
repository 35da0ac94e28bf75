"""Variable substitution for scaffold templates.

Templates are plain text containing ``{{name}}`` tokens.  The engine replaces
every token whose name is registered and leaves anything else verbatim; it is a
deliberately dumb string replace, not a template language.  Substitution is a
single pass: a replacement value is never scanned again, so a value that
itself contains ``{{other}}`` is written out literally.
"""

from __future__ import annotations

import re
from collections.abc import Mapping


class TemplateEngine:
    """Holds ``name -> value`` bindings for one rendering context."""

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._variables: dict[str, str] = dict(variables or {})

    @property
    def variables(self) -> dict[str, str]:
        """A copy of the current bindings."""
        return dict(self._variables)

    def set(self, key: str, value: str) -> TemplateEngine:
        """Insert or overwrite a binding.  Returns ``self`` for chaining."""
        self._variables[key] = value
        return self

    def render(self, template: str) -> str:
        """Return *template* with every registered ``{{key}}`` replaced."""
        if not self._variables:
            return template

        # Longest keys first so that a key which is a prefix of another
        # never shadows it inside the alternation.
        keys = sorted(self._variables, key=len, reverse=True)
        pattern = re.compile(
            r"\{\{(" + "|".join(re.escape(k) for k in keys) + r")\}\}"
        )
        return pattern.sub(lambda m: self._variables[m.group(1)], template)

    def __repr__(self) -> str:
        return f"TemplateEngine({sorted(self._variables)!r})"
