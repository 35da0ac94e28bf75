"""Options-string parsing.

Turns a project type, a name and a free-form comma-separated options string
(``"postgres,grpc"``) into a validated :class:`ProjectConfig`.

Rules:

* Segments are split on ``,``, stripped, and empty segments dropped.
* ``sample`` anywhere wins: persistence becomes Postgres, the frontend SPA,
  and every other segment is ignored without validation.
* Otherwise keywords apply left to right, last write wins per field.  The
  generic ``persistence`` keyword only fills an empty persistence slot, so
  ``postgres,persistence`` stays Postgres.
* Any other segment raises :class:`InvalidOptionError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .errors import InvalidOptionError
from .identity import Identity, git_identity
from .models import FrontendType, PersistenceType, ProjectConfig, ProjectType

logger = logging.getLogger(__name__)

SAMPLE_OPTION = "sample"

_PERSISTENCE_KEYWORDS: dict[str, PersistenceType] = {
    "postgres": PersistenceType.POSTGRES,
    "sqlite": PersistenceType.SQLITE,
    "file": PersistenceType.FILE,
}

_FRONTEND_KEYWORDS: dict[str, FrontendType] = {
    "fe:spa": FrontendType.SPA,
    "fe-spa": FrontendType.SPA,
    "spa": FrontendType.SPA,
    "fe:ssr": FrontendType.SSR,
    "fe-ssr": FrontendType.SSR,
    "ssr": FrontendType.SSR,
}

_FLAG_KEYWORDS: dict[str, str] = {
    "grpc": "has_grpc",
    "http": "has_http",
    "client": "has_client",
}

OPTION_KEYWORDS: tuple[str, ...] = (
    *_PERSISTENCE_KEYWORDS,
    "persistence",
    *_FLAG_KEYWORDS,
    *_FRONTEND_KEYWORDS,
    SAMPLE_OPTION,
)


def split_options(options: str) -> list[str]:
    """Split on commas, strip whitespace, drop empty segments."""
    return [segment.strip() for segment in options.split(",") if segment.strip()]


def parse_options(
    project_type: ProjectType,
    name: str,
    options: str | None = None,
    identity: Callable[[], Identity] | None = None,
) -> ProjectConfig:
    """Build a :class:`ProjectConfig` from CLI input.

    Args:
        project_type: Kind of project to generate.
        name: Project name (directory name).
        options: Raw comma-separated options, or ``None`` for defaults.
        identity: Callable returning the author identity.  Defaults to the
            git configuration lookup; failures there yield empty strings.

    Raises:
        InvalidOptionError: For the first unrecognised keyword.
    """
    author = (identity or git_identity)()

    fields: dict[str, Any] = {
        "name": name,
        "project_type": project_type,
        "persistence": None,
        "frontend": None,
        "has_grpc": False,
        "has_http": True,
        "has_client": False,
        "author_name": author.name,
        "author_email": author.email,
    }

    if options is None:
        return ProjectConfig(**fields)

    segments = split_options(options)

    if SAMPLE_OPTION in segments:
        ignored = [s for s in segments if s != SAMPLE_OPTION]
        if ignored:
            logger.warning(
                "'%s' option selected, ignoring other options: %s",
                SAMPLE_OPTION,
                ", ".join(ignored),
            )
        fields["persistence"] = PersistenceType.POSTGRES
        fields["frontend"] = FrontendType.SPA
        return ProjectConfig(**fields)

    for segment in segments:
        if segment in _PERSISTENCE_KEYWORDS:
            fields["persistence"] = _PERSISTENCE_KEYWORDS[segment]
        elif segment == "persistence":
            if fields["persistence"] is None:
                fields["persistence"] = PersistenceType.FILE
        elif segment in _FLAG_KEYWORDS:
            fields[_FLAG_KEYWORDS[segment]] = True
        elif segment in _FRONTEND_KEYWORDS:
            fields["frontend"] = _FRONTEND_KEYWORDS[segment]
        else:
            raise InvalidOptionError(segment)

    return ProjectConfig(**fields)
