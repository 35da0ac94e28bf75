"""Pydantic v2 models describing a project to scaffold.

Defines the closed enumerations for project type, persistence, frontend and
module, plus the immutable :class:`ProjectConfig` value object that the
generator consumes.  ``ProjectConfig.modules()`` is the module resolver: a
pure function of the project type, persistence and client flag.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ProjectType(str, Enum):
    """Kind of project to generate."""
    SERVICE = "service"
    CLI = "cli"
    LIB = "lib"
    SAMPLE = "sample"

    @property
    def description(self) -> str:
        descriptions: dict[ProjectType, str] = {
            ProjectType.SERVICE: "Full-stack service: core, api, runtime and cli modules",
            ProjectType.CLI: "Command-line application: core and cli modules",
            ProjectType.LIB: "Library crate: core module with examples",
            ProjectType.SAMPLE: "Board sample application with roles, e2e tests and docs",
        }
        return descriptions[self]


class PersistenceType(str, Enum):
    """Data store backing the persistence module."""
    POSTGRES = "postgres"
    SQLITE = "sqlite"
    FILE = "file"


class FrontendType(str, Enum):
    """Frontend flavour. SPA = React + Vite behind Nginx, SSR = Next.js App Router."""
    SPA = "spa"
    SSR = "ssr"


class Module(str, Enum):
    """A workspace member generated under ``crates/``."""
    CORE = "core"
    API = "api"
    RUNTIME = "runtime"
    CLI = "cli"
    CLIENT = "client"
    PERSISTENCE = "persistence"

    @property
    def dir_name(self) -> str:
        """Directory name below ``crates/`` and template prefix below ``modules/``."""
        return self.value


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Validated, immutable description of one project to generate."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, used verbatim as the directory name")
    project_type: ProjectType = Field(..., description="Kind of project")
    persistence: Optional[PersistenceType] = Field(default=None)
    frontend: Optional[FrontendType] = Field(default=None)
    has_grpc: bool = Field(default=False)
    has_http: bool = Field(default=True)
    has_client: bool = Field(default=False)
    author_name: str = Field(default="", description="Best-effort author name")
    author_email: str = Field(default="", description="Best-effort author email")

    @field_validator("name")
    @classmethod
    def _valid_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"project name is not a valid directory name: {value!r}")
        return value

    # -- Derived names -------------------------------------------------------

    @property
    def name_snake(self) -> str:
        """``my-api`` -> ``my_api``."""
        return self.name.replace("-", "_")

    @property
    def name_pascal(self) -> str:
        """``my-api`` -> ``MyApi``."""
        return to_pascal_case(self.name)

    # -- Module resolution ---------------------------------------------------

    def modules(self) -> list[Module]:
        """Return the ordered modules this configuration scaffolds."""
        if self.project_type is ProjectType.SERVICE:
            modules = [Module.CORE, Module.API, Module.RUNTIME, Module.CLI]
            if self.persistence is not None:
                modules.append(Module.PERSISTENCE)
            return modules

        if self.project_type is ProjectType.CLI:
            modules = [Module.CORE, Module.CLI]
            if self.has_client:
                modules.append(Module.CLIENT)
            if self.persistence is not None:
                modules.append(Module.PERSISTENCE)
            return modules

        if self.project_type is ProjectType.LIB:
            return [Module.CORE]

        # Sample always carries the full service set plus persistence.
        return [
            Module.CORE,
            Module.API,
            Module.RUNTIME,
            Module.CLI,
            Module.PERSISTENCE,
        ]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def to_pascal_case(name: str) -> str:
    """Split on ``-``/``_`` and upper-case the first character of each segment.

    Only the first character changes: ``my-gRPC_api`` -> ``MyGRPCApi``.
    """
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[-_]", name))
