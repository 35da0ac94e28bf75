"""boots scaffolder -- generates modular Rust workspace projects.

Turns a project type, a name and a comma-separated options string into a
``ProjectConfig`` and renders a complete workspace from raw templates with
``{{variable}}`` substitution.

Quick usage::

    from boots.scaffolder import ProjectGenerator, ProjectType, parse_options

    config = parse_options(ProjectType.SERVICE, "my-api", "postgres,grpc")
    result = ProjectGenerator(config).generate("/tmp/output")
    print(result.root, len(result.files))
"""

from boots.scaffolder.adder import ADD_TARGETS, add
from boots.scaffolder.engine import TemplateEngine
from boots.scaffolder.errors import (
    AlreadyExistsError,
    BootsError,
    DirectoryExistsError,
    InvalidOptionError,
    ManifestError,
    TemplateError,
    UnknownTargetError,
)
from boots.scaffolder.generator import GenerationResult, ProjectGenerator
from boots.scaffolder.models import (
    FrontendType,
    Module,
    PersistenceType,
    ProjectConfig,
    ProjectType,
)
from boots.scaffolder.options import OPTION_KEYWORDS, parse_options
from boots.scaffolder.templates import (
    ArchiveTemplateStore,
    MemoryTemplateStore,
    TemplateStore,
    open_store,
)

__all__ = [
    "ADD_TARGETS",
    "AlreadyExistsError",
    "ArchiveTemplateStore",
    "BootsError",
    "DirectoryExistsError",
    "FrontendType",
    "GenerationResult",
    "InvalidOptionError",
    "ManifestError",
    "MemoryTemplateStore",
    "Module",
    "OPTION_KEYWORDS",
    "PersistenceType",
    "ProjectConfig",
    "ProjectGenerator",
    "ProjectType",
    "TemplateEngine",
    "TemplateError",
    "TemplateStore",
    "UnknownTargetError",
    "add",
    "open_store",
    "parse_options",
]
