"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and generates a complete Rust workspace under
``<base_path>/<name>``: workspace manifest, CI workflows, container files,
automation and readme, optional gRPC / persistence / frontend pieces, one
crate per resolved module, and the sample application layer.

Generation is create-only.  An existing project root aborts the run before
anything is written; a failure midway leaves the partial tree on disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .assets import Asset, module_template
from .docker_gen import DockerGenerator
from .engine import TemplateEngine
from .errors import DirectoryExistsError
from .frontend_gen import FrontendGenerator
from .models import Module, PersistenceType, ProjectConfig, ProjectType
from .renderer import TemplateRenderer, write_file
from .sample_gen import SampleGenerator
from .templates import TemplateStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Dependency snippets injected into module manifests
# ---------------------------------------------------------------------------

PERSISTENCE_DEPS: dict[PersistenceType, str] = {
    PersistenceType.POSTGRES: 'sqlx = { version = "0.7", features = ["runtime-tokio", "postgres"] }',
    PersistenceType.SQLITE: 'sqlx = { version = "0.7", features = ["runtime-tokio", "sqlite"] }',
}

GRPC_DEPS = 'tonic = "0.11"\nprost = "0.12"'
GRPC_BUILD_DEPS = '\n[build-dependencies]\ntonic-build = "0.11"'

_WORKFLOWS: dict[Asset, str] = {
    Asset.WORKFLOW_BUILD: "build.yml",
    Asset.WORKFLOW_TEST: "test.yml",
    Asset.WORKFLOW_RELEASE: "release.yml",
}


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    root: Path
    files: list[Path] = field(default_factory=list)  # relative to root, write order

    def __contains__(self, relative: object) -> bool:
        return Path(str(relative)) in self.files


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Turns one ``ProjectConfig`` into a populated directory tree."""

    def __init__(self, config: ProjectConfig, store: TemplateStore | None = None) -> None:
        self.config = config
        self.renderer = TemplateRenderer(store or TemplateStore.bundled())
        self.engine = TemplateEngine(
            {
                "project_name": config.name,
                "project_name_snake": config.name_snake,
            }
        )
        self.docker_gen = DockerGenerator(self.renderer, self.engine)
        self.frontend_gen = FrontendGenerator(self.renderer, self.engine)
        self.sample_gen = SampleGenerator(self.renderer, self.engine)

    # -- Public API --------------------------------------------------------

    def generate(self, base_path: str | Path) -> GenerationResult:
        """Generate the project under *base_path*.

        Raises:
            DirectoryExistsError: ``<base_path>/<name>`` already exists.
            TemplateError: the workspace manifest template is missing, or a
                template is not valid UTF-8.
            OSError: any filesystem failure.
        """
        root = Path(base_path) / self.config.name
        if root.exists():
            raise DirectoryExistsError(root)

        # 1. Project root
        root.mkdir(parents=True)
        logger.info("generating %s project in %s", self.config.project_type.value, root)

        written: list[Path] = []
        is_sample = self.config.project_type is ProjectType.SAMPLE

        # 2. Workspace manifest
        written.append(self._create_workspace_manifest(root))

        # 3. CI workflows
        written.extend(self._create_workflows(root))

        # 4. Container build files
        written.extend(self.docker_gen.generate_build_files(root))

        # 5-6. Makefile and README
        written.extend(
            self._render_all(
                {
                    Asset.SAMPLE_MAKEFILE if is_sample else Asset.MAKEFILE: "Makefile",
                    Asset.SAMPLE_README if is_sample else Asset.README: "README.md",
                },
                root,
            )
        )

        # 7. Ignore file and toolchain pin
        written.extend(
            self._render_all(
                {Asset.GITIGNORE: ".gitignore", Asset.TOOLCHAIN: "rust-toolchain.toml"},
                root,
            )
        )

        # 8. gRPC service definition
        if self.config.has_grpc:
            written.extend(self._create_proto(root))

        # 9. Environment example
        if self.config.persistence is not None:
            written.extend(self._render_all({Asset.ENV_EXAMPLE: ".env.example"}, root))

        # 10. Frontend and compose file
        if self.config.frontend is not None:
            written.extend(self.frontend_gen.generate(root, self.config.frontend))
            written.extend(self.docker_gen.generate_compose(root, self.config.frontend))

        # 11. Workspace members
        for module in self.config.modules():
            written.extend(self._create_module(root, module))

        # 12. Sample application layer
        if is_sample:
            written.extend(self.sample_gen.generate(root))

        # overwritten paths (the sample compose file) are listed once
        files = list(dict.fromkeys(p.relative_to(root) for p in written))
        logger.info("wrote %d files under %s", len(files), root)
        return GenerationResult(root=root, files=files)

    # -- Workspace ----------------------------------------------------------

    def _create_workspace_manifest(self, root: Path) -> Path:
        template = self.renderer.require(Asset.WORKSPACE_MANIFEST)
        engine = TemplateEngine(
            {
                "project_name": self.config.name,
                "modules": self._modules_list(),
                "authors": self._authors(),
                "repository": self._repository(),
            }
        )
        return write_file(root / "Cargo.toml", engine.render(template))

    def _modules_list(self) -> str:
        return ", ".join(f'"crates/{m.dir_name}"' for m in self.config.modules())

    def _authors(self) -> str:
        name, email = self.config.author_name, self.config.author_email
        if name and email:
            return f'"{name} <{email}>"'
        if name:
            return f'"{name}"'
        if email:
            return f'"<{email}>"'
        return ""

    def _repository(self) -> str:
        if self.config.author_name:
            return f"https://github.com/{self.config.name}"
        return ""

    def _create_workflows(self, root: Path) -> list[Path]:
        workflows_dir = root / ".github" / "workflows"
        workflows_dir.mkdir(parents=True, exist_ok=True)
        return self._render_all(_WORKFLOWS, workflows_dir)

    def _create_proto(self, root: Path) -> list[Path]:
        proto_dir = root / "proto"
        proto_dir.mkdir(exist_ok=True)
        engine = TemplateEngine(
            {
                "project_name": self.config.name,
                "project_name_snake": self.config.name_snake,
                "project_name_pascal": self.config.name_pascal,
            }
        )
        path = self.renderer.render_to_file(
            Asset.PROTO_SERVICE, proto_dir / "service.proto", engine
        )
        return [path] if path is not None else []

    # -- Modules ------------------------------------------------------------

    def _create_module(self, root: Path, module: Module) -> list[Path]:
        module_dir = root / "crates" / module.dir_name
        module_dir.mkdir(parents=True, exist_ok=True)
        (module_dir / "src").mkdir(exist_ok=True)
        written: list[Path] = []

        manifest = self.renderer.render_to_file(
            self._manifest_template(module),
            module_dir / "Cargo.toml",
            self._module_engine(module),
        )
        if manifest is not None:
            written.append(manifest)

        if module is Module.CLI:
            entry_template, entry_name = self._cli_main_template(), "main.rs"
        else:
            entry_template, entry_name = module_template(module, "lib.rs"), "lib.rs"
        entry = self.renderer.render_to_file(
            entry_template, module_dir / "src" / entry_name, self.engine
        )
        if entry is not None:
            written.append(entry)

        written.extend(self._create_module_extras(module_dir, module))
        return written

    def _manifest_template(self, module: Module) -> str:
        if module is Module.CLI:
            if self.config.project_type is ProjectType.SAMPLE:
                return Asset.SAMPLE_CLI_MANIFEST
            if self.config.project_type is ProjectType.SERVICE:
                return Asset.CLI_SERVICE_MANIFEST
        return module_template(module, "Cargo.toml")

    def _cli_main_template(self) -> str:
        if self.config.project_type is ProjectType.SAMPLE:
            return Asset.SAMPLE_CLI_MAIN
        if self.config.project_type is ProjectType.SERVICE:
            return Asset.CLI_SERVICE_MAIN
        return module_template(Module.CLI, "main.rs")

    def _module_engine(self, module: Module) -> TemplateEngine:
        grpc_api = module is Module.API and self.config.has_grpc
        persistence = self.config.persistence if module is Module.PERSISTENCE else None
        return TemplateEngine(
            {
                "project_name": self.config.name,
                "project_name_snake": self.config.name_snake,
                "module_name": module.dir_name,
                "persistence_deps": PERSISTENCE_DEPS.get(persistence, "") if persistence else "",
                "grpc_deps": GRPC_DEPS if grpc_api else "",
                "build_deps": GRPC_BUILD_DEPS if grpc_api else "",
            }
        )

    def _create_module_extras(self, module_dir: Path, module: Module) -> list[Path]:
        src = module_dir / "src"
        is_sample = self.config.project_type is ProjectType.SAMPLE

        if module is Module.CORE:
            (module_dir / "examples").mkdir(exist_ok=True)
            return self._render_all(
                {
                    Asset.CORE_ERROR: "src/error.rs",
                    Asset.CORE_EXAMPLE: "examples/basic.rs",
                },
                module_dir,
            )

        if module is Module.API:
            (src / "handlers").mkdir(exist_ok=True)
            files = {
                Asset.SAMPLE_API_ROUTES if is_sample else Asset.API_ROUTES: "routes.rs",
                Asset.SAMPLE_API_HANDLERS if is_sample else Asset.API_HANDLERS: "handlers/mod.rs",
            }
            written = self._render_all(files, src)
            if self.config.has_grpc:
                written.extend(self._render_all({Asset.API_BUILD_SCRIPT: "build.rs"}, module_dir))
            return written

        if module is Module.RUNTIME:
            return self._render_all({Asset.RUNTIME_SERVER: "server.rs"}, src)

        if module is Module.CLIENT:
            return self._render_all({Asset.CLIENT_HTTP: "http.rs"}, src)

        if module is Module.PERSISTENCE and self.config.persistence is not None:
            return [write_file(module_dir / "migrations" / ".gitkeep", "")]

        return []

    # -- Helpers ------------------------------------------------------------

    def _render_all(self, files: dict[Asset, str], target_dir: Path) -> list[Path]:
        written: list[Path] = []
        for asset, output_name in files.items():
            path = self.renderer.render_to_file(asset, target_dir / output_name, self.engine)
            if path is not None:
                written.append(path)
        return written
