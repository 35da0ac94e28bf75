"""Logical template paths used by the generator.

Every template the generator asks the store for is named here, so the
string keys of the store appear in exactly one place.  Per-module and
per-frontend templates are addressed through :func:`module_template` and
:func:`frontend_template`.
"""

from __future__ import annotations

from enum import Enum

from .models import FrontendType, Module


class Asset(str, Enum):
    """Fixed-path templates."""

    # Workspace root
    WORKSPACE_MANIFEST = "base/Cargo.workspace.toml"
    MAKEFILE = "base/Makefile"
    README = "base/README.md"
    GITIGNORE = "base/gitignore"
    TOOLCHAIN = "base/rust-toolchain.toml"
    ENV_EXAMPLE = "base/env.example"
    DOCKER_COMPOSE = "base/docker-compose.yml"

    # CI workflows
    WORKFLOW_BUILD = "github/build.yml"
    WORKFLOW_TEST = "github/test.yml"
    WORKFLOW_RELEASE = "github/release.yml"
    WORKFLOW_SEMVER = "github/semver.yml"

    # Container build
    DOCKERFILE = "docker/Dockerfile"
    DOCKERIGNORE = "docker/dockerignore"

    # gRPC
    PROTO_SERVICE = "proto/service.proto"

    # Module extras
    CORE_ERROR = "modules/core/error.rs"
    CORE_EXAMPLE = "modules/core/examples/basic.rs"
    API_ROUTES = "modules/api/routes.rs"
    API_HANDLERS = "modules/api/handlers/mod.rs"
    API_BUILD_SCRIPT = "modules/api/build.rs"
    RUNTIME_SERVER = "modules/runtime/server.rs"
    CLIENT_HTTP = "modules/client/http.rs"
    CLI_SERVICE_MANIFEST = "modules/cli/Cargo_service.toml"
    CLI_SERVICE_MAIN = "modules/cli/main_service.rs"

    # Sample application
    SAMPLE_MAKEFILE = "samples/Makefile"
    SAMPLE_README = "samples/README.md"
    SAMPLE_DOCKER_COMPOSE = "samples/docker-compose.yml"
    SAMPLE_CLI_MANIFEST = "samples/cli/Cargo.toml"
    SAMPLE_CLI_MAIN = "samples/cli/main.rs"
    SAMPLE_API_ROUTES = "samples/api/routes.rs"
    SAMPLE_API_HANDLERS = "samples/api/handlers/mod.rs"
    BOARD_MOD = "samples/board/mod.rs"
    BOARD_MODELS = "samples/board/models.rs"
    BOARD_PERMISSION = "samples/board/permission.rs"
    E2E_CONFIG = "samples/e2e/playwright.config.ts"
    E2E_PACKAGE = "samples/e2e/package.json"
    E2E_AUTH_HELPER = "samples/e2e/helpers/auth.ts"
    E2E_POSTS_SPEC = "samples/e2e/tests/posts.spec.ts"
    DOCS_API = "samples/docs/api.md"
    DOCS_ARCHITECTURE = "samples/docs/architecture.md"
    DOCS_E2E = "samples/docs/e2e-testing.md"

    # Add-ons
    BENCHMARK = "benches/benchmark.rs"

    def __str__(self) -> str:
        return self.value


def module_template(module: Module, filename: str) -> str:
    """``modules/<module>/<filename>``."""
    return f"modules/{module.dir_name}/{filename}"


def frontend_template(frontend: FrontendType, filename: str) -> str:
    """``frontend/<spa|ssr>/<filename>``."""
    return f"frontend/{frontend.value}/{filename}"
