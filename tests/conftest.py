"""Shared pytest fixtures for the boots test suite.

Provides reusable fixtures for:
- Temporary output directories
- A fixed author identity (no git lookups during tests)
- Bundled and in-memory template stores
- Zip archive bytes for the archive-backed store
"""

from __future__ import annotations

import io
import os
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from boots.scaffolder.identity import Identity
from boots.scaffolder.models import ProjectConfig, ProjectType
from boots.scaffolder.options import parse_options
from boots.scaffolder.templates import MemoryTemplateStore, TemplateStore


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_boots_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any BOOTS_* variables from the environment."""
    for key in list(os.environ):
        if key.startswith("BOOTS_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory that generated projects are created in."""
    out = tmp_path / "out"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_identity() -> Callable[[], Identity]:
    """Identity provider returning a fixed author."""
    return lambda: Identity(name="Jane Doe", email="jane@example.com")


@pytest.fixture
def make_config(fake_identity: Callable[[], Identity]) -> Callable[..., ProjectConfig]:
    """Factory: ``make_config(ProjectType.SERVICE, "my-api", "postgres")``."""

    def _make(
        project_type: ProjectType,
        name: str,
        options: str | None = None,
    ) -> ProjectConfig:
        return parse_options(project_type, name, options, identity=fake_identity)

    return _make


# ---------------------------------------------------------------------------
# Template stores
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def bundled_store() -> TemplateStore:
    """The templates shipped with the package."""
    return TemplateStore.bundled()


@pytest.fixture
def workspace_only_store() -> MemoryTemplateStore:
    """A store holding nothing but a TOML-parseable workspace manifest."""
    return MemoryTemplateStore(
        {
            "base/Cargo.workspace.toml": (
                "[workspace]\n"
                "members = [{{modules}}]\n"
                "\n"
                "[workspace.package]\n"
                'name = "{{project_name}}"\n'
                "authors = [{{authors}}]\n"
                'repository = "{{repository}}"\n'
            ),
        }
    )


# ---------------------------------------------------------------------------
# Archives
# ---------------------------------------------------------------------------

def build_zip(files: dict[str, str | bytes], root: str = "") -> bytes:
    """Return the bytes of a zip archive holding *files* under *root*."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, content in files.items():
            data = content.encode("utf-8") if isinstance(content, str) else content
            zf.writestr(f"{root}{name}", data)
    return buffer.getvalue()


@pytest.fixture
def zip_bytes() -> Callable[..., bytes]:
    """Factory building zip archive bytes, see :func:`build_zip`."""
    return build_zip
