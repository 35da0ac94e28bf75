"""Add-on files for an existing generated project.

``boots add <target>`` drops one extra file into a project that was already
generated: a GitHub workflow, or a Criterion benchmark for the core crate.
Targets never overwrite: an existing file aborts with
:class:`AlreadyExistsError` before anything is written.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path

import tomlkit
from tomlkit.exceptions import ParseError

from .assets import Asset
from .errors import AlreadyExistsError, ManifestError, UnknownTargetError
from .renderer import TemplateRenderer, write_file
from .templates import TemplateStore

logger = logging.getLogger(__name__)


ADD_TARGETS: dict[str, str] = {
    "gh:test": "GitHub workflow running the test suite",
    "gh:build": "GitHub workflow building the workspace",
    "gh:semver": "GitHub workflow checking semver compatibility",
    "test:perf": "Criterion benchmark for the core crate",
}

_WORKFLOW_TARGETS: dict[str, Asset] = {
    "gh:test": Asset.WORKFLOW_TEST,
    "gh:build": Asset.WORKFLOW_BUILD,
    "gh:semver": Asset.WORKFLOW_SEMVER,
}

CRITERION_VERSION = "1.0"
BENCH_NAME = "benchmark"


def add(
    target: str,
    project_dir: str | Path = ".",
    store: TemplateStore | None = None,
) -> list[Path]:
    """Add *target* to the project in *project_dir*.

    Returns:
        Paths written or modified, relative to *project_dir*.

    Raises:
        UnknownTargetError: *target* is not one of :data:`ADD_TARGETS`.
        AlreadyExistsError: the target file is already present.
        ManifestError: ``crates/core/Cargo.toml`` is not valid TOML.
    """
    if target not in ADD_TARGETS:
        raise UnknownTargetError(target)

    root = Path(project_dir)
    renderer = TemplateRenderer(store or TemplateStore.bundled())

    if target in _WORKFLOW_TARGETS:
        asset = _WORKFLOW_TARGETS[target]
        relative = Path(".github") / "workflows" / Path(asset.value).name
        if (root / relative).exists():
            raise AlreadyExistsError(relative.as_posix())
        content = renderer.require(asset)
        write_file(root / relative, content)
        logger.info("added %s", relative)
        return [relative]

    return _add_test_perf(root, renderer)


# ---------------------------------------------------------------------------
# test:perf
# ---------------------------------------------------------------------------


def _add_test_perf(root: Path, renderer: TemplateRenderer) -> list[Path]:
    bench_file = Path("crates") / "core" / "benches" / f"{BENCH_NAME}.rs"
    manifest = Path("crates") / "core" / "Cargo.toml"

    if (root / bench_file).exists():
        raise AlreadyExistsError(bench_file.as_posix())

    content = renderer.require(Asset.BENCHMARK)

    manifest_path = root / manifest
    text = manifest_path.read_text(encoding="utf-8")
    updated = add_criterion(text)
    if updated != text:
        manifest_path.write_text(updated, encoding="utf-8")

    write_file(root / bench_file, content)
    logger.info("added %s", bench_file)
    return [manifest, bench_file]


def add_criterion(manifest: str) -> str:
    """Register criterion and a ``[[bench]]`` target in a crate manifest.

    Each piece is added only when absent.  The manifest is edited as a
    ``tomlkit`` document so formatting and comments survive; dev-dependencies
    may be a table, a set of ``[dev-dependencies.<name>]`` sub-tables or an
    inline table.  An unchanged manifest is returned as-is.
    """
    text = manifest if manifest.endswith("\n") or not manifest else manifest + "\n"
    try:
        document = tomlkit.parse(text)
    except ParseError as exc:
        raise ManifestError(f"Failed to parse Cargo.toml: {exc}") from exc

    changed = False

    dev_deps = document.get("dev-dependencies")
    if dev_deps is None:
        table = tomlkit.table()
        table.add("criterion", CRITERION_VERSION)
        document.add("dev-dependencies", table)
        changed = True
    elif not isinstance(dev_deps, Mapping):
        raise ManifestError("Failed to parse Cargo.toml: dev-dependencies is not a table")
    elif "criterion" not in dev_deps:
        dev_deps["criterion"] = CRITERION_VERSION
        changed = True

    if "bench" not in document:
        bench = tomlkit.table()
        bench.add("name", BENCH_NAME)
        bench.add("harness", False)
        benches = tomlkit.aot()
        benches.append(bench)
        document.add("bench", benches)
        changed = True

    if not changed:
        return manifest

    updated = tomlkit.dumps(document)
    _check_manifest(updated)
    return updated


def _check_manifest(text: str) -> None:
    try:
        tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestError(f"Failed to parse Cargo.toml: {exc}") from exc
