"""Read-only template stores for project scaffolding.

A template store maps a logical path such as ``"modules/api/routes.rs"`` to
the raw text of that template.  Stores never render anything: substitution is
the job of :class:`~boots.scaffolder.engine.TemplateEngine`.  Lookups go
through a Jinja2 loader so the same store works over the templates bundled
in ``boots/scaffolder/templates/``, an on-disk directory, an in-memory
mapping, or a downloaded zip archive.
"""

from __future__ import annotations

import io
import logging
import posixpath
import zipfile
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
from jinja2 import BaseLoader, DictLoader, Environment, FileSystemLoader, TemplateNotFound

from .errors import TemplateError

if TYPE_CHECKING:
    from boots.config import Config

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Archive limits
MAX_ARCHIVE_BYTES = 20 * 1024 * 1024
MAX_ARCHIVE_FILES = 2000
MAX_EXTRACTED_BYTES = 50 * 1024 * 1024


# ---------------------------------------------------------------------------
# TemplateStore
# ---------------------------------------------------------------------------


class TemplateStore:
    """Looks up raw template text by logical path.

    The store is immutable for its lifetime.  A missing template is reported
    as ``None`` so callers can skip optional files; content that is not valid
    UTF-8 raises :class:`TemplateError` naming the offending path.
    """

    def __init__(self, loader: BaseLoader, source: str = "memory") -> None:
        self.source = source
        self.env = Environment(loader=loader, keep_trailing_newline=True)
        self.loader = loader

    # -- Constructors -------------------------------------------------------

    @classmethod
    def bundled(cls) -> TemplateStore:
        """The templates shipped with the package."""
        return cls(FileSystemLoader(str(_DEFAULT_TEMPLATE_DIR)), source="bundled")

    @classmethod
    def from_directory(cls, template_dir: str | Path) -> TemplateStore:
        """Templates read from *template_dir* on disk."""
        path = Path(template_dir)
        if not path.is_dir():
            raise TemplateError(f"template directory not found: {path}", str(path))
        return cls(FileSystemLoader(str(path)), source=str(path))

    @classmethod
    def from_mapping(cls, templates: Mapping[str, str]) -> MemoryTemplateStore:
        """Templates held in memory, keyed by logical path."""
        return MemoryTemplateStore(templates)

    # -- Lookup -------------------------------------------------------------

    def get_template(self, path: str) -> str | None:
        """Return the raw text stored at *path*, or ``None`` if absent."""
        path = str(path)
        try:
            source, _filename, _uptodate = self.loader.get_source(self.env, path)
        except TemplateNotFound:
            return None
        except UnicodeDecodeError as exc:
            raise TemplateError(f"{path} is not valid UTF-8", path) from exc
        return source

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return the sorted logical paths that start with *prefix*."""
        return sorted(p for p in self.loader.list_templates() if p.startswith(prefix))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and path in self.list_templates(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self.source!r})"


# ---------------------------------------------------------------------------
# In-memory and archive-backed stores
# ---------------------------------------------------------------------------


class MemoryTemplateStore(TemplateStore):
    """Templates held in a dict, keyed by logical path."""

    def __init__(self, templates: Mapping[str, str], source: str = "memory") -> None:
        super().__init__(DictLoader(dict(templates)), source=source)


class ArchiveTemplateStore(MemoryTemplateStore):
    """Templates extracted from a zip archive (e.g. a GitHub source download).

    Entries whose bytes are not UTF-8 are remembered and reported as a
    :class:`TemplateError` when requested, matching the other stores.
    """

    def __init__(
        self,
        templates: Mapping[str, str],
        undecodable: set[str] | None = None,
        source: str = "archive",
    ) -> None:
        super().__init__(templates, source=source)
        self._undecodable = set(undecodable or ())

    @classmethod
    def from_bytes(cls, data: bytes, source: str = "archive") -> ArchiveTemplateStore:
        """Load templates from the bytes of a zip archive.

        A single top-level directory shared by every entry (``repo-main/``)
        is stripped.  Absolute paths and ``..`` segments are rejected.
        """
        if len(data) > MAX_ARCHIVE_BYTES:
            raise TemplateError(
                f"archive size exceeds limit: {len(data)} > {MAX_ARCHIVE_BYTES} bytes"
            )

        try:
            zf = zipfile.ZipFile(io.BytesIO(data), "r")
        except zipfile.BadZipFile as exc:
            raise TemplateError("invalid zip archive") from exc

        with zf:
            names = [n for n in zf.namelist() if not n.endswith("/")]
            if len(names) > MAX_ARCHIVE_FILES:
                raise TemplateError(
                    f"too many files in archive: {len(names)} > {MAX_ARCHIVE_FILES}"
                )

            strip = _common_root(names)
            templates: dict[str, str] = {}
            undecodable: set[str] = set()
            total = 0

            for name in names:
                relative = name[len(strip):] if strip else name
                if not relative:
                    continue
                if not _is_safe_path(relative):
                    logger.warning("unsafe path in template archive: %s", relative)
                    raise TemplateError(f"unsafe path in archive: {relative}", relative)

                total += zf.getinfo(name).file_size
                if total > MAX_EXTRACTED_BYTES:
                    raise TemplateError(
                        f"extracted size exceeds limit: {total} > {MAX_EXTRACTED_BYTES} bytes"
                    )

                raw = zf.read(name)
                try:
                    templates[relative] = raw.decode("utf-8")
                except UnicodeDecodeError:
                    undecodable.add(relative)

        logger.debug("loaded %d templates from %s", len(templates), source)
        return cls(templates, undecodable, source=source)

    @classmethod
    def download(
        cls,
        url: str,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> ArchiveTemplateStore:
        """Download a zip archive from *url* and load it."""
        logger.info("downloading templates from %s", url)
        owns_client = client is None
        if client is None:
            client = httpx.Client(timeout=timeout, follow_redirects=True)

        try:
            response = client.get(url)
        except httpx.TimeoutException as exc:
            raise TemplateError(f"template download timed out: {url}") from exc
        except httpx.HTTPError as exc:
            raise TemplateError(
                f"template download failed: {type(exc).__name__}: {url}"
            ) from exc
        finally:
            if owns_client:
                client.close()

        if response.status_code != 200:
            raise TemplateError(
                f"template download failed: HTTP {response.status_code}: {url}"
            )

        store = cls.from_bytes(response.content, source=url)
        logger.info("downloaded %d templates from %s", len(store.list_templates()), url)
        return store

    def get_template(self, path: str) -> str | None:
        path = str(path)
        if path in self._undecodable:
            raise TemplateError(f"{path} is not valid UTF-8", path)
        return super().get_template(path)

    def list_templates(self, prefix: str = "") -> list[str]:
        names = set(super().list_templates(prefix))
        names.update(p for p in self._undecodable if p.startswith(prefix))
        return sorted(names)


# ---------------------------------------------------------------------------
# Backend selection
# ---------------------------------------------------------------------------


def open_store(config: Config) -> TemplateStore:
    """Return the template store selected by *config*.

    ``template_url`` wins over ``template_dir``; with neither set the
    bundled templates are used.
    """
    if config.template_url:
        return ArchiveTemplateStore.download(
            config.template_url, timeout=config.download_timeout
        )
    if config.template_dir is not None:
        return TemplateStore.from_directory(config.template_dir)
    return TemplateStore.bundled()


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _common_root(names: list[str]) -> str:
    """Return ``"root/"`` when every entry lives under one directory."""
    if not names:
        return ""
    first = names[0].split("/", 1)
    if len(first) < 2:
        return ""
    root = first[0] + "/"
    if all(n.startswith(root) for n in names):
        return root
    return ""


def _is_safe_path(path: str) -> bool:
    """Reject absolute paths, drive letters and parent-directory segments."""
    if path.startswith(("/", "\\")) or (len(path) > 1 and path[1] == ":"):
        return False
    normalized = posixpath.normpath(path.replace("\\", "/"))
    return not (normalized == ".." or normalized.startswith("../"))
