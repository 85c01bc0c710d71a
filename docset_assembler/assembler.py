"""
assembler.py
============
Builds a Dash docset bundle from an existing HTML documentation tree.

Bundle layout
-------------
    <identifier>.docset/
        icon.png
        Contents/
            Info.plist
            Resources/
                docSet.dsidx
                Documents/

The bundle is deleted and rebuilt from scratch on every run.  When the
documentation folder is also the destination, the documentation is first
moved to a temporary folder so it is not copied into itself.
"""

from __future__ import annotations

import logging
import re
import shutil
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path

from .config import DocsetConfig
from .database import init_database, insert_entries
from .errors import ConfigurationError, FilesystemError
from .pages import scan_pages
from .plist import write_info_plist

log = logging.getLogger(__name__)

INFO_PLIST = "Info.plist"
ICON = "icon.png"
SQLITE_DB = "docSet.dsidx"
DOCSET_EXTENSION = ".docset"
CONTENTS_PATH = ("Contents",)
RESOURCES_PATH = ("Contents", "Resources")
DOCUMENTS_PATH = ("Contents", "Resources", "Documents")

# Characters an XML property list can't hold.
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def _is_valid_string(value) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _has_control_chars(value) -> bool:
    return isinstance(value, str) and _CONTROL_CHARS.search(value) is not None


def _is_inside(path: Path, parent: Path) -> bool:
    """True when *path* is strictly below *parent*."""
    return parent in path.parents


@dataclass(frozen=True)
class DocsetBundle:
    """What ``DocsetAssembler.create`` produced."""

    path: Path
    documents_path: Path
    database_path: Path
    info_plist_path: Path
    icon_path: Path | None
    entry_count: int


class DocsetAssembler:
    """Validates a ``DocsetConfig`` and builds the docset it describes."""

    def __init__(self, config: DocsetConfig) -> None:
        if not (_is_valid_string(config.documentation) or isinstance(config.documentation, Path)):
            raise ConfigurationError(
                "Please provide the path to the html documentation (config: documentation)"
            )
        documentation = Path(config.documentation).expanduser()
        if not documentation.exists():
            raise ConfigurationError(
                f"Documentation path does not exist: {documentation} (config: documentation)"
            )
        if not _is_valid_string(config.name):
            raise ConfigurationError("Please provide a valid name for this docset (config: name)")
        if not _is_valid_string(config.identifier) or "/" in config.identifier or "\\" in config.identifier:
            raise ConfigurationError(
                f"Invalid docset identifier {config.identifier!r} (config: identifier)"
            )
        for field_name in ("name", "identifier", "platform_family", "index", "fallback_url", "keyword"):
            if _has_control_chars(getattr(config, field_name)):
                raise ConfigurationError(
                    f"{field_name} can't contain control characters (config: {field_name})"
                )

        self.config = config
        self._level = logging.INFO if config.verbose else logging.DEBUG
        self._relocated_to: Path | None = None

        self.documentation = documentation.resolve()
        self.docset_root = Path(config.destination).expanduser().resolve()
        self.documentation_at_destination = self.documentation == self.docset_root

        if _is_inside(self.docset_root, self.documentation):
            raise ConfigurationError(
                "The docset destination can't be a subfolder of the documentation folder"
            )

        self.docset_path = self.docset_root / (config.identifier + DOCSET_EXTENSION)
        if self.documentation == self.docset_path or _is_inside(self.documentation, self.docset_path):
            raise ConfigurationError(
                f"The documentation folder can't be inside the docset being rebuilt: {self.docset_path}"
            )

        self.icon = Path(config.icon).expanduser().resolve() if config.icon else None
        self.docset_documents_path = self.docset_path.joinpath(*DOCUMENTS_PATH)
        self.docset_icon_path = self.docset_path / ICON
        self.docset_sqlite_path = self.docset_path.joinpath(*RESOURCES_PATH, SQLITE_DB)
        self.docset_info_plist_path = self.docset_path.joinpath(*CONTENTS_PATH, INFO_PLIST)

    def _log(self, msg: str, *args) -> None:
        log.log(self._level, msg, *args)

    # ── Pipeline ───────────────────────────────────────────────────────────────

    def create(self) -> DocsetBundle:
        """Build the docset. Returns once the search index is populated."""
        try:
            relocated = self._relocate_documentation()
            self._create_structure()
            self._copy_documentation()
            if relocated:
                shutil.rmtree(self._relocated_to)
                self._relocated_to = None
                self.documentation = self.docset_documents_path
            icon_path = self._copy_icon()
            self._create_info_plist()
        except (OSError, shutil.Error) as exc:
            if self._relocated_to is not None and self._relocated_to.exists():
                log.warning("Documentation pages are kept at %s", self._relocated_to)
            raise FilesystemError(str(exc)) from exc

        entry_count = self._populate_database()
        log.info("Docset ready: %s (%d entries)", self.docset_path, entry_count)
        return DocsetBundle(
            path=self.docset_path,
            documents_path=self.docset_documents_path,
            database_path=self.docset_sqlite_path,
            info_plist_path=self.docset_info_plist_path,
            icon_path=icon_path,
            entry_count=entry_count,
        )

    def _relocate_documentation(self) -> bool:
        """Move the documentation out of the way when it is also the destination."""
        if not self.documentation_at_destination:
            return False
        tmp_dir = Path(tempfile.mkdtemp(prefix=f"docset-documentation-{int(time.time() * 1000)}-"))
        self._relocated_to = tmp_dir
        tmp_documentation = tmp_dir / self.documentation.name
        self._log("Moving documentation to %s", tmp_documentation)
        # A bundle left by an earlier build in place is not part of the pages.
        shutil.copytree(self.documentation, tmp_documentation, ignore=self._ignore_bundle)
        shutil.rmtree(self.documentation)
        self.documentation = tmp_documentation
        return True

    def _ignore_bundle(self, folder: str, names: list[str]) -> list[str]:
        if Path(folder) == self.documentation and self.docset_path.name in names:
            return [self.docset_path.name]
        return []

    def _create_structure(self) -> None:
        if not self.docset_root.exists():
            self.docset_root.mkdir(parents=True)
        if self.docset_path.exists():
            self._log("Folder %s already exists. Deleting it...", self.docset_path)
            shutil.rmtree(self.docset_path)
        self.docset_documents_path.mkdir(parents=True)
        self._log("Folder structure %s created.", self.docset_documents_path)

    def _copy_documentation(self) -> None:
        shutil.copytree(self.documentation, self.docset_documents_path, dirs_exist_ok=True)
        self._log("HTML documentation copied to %s.", self.docset_documents_path)

    def _copy_icon(self) -> Path | None:
        if self.icon is None:
            self._log("No icon specified.")
            return None
        if not self.icon.exists():
            log.warning("Icon not found: %s", self.icon)
            return None
        shutil.copyfile(self.icon, self.docset_icon_path)
        self._log("%s copied to docset.", ICON)
        return self.docset_icon_path

    def _create_info_plist(self) -> None:
        write_info_plist(
            self.docset_info_plist_path,
            identifier=self.config.identifier,
            name=self.config.name,
            platform_family=self.config.platform_family,
            index=self.config.index,
            enable_javascript=self.config.enable_javascript,
            fallback_url=self.config.fallback_url,
            keyword=self.config.keyword,
        )
        self._log("%s written to docset.", INFO_PLIST)

    def _populate_database(self) -> int:
        entries = list(self.config.entries)
        if self.config.index_pages:
            try:
                entries.extend(scan_pages(self.docset_documents_path))
            except OSError as exc:
                raise FilesystemError(str(exc)) from exc

        conn = init_database(self.docset_sqlite_path)
        self._log("Database %s created.", SQLITE_DB)
        try:
            count = insert_entries(conn, entries)
        finally:
            conn.close()
        self._log("Inserted %d search entries.", count)
        return count


def create_docset(config: DocsetConfig) -> DocsetBundle:
    """Validate *config* and build its docset."""
    return DocsetAssembler(config).create()


