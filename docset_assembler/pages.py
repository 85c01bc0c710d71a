"""Derive Guide entries from the titles of the copied HTML pages."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from bs4 import BeautifulSoup

from .config import SearchEntry

log = logging.getLogger(__name__)

SKIPPED_PAGES = {"404.html"}
REDIRECT_TITLE = "Redirecting..."


def page_title(html: str, fallback: str) -> str | None:
    """
    Return the page title up to the first ``|``, *fallback* when there is none,
    or ``None`` for redirect pages.
    """
    soup = BeautifulSoup(html, "lxml")
    title_tag = soup.find("title")
    title = title_tag.get_text() if title_tag else ""
    title = title.split("|")[0].strip()
    if title == REDIRECT_TITLE:
        return None
    return title or fallback


def scan_pages(documents_dir: Path) -> list[SearchEntry]:
    """Return one Guide entry per HTML page under *documents_dir*, sorted by path."""
    documents_dir = Path(documents_dir)
    entries: list[SearchEntry] = []
    for root, dirs, files in os.walk(documents_dir):
        dirs.sort()
        for file in sorted(files):
            if not file.endswith(".html") or file in SKIPPED_PAGES:
                continue
            abspath = Path(root) / file
            relpath = abspath.relative_to(documents_dir).as_posix()
            html = abspath.read_text(encoding="utf-8", errors="replace")
            title = page_title(html, relpath)
            if title is None:
                log.debug("Skipping redirect page: %s", relpath)
                continue
            entries.append(SearchEntry(title, "Guide", relpath))
    log.debug("Scanned %d pages under %s", len(entries), documents_dir)
    return entries
