"""Info.plist rendering for Dash docsets."""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path

log = logging.getLogger(__name__)

DOCSET_FAMILY = "dashtoc"


def render_info_plist(
    identifier: str,
    name: str,
    platform_family: str,
    index: str,
    enable_javascript: bool = False,
    fallback_url: str | None = None,
    keyword: str | None = None,
) -> str:
    """
    Return the text of the ``Info.plist`` manifest.

    ``plistlib`` escapes ``&``, ``<`` and ``>`` in string values, so caller
    supplied names cannot break the XML.
    """
    plist: dict = {
        "CFBundleIdentifier": identifier,
        "CFBundleName": name,
        "DocSetPlatformFamily": platform_family,
        "dashIndexFilePath": index,
        "DashDocSetFamily": DOCSET_FAMILY,
        "isDashDocset": True,
        "isJavaScriptEnabled": bool(enable_javascript),
    }
    if fallback_url:
        plist["DashDocSetFallbackURL"] = fallback_url
    if keyword:
        plist["DashDocSetKeyword"] = keyword
    return plistlib.dumps(plist, sort_keys=False).decode("utf-8")


def write_info_plist(path: Path, **fields) -> None:
    """Render the manifest and write it to *path*."""
    Path(path).write_text(render_info_plist(**fields), encoding="utf-8")
    log.debug("Wrote %s", path)
