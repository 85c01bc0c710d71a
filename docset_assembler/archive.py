"""Package a built docset as a ``.tgz`` for distribution."""

from __future__ import annotations

import logging
import tarfile
from pathlib import Path

from .errors import FilesystemError

log = logging.getLogger(__name__)


def archive_docset(bundle_path: Path, output_dir: Path | None = None) -> Path:
    """
    Write ``<identifier>.tgz`` next to the bundle (or into *output_dir*).

    The archive holds the bundle under its own ``<identifier>.docset`` name,
    which is the layout Dash expects for user contributed docsets.
    """
    bundle_path = Path(bundle_path)
    output_dir = Path(output_dir) if output_dir is not None else bundle_path.parent
    archive_path = output_dir / f"{bundle_path.stem}.tgz"
    log.info("Creating archive: %s", archive_path)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        with tarfile.open(str(archive_path), "w:gz") as tar:
            tar.add(str(bundle_path), arcname=bundle_path.name)
    except (OSError, tarfile.TarError) as exc:
        raise FilesystemError(f"Cannot create archive {archive_path}: {exc}") from exc
    size_mb = archive_path.stat().st_size / 1_000_000
    log.info("Archive created: %s (%.1f MB)", archive_path, size_mb)
    return archive_path
