from __future__ import annotations

from pathlib import Path

import pytest

INDEX_HTML = "<html><head><title>MyLib | Home</title></head><body><h1>MyLib</h1></body></html>"
API_HTML = "<html><head><title>API</title></head><body><h2 id='foo'>foo</h2></body></html>"


@pytest.fixture
def docs(tmp_path: Path) -> Path:
    """A small HTML documentation tree with a nested folder and a binary file."""
    root = tmp_path / "html"
    (root / "guide").mkdir(parents=True)
    (root / "_static").mkdir()
    (root / "index.html").write_text(INDEX_HTML)
    (root / "api.html").write_text(API_HTML)
    (root / "guide" / "intro.html").write_text("<html><head><title>Intro</title></head></html>")
    (root / "_static" / "logo.bin").write_bytes(bytes(range(256)))
    return root


@pytest.fixture
def icon(tmp_path: Path) -> Path:
    path = tmp_path / "logo.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image-data")
    return path
