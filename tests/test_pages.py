from pathlib import Path

from docset_assembler.config import SearchEntry
from docset_assembler.pages import page_title, scan_pages


def test_page_title() -> None:
    assert page_title("<html><head><title>Intro | MyLib</title></head></html>", "x.html") == "Intro"
    assert page_title("<html><body>no title</body></html>", "x.html") == "x.html"
    assert page_title("<title>Redirecting...</title>", "x.html") is None


def test_scan_pages_skips_404_and_redirects(tmp_path: Path) -> None:
    (tmp_path / "ref").mkdir()
    (tmp_path / "index.html").write_text("<title>Home</title>")
    (tmp_path / "404.html").write_text("<title>Not found</title>")
    (tmp_path / "old.html").write_text("<title>Redirecting...</title>")
    (tmp_path / "style.css").write_text("body {}")
    (tmp_path / "ref" / "cli.html").write_text("<title>CLI | Reference</title>")

    assert scan_pages(tmp_path) == [
        SearchEntry("Home", "Guide", "index.html"),
        SearchEntry("CLI", "Guide", "ref/cli.html"),
    ]
