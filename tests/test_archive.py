import tarfile
from pathlib import Path

from docset_assembler import DocsetConfig, create_docset
from docset_assembler.archive import archive_docset


def test_archive_docset(docs: Path, tmp_path: Path) -> None:
    bundle = create_docset(DocsetConfig(documentation=docs, destination=tmp_path / "out", name="MyLib"))
    archive = archive_docset(bundle.path)
    assert archive == bundle.path.parent / "MyLib.tgz"
    with tarfile.open(archive) as tar:
        names = tar.getnames()
    assert "MyLib.docset/Contents/Info.plist" in names
    assert "MyLib.docset/Contents/Resources/docSet.dsidx" in names
    assert "MyLib.docset/Contents/Resources/Documents/guide/intro.html" in names


def test_archive_into_other_folder(docs: Path, tmp_path: Path) -> None:
    bundle = create_docset(DocsetConfig(documentation=docs, destination=tmp_path / "out", name="MyLib"))
    archive = archive_docset(bundle.path, tmp_path / "dist")
    assert archive == tmp_path / "dist" / "MyLib.tgz"
    assert archive.exists()
