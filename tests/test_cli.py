import plistlib
from pathlib import Path

from docset_assembler.cli import main
from docset_assembler.config import SearchEntry
from docset_assembler.database import read_entries


def test_cli_builds_docset(docs: Path, tmp_path: Path, icon: Path) -> None:
    entries = tmp_path / "entries.yml"
    entries.write_text("- {name: foo, type: Function, path: 'api.html#foo'}\n")
    out = tmp_path / "out"

    code = main(
        [
            "--documentation", str(docs),
            "--destination", str(out),
            "--name", "MyLib",
            "--identifier", "mylib",
            "--icon", str(icon),
            "--entries", str(entries),
            "--enable-javascript",
            "--archive",
        ]
    )

    assert code == 0
    bundle = out / "mylib.docset"
    assert (bundle / "icon.png").exists()
    assert (out / "mylib.tgz").exists()
    with open(bundle / "Contents" / "Info.plist", "rb") as fh:
        assert plistlib.load(fh)["isJavaScriptEnabled"] is True
    assert read_entries(bundle / "Contents" / "Resources" / "docSet.dsidx") == [
        SearchEntry("foo", "Function", "api.html#foo")
    ]


def test_cli_with_config_file(docs: Path, tmp_path: Path) -> None:
    config = tmp_path / "docset.yml"
    config.write_text(f"documentation: {docs.name}\ndestination: out\nname: MyLib\n")
    assert main(["--config", str(config), "--name", "Renamed", "--index-pages"]) == 0
    bundle = tmp_path / "out" / "Renamed.docset"
    names = [entry.name for entry in read_entries(bundle / "Contents" / "Resources" / "docSet.dsidx")]
    assert names == ["API", "MyLib", "Intro"]


def test_cli_reports_configuration_errors(tmp_path: Path) -> None:
    assert main(["--documentation", str(tmp_path / "missing"), "--name", "MyLib"]) == 1
    assert main(["--name", "MyLib"]) == 1


def test_cli_rejects_empty_documentation_in_config(tmp_path: Path) -> None:
    config = tmp_path / "docset.yml"
    config.write_text("documentation:\nname: MyLib\n")
    assert main(["--config", str(config)]) == 1
