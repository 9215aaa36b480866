import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "paginate.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("paginate_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_writes_pages_as_json(cli, tmp_path):
    source = tmp_path / "notes.txt"
    source.write_text("\n".join(f"段落{i}。" for i in range(20)), encoding="utf-8")
    output = tmp_path / "out" / "pages.json"

    assert cli.main([str(source), "-o", str(output), "--preset", "xhs-3"]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert len(payload) == 1
    doc = payload[0]
    assert doc["title"] == "notes"
    assert [page["index"] for page in doc["pages"]] == list(range(len(doc["pages"])))
    assert doc["pages"][0]["filename"].endswith("_notes_P1.png")
    assert doc["pages"][0]["title"] == "notes"


def test_custom_size_overrides_ratio(cli):
    args = cli._parse_args(["x.txt", "--ratio", "3:4", "--custom-size", "9", "16"])
    style = cli._style_for(args=args, title="t")
    assert style.aspect_ratio == "custom"
    assert style.ratio() == (9.0, 16.0)


def test_unwritable_output_reports_export_error(cli, tmp_path, capsys):
    source = tmp_path / "notes.txt"
    source.write_text("内容。", encoding="utf-8")
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    assert cli.main([str(source), "-o", str(blocker / "pages.json")]) == 1
    assert "retry" in capsys.readouterr().err
