import json

import pytest

import main

from conftest import VALID_TEXTS
from test_pipeline import k1_pdf2json


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("SERVE", "DEFAULT_LAYOUT", "MIN_FIELDS", "MAX_PAGES", "LAYOUTS_DIR"):
        monkeypatch.delenv(key, raising=False)


def _json_tail(out: str) -> dict:
    # log lines share stdout; the report is the trailing indented object
    return json.loads(out[out.index("{\n"):])


def _run(monkeypatch, *args):
    monkeypatch.setattr("sys.argv", ["main.py", *args])
    main.main()


def test_usage_without_arguments(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch)
    assert exc.value.code == 2
    assert "Usage" in capsys.readouterr().out


def test_missing_file(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, str(tmp_path / "absent.pdf"))
    assert exc.value.code == 2
    assert "File not found" in capsys.readouterr().out


def test_no_valid_page_prints_diagnostics(monkeypatch, capsys, tmp_path):
    src = tmp_path / "k1.json"
    src.write_bytes(k1_pdf2json([[("Acme LLC", 12, 50)]]))
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, str(src))
    assert exc.value.code == 1
    diag = _json_tail(capsys.readouterr().out)
    assert "not recognized" in diag["error"]
    assert [f["text"] for f in diag["result"]["fields"]["i_A"]] == ["Acme LLC"]
    assert diag["attempts"][0]["valid"] is False


def test_prints_result(monkeypatch, capsys, tmp_path):
    src = tmp_path / "k1.json"
    src.write_bytes(k1_pdf2json([VALID_TEXTS]))
    _run(monkeypatch, str(src))
    out = _json_tail(capsys.readouterr().out)
    assert out["page"] == 1
    assert out["layout"] == "k1-2024"
    assert sorted(out["result"]["fields"]) == ["i_A", "i_B", "ii_E"]
