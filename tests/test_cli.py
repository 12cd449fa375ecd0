"""Tests for the command-line entry point."""

import pytest

from gohgen.__main__ import main
from gohgen.errors import UnsupportedValueTypeError

_FUNCTION = "func Render(w *bytes.Buffer)"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("GOH_PACKAGE", "GOH_DESTINATION", "GOH_FORMAT_COMMAND"):
        monkeypatch.delenv(key, raising=False)


class TestMain:

    def test_generates_file(self, write_document, tmp_path, capsys):
        document = write_document({
            "template": "views/index.html",
            "function": _FUNCTION,
            "blocks": [{"kind": "value", "type": "bool", "content": "ok"}],
        })
        out = tmp_path / "out"
        assert main([str(document), "--dest", str(out), "--package", "views"]) == 0

        source = (out / "index.html.go").read_text()
        assert "package views\n" in source
        assert "w.Grow(5)\nGoh.FormatBool(ok, w)\n" in source
        assert f"Generated {out / 'index.html.go'} (1 blocks)" in capsys.readouterr().out

    def test_destination_from_env(self, write_document, tmp_path, monkeypatch):
        monkeypatch.setenv("GOH_DESTINATION", str(tmp_path / "env"))
        document = write_document({"template": "page.html"})
        assert main([str(document)]) == 0
        assert (tmp_path / "env" / "page.html.go").exists()

    def test_stops_at_first_invalid_function(self, write_document, tmp_path, capsys):
        bad = write_document({"template": "bad.html", "function": "func Render(n int)"})
        good = write_document({"template": "good.html", "function": _FUNCTION})
        out = tmp_path / "out"

        assert main([str(bad), str(good), "--dest", str(out)]) == 1
        assert "error:" in capsys.readouterr().err
        assert not (out / "bad.html.go").exists()
        assert not (out / "good.html.go").exists()

    def test_bad_document(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json"), "--dest", str(tmp_path)]) == 1
        assert "cannot read document" in capsys.readouterr().err

    def test_bad_package(self, write_document, tmp_path, capsys):
        document = write_document({"template": "page.html"})
        assert main([str(document), "--dest", str(tmp_path), "--package", "no-dash"]) == 1
        assert "not a valid Go package name" in capsys.readouterr().err

    def test_unsupported_value_type_is_not_handled(self, write_document, tmp_path):
        document = write_document({
            "template": "page.html",
            "function": _FUNCTION,
            "blocks": [{"kind": "escape", "type": "float", "content": "f"}],
        })
        with pytest.raises(UnsupportedValueTypeError):
            main([str(document), "--dest", str(tmp_path)])

    def test_requires_documents(self):
        with pytest.raises(SystemExit):
            main([])
