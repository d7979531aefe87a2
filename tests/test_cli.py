"""Tests for the eachr command line."""

import io
import json

import pytest

from eachr.cli import json_equal, main, run


# ---------------------------------------------------------------------------
# run()
# ---------------------------------------------------------------------------

def test_run_array():
    out = io.StringIO()
    assert run(["hello", "world"], out=out) == 2
    assert out.getvalue() == '0\t"hello"\n1\t"world"\n'

def test_run_object():
    out = io.StringIO()
    run({"a": 1, "b": "two"}, out=out)
    assert out.getvalue().splitlines() == ["a\t1", 'b\t"two"']

def test_run_until_stops_before_match():
    out = io.StringIO()
    count = run(["hello", "world", "break", "never"], until="break", out=out)
    assert count == 2
    assert "never" not in out.getvalue()

def test_run_non_ascii_kept():
    out = io.StringIO()
    run(["山田"], out=out)
    assert out.getvalue() == '0\t"山田"\n'


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"x": [1, 2]}), encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "x\t[1, 2]\n"

def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("[true, null]"))
    assert main([]) == 0
    assert capsys.readouterr().out == "0\ttrue\n1\tnull\n"

def test_main_until(tmp_path, capsys):
    path = tmp_path / "doc.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert main([str(path), "--until", "2"]) == 0
    assert capsys.readouterr().out == "0\t1\n"

def test_main_scalar_document(tmp_path, capsys):
    path = tmp_path / "doc.json"
    path.write_text("42", encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: eachr does not know how to iterate")

def test_main_invalid_json(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text("{nope", encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        main([str(path)])
    assert info.value.code == 2

def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "missing.json")])
    assert info.value.code == 2

def test_main_until_compares_decoded_values(tmp_path, capsys):
    path = tmp_path / "doc.json"
    path.write_text('[{"a": 1}, 2.0, "end"]', encoding="utf-8")
    assert main([str(path), "--until", "2"]) == 0
    assert capsys.readouterr().out == '0\t{"a": 1}\n'

def test_main_until_object(tmp_path, capsys):
    path = tmp_path / "doc.json"
    path.write_text('[0, {"a": 1}, 2]', encoding="utf-8")
    assert main([str(path), "--until", '{"a":1}']) == 0
    assert capsys.readouterr().out == "0\t0\n"

def test_main_until_invalid_json(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text("[1]", encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        main([str(path), "--until", "nope"])
    assert info.value.code == 2

def test_main_not_utf8(tmp_path):
    path = tmp_path / "doc.json"
    path.write_bytes(b'["\xff\xfe"]')
    with pytest.raises(SystemExit) as info:
        main([str(path)])
    assert info.value.code == 2


# ---------------------------------------------------------------------------
# json_equal
# ---------------------------------------------------------------------------

def test_json_equal_int_and_float():
    assert json_equal(2, 2.0)

def test_json_equal_bool_is_not_number():
    assert not json_equal(True, 1)
    assert not json_equal(0, False)
    assert json_equal(False, False)

def test_json_equal_nested():
    assert json_equal({"a": [1, {"b": None}]}, {"a": [1.0, {"b": None}]})
    assert not json_equal({"a": [True]}, {"a": [1]})
    assert not json_equal([1, 2], [1])
    assert not json_equal({"a": 1}, {"b": 1})
    assert not json_equal([1], {"0": 1})

def test_json_equal_null():
    assert json_equal(None, None)
    assert not json_equal(None, 0)
