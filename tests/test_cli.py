import io

import pytest

from slrkit.cli import main

EXPR = "# expressions\nE -> E + T | T\nT -> T * F | F\nF -> ( E ) | id\n"


@pytest.fixture
def grammar_file(tmp_path):
    path = tmp_path / "expr.g"
    path.write_text(EXPR, encoding="utf-8")
    return path


def test_accepted_input(grammar_file, capsys):
    assert main([str(grammar_file), "--input", "id + id * id"]) == 0
    out = capsys.readouterr().out
    assert "SLR PARSER (GENERIC)" in out
    assert "TOKENS: id + id * id \n" in out
    assert "LR(0) STATES" in out
    assert "ACTION TABLE" in out
    assert "GOTO TABLE" in out
    assert "=========== PARSING ===========" in out
    assert out.endswith("ACCEPTED: Input is valid\n")


def test_rejected_input(grammar_file, capsys):
    assert main([str(grammar_file), "-i", "id +"]) == 0
    out = capsys.readouterr().out
    assert "REJECTED: Invalid input" in out
    assert "ACCEPTED" not in out


def test_reads_input_from_stdin(grammar_file, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("( id )\n"))
    assert main([str(grammar_file)]) == 0
    out = capsys.readouterr().out
    assert "Enter input string: " in out
    assert "TOKENS: ( id ) \n" in out
    assert "ACCEPTED: Input is valid" in out


def test_missing_grammar_file(tmp_path, capsys):
    missing = tmp_path / "absent.g"
    assert main([str(missing), "-i", "id"]) == 1
    assert f"Could not open grammar file: {missing}" in capsys.readouterr().err


def test_grammar_without_rules(tmp_path, capsys):
    path = tmp_path / "empty.g"
    path.write_text("# nothing here\n", encoding="utf-8")
    assert main([str(path), "-i", "id"]) == 1
    assert "no rules" in capsys.readouterr().err


def test_conflicts_are_reported(tmp_path, capsys):
    path = tmp_path / "lr.g"
    path.write_text("S -> L = R | R\nL -> * R | id\nR -> L\n", encoding="utf-8")
    assert main([str(path), "-i", "id"]) == 0
    out = capsys.readouterr().out
    assert "Conflict at state" in out
    assert "symbol =" in out