"""Tests for the line driver in main.py."""

import json

import pytest

from main import process_file, process_line, run, validate_line


def test_validate_line_strips_semicolon_and_trailing_whitespace():
    assert validate_line("1 + 2;  \n") == "1 + 2"


@pytest.mark.parametrize("raw", ["", "   \n", "1 + 2", "1 + 2; x"])
def test_validate_line_rejects_missing_semicolon(raw):
    with pytest.raises(SyntaxError):
        validate_line(raw)


def test_run_evaluates_one_line():
    assert run("print 2 + 3 * 4") == "14"


def test_process_line_prints_stages(capsys):
    result = process_line("print 3 + 4", print_tokens=True)
    out = capsys.readouterr().out

    assert result == "7"
    assert "Tokens (5):" in out
    assert "PRINT((3 ADD 4))" in out
    assert "Operation(ADD)" in out
    assert out.rstrip().endswith("stdout: 7")


def test_process_line_quiet(capsys):
    assert process_line("6 / 3 / 2", print_inline=False, print_ast=False) == "1"
    assert capsys.readouterr().out == "stdout: 1\n"


def test_process_file_evaluates_lines_in_order(source_file):
    path = source_file("stampa 2 sprout 3;", "5 / 0;", "x + 1;")
    results = process_file(path, print_inline=False, print_ast=False)
    assert results == ["5", "Error: divide by zero", "1"]


def test_process_file_stops_at_invalid_line(source_file, capsys):
    path = source_file("1 + 1;", "2 + 2", "3 + 3;")
    results = process_file(path, print_inline=False, print_ast=False)

    assert results == ["2"]
    assert "lines must end with ';'" in capsys.readouterr().out


def test_process_file_strict_skips_line_with_missing_operand(source_file, capsys):
    path = source_file("1 +;", "2;", "3 * 4;")
    results = process_file(path, print_inline=False, print_ast=False, strict=True)

    assert results == ["2", "12"]
    assert "Syntax Error: line 1" in capsys.readouterr().out


def test_process_file_strict_still_stops_at_missing_semicolon(source_file):
    path = source_file("1 +;", "2", "3;")
    assert process_file(path, print_inline=False, print_ast=False, strict=True) == []


def test_process_file_dumps_ast_json(source_file, tmp_path):
    path = source_file("print 1;", "2 * 3;")
    dump = tmp_path / "ast.json"
    process_file(path, print_inline=False, print_ast=False, dump_ast_path=str(dump))

    trees = json.loads(dump.read_text(encoding="utf-8"))
    assert [t["node_type"] for t in trees] == ["Print", "Operation"]


def test_process_file_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        process_file(str(tmp_path / "missing.txt"))


def test_process_line_collects_tree_json():
    trees = []
    assert process_line("print 4 / 2", print_inline=False, print_ast=False, trees=trees) == "2"
    assert len(trees) == 1
    assert trees[0]["operand"]["token"] == {"kind": "DIV", "text": "/"}


def test_process_file_dump_skips_failed_strict_lines(source_file, tmp_path):
    path = source_file("1 +;", "2 * 3;")
    dump = tmp_path / "ast.json"
    process_file(
        path, print_inline=False, print_ast=False, strict=True, dump_ast_path=str(dump)
    )

    trees = json.loads(dump.read_text(encoding="utf-8"))
    assert [t["node_type"] for t in trees] == ["Operation"]


def test_process_line_long_chain(capsys):
    assert process_line(" + ".join(["1"] * 2000)) == "2000"
    assert capsys.readouterr().out.rstrip().endswith("stdout: 2000")
