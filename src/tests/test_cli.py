import io
import json
import os

import pytest

from cli import EXIT_SEMANTIC, EXIT_USAGE, print_result
from semantic import analyze
from tests.builders import decl, lit, program, read, write


def test_print_clean_result():
    out = io.StringIO()
    print_result(analyze(program(decl("x", "int", 1), read("x", 2, 6))), out)
    assert out.getvalue() == "=== Symbol Table ===\nx -> INT\n\n=== Diagnostics ===\nno errors found\n"


def test_print_diagnostics():
    out = io.StringIO()
    print_result(analyze(program(decl("x", "int", 1), read("y", 2, 6))), out)
    assert out.getvalue().endswith("=== Diagnostics ===\ny undefined at 2:6\n")


def test_print_json():
    out = io.StringIO()
    print_result(analyze(program(write(lit("1", 1, 7)))), out, as_json=True)
    data = json.loads(out.getvalue())
    assert data["errors"] == []
    assert data["pending_types"] == ["INT"]


def test_main_end_to_end(capsys):
    pytest.importorskip("parsing.antlr.EasyCalcParser")
    from cli import main

    path = os.path.join(os.path.dirname(__file__), "programs", "fail_01_redefinition.ec")
    assert main([path]) == EXIT_SEMANTIC
    assert "redefinition of x at 2:1" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    pytest.importorskip("parsing.antlr.EasyCalcParser")
    from cli import main

    assert main([str(tmp_path / "nope.ec")]) == EXIT_USAGE


class _Parsed:
    """Resultado de parseo mínimo para probar main() sin el parser generado."""

    def __init__(self, tree=None, errors=()):
        self.tree = tree
        self.errors = list(errors)

    def ok(self):
        return not self.errors

    def program(self):
        return self.tree


def test_main_reports_internal_fault(monkeypatch, capsys):
    import cli

    monkeypatch.setattr(cli, "_parse", lambda path: _Parsed(program(write(lit("1", 1, 7)))))
    assert cli.main(["prog.ec", "--strict-stack"]) == cli.EXIT_INTERNAL
    captured = capsys.readouterr()
    assert "internal error: WriteStmt at 1:7" in captured.err
    assert captured.out == ""


def test_main_undecodable_file(monkeypatch, capsys):
    import cli

    def broken(path):
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    monkeypatch.setattr(cli, "_parse", broken)
    assert cli.main(["latin1.ec"]) == EXIT_USAGE
    assert "cannot read latin1.ec" in capsys.readouterr().err


def test_main_syntax_errors(monkeypatch, capsys):
    import cli
    from parsing.antlr.error_listener import SyntaxDiagnostic

    err = SyntaxDiagnostic(1, 8, "<EOF>", "missing ';' at '<EOF>'")
    monkeypatch.setattr(cli, "_parse", lambda path: _Parsed(errors=[err]))
    assert cli.main(["prog.ec"]) == cli.EXIT_SYNTAX
    assert "syntax error at 1:8" in capsys.readouterr().err


def test_main_clean_program(monkeypatch, capsys):
    import cli

    monkeypatch.setattr(cli, "_parse", lambda path: _Parsed(program(decl("x", "int", 1), read("x", 2, 6))))
    assert cli.main(["prog.ec"]) == cli.EXIT_OK
    assert "x -> INT" in capsys.readouterr().out
