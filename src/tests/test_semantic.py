# src/tests/test_semantic.py
import os

import pytest

# El parser se genera desde EasyCalc.g4; sin él estos tests no aplican
pytest.importorskip("parsing.antlr.EasyCalcParser")

from parsing.antlr.parser_builder import build_from_file, build_from_text, parse_program  # noqa: E402
from semantic import analyze  # noqa: E402

BASE = os.path.join(os.path.dirname(__file__), "programs")

OK = [
    "ok_01_declarations.ec",    # Declaraciones, aritmética, lógicas, if
    "ok_02_conditional.ec",     # read, if con ramas enteras, write
]
FAIL = [
    "fail_01_redefinition.ec",  # Redefinición de variable
    "fail_02_mixed.ec",         # Un error distinto en cada línea
]


def compile_file(path):
    parsed = build_from_file(path)
    assert parsed.ok(), parsed.errors
    return analyze(parsed.program())


def test_examples_ok():
    for fname in OK:
        path = os.path.join(BASE, fname)
        assert os.path.exists(path), f"No existe {path}"
        res = compile_file(path)
        assert res.diagnostics == [], f"{fname} no debería dar errores, obtuvo: {res.diagnostics_report}"


def test_examples_fail():
    for fname in FAIL:
        path = os.path.join(BASE, fname)
        assert os.path.exists(path), f"No existe {path}"
        res = compile_file(path)
        assert res.diagnostics, f"{fname} debería dar errores semánticos"


def test_symbol_report_for_ok_program():
    res = compile_file(os.path.join(BASE, "ok_01_declarations.ec"))
    assert res.symbol_report == "x -> INT\ny -> REAL\nb -> BOOL\n"


def test_redefinition_program():
    res = compile_file(os.path.join(BASE, "fail_01_redefinition.ec"))
    assert res.symbol_report == "x -> INT\n"
    assert res.diagnostics_report == "redefinition of x at 2:1\n"


def test_mixed_program_report():
    res = compile_file(os.path.join(BASE, "fail_02_mixed.ec"))
    assert res.symbol_report == "a -> INT\nr -> REAL\n"
    assert res.diagnostics_report == (
        "type clash at 3:6\n"
        "+ undefined for BOOL at 4:6\n"
        "c undefined at 5:1\n"
        "d undefined at 6:6\n"
        "if undefined for INT at 7:9\n"
        "to_int undefined for INT at 8:14\n"
    )


def test_examples_from_text():
    cases = {
        "write 1 + 2;": "",
        "write 1 + 1.5;": "type clash at 1:7\n",
        "write true + 1;": "+ undefined for BOOL at 1:7\n",
        "write if true then 1 else 2;": "",
        "write if 1 then 1 else 2;": "if undefined for INT at 1:10\n",
        "x := 5;": "x undefined at 1:1\n",
    }
    for code, expected in cases.items():
        assert analyze(parse_program(code)).diagnostics_report == expected, code


def test_syntax_errors_are_collected():
    parsed = build_from_text("x : int")
    assert not parsed.ok()
    assert parsed.program() is None
    with pytest.raises(SyntaxError):
        build_from_text("x : int", raise_on_error=True)


def test_long_operator_chain():
    code = "x : int;\nx := " + " + ".join(["1"] * 1000) + ";\nwrite x or " + " or ".join(["true"] * 1000) + ";"
    res = analyze(parse_program(code))
    assert res.diagnostics_report == "or undefined for INT at 3:7\n"
