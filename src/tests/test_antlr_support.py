"""Piezas de la capa ANTLR que no necesitan el parser generado."""

import pytest
from antlr4.Token import CommonToken
from antlr4.tree.Tree import TerminalNodeImpl

from parsing.antlr.error_listener import CollectingErrorListener, SyntaxDiagnostic
from parsing.antlr.positions import token_from_antlr
from semantic.tree import Token


def make_token(text, line, column):
    t = CommonToken(type=1)
    t.text = text
    t.line = line
    t.column = column  # base 0, como lo entrega ANTLR
    return t


def test_token_from_antlr_uses_one_based_column():
    assert token_from_antlr(make_token("x", 3, 4)) == Token("x", 3, 5)


def test_token_from_terminal_node():
    node = TerminalNodeImpl(make_token("to_int", 2, 0))
    assert token_from_antlr(node) == Token("to_int", 2, 1)


def test_token_from_antlr_rejects_other_objects():
    with pytest.raises(TypeError):
        token_from_antlr("x")


def test_error_listener_collects():
    err = CollectingErrorListener()
    assert not err.has_errors()
    err.syntaxError(None, make_token(";", 1, 6), 1, 6, "extraneous input ';'", None)
    err.syntaxError(None, None, 2, 0, "token recognition error at: '$'", None)
    assert err.has_errors()
    assert err.errors == [
        SyntaxDiagnostic(1, 7, ";", "extraneous input ';'"),
        SyntaxDiagnostic(2, 1, "<EOF>", "token recognition error at: '$'"),
    ]
    assert err.report().splitlines()[0] == "syntax error at 1:7 near ';': extraneous input ';'"
