from __future__ import annotations

from antlr4.Token import Token as AntlrToken
from antlr4.tree.Tree import TerminalNode

from semantic.tree import Token


def token_from_antlr(tok) -> Token:
    """Convierte un token (o nodo terminal) de ANTLR en un Token con columna base 1."""
    if isinstance(tok, TerminalNode):
        tok = tok.getSymbol()
    if not isinstance(tok, AntlrToken):
        raise TypeError(f"expected an ANTLR token, got {type(tok).__name__}")
    # ANTLR puede entregar None en líneas/columnas si el token es sintético
    line = int(tok.line or 0)
    col = int(tok.column or 0) + 1
    return Token(tok.text or "", line, col)

