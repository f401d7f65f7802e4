"""
Árbol sintáctico que consume el análisis semántico.

Cada tipo de nodo es una clase distinta; el recorrido despacha por clase.
El árbol lo construye un parser externo (ver parsing.antlr.tree_builder).
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .types import PrimitiveType


@dataclass
class Token:
    text: str
    line: int
    column: int  # base 1

    @property
    def where(self) -> str:
        return f"{self.line}:{self.column}"


class Node:
    def children(self) -> Tuple["Node", ...]:
        return ()

    # Token usado para ubicar el nodo en mensajes internos.
    @property
    def start(self) -> Token:
        raise NotImplementedError


# -----------------------------------------------------------------------------
# Expresiones
# -----------------------------------------------------------------------------

@dataclass
class IdExpr(Node):
    name: Token

    @property
    def start(self) -> Token:
        return self.name


@dataclass
class LitExpr(Node):
    literal: Token

    @property
    def start(self) -> Token:
        return self.literal


@dataclass
class ParenExpr(Node):
    lparen: Token
    inner: "Expr"

    def children(self):
        return (self.inner,)

    @property
    def start(self) -> Token:
        return self.lparen


@dataclass
class ArithmeticExpr(Node):
    """`+ - * /`"""
    op: Token
    left: "Expr"
    right: "Expr"

    def children(self):
        return (self.left, self.right)

    @property
    def start(self) -> Token:
        return _leftmost_start(self.left)


@dataclass
class LogicalExpr(Node):
    """`and`, `or`"""
    op: Token
    left: "Expr"
    right: "Expr"

    def children(self):
        return (self.left, self.right)

    @property
    def start(self) -> Token:
        return _leftmost_start(self.left)


@dataclass
class IfExpr(Node):
    keyword: Token  # el token `if`
    cond: "Expr"
    then: "Expr"
    orelse: "Expr"

    def children(self):
        return (self.cond, self.then, self.orelse)

    @property
    def start(self) -> Token:
        return self.keyword


@dataclass
class ConversionExpr(Node):
    """`to_int e`, `to_real e`"""
    op: Token
    operand: "Expr"

    def children(self):
        return (self.operand,)

    @property
    def start(self) -> Token:
        return self.op


Expr = Union[IdExpr, LitExpr, ParenExpr, ArithmeticExpr, LogicalExpr, IfExpr, ConversionExpr]


def _leftmost_start(node: "Expr") -> Token:
    # Las cadenas de operadores binarios anidan por la izquierda y pueden ser muy largas
    while isinstance(node, (ArithmeticExpr, LogicalExpr)):
        node = node.left
    return node.start


# -----------------------------------------------------------------------------
# Declaraciones y sentencias
# -----------------------------------------------------------------------------

@dataclass
class Declaration(Node):
    name: Token
    declared: PrimitiveType

    @property
    def start(self) -> Token:
        return self.name


@dataclass
class AssignStmt(Node):
    target: Token
    expr: Expr

    def children(self):
        return (self.expr,)

    @property
    def start(self) -> Token:
        return self.target


@dataclass
class ReadStmt(Node):
    target: Token

    @property
    def start(self) -> Token:
        return self.target


@dataclass
class WriteStmt(Node):
    expr: Expr

    def children(self):
        return (self.expr,)

    @property
    def start(self) -> Token:
        return self.expr.start


Stmt = Union[AssignStmt, ReadStmt, WriteStmt]


@dataclass
class Program(Node):
    declarations: List[Declaration] = field(default_factory=list)
    statements: List[Stmt] = field(default_factory=list)

    def children(self):
        return tuple(self.declarations) + tuple(self.statements)

    @property
    def start(self) -> Token:
        return Token("<program>", 1, 1)


EXPRESSION_KINDS = (IdExpr, LitExpr, ParenExpr, ArithmeticExpr, LogicalExpr, IfExpr, ConversionExpr)
STATEMENT_KINDS = (Declaration, AssignStmt, ReadStmt, WriteStmt)
NODE_KINDS = (Program,) + STATEMENT_KINDS + EXPRESSION_KINDS
