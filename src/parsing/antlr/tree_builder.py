"""
Convierte el árbol de ANTLR (EasyCalcParser) en los nodos de semantic.tree.
Solo se usa con árboles sin errores de sintaxis.
"""
from __future__ import annotations
from typing import List

from semantic.errors import MalformedTree
from semantic.tree import (
    ArithmeticExpr, AssignStmt, ConversionExpr, Declaration, IdExpr, IfExpr,
    LitExpr, LogicalExpr, ParenExpr, Program, ReadStmt, WriteStmt,
)
from semantic.types import PrimitiveType

from .EasyCalcParser import EasyCalcParser  # Parser generado por ANTLR
from .EasyCalcVisitor import EasyCalcVisitor  # Visitor generado por ANTLR
from .positions import token_from_antlr


class TreeBuilder(EasyCalcVisitor):

    # ------------------------------ programa ------------------------------
    def visitProgram(self, ctx: EasyCalcParser.ProgramContext) -> Program:
        decls: List[Declaration] = [self.visit(d) for d in (ctx.declar() or [])]
        stmts = [self.visit(s) for s in (ctx.stmt() or [])]
        return Program(declarations=decls, statements=stmts)

    def visitDeclar(self, ctx: EasyCalcParser.DeclarContext) -> Declaration:
        name = token_from_antlr(ctx.ID())
        declared = PrimitiveType.from_text(ctx.typ.text)
        if declared is None:
            raise MalformedTree(f"unknown type '{ctx.typ.text}'", name.line, name.column)
        return Declaration(name=name, declared=declared)

    # ------------------------------ sentencias ------------------------------
    def visitAssignStmt(self, ctx: EasyCalcParser.AssignStmtContext) -> AssignStmt:
        return AssignStmt(target=token_from_antlr(ctx.ID()), expr=self.visit(ctx.expr()))

    def visitReadStmt(self, ctx: EasyCalcParser.ReadStmtContext) -> ReadStmt:
        return ReadStmt(target=token_from_antlr(ctx.ID()))

    def visitWriteStmt(self, ctx: EasyCalcParser.WriteStmtContext) -> WriteStmt:
        return WriteStmt(expr=self.visit(ctx.expr()))

    # ------------------------------ expresiones ------------------------------
    def visitParenExpr(self, ctx: EasyCalcParser.ParenExprContext) -> ParenExpr:
        return ParenExpr(lparen=token_from_antlr(ctx.start), inner=self.visit(ctx.expr()))

    def visitToExpr(self, ctx: EasyCalcParser.ToExprContext) -> ConversionExpr:
        return ConversionExpr(op=token_from_antlr(ctx.op), operand=self.visit(ctx.expr()))

    # Cadenas como `1 + 2 + ... + n` anidan por la izquierda; se arman con un
    # bucle para no gastar un marco de recursión por operador.
    _BINARY = {
        EasyCalcParser.MulDivExprContext: ArithmeticExpr,
        EasyCalcParser.AddSubExprContext: ArithmeticExpr,
        EasyCalcParser.AndExprContext: LogicalExpr,
        EasyCalcParser.OrExprContext: LogicalExpr,
    }

    def _binary(self, ctx):
        chain = []
        cur = ctx
        while type(cur) in self._BINARY:
            chain.append(cur)
            cur = cur.expr(0)
        node = self.visit(cur)
        for c in reversed(chain):
            node = self._BINARY[type(c)](op=token_from_antlr(c.op),
                                         left=node,
                                         right=self.visit(c.expr(1)))
        return node

    def visitMulDivExpr(self, ctx: EasyCalcParser.MulDivExprContext) -> ArithmeticExpr:
        return self._binary(ctx)

    def visitAddSubExpr(self, ctx: EasyCalcParser.AddSubExprContext) -> ArithmeticExpr:
        return self._binary(ctx)

    def visitAndExpr(self, ctx: EasyCalcParser.AndExprContext) -> LogicalExpr:
        return self._binary(ctx)

    def visitOrExpr(self, ctx: EasyCalcParser.OrExprContext) -> LogicalExpr:
        return self._binary(ctx)

    def visitIfExpr(self, ctx: EasyCalcParser.IfExprContext) -> IfExpr:
        return IfExpr(keyword=token_from_antlr(ctx.start),
                      cond=self.visit(ctx.expr(0)),
                      then=self.visit(ctx.expr(1)),
                      orelse=self.visit(ctx.expr(2)))

    def visitIdExpr(self, ctx: EasyCalcParser.IdExprContext) -> IdExpr:
        return IdExpr(name=token_from_antlr(ctx.ID()))

    def visitLitExpr(self, ctx: EasyCalcParser.LitExprContext) -> LitExpr:
        return LitExpr(literal=token_from_antlr(ctx.LIT()))


def build_tree(parse_tree: EasyCalcParser.ProgramContext) -> Program:
    return TreeBuilder().visit(parse_tree)
