# semantic/checker.py
from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .config import AnalysisConfig
from .diagnostics import Diagnostic, Diagnostics
from .errors import MalformedTree, StackImbalance
from .symbol_table import SymbolTable
from .symbols import VariableSymbol
from .tree import (
    ArithmeticExpr, AssignStmt, ConversionExpr, Declaration, IdExpr, IfExpr,
    LitExpr, LogicalExpr, Node, ParenExpr, Program, ReadStmt, WriteStmt,
    EXPRESSION_KINDS, STATEMENT_KINDS,
)
from .type_stack import TypeStack
from .types import BOOL, INT, REAL, PrimitiveType

log = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Utilidades
# -----------------------------------------------------------------------------

_INT_LIT = re.compile(r"[0-9]+")
_REAL_LIT = re.compile(r"[0-9]*\.[0-9]*")
_BOOL_LITS = ("true", "false")


def classify_literal(text: str) -> Optional[PrimitiveType]:
    """Tipo de un literal según su texto, o None si no es un literal válido."""
    if _INT_LIT.fullmatch(text):
        return INT
    if _REAL_LIT.fullmatch(text):
        return REAL
    if text in _BOOL_LITS:
        return BOOL
    return None


def _stack_contract(node: Node) -> Optional[int]:
    # Variación esperada de la pila tras visitar el subárbol completo del nodo.
    if isinstance(node, EXPRESSION_KINDS):
        return 1
    if isinstance(node, STATEMENT_KINDS):
        return 0
    return None


@dataclass
class StackImbalanceRecord:
    node: str
    line: int
    col: int
    expected: int
    actual: int

    def __str__(self) -> str:
        return (f"{self.node} at {self.line}:{self.col} left {self.actual:+d} "
                f"type(s) on the stack, expected {self.expected:+d}")


# Estado de un único análisis. Se crea vacío en cada pasada y no se reutiliza.
@dataclass
class AnalysisState:
    symtab: SymbolTable = field(default_factory=SymbolTable)
    stack: TypeStack = field(default_factory=TypeStack)
    diag: Diagnostics = field(default_factory=Diagnostics)
    imbalances: List[StackImbalanceRecord] = field(default_factory=list)


@dataclass
class AnalysisResult:
    symbols: List[VariableSymbol]
    diagnostics: List[Diagnostic]
    symbol_report: str
    diagnostics_report: str
    pending_types: List[PrimitiveType]
    imbalances: List[StackImbalanceRecord]

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def to_dict(self) -> dict:
        return {
            "symbols": [s.to_dict() for s in self.symbols],
            "errors": [d.to_dict() for d in self.diagnostics],
            "pending_types": [t.label for t in self.pending_types],
            "imbalances": [str(i) for i in self.imbalances],
        }


# -----------------------------------------------------------------------------
# Recorrido semántico principal
# -----------------------------------------------------------------------------
class TypeChecker:
    """
    Recorre el árbol en post-orden: primero todos los hijos, luego el nodo.
      • Declaraciones: llenan la tabla de símbolos (redefinición => error)
      • Identificadores, asignaciones y read: deben estar declarados
      • Expresiones: cada nodo saca los tipos de sus operandos de la pila
        y empuja un único tipo resultado
      • A lo sumo un diagnóstico por línea
    """

    # Una regla por tipo de nodo. Tiene que cubrir todo tree.NODE_KINDS.
    _RULES: Dict[type, str] = {
        Program: "_exit_program",
        Declaration: "_exit_declaration",
        AssignStmt: "_exit_assign",
        ReadStmt: "_exit_read",
        WriteStmt: "_exit_write",
        IdExpr: "_exit_id",
        LitExpr: "_exit_literal",
        ParenExpr: "_exit_paren",
        ArithmeticExpr: "_exit_arithmetic",
        LogicalExpr: "_exit_logical",
        IfExpr: "_exit_if",
        ConversionExpr: "_exit_conversion",
    }

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self.config = config or AnalysisConfig()

    def check(self, program: Program) -> AnalysisResult:
        st = AnalysisState()
        self.walk(program, st)
        pending = st.stack.snapshot()
        if pending:
            log.debug("pass finished with %d pending type(s): %s",
                      len(pending), ", ".join(t.label for t in pending))
        return AnalysisResult(
            symbols=list(st.symtab.symbols.values()),
            diagnostics=st.diag.items(),
            symbol_report=st.symtab.render(),
            diagnostics_report=st.diag.render(),
            pending_types=pending,
            imbalances=list(st.imbalances),
        )

    def walk(self, root: Node, st: AnalysisState) -> None:
        # Post-orden con pila explícita: la profundidad del árbol no está acotada.
        # Entradas: (nodo, regla, profundidad de la pila de tipos al entrar).
        # Una regla None marca un nodo cuyos hijos aún no se encolaron.
        work = [(root, None, 0)]
        while work:
            node, rule, before = work.pop()
            if rule is not None:
                rule(node, st)
                self._check_balance(node, len(st.stack) - before, st)
                continue
            # Los hermanos anteriores ya terminaron: esta es la profundidad de entrada
            work.append((node, self._rule_for(node), len(st.stack)))
            for child in reversed(node.children()):
                work.append((child, None, 0))

    def _rule_for(self, node: Node) -> Callable[[Node, AnalysisState], None]:
        name = self._RULES.get(type(node))
        if name is None:
            raise MalformedTree(f"unknown node kind {type(node).__name__}")
        return getattr(self, name)

    def _check_balance(self, node: Node, delta: int, st: AnalysisState) -> None:
        expected = _stack_contract(node)
        if expected is None or delta == expected:
            return
        tok = node.start
        rec = StackImbalanceRecord(type(node).__name__, tok.line, tok.column, expected, delta)
        log.debug("stack imbalance: %s", rec)
        if self.config.strict_stack:
            raise StackImbalance(str(rec), tok.line, tok.column)
        st.imbalances.append(rec)

    def _skip(self, node: Node, st: AnalysisState, needed: int) -> bool:
        if st.stack.has(needed):
            return False
        log.debug("%s at %s skipped: needs %d pending type(s), stack has %d",
                  type(node).__name__, node.start.where, needed, len(st.stack))
        return True

    # ------------------------------ declaraciones ------------------------------
    def _exit_program(self, node: Program, st: AnalysisState) -> None:
        return None

    def _exit_declaration(self, node: Declaration, st: AnalysisState) -> None:
        tok = node.name
        try:
            st.symtab.declare(tok.text, node.declared, tok.line, tok.column)
        except KeyError:
            st.diag.redefinition(tok)

    # ------------------------------ sentencias ------------------------------
    def _exit_assign(self, node: AssignStmt, st: AnalysisState) -> None:
        tok = node.target
        sym = st.symtab.resolve(tok.text)
        if sym is None:
            st.diag.undefined(tok)
            return
        if self._skip(node, st, 1):
            return
        if st.stack.pop() is not sym.type:
            st.diag.type_clash(tok)

    def _exit_read(self, node: ReadStmt, st: AnalysisState) -> None:
        if st.symtab.resolve(node.target.text) is None:
            st.diag.undefined(node.target)

    def _exit_write(self, node: WriteStmt, st: AnalysisState) -> None:
        # Sin write_consumes el tipo de la expresión queda en la pila.
        if self.config.write_consumes and not self._skip(node, st, 1):
            st.stack.pop()

    # ------------------------------ expresiones ------------------------------
    def _exit_id(self, node: IdExpr, st: AnalysisState) -> None:
        sym = st.symtab.resolve(node.name.text)
        if sym is None:
            st.diag.undefined(node.name)
            return
        st.stack.push(sym.type)

    def _exit_literal(self, node: LitExpr, st: AnalysisState) -> None:
        t = classify_literal(node.literal.text)
        if t is None:
            st.diag.undefined(node.literal)
            return
        st.stack.push(t)

    def _exit_paren(self, node: ParenExpr, st: AnalysisState) -> None:
        if self._skip(node, st, 1):
            return
        st.stack.push(st.stack.pop())

    def _exit_arithmetic(self, node: ArithmeticExpr, st: AnalysisState) -> None:
        if self._skip(node, st, 2):
            return
        right = st.stack.pop()
        left = st.stack.pop()
        if left is INT and right is INT:
            st.stack.push(INT)
            return
        if left is REAL and right is REAL:
            st.stack.push(REAL)
            return
        if left is BOOL:
            st.diag.argument_error(node.op, node.left.start, left)
        elif right is BOOL:
            st.diag.argument_error(node.op, node.right.start, right)
        else:
            st.diag.type_clash(node.left.start)
        st.stack.push(left)

    def _exit_logical(self, node: LogicalExpr, st: AnalysisState) -> None:
        if self._skip(node, st, 2):
            return
        right = st.stack.pop()
        left = st.stack.pop()
        if left is BOOL and right is BOOL:
            st.stack.push(BOOL)
        elif left is not BOOL:
            st.diag.argument_error(node.op, node.left.start, left)
        else:
            st.diag.argument_error(node.op, node.right.start, right)

    def _exit_if(self, node: IfExpr, st: AnalysisState) -> None:
        if self._skip(node, st, 3):
            return
        else_t = st.stack.pop()
        then_t = st.stack.pop()
        cond_t = st.stack.pop()
        if then_t is not else_t:
            st.diag.type_clash(node.orelse.start)
        if cond_t is not BOOL:
            st.diag.argument_error(node.keyword, node.cond.start, cond_t)
        st.stack.push(then_t)

    def _exit_conversion(self, node: ConversionExpr, st: AnalysisState) -> None:
        op = node.op.text
        if op == "to_int":
            accepted = REAL
        elif op == "to_real":
            accepted = INT
        else:
            raise MalformedTree(f"unknown conversion '{op}'", node.op.line, node.op.column)
        if self._skip(node, st, 1):
            return
        t = st.stack.pop()
        if t is not accepted:
            st.diag.argument_error(node.op, node.operand.start, t)


# -----------------------------------------------------------------------------
# API pública
# -----------------------------------------------------------------------------

def analyze(program: Program, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Punto de entrada estable: analiza un programa con estado nuevo."""
    return TypeChecker(config).check(program)
