"""
Módulo de análisis semántico para EasyCalc.
Exporta la función principal 'analyze', la tabla de símbolos, la pila de
tipos, los diagnósticos y los nodos del árbol.
"""

from .checker import analyze, classify_literal, TypeChecker, AnalysisResult, AnalysisState, StackImbalanceRecord
from .config import AnalysisConfig
from .diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from .errors import InternalFault, MalformedTree, StackImbalance, StackUnderflow
from .symbol_table import SymbolTable
from .symbols import VariableSymbol
from .type_stack import TypeStack
from .types import PrimitiveType, INT, REAL, BOOL

__all__ = [
    # Función principal
    'analyze',
    'classify_literal',
    'TypeChecker',
    'AnalysisResult',
    'AnalysisState',
    'StackImbalanceRecord',
    'AnalysisConfig',

    # Estado del análisis
    'SymbolTable',
    'VariableSymbol',
    'TypeStack',

    # Diagnósticos y fallos internos
    'Diagnostic',
    'DiagnosticKind',
    'Diagnostics',
    'InternalFault',
    'MalformedTree',
    'StackImbalance',
    'StackUnderflow',

    # Tipos
    'PrimitiveType',
    'INT',
    'REAL',
    'BOOL',
]
