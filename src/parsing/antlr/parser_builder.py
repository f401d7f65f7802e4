from __future__ import annotations  # Importación para usar anotaciones de tipo como cadenas
from dataclasses import dataclass  # Importamos el decorador para crear clases con atributos automáticamente
from typing import Optional, Tuple, Union  # Importamos tipos para anotaciones de tipo
from pathlib import Path  # Importación para trabajar con rutas de archivo

# Importaciones de ANTLR, que es la herramienta para generar analizadores sintácticos
from antlr4 import InputStream, FileStream, CommonTokenStream, ParserRuleContext

from semantic.tree import Program

# Importación de nuestras clases de errores y de los módulos generados por ANTLR
from .error_listener import CollectingErrorListener, SyntaxDiagnostic
from .EasyCalcLexer import EasyCalcLexer  # Lexer generado por ANTLR para nuestro lenguaje
from .EasyCalcParser import EasyCalcParser  # Parser generado por ANTLR para nuestro lenguaje
from .tree_builder import build_tree


# Resultado de un análisis sintáctico
@dataclass
class ParseResult:
    """Árbol, parser, tokens y errores de sintaxis."""
    tree: ParserRuleContext
    parser: EasyCalcParser
    tokens: CommonTokenStream
    errors: list[SyntaxDiagnostic]

    # True si no hubo errores de sintaxis
    def ok(self) -> bool:
        return not self.errors

    # Árbol listo para el análisis semántico (solo si no hubo errores)
    def program(self) -> Optional[Program]:
        if self.errors:
            return None
        return build_tree(self.tree)


# Configura el lexer, el parser y el listener que junta los errores
def _configure(input_stream) -> Tuple[EasyCalcLexer, EasyCalcParser, CommonTokenStream, CollectingErrorListener]:
    lexer = EasyCalcLexer(input_stream)
    tokens = CommonTokenStream(lexer)
    parser = EasyCalcParser(tokens)

    err = CollectingErrorListener()
    lexer.removeErrorListeners()  # Quitamos el listener por defecto (imprime en consola)
    lexer.addErrorListener(err)
    parser.removeErrorListeners()
    parser.addErrorListener(err)

    return lexer, parser, tokens, err


def _run(input_stream, entry_rule: str, raise_on_error: bool) -> ParseResult:
    _, parser, tokens, err = _configure(input_stream)

    # Verifica que la regla de entrada exista en el parser
    if not hasattr(parser, entry_rule):
        raise AttributeError(f"Entry rule '{entry_rule}' does not exist in EasyCalcParser.")

    tree = getattr(parser, entry_rule)()

    errors = err.errors
    if raise_on_error and errors:
        raise SyntaxError("\n".join(str(e) for e in errors))

    return ParseResult(tree=tree, parser=parser, tokens=tokens, errors=errors)


# Construye el árbol a partir de código fuente en texto
def build_from_text(
    code: str,
    *,
    entry_rule: str = "program",
    raise_on_error: bool = False,
) -> ParseResult:
    return _run(InputStream(code), entry_rule, raise_on_error)


# Construye el árbol a partir de un archivo
def build_from_file(
    path: Union[str, Path],
    *,
    entry_rule: str = "program",
    encoding: Optional[str] = "utf-8",
    raise_on_error: bool = False,
) -> ParseResult:
    return _run(FileStream(str(path), encoding=encoding), entry_rule, raise_on_error)


# Atajo: texto -> árbol semántico. Lanza SyntaxError si el texto no es válido.
def parse_program(code: str) -> Program:
    return build_from_text(code, raise_on_error=True).program()
