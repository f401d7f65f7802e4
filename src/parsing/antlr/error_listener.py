from antlr4.error.ErrorListener import ErrorListener  # Importamos la clase base ErrorListener de ANTLR
from dataclasses import dataclass  # Importamos decorador dataclass para crear clases con características simples


# Clase que define la estructura de un error de sintaxis
@dataclass
class SyntaxDiagnostic:
    """Contenedor para los detalles de un error de sintaxis."""
    line: int  # Línea donde ocurrió el error
    column: int  # Columna (base 1) donde ocurrió el error
    text: str  # El texto del símbolo que causó el error
    msg: str  # El mensaje de error de ANTLR

    def __str__(self):
        return f"syntax error at {self.line}:{self.column} near '{self.text}': {self.msg}"

    def to_dict(self):
        return {"line": self.line, "col": self.column, "text": self.text, "message": self.msg}


# Listener que junta los errores del lexer y del parser en vez de imprimirlos
class CollectingErrorListener(ErrorListener):
    def __init__(self):
        super().__init__()
        self.errors = []  # Lista de SyntaxDiagnostic, en orden de aparición

    # 'offendingSymbol' es el token que causó el error (None si viene del lexer);
    # ANTLR entrega la columna en base 0.
    def syntaxError(self, recognizer, offendingSymbol, line, column, msg, e):
        text = getattr(offendingSymbol, 'text', None) or '<EOF>'
        self.errors.append(SyntaxDiagnostic(line, column + 1, text, msg))

    def has_errors(self):
        return len(self.errors) > 0

    def report(self):
        return "\n".join(str(e) for e in self.errors)
