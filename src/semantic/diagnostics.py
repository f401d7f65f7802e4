from __future__ import annotations  # Permite la anotación de tipo en el mismo archivo antes de Python 3.10.
from dataclasses import dataclass  # Utiliza `dataclass` para crear clases con atributos fáciles de gestionar.
from enum import Enum
from typing import Dict, List, Optional, TYPE_CHECKING

from .types import PrimitiveType

if TYPE_CHECKING:
    from .tree import Token


# Tipos de diagnóstico, cada uno con su código estable.
class DiagnosticKind(Enum):
    REDEFINITION = "E001"
    UNDEFINED = "E002"
    TYPE_CLASH = "E101"
    ARGUMENT_ERROR = "E102"

    @property
    def code(self) -> str:
        return self.value


# Un error semántico, anclado a una línea del código fuente.
@dataclass
class Diagnostic:
    kind: DiagnosticKind
    message: str    # Texto final, p. ej. "type clash at 3:7"
    line: int       # Línea donde ocurrió el error.
    col: int        # Columna (base 1) donde ocurrió el error.

    @property
    def code(self) -> str:
        return self.kind.code

    # Convierte el diagnóstico en un diccionario. Útil para la serialización.
    def to_dict(self) -> dict:
        return {"code": self.code, "kind": self.kind.name.lower(), "message": self.message,
                "line": self.line, "col": self.col}


# Colección de diagnósticos con a lo sumo uno por línea.
# El primero que llega a una línea gana; los siguientes se descartan.
class Diagnostics:
    def __init__(self):
        self.by_line: Dict[int, Diagnostic] = {}
        self._items: List[Diagnostic] = []  # En el orden en que se registraron.

    # Registra un diagnóstico. Devuelve False si la línea ya tenía uno.
    def report(self, kind: DiagnosticKind, message: str, line: int, col: int) -> bool:
        if line in self.by_line:
            return False
        d = Diagnostic(kind=kind, message=message, line=line, col=col)
        self.by_line[line] = d
        self._items.append(d)
        return True

    # --- formas de los mensajes ---

    def redefinition(self, tok: "Token") -> bool:
        return self.report(DiagnosticKind.REDEFINITION,
                           f"redefinition of {tok.text} at {tok.line}:{tok.column}",
                           tok.line, tok.column)

    def undefined(self, tok: "Token") -> bool:
        return self.report(DiagnosticKind.UNDEFINED,
                           f"{tok.text} undefined at {tok.line}:{tok.column}",
                           tok.line, tok.column)

    def type_clash(self, tok: "Token") -> bool:
        return self.report(DiagnosticKind.TYPE_CLASH,
                           f"type clash at {tok.line}:{tok.column}",
                           tok.line, tok.column)

    # La posición es la del operando culpable, no la del operador.
    def argument_error(self, op: "Token", operand: "Token", typ: PrimitiveType) -> bool:
        return self.report(DiagnosticKind.ARGUMENT_ERROR,
                           f"{op.text} undefined for {typ.label} at {operand.line}:{operand.column}",
                           operand.line, operand.column)

    # --- consulta ---

    def at(self, line: int) -> Optional[Diagnostic]:
        return self.by_line.get(line)

    def empty(self) -> bool:
        return not self._items

    def items(self) -> List[Diagnostic]:
        return list(self._items)

    def messages(self) -> List[str]:
        return [d.message for d in self._items]

    # Reporte final: un diagnóstico por línea de salida.
    def render(self) -> str:
        return "".join(d.message + "\n" for d in self._items)

    def to_list(self) -> List[dict]:
        return [d.to_dict() for d in self._items]

    def __len__(self) -> int:
        return len(self._items)
