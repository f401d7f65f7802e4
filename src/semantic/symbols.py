from __future__ import annotations
from dataclasses import dataclass, field

from .types import PrimitiveType


@dataclass
class VariableSymbol:
    name: str
    type: PrimitiveType
    line: int = 0  # Línea de la declaración
    col: int = 0   # Columna (base 1) de la declaración
    kind: str = field(default="var", init=False)

    def report_line(self) -> str:
        # Formato del reporte de la tabla de símbolos: "x -> INT"
        return f"{self.name} -> {self.type.label}"

    def to_dict(self) -> dict:
        return {"name": self.name, "kind": self.kind, "type": self.type.label,
                "line": self.line, "col": self.col}
