from __future__ import annotations  # Permite las anotaciones de tipo en el mismo archivo antes de Python 3.10.
from typing import Dict, List, Optional  # Importa tipos de datos como diccionarios, listas y opcionales.

from .symbols import VariableSymbol  # Símbolo que se guarda en la tabla.
from .types import PrimitiveType


# Tabla de símbolos de un único espacio de nombres global.
# No hay scopes anidados, ni sombreado, ni borrado: vive lo que dura un análisis.
class SymbolTable:
    def __init__(self):
        self.symbols: Dict[str, VariableSymbol] = {}  # identificador -> símbolo, en orden de declaración

    # Define un nuevo símbolo. Si ya existe, lanza KeyError y la tabla no cambia.
    def define(self, sym: VariableSymbol) -> VariableSymbol:
        if sym.name in self.symbols:
            raise KeyError(f"Symbol '{sym.name}' already defined")
        self.symbols[sym.name] = sym
        return sym

    # Atajo para declarar un identificador con su tipo.
    def declare(self, name: str, typ: PrimitiveType, line: int = 0, col: int = 0) -> VariableSymbol:
        return self.define(VariableSymbol(name=name, type=typ, line=line, col=col))

    # Devuelve el símbolo o None si el identificador no fue declarado.
    def resolve(self, name: str) -> Optional[VariableSymbol]:
        return self.symbols.get(name)

    # Devuelve solo el tipo declarado (o None).
    def lookup(self, name: str) -> Optional[PrimitiveType]:
        sym = self.symbols.get(name)
        return sym.type if sym is not None else None

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    # Líneas "id -> TIPO" en orden de declaración.
    def report_lines(self) -> List[str]:
        return [sym.report_line() for sym in self.symbols.values()]

    # Reporte de la tabla de símbolos: una línea por declaración exitosa.
    def render(self) -> str:
        return "".join(line + "\n" for line in self.report_lines())

