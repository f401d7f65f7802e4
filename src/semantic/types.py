from __future__ import annotations  # Permite anotaciones de tipo diferidas.
from enum import Enum
from typing import Optional


# Tipos primitivos del lenguaje. Se comparan por identidad, nunca por texto.
class PrimitiveType(Enum):
    INT = "int"
    REAL = "real"
    BOOL = "bool"

    @property
    def label(self) -> str:
        """Nombre en mayúsculas, como aparece en los reportes (INT, REAL, BOOL)."""
        return self.value.upper()

    @classmethod
    def from_text(cls, text: str) -> Optional["PrimitiveType"]:
        # Devuelve None si el texto no nombra un tipo primitivo.
        for t in cls:
            if t.value == text:
                return t
        return None

    def __str__(self) -> str:
        return self.value


INT = PrimitiveType.INT
REAL = PrimitiveType.REAL
BOOL = PrimitiveType.BOOL

