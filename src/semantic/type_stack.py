from __future__ import annotations
from typing import List

from .errors import StackUnderflow
from .types import PrimitiveType


class TypeStack:
    """
    Pila LIFO con los tipos inferidos de subexpresiones aún no consumidas
    por su padre. Cada visita de expresión saca los tipos de sus operandos
    y empuja un único tipo resultado.
    """

    def __init__(self):
        self._items: List[PrimitiveType] = []

    def push(self, t: PrimitiveType) -> None:
        self._items.append(t)

    def pop(self) -> PrimitiveType:
        if not self._items:
            raise StackUnderflow()
        return self._items.pop()

    def peek(self) -> PrimitiveType:
        if not self._items:
            raise StackUnderflow("peek on empty type stack")
        return self._items[-1]

    # True si hay al menos n tipos pendientes.
    def has(self, n: int) -> bool:
        return len(self._items) >= n

    def empty(self) -> bool:
        return not self._items

    def snapshot(self) -> List[PrimitiveType]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
