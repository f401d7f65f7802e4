from __future__ import annotations
from dataclasses import dataclass


@dataclass
class AnalysisConfig:
    """Opciones de un análisis semántico."""
    # La sentencia write saca de la pila el tipo de su expresión.
    # Por defecto no lo hace (comportamiento histórico).
    write_consumes: bool = False
    # Lanza StackImbalance ante el primer nodo que no respeta su contrato de pila.
    strict_stack: bool = False
