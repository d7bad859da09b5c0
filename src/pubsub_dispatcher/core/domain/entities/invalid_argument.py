from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InvalidArgument:
    """
    Resultado de uma operação rejeitada pela validação.

    É sempre falso em contexto booleano, então `if not dispatcher.off(name)`
    detecta a falha sem checar o tipo.
    """
    operation: str
    fields: tuple[str, ...]

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.operation}: argumento(s) inválido(s): {', '.join(self.fields)}"
