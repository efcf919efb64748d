# src/rangeguard/core/value_objects.py
"""
Value Objects de rango acotado.

Arquitectura: Modular Monolith
Componente: Value Object (Core)
Responsabilidad: Garantizar que toda instancia viva contenga un entero dentro de un rango cerrado.
"""

from __future__ import annotations

from dataclasses import dataclass

from rangeguard.core.exceptions import Bound, OutOfRange
from rangeguard.core.result import Err, Ok, Result

# === 🧭 Protocolos Arquitectónicos ===
# ✅ CORE: No depende de nada externo.
# 🔒 Inmutabilidad: frozen=True.


def _require_int(candidate: object) -> None:
    # bool es subclase de int, pero no es un candidato numérico válido
    if isinstance(candidate, bool) or not isinstance(candidate, int):
        raise TypeError(
            f"Se esperaba un entero, se recibió {type(candidate).__name__}: {candidate!r}"
        )


@dataclass(frozen=True)
class IntRange:
    """
    Rango cerrado de enteros [lower, upper].

    Invariantes:
    1. lower <= upper
    """

    lower: int
    upper: int

    def __post_init__(self):
        if self.lower > self.upper:
            raise ValueError(
                f"El límite inferior ({self.lower}) no puede superar al superior ({self.upper})"
            )

    def __str__(self) -> str:
        return f"[{self.lower}, {self.upper}]"

    def contains(self, candidate: int) -> bool:
        return self.lower <= candidate <= self.upper

    def check(self, candidate: int) -> None:
        """Lanza OutOfRange indicando el límite violado."""
        if candidate < self.lower:
            raise OutOfRange(candidate, Bound.LOWER, self.lower)
        if candidate > self.upper:
            raise OutOfRange(candidate, Bound.UPPER, self.upper)


GUESS_RANGE = IntRange(1, 100)


@dataclass(frozen=True)
class BoundedValue:
    """
    Entero validado dentro de GUESS_RANGE (1..100 inclusivo).

    Invariantes:
    1. 1 <= value <= 100 durante toda la vida de la instancia.
    2. No existe camino de mutación posterior a la construcción.

    Instanciar directamente lanza OutOfRange; `construct` devuelve Ok / Err.
    """

    value: int

    def __post_init__(self):
        _require_int(self.value)
        GUESS_RANGE.check(self.value)

    @classmethod
    def construct(cls, candidate: int) -> Result[BoundedValue, OutOfRange]:
        """
        Construye un BoundedValue sin lanzar por valores fuera de rango.

        Returns:
            Ok(BoundedValue) si el candidato está en rango.
            Err(OutOfRange) si viola alguno de los límites.

        Raises:
            TypeError: Si el candidato no es un entero (error del llamador).
        """
        try:
            return Ok(cls(candidate))
        except OutOfRange as e:
            return Err(e)

    def get(self) -> int:
        """Devuelve el valor almacenado, sin efectos secundarios."""
        return self.value
