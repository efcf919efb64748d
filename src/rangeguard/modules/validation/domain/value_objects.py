# src/rangeguard/modules/validation/domain/value_objects.py
"""
Value Objects para el Bounded Context de Validación.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Describir el veredicto sobre un candidato ya evaluado.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rangeguard.core import BoundedValue, OutOfRange, Result

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos y lógica de validación pura.
# ❌ SIN I/O: El reporte no imprime ni loguea; la presentación decide.


@dataclass(frozen=True)
class CandidateReport:
    """
    Veredicto inmutable para un candidato.

    El reporte conserva el Result completo: Ok con el BoundedValue construido,
    o Err con el OutOfRange que explica el rechazo.
    """

    candidate: int
    result: Result[BoundedValue, OutOfRange]

    @property
    def accepted(self) -> bool:
        return self.result.is_ok()

    @property
    def message(self) -> str:
        if self.result.is_ok():
            return f"Valor aceptado: {self.result.unwrap().get()}"
        return str(self.result.error)

    def to_dict(self) -> dict[str, Any]:
        """Representación serializable (JSON) del reporte."""
        data: dict[str, Any] = {
            "candidate": self.candidate,
            "accepted": self.accepted,
            "message": self.message,
        }
        if not self.accepted:
            data["bound"] = self.result.error.bound.value
            data["limit"] = self.result.error.limit
        return data
