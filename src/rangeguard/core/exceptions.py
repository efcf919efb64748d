# src/rangeguard/core/exceptions.py
"""
Excepciones universales del núcleo.

Arquitectura: Core (Shared Kernel)
Responsabilidad: Definir errores semánticos de validación independientes de cualquier módulo.
"""

from __future__ import annotations

from enum import Enum


class Bound(Enum):
    """Límite de un rango cerrado que un candidato puede violar."""

    LOWER = "lower"
    UPPER = "upper"


class ValidationError(ValueError):
    """Clase base para errores de validación de Value Objects."""

    pass


class OutOfRange(ValidationError):
    """
    El candidato cae fuera del rango inclusivo permitido.

    Atributos:
        candidate: Valor rechazado.
        bound: Límite violado (LOWER / UPPER).
        limit: Valor del límite violado.
    """

    def __init__(self, candidate: int, bound: Bound, limit: int):
        self.candidate = candidate
        self.bound = bound
        self.limit = limit

        # El mensaje siempre corresponde al límite realmente violado
        if bound is Bound.LOWER:
            message = f"El valor debe ser mayor o igual a {limit}, se recibió {candidate}"
        else:
            message = f"El valor debe ser menor o igual a {limit}, se recibió {candidate}"
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.candidate, self.bound, self.limit))
