# src/rangeguard/core/result.py
"""
Variante etiquetada Ok / Err.

Arquitectura: Core (Shared Kernel)
Responsabilidad: Representar el resultado de una validación recuperable,
dejando al llamador decidir si el fallo es fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Resultado exitoso que transporta el valor construido."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Resultado fallido que transporta el error de validación."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Lanza el error transportado (el llamador eligió tratarlo como fatal)."""
        raise self.error.with_traceback(None)

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Ok[T], Err[E]]
