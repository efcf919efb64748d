"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Value Objects matemáticos/lógicos reusables en CUALQUIER dominio:
     - IntRange, BoundedValue
   • Resultados tipados (Ok / Err) para validación recuperable
   • Excepciones de validación SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Fuentes de candidatos, reportes, CLI
   • Cualquier concepto que solo tenga sentido en un módulo concreto

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/
"""

from __future__ import annotations

from .exceptions import Bound, OutOfRange, ValidationError
from .result import Err, Ok, Result
from .value_objects import GUESS_RANGE, BoundedValue, IntRange

__all__ = [
    "Bound",
    "BoundedValue",
    "Err",
    "GUESS_RANGE",
    "IntRange",
    "Ok",
    "OutOfRange",
    "Result",
    "ValidationError",
]
