# src/rangeguard/modules/validation/domain/ports/source.py
"""
Puerto para la Fuente de Candidatos.

Arquitectura: Domain Port (Interface)
Responsabilidad: Definir el contrato para obtener los enteros a validar.
"""

from __future__ import annotations

from typing import Protocol


class CandidateSource(Protocol):
    """
    Contrato abstracto para fuentes de candidatos.

    Implementaciones esperadas:
    - TextFileCandidateSource (Infraestructura)
    - InMemoryCandidateSource (Testing / argumentos de CLI)
    """

    def read_candidates(self) -> list[int]:
        """
        Retorna los candidatos en el orden de entrada.

        Raises:
            CandidateSourceError: Si la fuente no es accesible o contiene
                valores que no son enteros.
        """
        ...
