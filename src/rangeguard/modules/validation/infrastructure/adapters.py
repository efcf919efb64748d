# src/rangeguard/modules/validation/infrastructure/adapters.py
"""
Adaptadores de Infraestructura para Fuentes de Candidatos.

Arquitectura: Infrastructure Layer
Responsabilidad: Implementar el puerto CandidateSource usando archivos o memoria.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from rangeguard.modules.validation.domain.exceptions import CandidateSourceError


def parse_candidate(raw: str) -> int:
    """
    Convierte texto a entero con signo.

    Raises:
        CandidateSourceError: Si el texto no representa un entero.
    """
    text = raw.strip()
    try:
        return int(text, 10)
    except ValueError:
        raise CandidateSourceError(f"No es un entero válido: {raw!r}") from None


class InMemoryCandidateSource:
    """
    Fuente en memoria. Útil para tests y para argumentos posicionales de la CLI.
    """

    target_name = "memory"

    def __init__(self, candidates: Iterable[int]):
        self._candidates = list(candidates)

    @classmethod
    def from_strings(cls, raw_values: Iterable[str]) -> InMemoryCandidateSource:
        return cls(parse_candidate(raw) for raw in raw_values)

    def read_candidates(self) -> List[int]:
        # Copia para que el llamador no altere el estado interno
        return list(self._candidates)


class TextFileCandidateSource:
    """
    Lee un entero por línea desde un archivo de texto.

    Formato:
    - Líneas vacías se ignoran.
    - Todo lo que sigue a '#' es comentario.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def target_name(self) -> str:
        return self._path.name

    def read_candidates(self) -> List[int]:
        if not self._path.exists():
            raise CandidateSourceError(f"El archivo no existe: {self._path}")
        if not self._path.is_file():
            raise CandidateSourceError(f"La ruta no es un archivo: {self._path}")

        try:
            lines = self._path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise CandidateSourceError(f"No se pudo leer {self._path}: {e}") from e

        candidates = []
        for lineno, line in enumerate(lines, 1):
            content = line.split("#", 1)[0].strip()
            if not content:
                continue
            try:
                candidates.append(parse_candidate(content))
            except CandidateSourceError as e:
                raise CandidateSourceError(f"{self._path.name}:{lineno}: {e}") from None
        return candidates
