# src/rangeguard/modules/validation/application/use_cases.py
"""
Casos de Uso para la Validación de Candidatos.

Arquitectura: Application Layer
Responsabilidad: Aplicar BoundedValue a cada candidato de una fuente y reportar el veredicto.
"""
from __future__ import annotations

from typing import List

from rangeguard.core import BoundedValue
from rangeguard.modules.validation.domain.ports.source import CandidateSource
from rangeguard.modules.validation.domain.value_objects import CandidateReport
from rangeguard.modules.validation.infrastructure.observability import ObservabilityService


class ValidateCandidates:
    """
    Caso de Uso: Validar un lote de candidatos contra el rango 1..100.

    Colaboradores:
    - source: CandidateSource (Puerto)
    """

    def __init__(self, source: CandidateSource):
        self._source = source

    @property
    def target_name(self) -> str:
        return getattr(self._source, "target_name", type(self._source).__name__)

    @ObservabilityService.measure_latency(operation_name="validate_candidates_use_case")
    def execute(self) -> List[CandidateReport]:
        """
        Evalúa todos los candidatos de la fuente.

        Returns:
            Un CandidateReport por candidato, en el orden de entrada.
            Los rechazos se reportan, nunca se lanzan.

        Raises:
            CandidateSourceError: Si la fuente no puede leerse.
        """
        candidates = self._source.read_candidates()

        reports = []
        for candidate in candidates:
            report = CandidateReport(candidate, BoundedValue.construct(candidate))
            if not report.accepted:
                ObservabilityService.log_event(
                    event_name="candidate.rejected",
                    correlation_id=ObservabilityService.get_correlation_id(),
                    payload=report.to_dict(),
                    level="WARNING",
                )
            reports.append(report)

        return reports
