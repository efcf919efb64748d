# tests/modules/validation/application/test_validation_use_cases.py
"""
Tests para: ValidateCandidates (Use Case)
Tipo: Unitario (Application)
"""
import json
from unittest.mock import Mock, patch

import pytest

from rangeguard.core import Bound
from rangeguard.modules.validation.application.use_cases import ValidateCandidates
from rangeguard.modules.validation.domain.exceptions import CandidateSourceError
from rangeguard.modules.validation.infrastructure.adapters import InMemoryCandidateSource

# === Fixtures ===


@pytest.fixture
def mixed_source():
    """Fuente con candidatos válidos y en ambos lados del rango."""
    return InMemoryCandidateSource([50, 200, -5, 1, 100])


# === Casos de Prueba ===


def test_execute_reports_every_candidate_in_order(mixed_source):
    """
    Given: Una fuente con 5 candidatos
    When: Se ejecuta el caso de uso
    Then: Devuelve 5 reportes en el mismo orden, sin lanzar por rechazos
    """
    # Act
    reports = ValidateCandidates(source=mixed_source).execute()

    # Assert
    assert [r.candidate for r in reports] == [50, 200, -5, 1, 100]
    assert [r.accepted for r in reports] == [True, False, False, True, True]
    assert reports[1].result.error.bound is Bound.UPPER
    assert reports[2].result.error.bound is Bound.LOWER


def test_execute_with_empty_source_returns_empty_list():
    assert ValidateCandidates(source=InMemoryCandidateSource([])).execute() == []


@patch("rangeguard.modules.validation.infrastructure.observability.logger")
def test_execute_logs_each_rejection(mock_logger, mixed_source):
    """
    Given: Dos candidatos fuera de rango
    When: Se ejecuta el caso de uso
    Then: Se emite un evento candidate.rejected por cada uno
    """
    ValidateCandidates(source=mixed_source).execute()

    events = [json.loads(c[0][0]) for c in mock_logger.warning.call_args_list]
    assert [e["event"] for e in events] == ["candidate.rejected", "candidate.rejected"]
    assert [e["data"]["candidate"] for e in events] == [200, -5]


@patch("rangeguard.modules.validation.infrastructure.observability.logger")
def test_execute_propagates_source_errors(mock_logger):
    """
    Given: Una fuente que falla
    When: Se ejecuta el caso de uso
    Then: Se re-lanza CandidateSourceError y se loguea el fallo
    """
    source = Mock()
    source.target_name = "broken.txt"
    source.read_candidates.side_effect = CandidateSourceError("ilegible")

    with pytest.raises(CandidateSourceError):
        ValidateCandidates(source=source).execute()

    log_json = json.loads(mock_logger.error.call_args[0][0])
    assert log_json["event"] == "validate_candidates_use_case.failed"
    assert log_json["data"]["target"] == "broken.txt"
