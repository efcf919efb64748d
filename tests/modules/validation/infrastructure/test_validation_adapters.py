# tests/modules/validation/infrastructure/test_validation_adapters.py
"""
Tests para: InMemoryCandidateSource, TextFileCandidateSource, parse_candidate
Tipo: Integración (Infraestructura, disco real vía tmp_path)
"""
import pytest

from rangeguard.modules.validation.domain.exceptions import CandidateSourceError
from rangeguard.modules.validation.infrastructure.adapters import (
    InMemoryCandidateSource,
    TextFileCandidateSource,
    parse_candidate,
)


def test_parse_candidate_accepts_signed_integers():
    assert parse_candidate("42") == 42
    assert parse_candidate(" -5 ") == -5
    assert parse_candidate("+7") == 7


@pytest.mark.parametrize("raw", ["", "abc", "1.5", "0x10"])
def test_parse_candidate_rejects_non_integers(raw):
    with pytest.raises(CandidateSourceError, match="No es un entero"):
        parse_candidate(raw)


def test_in_memory_source_returns_copy():
    source = InMemoryCandidateSource([1, 2])

    first = source.read_candidates()
    first.append(3)

    assert source.read_candidates() == [1, 2]


def test_in_memory_source_from_strings():
    assert InMemoryCandidateSource.from_strings(["10", "-3"]).read_candidates() == [10, -3]


def test_text_file_source_skips_blanks_and_comments(tmp_path):
    """
    Given: Un archivo con comentarios y líneas vacías
    When: Se leen los candidatos
    Then: Solo se devuelven los enteros, en orden
    """
    # Arrange
    path = tmp_path / "candidates.txt"
    path.write_text("# intentos\n50\n\n200  # demasiado alto\n-5\n", encoding="utf-8")

    # Act
    source = TextFileCandidateSource(path)

    # Assert
    assert source.read_candidates() == [50, 200, -5]
    assert source.target_name == "candidates.txt"


def test_text_file_source_reports_line_number(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1\n2\ntres\n", encoding="utf-8")

    with pytest.raises(CandidateSourceError) as exc_info:
        TextFileCandidateSource(path).read_candidates()

    assert "bad.txt:3" in str(exc_info.value)


def test_text_file_source_missing_file(tmp_path):
    with pytest.raises(CandidateSourceError, match="no existe"):
        TextFileCandidateSource(tmp_path / "ghost.txt").read_candidates()


def test_text_file_source_rejects_directory(tmp_path):
    with pytest.raises(CandidateSourceError, match="no es un archivo"):
        TextFileCandidateSource(tmp_path).read_candidates()
