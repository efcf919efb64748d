# src/rangeguard/modules/validation/__init__.py
"""
Módulo de Validación de Candidatos.
"""

from __future__ import annotations

# Application
from .application.use_cases import ValidateCandidates
from .domain.exceptions import CandidateSourceError, ValidationContextError
from .domain.ports.source import CandidateSource

# Domain
from .domain.value_objects import CandidateReport

# Infrastructure
from .infrastructure.adapters import InMemoryCandidateSource, TextFileCandidateSource

__all__ = [
    "CandidateReport",
    "CandidateSource",
    "CandidateSourceError",
    "ValidationContextError",
    "ValidateCandidates",
    "InMemoryCandidateSource",
    "TextFileCandidateSource",
]
