# src/rangeguard/modules/validation/domain/exceptions.py
"""
Excepciones del dominio de Validación.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.
"""


class ValidationContextError(Exception):
    """Clase base para errores en el módulo de validación."""

    pass


class CandidateSourceError(ValidationContextError):
    """La fuente de candidatos no existe, es ilegible o contiene valores no enteros."""

    pass
