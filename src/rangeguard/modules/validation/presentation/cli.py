# src/rangeguard/modules/validation/presentation/cli.py
"""
Interfaz de Línea de Comandos (CLI) para Validación de Candidatos.

Arquitectura: Presentation Layer (Interface Adapter)
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Instanciar el Composition Root.
    3. Formatear la salida (JSON/Texto).
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rangeguard.core import GUESS_RANGE
from rangeguard.modules.validation.application.use_cases import ValidateCandidates
from rangeguard.modules.validation.domain.exceptions import ValidationContextError
from rangeguard.modules.validation.infrastructure.adapters import (
    InMemoryCandidateSource,
    TextFileCandidateSource,
)
from rangeguard.modules.validation.infrastructure.observability import configure_logging

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_INPUT_ERROR = 2
EXIT_UNEXPECTED = 3
EXIT_INTERRUPTED = 130


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="rangeguard-check",
        description=f"🎯 RangeGuard - Validador de valores en {GUESS_RANGE}",
        epilog="Ejemplo: rangeguard-check 50 200 -5 --json",
    )

    parser.add_argument(
        "candidates", nargs="*", help="Enteros a validar (admite negativos)"
    )

    parser.add_argument(
        "--file",
        "-f",
        type=Path,
        help="Archivo con un entero por línea ('#' inicia comentario)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Salida en formato JSON (útil para tuberías/pipes)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Muestra logs estructurados de ejecución",
    )

    parser.add_argument(
        "--log-file",
        help="Persistir logs detallados en este archivo",
    )

    return parser


def format_output_text(reports):
    """Presentación amigable para humanos."""
    for report in reports:
        icon = "✅" if report.accepted else "❌"
        print(f"{icon} {report.candidate:>6} | {report.message}")

    accepted = sum(1 for r in reports if r.accepted)
    print("-" * 60)
    print(f"Aceptados: {accepted} / {len(reports)}")


def format_output_json(reports):
    """Presentación para máquinas (Machine Readable)."""
    print(json.dumps([r.to_dict() for r in reports], indent=2, ensure_ascii=False))


def main(argv=None):
    parser = setup_parser()
    # Candidatos antes y después de los flags: "50 --json 60"
    args = parser.parse_intermixed_args(argv)

    if args.file and args.candidates:
        parser.error("Use candidatos posicionales o --file, no ambos.")
    if not args.file and not args.candidates:
        parser.error("Debe indicar al menos un candidato o --file.")

    try:
        # Sin --verbose la consola solo muestra los mensajes de la CLI
        configure_logging(
            level=logging.INFO if args.verbose else logging.CRITICAL,
            log_file=args.log_file,
        )

        # Composition Root (Wiring)
        if args.file:
            source = TextFileCandidateSource(args.file)
        else:
            source = InMemoryCandidateSource.from_strings(args.candidates)
        use_case = ValidateCandidates(source=source)

        reports = use_case.execute()

        if args.json:
            format_output_json(reports)
        else:
            format_output_text(reports)

    except ValidationContextError as e:
        print(f"❌ Error de Entrada: {e}", file=sys.stderr)
        sys.exit(EXIT_INPUT_ERROR)
    except KeyboardInterrupt:
        print("\n⚠️  Operación cancelada por el usuario.", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        # Errores inesperados (Bugs)
        print(f"❌ Error Crítico: {e}", file=sys.stderr)
        sys.exit(EXIT_UNEXPECTED)

    if not all(r.accepted for r in reports):
        sys.exit(EXIT_REJECTED)


if __name__ == "__main__":
    main()
