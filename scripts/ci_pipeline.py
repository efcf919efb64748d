#!/usr/bin/env python3
"""
Pipeline de CI Local para RangeGuard.
Ejecuta validaciones estáticas, tipos del núcleo y tests.

Uso: python scripts/ci_pipeline.py
"""

import subprocess
import sys
import time
from datetime import datetime


# Colores para la terminal
class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def print_step(step_name):
    print(f"\n{Colors.HEADER}=== EJECUTANDO: {step_name} ==={Colors.ENDC}")


def run_command(command, description):
    print(f"⏳ {description}...")
    start = time.time()
    result = subprocess.run(command, capture_output=True, text=True)
    duration = time.time() - start

    if result.returncode == 0:
        print(f"{Colors.OKGREEN}✅ PASÓ ({duration:.2f}s){Colors.ENDC}")
        return True
    print(f"{Colors.FAIL}❌ FALLÓ ({duration:.2f}s){Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDERR ---\n{result.stderr}{Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDOUT ---\n{result.stdout}{Colors.ENDC}")
    return False


def main():
    start_total = time.time()
    print(f"{Colors.BOLD}🚀 INICIANDO PIPELINE CI - RANGEGUARD{Colors.ENDC}")
    print(f"📅 Fecha: {datetime.now()}")

    # --- PASO 1: LINTER (Estilo) ---
    print_step("1. ANÁLISIS ESTÁTICO DE CÓDIGO (LINTING)")
    if not run_command(["ruff", "check", "src/", "tests/"], "Verificando estilo y errores comunes"):
        print(f"{Colors.WARNING}⚠️  Advertencias de estilo detectadas (No bloqueante){Colors.ENDC}")

    # --- PASO 2: TYPE CHECKING (MyPy) ---
    print_step("2. VERIFICACIÓN DE TIPOS (CORE)")
    if not run_command(
        ["mypy", "src/rangeguard/core", "--ignore-missing-imports"],
        "Validando tipos estrictos en el núcleo",
    ):
        print(f"{Colors.FAIL}⛔ El núcleo viola el contrato de tipos.{Colors.ENDC}")
        sys.exit(1)

    # --- PASO 3: TESTS UNITARIOS ---
    print_step("3. TESTS UNITARIOS (CORE & DOMAIN & APP)")
    if not run_command(
        ["pytest", "tests/core", "tests/modules/validation/domain",
         "tests/modules/validation/application", "-v"],
        "Ejecutando lógica pura",
    ):
        sys.exit(1)

    # --- PASO 4: TESTS INFRAESTRUCTURA & CLI ---
    print_step("4. TESTS INFRAESTRUCTURA & CLI")
    if not run_command(
        ["pytest", "tests/modules/validation/infrastructure",
         "tests/modules/validation/presentation", "-v"],
        "Validando adaptadores, observabilidad y CLI",
    ):
        sys.exit(1)

    total_duration = time.time() - start_total
    print(f"\n{Colors.OKGREEN}{'='*50}{Colors.ENDC}")
    print(f"{Colors.OKGREEN}🎉  BUILD SUCCESSFUL{Colors.ENDC}")
    print(f"{Colors.OKGREEN}{'='*50}{Colors.ENDC}")
    print(f"⏱️ Tiempo Total: {total_duration:.2f}s")


if __name__ == "__main__":
    main()
