# src/rangeguard/modules/validation/infrastructure/observability.py
"""
Servicio de Observabilidad SRE: Logs, Latency & Saturation (RAM).
Soporta modo "Pretty Print" para depuración visual.
"""

import functools
import json
import logging
import os
import sys
import time
import uuid
from pathlib import Path
from typing import Any, Callable, Optional

import psutil

logger = logging.getLogger("rangeguard")


def configure_logging(level=logging.INFO, log_file: Optional[str] = None):
    """
    Configura el logging raíz: consola siempre, archivo solo si se indica.
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)

    if log_file:
        # Formateador detallado para archivo (Forensics)
        file_formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
        )
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
        logger.debug(f"🔭 Logs persistentes en: {log_file}")


class _Span:
    """Ventana de medición de una operación: tiempo, RAM y correlación."""

    def __init__(self, operation_name: str, target: str):
        self.operation_name = operation_name
        self.target = target
        self.correlation_id = ObservabilityService.get_correlation_id()
        self.start_ram = ObservabilityService._get_ram_usage_mb()
        self._start = time.perf_counter()

    @property
    def elapsed(self) -> float:
        return round(time.perf_counter() - self._start, 3)

    def emit(self, phase: str, payload: dict[str, Any], level: str = "INFO"):
        ObservabilityService.log_event(
            event_name=f"{self.operation_name}.{phase}",
            correlation_id=self.correlation_id,
            payload={"target": self.target, **payload},
            level=level,
        )


class ObservabilityService:

    # Si LOG_FORMAT=PRETTY, JSON indentado (vista vertical)
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return uuid.uuid4().hex[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            rss = psutil.Process(os.getpid()).memory_info().rss
        except psutil.Error:
            return 0.0
        return round(rss / 1024 / 1024, 2)

    @staticmethod
    def _resolve_target(args: tuple) -> str:
        for arg in args:
            if isinstance(arg, Path):
                return arg.name
            target = getattr(arg, "target_name", None)
            if isinstance(target, str):
                return target
        return "unknown"

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un evento JSON; `level` es INFO, WARNING o ERROR."""
        entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }
        indent = 4 if ObservabilityService.PRETTY_PRINT else None
        emit = getattr(logger, level.lower(), logger.info)
        emit(json.dumps(entry, indent=indent, ensure_ascii=False))

    @staticmethod
    def measure_latency(operation_name: str):
        """
        Decorador: registra `.started`, `.completed` (latencia + delta de RAM)
        o `.failed` (tipo de error + RAM al fallar) y re-lanza el error.
        """

        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                span = _Span(operation_name, ObservabilityService._resolve_target(args))
                span.emit("started", {"start_ram_mb": span.start_ram})

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.emit(
                        "failed",
                        {
                            "duration_sec": span.elapsed,
                            "crash_ram_mb": ObservabilityService._get_ram_usage_mb(),
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                span.emit(
                    "completed",
                    {
                        "duration_sec": span.elapsed,
                        "end_ram_mb": end_ram,
                        "ram_delta_mb": round(end_ram - span.start_ram, 2),
                        "status": "success",
                    },
                )
                return result

            return wrapper

        return decorator
