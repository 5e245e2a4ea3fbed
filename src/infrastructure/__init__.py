"""
Infrastructure — Инфраструктурные сервисы (логирование)
"""

from src.infrastructure.logging import (
    TRACE_LOGGER_NAME,
    get_logger,
    get_trace_logger,
    setup_logging,
)

__all__ = [
    "TRACE_LOGGER_NAME",
    "get_logger",
    "get_trace_logger",
    "setup_logging",
]
