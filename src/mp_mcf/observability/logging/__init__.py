"""Observability – structured logging helpers."""
from mp_mcf.observability.logging.factory import JsonLoggerFactory, get_logger
from mp_mcf.observability.logging.filters import SensitiveFieldsFilter

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
