"""Observability – structured logging helpers."""
from wcb_privacy.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from wcb_privacy.observability.logging.factory import JsonLoggerFactory
from wcb_privacy.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
