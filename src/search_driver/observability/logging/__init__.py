"""Observability – structured logging ports and helpers."""
from search_driver.observability.logging.factory import JsonLoggerFactory
from search_driver.observability.logging.processors import DriverContextProcessor, get_logger
from search_driver.observability.logging.protocol import Logger

__all__ = [
    "DriverContextProcessor",
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
