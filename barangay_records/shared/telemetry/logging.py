"""Logging configuration for the Barangay Records application"""
import logging
import sys

from barangay_records.infrastructure.config.settings import get_settings


def setup_logging():
    """Configure application-wide logging"""
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s",
        handlers=[_correlated_handler()],
    )


def _correlated_handler() -> logging.Handler:
    from barangay_records.presentation.middleware.correlation import CorrelationIdFilter

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get logger for module"""
    return logging.getLogger(name)
