"""
Service logger setup

Every module logs through ``logging.getLogger(__name__)``; entry points call
``setup_service_logger`` once to attach handlers to the root logger.
"""

import logging
import sys
from typing import Optional

from core.config.logging_config import LoggingConfig

_configured = False


def setup_service_logger(
    service_name: str,
    level: str = "INFO",
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure root handlers (once per process) and return the service logger"""
    global _configured

    fmt = log_format or LoggingConfig.log_format
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not _configured:
        formatter = logging.Formatter(fmt)

        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(formatter)
        root.addHandler(console)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        _configured = True

    return logging.getLogger(service_name)


def setup_from_config(config: LoggingConfig, service_name: Optional[str] = None) -> logging.Logger:
    """Configure logging from a LoggingConfig"""
    return setup_service_logger(
        service_name or config.service_name,
        level=config.log_level,
        log_format=config.log_format,
        log_file=config.log_file or None,
    )
