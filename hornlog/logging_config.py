"""
Logging Configuration for HornLog

Console and optional rotating-file logging, with an optional structured
JSON format.
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter for logs"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        return json.dumps(log_entry)


def setup_logging(log_level: str = "INFO",
                  log_file: Optional[Union[str, Path]] = None,
                  structured: bool = False) -> None:
    """
    Setup logging for HornLog

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Also log to this file, rotated at 10MB
        structured: Whether to use structured JSON logging
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    setup_component_loggers(level)


def setup_logging_from_config(config=None) -> None:
    """Setup logging from the log_level and log_file of a HornLogConfig"""
    if config is None:
        from .config import get_config
        config = get_config()
    setup_logging(config.log_level, config.log_file)


def setup_component_loggers(level: int = logging.INFO) -> None:
    """Setup levels for the HornLog component loggers"""
    # Token counts and binding decisions are only interesting when debugging
    component_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    logging.getLogger('hornlog.tokenizer').setLevel(component_level)
    logging.getLogger('hornlog.rules').setLevel(component_level)
