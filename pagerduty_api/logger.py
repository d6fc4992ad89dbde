"""Logging configuration for the pagerduty-api command line tool.

Supports two logging formats:
- JSON logging (production): Structured logs for log aggregation systems
- Standard logging (development): Human-readable logs

The library modules log through structlog. ``setup_logging`` routes structlog
events into the standard logging module, so library and third-party logs
share the same handler and format. The library never calls it itself.
"""

import logging
import sys

import structlog
from pythonjsonlogger.json import JsonFormatter
from structlog.typing import Processor


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter with consistent field names.

    Key/value pairs of structlog events arrive as extra fields of the log
    record and are kept as top-level JSON fields.
    """

    def add_fields(
        self,
        log_record: dict[str, object],
        record: logging.LogRecord,
        message_dict: dict[str, object],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["message"] = record.getMessage()

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)


def _processors(log_format_json: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_format_json:
        # event becomes the message, everything else extra fields
        processors.append(structlog.stdlib.render_to_log_kwargs)
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def setup_logger(
    logger: logging.Logger, log_level: str = "INFO", log_format_json: bool = True
) -> logging.Logger:
    """Setup a specific logger with JSON or human-readable formatting."""
    formatter: logging.Formatter
    if log_format_json:
        formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(log_level.upper())
    return logger


def setup_logging(
    log_level: str = "INFO",
    log_format_json: bool = True,
    log_exclude_loggers: str = "",
) -> logging.Logger:
    """Configure structlog and the root logger.

    Loggers listed in ``log_exclude_loggers`` (comma-separated, e.g.
    "httpx,httpcore") are set to WARNING to suppress their DEBUG/INFO logs.

    Returns:
        Configured logger for pagerduty_api
    """
    setup_logger(logging.getLogger(), log_level, log_format_json)

    structlog.configure(
        processors=_processors(log_format_json),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    for name in log_exclude_loggers.split(","):
        if name.strip():
            logging.getLogger(name.strip()).setLevel(logging.WARNING)

    return logging.getLogger("pagerduty_api")
