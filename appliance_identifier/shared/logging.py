"""
Logging Configuration - Shared Layer

Routes the standard library logging tree through structlog so that
both ``logging.getLogger`` callers and structlog loggers render the
same way (console output in development, JSON lines in production).
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from appliance_identifier.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_log_config() -> Dict[str, Optional[str]]:
    """Bootstrap values read before the settings object exists."""
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        "file_path": os.environ.get("LOG_FILE_PATH"),
    }


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer_for(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure stdlib logging and structlog together.

    Safe to call more than once: existing root handlers are replaced.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO.
        format_string: Accepted for settings compatibility. Rendering
            is done by structlog, so it is not applied to handlers.
        file_path: Optional file to log to in addition to stdout.
        environment: Deployment environment; "production" selects JSON.
    """
    env_config = _env_log_config()
    log_level = (level or env_config["level"] or "INFO").upper()
    log_file = file_path or env_config["file_path"]
    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_renderer_for(environment),
        foreign_pre_chain=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.getLogger(__name__).info(
        "logging.configured level=%s file=%s", log_level, log_file or "-"
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Re-apply logging configuration once application settings are loaded.

    Args:
        settings: Object exposing ``logging.level``, ``logging.format``,
            ``logging.file_path`` and ``environment``.
    """
    try:
        level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except (AttributeError, OSError, ValueError) as exc:
        logging.getLogger(__name__).error(
            "logging.settings_update_failed error=%s", exc
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
