"""
Logging — конфигурация structlog

Движок не настраивает логирование при импорте: модули получают логгер через
structlog.get_logger(__name__), а приложение-хост вызывает setup_logging()
один раз при старте.
"""

import logging
import sys

import structlog


def setup_logging(level: int = logging.INFO) -> None:
    """
    Настройка structlog: ISO timestamp, уровень, консольный рендер.

    Args:
        level: Минимальный уровень логирования (default: INFO)
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
