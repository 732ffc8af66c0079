"""
Loguru setup shared by Logger.io and Logger.base

Sinks:
- stdout, always
- a daily file under LOG_DIR (or TEST_LOG_DIR) in DEBUG mode

Standard-library loggers (granian, sqlalchemy, aiosqlite, asyncio) are
routed into the same sinks through InterceptHandler.
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys

from loguru import logger as loguru_logger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)

# Customer contact details never reach a log line
SENSITIVE_KEYWORDS = {
    'customer_email',
    'customer_phone',
}

TRUNCATE_MAX_LENGTH = 1000

# Chatty below WARNING
QUIET_LOGGERS = ('aiosqlite', 'asyncio', 'sse_starlette')

chain_start_time_var: ContextVar[float] = ContextVar('first_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


class InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, attributed to the original caller."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def log_file_path() -> str:
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return f'{LOG_DIR}/{prefix}{datetime.now().astimezone():%Y-%m-%d}.log'


def intercept_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if not settings.DB_ECHO:
        logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)


loguru_logger.remove()
custom_logger = loguru_logger.bind(
    **{
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }
)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'

custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

if settings.DEBUG:
    custom_logger.add(
        log_file_path(),
        format=io_log_format,
        rotation='00:00',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

intercept_stdlib_logging()
