"""
Logging Configuration
Opt-in structured output for the package loggers
"""
import logging
import logging.handlers
import json
from typing import List, Optional
from datetime import datetime


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs one JSON object per record, including any `extra` fields
    such as `display` and `data_type` attached by views
    """

    RESERVED_ATTRS = frozenset([
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'message', 'taskName',
    ])

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Args:
            include_fields: Record attributes to always include when present
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed through logger.debug(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """

    TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @staticmethod
    def setup_logger(
        name: Optional[str] = None,
        format_type: Optional[str] = None,
        level: Optional[int] = None,
        log_file: Optional[str] = None,
        console: bool = True,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None
    ) -> logging.Logger:
        """
        Setup a package logger with console and optional rotating file output

        Args:
            name: Logger name (default: the package root logger)
            format_type: Format type ('json' or 'text', default from config)
            level: Log level (default mapped from the configured environment)
            log_file: Path of a rotating log file, or None for no file output
            console: Attach a stream handler
            max_bytes: Max bytes before rotation
            backup_count: Number of backup files to keep

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger(
                format_type='json',
                level=logging.DEBUG,
                log_file='logs/views.log'
            )
        """
        from viewable.support import Config
        from viewable.defaults import (
            DEFAULT_LOGGER_NAME,
            DEFAULT_LOG_FORMAT,
            DEFAULT_LOG_ENV,
            DEFAULT_LOG_MAX_BYTES,
            DEFAULT_LOG_BACKUP_COUNT,
        )

        name = name or DEFAULT_LOGGER_NAME
        if format_type is None:
            format_type = Config.get('logging.FORMAT', DEFAULT_LOG_FORMAT)
        if level is None:
            level = LoggerConfig.get_level_by_environment(
                Config.get('logging.ENV', DEFAULT_LOG_ENV)
            )
        if max_bytes is None:
            max_bytes = int(Config.get('logging.MAX_BYTES', DEFAULT_LOG_MAX_BYTES))
        if backup_count is None:
            backup_count = int(Config.get('logging.BACKUP_COUNT', DEFAULT_LOG_BACKUP_COUNT))

        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Clear existing handlers
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(LoggerConfig.TEXT_FORMAT)

        if log_file:
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        if console:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(str(environment).lower(), logging.INFO)
