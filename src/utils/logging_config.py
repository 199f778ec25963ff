"""
Structured JSON Logging Configuration for the Garment Grid API

Provides consistent, parseable logging for development and production.
Logs can be viewed with jq for easy filtering and analysis.
"""
import json
import logging
import os
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# Attributes every LogRecord carries; anything else arrived through extra={}
_STANDARD_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'extra_data', 'getMessage', 'taskName'
}


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.

    Outputs logs as single-line JSON objects that are:
    - Machine-parseable (CloudWatch, Elasticsearch, etc.)
    - Human-readable with jq
    - Consistent across environments
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_data'):
            log_data.update(record.extra_data)

        # Include all non-standard attributes passed via extra={}
        for attr_name, attr_value in record.__dict__.items():
            if attr_name not in _STANDARD_ATTRS and attr_name not in log_data:
                # Only include serializable types
                if isinstance(attr_value, (str, int, float, bool, type(None), dict, list)):
                    log_data[attr_name] = attr_value

        return json.dumps(log_data, ensure_ascii=False, default=str)


class PrettyJSONFormatter(logging.Formatter):
    """
    Readable formatter for development.

    Keeps the same fields as the JSON logs but prints them on one
    colored line.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m',       # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime('%H:%M:%S.%f')[:-3]
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        parts = [
            f"{color}[{record.levelname}]{reset}",
            timestamp,
            f"{record.name}:",
            record.getMessage()
        ]

        extra_parts = []
        request_id = getattr(record, 'request_id', None)
        if request_id:
            extra_parts.append(f"req_id={request_id}")
        if hasattr(record, 'method') and hasattr(record, 'path'):
            extra_parts.append(f"{record.method} {record.path}")
        if hasattr(record, 'status_code'):
            extra_parts.append(f"status={record.status_code}")
        if hasattr(record, 'duration_ms'):
            extra_parts.append(f"duration={record.duration_ms}ms")
        if hasattr(record, 'operation'):
            extra_parts.append(f"op={record.operation}")

        if extra_parts:
            parts.append(f"({', '.join(extra_parts)})")

        result = ' '.join(parts)

        if record.exc_info:
            result += '\n' + self.formatException(record.exc_info)

        return result


def setup_logging(
    app_name: str = 'garment-grid',
    log_level: str = 'INFO',
    log_format: str = 'json',
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure structured logging for the application.

    Handlers are attached to the root logger so module loggers created with
    logging.getLogger(__name__) share the same output.

    Args:
        app_name: Name of the application logger
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format type ('json' or 'pretty')
        log_file: Optional file path for file-based logging

    Returns:
        The application logger

    Example:
        >>> logger = setup_logging('garment-grid', 'INFO', 'json')
        >>> logger.info('Server started', extra={'port': 3000})
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers = []  # Clear any existing handlers

    if log_format == 'pretty':
        formatter = PrettyJSONFormatter()
    else:
        formatter = JSONFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            # Always use JSON for file logs
            file_handler.setFormatter(JSONFormatter())
            root.addHandler(file_handler)
        except OSError as e:
            root.warning(f"Failed to setup file logging: {e}")

    return logging.getLogger(app_name)


def generate_request_id() -> str:
    """
    Generate a short request ID for tracing.

    Returns:
        8-character unique identifier
    """
    return str(uuid.uuid4())[:8]
