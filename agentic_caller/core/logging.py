"""
Logging configuration for the application.
Sets up console logging with a consistent formatter.
"""

import logging
import sys
from typing import Optional, TextIO

from agentic_caller.config.settings import settings


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None):
    """
    Set up application logging configuration.

    Args:
        level: Log level name; defaults to settings.log_level
        stream: Where log lines go; defaults to stdout
    """
    level_name = (level or settings.log_level).upper()

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))

    # Clear any existing handlers
    root_logger.handlers.clear()

    simple_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(simple_formatter)

    # Set encoding for Windows to handle Unicode characters
    if sys.platform == "win32" and hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8')

    root_logger.addHandler(console_handler)

    # Set specific logger levels
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)
    logging.getLogger("twilio.http_client").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Logging configuration initialized")
