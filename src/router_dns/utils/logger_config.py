"""
Logging setup for Router DNS
Format: YYYY-MM-DD HH:MM:SS - [Module] - [Source] - Description
"""

import logging
from datetime import datetime


class RouterDnsFormatter(logging.Formatter):
    """Custom formatter with module and source context"""

    def __init__(self, use_color=True):
        super().__init__()
        self.use_color = use_color

    def format(self, record):
        # Extract module and source from extra fields
        module = getattr(record, 'module_name', record.name.split('.')[-1].upper())
        source = getattr(record, 'source', 'CORE')

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        colors = {
            'DEBUG': '\033[36m',    # Cyan
            'INFO': '\033[32m',     # Green
            'WARNING': '\033[33m',  # Yellow
            'ERROR': '\033[31m',    # Red
            'CRITICAL': '\033[35m'  # Magenta
        }
        reset = '\033[0m'

        formatted = f"{timestamp} - [{module}] - [{source}] - {record.getMessage()}"
        if record.exc_info:
            formatted = f"{formatted}\n{self.formatException(record.exc_info)}"

        if not self.use_color:
            return formatted
        return f"{colors.get(record.levelname, '')}{formatted}{reset}"


def setup_logger(name='router_dns', debug=False, use_color=True):
    """Setup package logger; calling again only adjusts the level"""
    logger = logging.getLogger(name)
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(RouterDnsFormatter(use_color=use_color))

    logger.addHandler(console_handler)
    logger.propagate = False

    return logger


def log(logger, level, message, module='SYSTEM', source='CORE'):
    """Helper function to log with module and source context"""
    extra = {'module_name': module, 'source': source}
    logger.log(logging.getLevelName(level.upper()), message, extra=extra)
