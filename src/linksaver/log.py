"""Logging configuration with Rich formatting.

Provides setup_logging() for app initialization and get_logger() for module-level loggers.
"""

import logging
from typing import Optional
from rich.logging import RichHandler

def setup_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=level or "INFO",
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )
    
    # Quiet down some noisy libraries
    for name in ("httpx", "pymongo", "telegram"):
        logging.getLogger(name).setLevel(logging.WARNING)

def get_logger(name: str):
    return logging.getLogger(name)
