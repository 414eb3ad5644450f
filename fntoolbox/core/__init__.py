"""
Shared plumbing: exception types and logging configuration.
"""

from .errors import ActionFormatError, BuilderSealedError, ActionLogError, ReducerLoadError
from .logging_config import setup_logging, get_logger

__all__ = [
    "ActionFormatError",
    "BuilderSealedError",
    "ActionLogError",
    "ReducerLoadError",
    "setup_logging",
    "get_logger",
]
