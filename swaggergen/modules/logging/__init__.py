"""Logger backends selected by the global ``--output`` option."""

from typing import Dict, Type
from .base import BaseLogger
from .colorful import ColorfulLogger
from .plain import PlainLogger
from .json import JsonLogger

LOGGERS: Dict[str, Type[BaseLogger]] = {
    "colorful": ColorfulLogger,
    "plain": PlainLogger,
    "json": JsonLogger,
}
OUTPUT_TYPES = list(LOGGERS)
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def create_logger(output_type: str, log_level: str = "INFO") -> BaseLogger:
    """Create the logger for an output type.

    Args:
        output_type: One of OUTPUT_TYPES, case-insensitive
        log_level: One of LOG_LEVELS

    Raises:
        ValueError: If the output type is unknown
    """
    logger_class = LOGGERS.get(output_type.lower())
    if logger_class is None:
        raise ValueError(f"Invalid output type: {output_type}. Must be one of: {', '.join(OUTPUT_TYPES)}")
    return logger_class(log_level)


__all__ = ['BaseLogger', 'ColorfulLogger', 'PlainLogger', 'JsonLogger',
           'LOGGERS', 'OUTPUT_TYPES', 'LOG_LEVELS', 'create_logger']
