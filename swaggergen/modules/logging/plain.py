import sys
from typing import List, Optional
from .base import BaseLogger


class PlainLogger(BaseLogger):
    """Logger that outputs plain text, suitable for CI/file output."""

    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        self.logger.configure(
            handlers=[{
                "sink": sys.stderr,
                "format": "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}",
                "colorize": False,
                "level": log_level
            }]
        )

    def log_resource(self, resource_name: str, parent_name: Optional[str] = None):
        label = f"{parent_name}/{resource_name}" if parent_name else resource_name
        self.logger.debug(f"Resource: {label}")

    def log_path(self, template: str, verbs: List[str]):
        self.logger.debug(f"  {template} [{', '.join(verb.upper() for verb in verbs)}]")

    def log_summary(self, path_count: int, definition_count: int):
        self.logger.info(f"Document has {path_count} paths and {definition_count} definitions")

    def log_error(self, message: str):
        self.logger.error(message)

    def log_warning(self, message: str):
        self.logger.warning(message)

    def log_info(self, message: str):
        self.logger.info(message)

    def log_debug(self, message: str):
        self.logger.debug(message)
