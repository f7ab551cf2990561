import click
from typing import List, Optional
from .base import BaseLogger
import sys


class ColorfulLogger(BaseLogger):
    """Logger that outputs colorful text for CLI usage."""

    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        self.logger.configure(
            handlers=[{
                "sink": sys.stderr,
                "colorize": True,
                "format": "<cyan>{time:YYYY-MM-DD HH:mm:ss.SSS}</cyan> | "
                         "<level>{level: <8}</level> | "
                         "<white>{message}</white>",
                "level": log_level
            }]
        )

    def log_resource(self, resource_name: str, parent_name: Optional[str] = None):
        label = f"{parent_name}/{resource_name}" if parent_name else resource_name
        self.logger.debug(click.style(f"Resource: {label}", fg="cyan", bold=True))

    def log_path(self, template: str, verbs: List[str]):
        methods = ", ".join(verb.upper() for verb in verbs)
        self.logger.debug(click.style(f"  {template} [{methods}]", fg="white"))

    def log_summary(self, path_count: int, definition_count: int):
        self.logger.info(click.style(
            f"Document has {path_count} paths and {definition_count} definitions",
            fg="green", bold=True
        ))

    def log_error(self, message: str):
        self.logger.error(click.style(message, fg="red", bold=True))

    def log_warning(self, message: str):
        self.logger.warning(click.style(message, fg="yellow", bold=True))

    def log_info(self, message: str):
        self.logger.info(click.style(message, fg="white"))

    def log_debug(self, message: str):
        self.logger.debug(click.style(message, fg="blue"))
