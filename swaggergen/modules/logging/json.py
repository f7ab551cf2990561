import sys
from typing import List, Optional
from .base import BaseLogger


class JsonLogger(BaseLogger):
    """Logger that outputs JSON for machine parsing."""

    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        self.logger.configure(
            handlers=[{
                "sink": sys.stderr,
                "serialize": True,
                "format": "{time} | {level} | {message}",
                "level": log_level
            }]
        )

    def log_resource(self, resource_name: str, parent_name: Optional[str] = None):
        self.logger.bind(
            type="resource",
            resource=resource_name,
            parent=parent_name
        ).debug("resource")

    def log_path(self, template: str, verbs: List[str]):
        self.logger.bind(
            type="path",
            template=template,
            verbs=[verb.upper() for verb in verbs]
        ).debug("path")

    def log_summary(self, path_count: int, definition_count: int):
        self.logger.bind(
            type="summary",
            paths=path_count,
            definitions=definition_count
        ).info("summary")

    def log_error(self, message: str):
        self.logger.bind(type="error").error(message)

    def log_warning(self, message: str):
        self.logger.bind(type="warning").warning(message)

    def log_info(self, message: str):
        self.logger.bind(type="info").info(message)

    def log_debug(self, message: str):
        self.logger.bind(type="debug").debug(message)
