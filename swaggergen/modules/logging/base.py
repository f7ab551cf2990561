from abc import ABC, abstractmethod
from typing import List, Optional
from loguru import logger


class BaseLogger(ABC):
    """Abstract base class for loggers."""

    def __init__(self, log_level: str = "INFO"):
        self.logger = logger
        self.log_level = log_level

    @abstractmethod
    def log_resource(self, resource_name: str, parent_name: Optional[str] = None):
        """Log the resource currently being processed."""
        pass

    @abstractmethod
    def log_path(self, template: str, verbs: List[str]):
        """Log a path template registered in the document."""
        pass

    @abstractmethod
    def log_summary(self, path_count: int, definition_count: int):
        """Log the size of a finished document."""
        pass

    @abstractmethod
    def log_error(self, message: str):
        """Log an error message."""
        pass

    @abstractmethod
    def log_warning(self, message: str):
        """Log a warning message."""
        pass

    @abstractmethod
    def log_info(self, message: str):
        """Log an info message."""
        pass

    @abstractmethod
    def log_debug(self, message: str):
        """Log a debug message."""
        pass
