from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class SearchParameter:
    """A named search parameter, optionally with a fixed value."""
    name: str
    value: Optional[str] = None


@dataclass
class SearchQuery:
    """One combination of parameters a search handler accepts."""
    required_parameters: List[SearchParameter] = field(default_factory=list)
    optional_parameters: List[SearchParameter] = field(default_factory=list)
    description: Optional[str] = None


@dataclass
class SearchConfig:
    """Configuration of a named search, scoped to ``supported_resource`` (e.g. ``v1/concept``)."""
    id: str
    supported_resource: str
    search_queries: List[SearchQuery] = field(default_factory=list)
    supported_versions: List[str] = field(default_factory=list)


class SearchHandler(ABC):
    """Base class for resource-scoped search capabilities."""

    @abstractmethod
    def get_search_config(self) -> SearchConfig:
        pass
