from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Representation(str, Enum):
    """Named property-set views of a resource."""
    REF = "ref"
    DEFAULT = "default"
    FULL = "full"


@dataclass
class RequestContext:
    """Request state handed to handler entry points."""
    representation: Representation = Representation.DEFAULT
    limit: Optional[int] = None
    start_index: int = 0
    parameters: Dict[str, str] = field(default_factory=dict)


class SimpleObject(Dict[str, Any]):
    """Loosely typed request body."""
    pass


class ResourceDescription:
    """Ordered set of property names exposed by one representation or write mode."""

    def __init__(self, *names: str):
        self.properties: Dict[str, Optional[Representation]] = {}
        for name in names:
            self.add_property(name)

    def add_property(self, name: str, representation: Optional[Representation] = None) -> "ResourceDescription":
        self.properties[name] = representation
        return self

    def property_names(self) -> List[str]:
        return list(self.properties)
