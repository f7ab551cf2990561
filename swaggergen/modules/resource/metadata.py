"""Resource identity metadata attached to handler classes."""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Type, TypeVar

RESOURCE_ATTR = "__swaggergen_resource__"
SUB_RESOURCE_ATTR = "__swaggergen_sub_resource__"

H = TypeVar("H", bound=type)


@dataclass(frozen=True)
class ResourceMetadata:
    """Identity of a top-level resource (``name`` is versioned, e.g. ``v1/concept``)."""
    name: str
    supported_class: Optional[Type[Any]] = None


@dataclass(frozen=True)
class SubResourceMetadata:
    """Identity of a resource nested under ``parent``."""
    parent: type
    path: str
    supported_class: Optional[Type[Any]] = None


def resource(name: str, supported_class: Optional[Type[Any]] = None) -> Callable[[H], H]:
    """Class decorator declaring a top-level resource handler."""
    def decorate(cls: H) -> H:
        setattr(cls, RESOURCE_ATTR, ResourceMetadata(name, supported_class))
        return cls
    return decorate


def sub_resource(parent: type, path: str, supported_class: Optional[Type[Any]] = None) -> Callable[[H], H]:
    """Class decorator declaring a sub-resource handler."""
    def decorate(cls: H) -> H:
        setattr(cls, SUB_RESOURCE_ATTR, SubResourceMetadata(parent, path, supported_class))
        return cls
    return decorate


def get_resource_metadata(cls: type) -> Optional[ResourceMetadata]:
    # declared on the class itself, not inherited
    value = cls.__dict__.get(RESOURCE_ATTR)
    return value if isinstance(value, ResourceMetadata) else None


def get_sub_resource_metadata(cls: type) -> Optional[SubResourceMetadata]:
    value = cls.__dict__.get(SUB_RESOURCE_ATTR)
    return value if isinstance(value, SubResourceMetadata) else None


def strip_version(name: str) -> str:
    """``v1/concept`` -> ``concept``; names without a slash are returned as-is."""
    return name[name.find('/') + 1:]
