"""Resource handler base classes and the capability interfaces they expose.

A handler describes the REST exposure of one domain type. Each optional
operation is a separate interface; the ``Delegating*`` base classes implement
all of them by raising :class:`ResourceDoesNotSupportOperationError`, so a
concrete handler only overrides the operations it really offers.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from .context import RequestContext, Representation, ResourceDescription, SimpleObject
from .errors import ResourceDoesNotSupportOperationError

T = TypeVar("T")
P = TypeVar("P")


class Capability(str, Enum):
    """Operations a resource may implement."""
    FETCH_ALL = "fetch_all"
    FETCH_BY_ID = "fetch_by_id"
    SEARCH = "search"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    PURGE = "purge"


class SupportsFetchAll(ABC):
    @abstractmethod
    def get_all(self, context: RequestContext) -> Any:
        pass


class SupportsFetchById(ABC):
    @abstractmethod
    def get_by_unique_id(self, uuid: str) -> Any:
        pass


class SupportsSearch(ABC):
    @abstractmethod
    def search(self, context: RequestContext) -> Any:
        pass


class SupportsCreate(ABC):
    @abstractmethod
    def create(self, post_body: Optional[SimpleObject], context: RequestContext) -> Any:
        pass


class SupportsUpdate(ABC):
    @abstractmethod
    def update(self, uuid: str, post_body: SimpleObject, context: RequestContext) -> Any:
        pass


class SupportsDelete(ABC):
    @abstractmethod
    def delete(self, uuid: str, reason: str, context: RequestContext) -> None:
        pass


class SupportsPurge(ABC):
    @abstractmethod
    def purge(self, uuid: str, context: RequestContext) -> None:
        pass


class BaseResource:
    """Descriptive queries every handler answers."""

    def get_representation_description(self, representation: Representation) -> Optional[ResourceDescription]:
        return None

    def get_creatable_properties(self) -> Optional[ResourceDescription]:
        return None

    def get_updatable_properties(self) -> Optional[ResourceDescription]:
        return None

    def has_types_defined(self) -> bool:
        """Whether the resource dispatches to several concrete subtypes."""
        return False

    def declared_capability(self, capability: Capability) -> Optional[bool]:
        """Explicitly declare a capability.

        ``True``/``False`` is taken as final; ``None`` leaves the decision to
        the capability probe.
        """
        return None


class _UnsupportedOperations(SupportsFetchAll, SupportsFetchById, SupportsSearch,
                             SupportsCreate, SupportsUpdate, SupportsDelete, SupportsPurge):

    def get_all(self, context: RequestContext) -> Any:
        raise ResourceDoesNotSupportOperationError()

    def get_by_unique_id(self, uuid: str) -> Any:
        raise ResourceDoesNotSupportOperationError()

    def search(self, context: RequestContext) -> Any:
        raise ResourceDoesNotSupportOperationError()

    def create(self, post_body: Optional[SimpleObject], context: RequestContext) -> Any:
        raise ResourceDoesNotSupportOperationError()

    def update(self, uuid: str, post_body: SimpleObject, context: RequestContext) -> Any:
        raise ResourceDoesNotSupportOperationError()

    def delete(self, uuid: str, reason: str, context: RequestContext) -> None:
        raise ResourceDoesNotSupportOperationError()

    def purge(self, uuid: str, context: RequestContext) -> None:
        raise ResourceDoesNotSupportOperationError()


class DelegatingCrudResource(BaseResource, _UnsupportedOperations, Generic[T]):
    """Base class for top-level resources backed by domain type ``T``."""
    pass


class DelegatingSubResource(BaseResource, _UnsupportedOperations, Generic[T, P]):
    """Base class for sub-resources of type ``T`` nested under parent type ``P``."""
    pass


class DelegatingSubclassHandler(BaseResource, _UnsupportedOperations, Generic[T]):
    """Dispatcher for one concrete subtype of a resource with types defined."""
    pass
