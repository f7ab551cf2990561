"""Interfaces implemented by resource and search handlers."""

from .context import RequestContext, Representation, ResourceDescription, SimpleObject
from .errors import ResourceDoesNotSupportOperationError
from .handler import (
    Capability,
    BaseResource,
    SupportsFetchAll,
    SupportsFetchById,
    SupportsSearch,
    SupportsCreate,
    SupportsUpdate,
    SupportsDelete,
    SupportsPurge,
    DelegatingCrudResource,
    DelegatingSubResource,
    DelegatingSubclassHandler,
)
from .metadata import (
    ResourceMetadata,
    SubResourceMetadata,
    resource,
    sub_resource,
    get_resource_metadata,
    get_sub_resource_metadata,
)
from .search import SearchHandler, SearchConfig, SearchQuery, SearchParameter

__all__ = [
    "RequestContext",
    "Representation",
    "ResourceDescription",
    "SimpleObject",
    "ResourceDoesNotSupportOperationError",
    "Capability",
    "BaseResource",
    "SupportsFetchAll",
    "SupportsFetchById",
    "SupportsSearch",
    "SupportsCreate",
    "SupportsUpdate",
    "SupportsDelete",
    "SupportsPurge",
    "DelegatingCrudResource",
    "DelegatingSubResource",
    "DelegatingSubclassHandler",
    "ResourceMetadata",
    "SubResourceMetadata",
    "resource",
    "sub_resource",
    "get_resource_metadata",
    "get_sub_resource_metadata",
    "SearchHandler",
    "SearchConfig",
    "SearchQuery",
    "SearchParameter",
]
