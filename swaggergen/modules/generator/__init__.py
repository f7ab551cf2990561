"""Swagger document generation from resource handlers."""

from .descriptor import ResourceDescriptor, find_modeled_type
from .definitions import DefinitionFactory
from .errors import GenerationError
from .index import ResourceIndex
from .naming import DefinitionFamily, DefinitionVariant, definition_name, operation_title, schema_base_name
from .operation_builder import OperationBuilder, OperationKind
from .path_assembler import PathAssembler, collection_path, item_path
from .probe import SWAGGER_IMPOSSIBLE_UNIQUE_ID, CapabilityProber, CapabilityStatus
from .property_resolver import OperationContext, PropertyResolver
from .search import SearchAugmenter, dependency_description, search_resource_key
from .specification_builder import FETCH_ALL_DEFINITION, SpecificationBuilder, fetch_all_definition

__all__ = [
    "ResourceDescriptor",
    "find_modeled_type",
    "DefinitionFactory",
    "GenerationError",
    "ResourceIndex",
    "DefinitionFamily",
    "DefinitionVariant",
    "definition_name",
    "operation_title",
    "schema_base_name",
    "OperationBuilder",
    "OperationKind",
    "PathAssembler",
    "collection_path",
    "item_path",
    "SWAGGER_IMPOSSIBLE_UNIQUE_ID",
    "CapabilityProber",
    "CapabilityStatus",
    "OperationContext",
    "PropertyResolver",
    "SearchAugmenter",
    "dependency_description",
    "search_resource_key",
    "FETCH_ALL_DEFINITION",
    "SpecificationBuilder",
    "fetch_all_definition",
]
