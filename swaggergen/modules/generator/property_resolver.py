"""Maps resource properties to typed schema properties."""

import datetime
import types
import uuid
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union, get_args, get_origin, get_type_hints

from ..logging import BaseLogger
from ..swagger.schema import SchemaProperty
from ..swagger.properties import (
    array_property,
    boolean_property,
    date_property,
    double_property,
    enum_property,
    integer_property,
    object_property,
    ref_property,
    string_property,
)
from .descriptor import ResourceDescriptor
from .index import ResourceIndex

_COLLECTION_TYPES = (list, set, frozenset, tuple)


class OperationContext(str, Enum):
    """Definition a property appears in; also the suffix of the refs it emits."""
    GET = "Get"
    GET_REF = "GetRef"
    GET_FULL = "GetFull"
    CREATE = "Create"
    CREATE_FULL = "CreateFull"
    UPDATE = "Update"


class PropertyResolver:
    """
    Resolves the schema property of a resource field.

    The field type is read from the annotations of the resource's modeled
    type. Domain types (classes living under one of ``domain_namespaces``)
    become references to the definitions of the resource declaring them.
    Unknown fields degrade to plain strings.
    """

    def __init__(self, index: ResourceIndex, logger: BaseLogger,
                 domain_namespaces: Optional[Iterable[str]] = None):
        self.index = index
        self.logger = logger
        namespaces = list(domain_namespaces or [])
        self.domain_namespaces: List[str] = namespaces or index.domain_namespaces()
        self._hints: Dict[type, Dict[str, Any]] = {}

    def resolve_property(self, descriptor: ResourceDescriptor, property_name: str,
                         context: OperationContext) -> SchemaProperty:
        modeled_type = descriptor.modeled_type
        if modeled_type is None:
            self.logger.log_warning(
                f"No modeled type for {descriptor.handler_class_name}; "
                f"'{property_name}' documented as string"
            )
            return string_property()

        hints = self._type_hints(modeled_type)
        if property_name not in hints:
            self.logger.log_warning(f"Field {property_name} not found in class {modeled_type.__name__}")
            return string_property()

        return self.create_property_for_type(hints[property_name], context)

    def create_property_for_type(self, field_type: Any, context: OperationContext) -> SchemaProperty:
        field_type = _unwrap_optional(field_type)

        if field_type is str:
            return string_property()
        if field_type is int:
            return integer_property()
        if field_type is bool:
            return boolean_property()
        if field_type is uuid.UUID:
            return string_property(description="uuid")
        if field_type in (datetime.date, datetime.datetime):
            return date_property()
        if field_type is float:
            return double_property()

        if self.is_domain_type(field_type):
            if issubclass(field_type, Enum):
                return enum_property(field_type)
            title = self.index.resource_title_for(field_type)
            if title is None:
                return string_property()
            return ref_property(title + context.value)

        if field_type in _COLLECTION_TYPES or get_origin(field_type) in _COLLECTION_TYPES:
            return self._collection_property(field_type, context)

        return object_property()

    def is_domain_type(self, field_type: Any) -> bool:
        if not isinstance(field_type, type):
            return False
        module = getattr(field_type, "__module__", "") or ""
        return any(
            module == namespace or module.startswith(namespace + ".")
            for namespace in self.domain_namespaces
        )

    def _collection_property(self, field_type: Any, context: OperationContext) -> SchemaProperty:
        args = get_args(field_type)
        element = _unwrap_optional(args[0]) if args else None

        if element is not None and self.is_domain_type(element) and not issubclass(element, Enum):
            title = self.index.sub_resource_title_for(element)
            if title is None:
                return string_property()
            return array_property(ref_property(title + context.value))

        if element is not None and not get_origin(element):
            item = self.create_property_for_type(element, context)
            if item.type != "object":
                return array_property(item)
        return array_property()

    def _type_hints(self, modeled_type: type) -> Dict[str, Any]:
        if modeled_type not in self._hints:
            try:
                hints = get_type_hints(modeled_type)
            except Exception as e:
                self.logger.log_debug(
                    f"Could not evaluate annotations of {modeled_type.__name__}: {str(e)}"
                )
                hints = {}
                for klass in reversed(modeled_type.__mro__):
                    hints.update(klass.__dict__.get("__annotations__", {}))
            self._hints[modeled_type] = hints
        return self._hints[modeled_type]


def _unwrap_optional(field_type: Any) -> Any:
    if get_origin(field_type) in (Union, types.UnionType):
        args = [arg for arg in get_args(field_type) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return field_type
