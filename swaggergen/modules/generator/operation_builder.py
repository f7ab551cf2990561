"""Templated construction of the operations generated for a resource."""

from enum import Enum
from typing import List, Optional

from ..logging import BaseLogger
from ..swagger.schema import Operation, Parameter, Response, SwaggerSpec
from ..swagger.properties import array_property, object_property, ref_property
from .definitions import DefinitionFactory
from .descriptor import ResourceDescriptor
from .naming import DefinitionFamily, definition_name, operation_title

JSON = "application/json"
XML = "application/xml"
REPRESENTATIONS = ["ref", "default", "full", "custom"]


class OperationKind(str, Enum):
    """Operation templates; each has a plain and a sub-resource variant."""
    GET_ALL = "get_all"
    GET_ALL_SUBRESOURCE = "get_all_subresource"
    GET_BY_UUID = "get_by_uuid"
    GET_SUBRESOURCE_BY_UUID = "get_subresource_by_uuid"
    SEARCH = "search"
    SEARCH_SUBRESOURCE = "search_subresource"
    CREATE = "create"
    CREATE_SUBRESOURCE = "create_subresource"
    UPDATE = "update"
    UPDATE_SUBRESOURCE = "update_subresource"
    DELETE = "delete"
    DELETE_SUBRESOURCE = "delete_subresource"
    PURGE = "purge"
    PURGE_SUBRESOURCE = "purge_subresource"

    @property
    def family(self) -> Optional[DefinitionFamily]:
        """Definition family the operation's schemas belong to."""
        if self in _GET_KINDS:
            return DefinitionFamily.GET
        if self in (OperationKind.CREATE, OperationKind.CREATE_SUBRESOURCE):
            return DefinitionFamily.CREATE
        if self in (OperationKind.UPDATE, OperationKind.UPDATE_SUBRESOURCE):
            return DefinitionFamily.UPDATE
        return None

    @classmethod
    def for_resource(cls, plain: "OperationKind", descriptor: ResourceDescriptor) -> "OperationKind":
        """The sub-resource variant of ``plain`` when the resource has a parent."""
        if descriptor.parent_name is None:
            return plain
        return _SUBRESOURCE_VARIANTS[plain]


_GET_KINDS = (
    OperationKind.GET_ALL,
    OperationKind.GET_ALL_SUBRESOURCE,
    OperationKind.GET_BY_UUID,
    OperationKind.GET_SUBRESOURCE_BY_UUID,
    OperationKind.SEARCH,
    OperationKind.SEARCH_SUBRESOURCE,
)

_SUBRESOURCE_VARIANTS = {
    OperationKind.GET_ALL: OperationKind.GET_ALL_SUBRESOURCE,
    OperationKind.GET_BY_UUID: OperationKind.GET_SUBRESOURCE_BY_UUID,
    OperationKind.SEARCH: OperationKind.SEARCH_SUBRESOURCE,
    OperationKind.CREATE: OperationKind.CREATE_SUBRESOURCE,
    OperationKind.UPDATE: OperationKind.UPDATE_SUBRESOURCE,
    OperationKind.DELETE: OperationKind.DELETE_SUBRESOURCE,
    OperationKind.PURGE: OperationKind.PURGE_SUBRESOURCE,
}


def paging_parameters() -> List[Parameter]:
    return [
        Parameter(name="limit", in_location="query",
                  description="The number of results to return", type="integer", required=False),
        Parameter(name="startIndex", in_location="query",
                  description="The offset at which to start", type="integer", required=False),
    ]


def representation_parameter() -> Parameter:
    return Parameter(
        name="v",
        in_location="query",
        description="The representation to return (ref, default, full or custom)",
        type="string",
        enum=list(REPRESENTATIONS),
        required=False
    )


def subclass_type_parameter() -> Parameter:
    return Parameter(
        name="t",
        in_location="query",
        description="The type of Subclass Resource to return",
        type="string",
        required=False
    )


def search_query_parameter(required: bool = False) -> Parameter:
    return Parameter(
        name="q", in_location="query", description="The search query", type="string", required=required
    )


def path_parameter(name: str, description: str) -> Parameter:
    return Parameter(name=name, in_location="path", description=description, required=True, type="string")


def parent_uuid_parameter() -> Parameter:
    return path_parameter("parent-uuid", "parent resource uuid")


def body_parameter(description: str, definition: str) -> Parameter:
    return Parameter(
        name="resource",
        in_location="body",
        description=description,
        required=True,
        param_schema=ref_property(definition)
    )


class OperationBuilder:
    """
    Builds one operation per (resource, kind).

    Definitions referenced by GET and POST operations are created in the
    document as a side effect, so every emitted ``$ref`` has a target.
    """

    def __init__(self, document: SwaggerSpec, definitions: DefinitionFactory, logger: BaseLogger):
        self.document = document
        self.definitions = definitions
        self.logger = logger

    def build_operation(self, descriptor: ResourceDescriptor, verb: str, kind: OperationKind) -> Operation:
        operation = Operation(tags=[descriptor.tag], consumes=[JSON], produces=[JSON])

        if verb in ("get", "post") and kind.family is not None:
            self.ensure_definitions(descriptor, kind.family)

        name = descriptor.name
        get_schema = definition_name(name, descriptor.parent_name, DefinitionFamily.GET)
        title = operation_title(descriptor.handler_class_name, pluralize=False)
        titles = operation_title(descriptor.handler_class_name, pluralize=True)

        if kind == OperationKind.GET_ALL:
            operation.summary = "Fetch all non-retired"
            operation.operation_id = "getAll" + titles
            operation.parameters = paging_parameters()
            operation.parameter(representation_parameter())
            self._add_subclass_type(descriptor, operation)
            operation.response(200, Response(
                description=f"{name} response", response_schema=array_property(ref_property(get_schema))
            ))

        elif kind == OperationKind.GET_ALL_SUBRESOURCE:
            operation.summary = f"Fetch all non-retired {name} subresources"
            operation.operation_id = "getAll" + titles
            operation.parameters = paging_parameters()
            operation.parameter(parent_uuid_parameter())
            operation.parameter(representation_parameter())
            self._add_subclass_type(descriptor, operation)
            operation.response(200, Response(
                description=f"{name} response",
                response_schema=object_property(results=array_property(ref_property(get_schema)))
            ))

        elif kind == OperationKind.GET_BY_UUID:
            operation.summary = "Fetch by uuid"
            operation.operation_id = "get" + title
            operation.parameter(representation_parameter())
            operation.parameter(path_parameter("uuid", "uuid to filter by"))
            self._add_subclass_type(descriptor, operation)
            operation.response(200, Response(description=f"{name} response", response_schema=ref_property(get_schema)))
            operation.response(404, self._not_found())

        elif kind == OperationKind.GET_SUBRESOURCE_BY_UUID:
            operation.summary = f"Fetch {name} subresources by uuid"
            operation.operation_id = "get" + title
            operation.parameter(parent_uuid_parameter())
            operation.parameter(path_parameter("uuid", "uuid to filter by"))
            operation.parameter(representation_parameter())
            self._add_subclass_type(descriptor, operation)
            operation.response(200, Response(description=f"{name} response", response_schema=ref_property(get_schema)))
            operation.response(404, self._not_found())

        elif kind in (OperationKind.SEARCH, OperationKind.SEARCH_SUBRESOURCE):
            return self.build_search_operation(descriptor, search_query_parameter(required=True))

        elif kind in (OperationKind.CREATE, OperationKind.CREATE_SUBRESOURCE):
            if kind == OperationKind.CREATE:
                operation.summary = "Create with properties in request"
            else:
                operation.summary = f"Create {name} subresource with properties in request"
                operation.parameter(parent_uuid_parameter())
            operation.operation_id = "create" + title
            operation.parameter(body_parameter(
                "Resource to create",
                definition_name(name, descriptor.parent_name, DefinitionFamily.CREATE)
            ))
            operation.response(201, Response(description=f"{name} response"))

        elif kind in (OperationKind.UPDATE, OperationKind.UPDATE_SUBRESOURCE):
            if kind == OperationKind.UPDATE:
                operation.summary = "Edit with given uuid, only modifying properties in request"
            else:
                operation.summary = f"edit {name} subresource with given uuid, only modifying properties in request"
                operation.parameter(parent_uuid_parameter())
            operation.operation_id = "update" + title
            operation.parameter(path_parameter("uuid", "uuid of resource to update"))
            operation.parameter(body_parameter(
                "Resource properties to update",
                definition_name(name, descriptor.parent_name, DefinitionFamily.UPDATE)
            ))
            operation.response(201, Response(description=f"{name} response"))

        elif kind in (OperationKind.DELETE, OperationKind.DELETE_SUBRESOURCE):
            if kind == OperationKind.DELETE:
                operation.summary = "Delete resource by uuid"
            else:
                operation.summary = f"Delete {name} subresource by uuid"
                operation.parameter(parent_uuid_parameter())
            operation.operation_id = "delete" + title
            operation.parameter(path_parameter("uuid", "uuid to delete"))
            operation.response(204, Response(description="Delete successful"))
            operation.response(404, self._not_found())

        elif kind in (OperationKind.PURGE, OperationKind.PURGE_SUBRESOURCE):
            if kind == OperationKind.PURGE:
                operation.summary = "Purge resource by uuid"
            else:
                operation.summary = f"Purge {name} subresource by uuid"
                operation.parameter(parent_uuid_parameter())
            operation.operation_id = "purge" + title
            operation.parameter(path_parameter("uuid", "uuid to delete"))
            operation.response(204, Response(description="Delete successful"))

        operation.response(401, Response(description="User not logged in"))
        return operation

    def build_search_operation(self, descriptor: ResourceDescriptor, q: Parameter) -> Operation:
        """Search-only GET for a resource without a fetch-all operation."""
        self.ensure_definitions(descriptor, DefinitionFamily.GET)

        operation = Operation(
            tags=[descriptor.tag],
            produces=[JSON, XML],
            summary=f"Search for {descriptor.name}",
            description="At least one search parameter must be specified",
            operation_id="getAll" + operation_title(descriptor.handler_class_name, pluralize=True),
        )
        operation.parameters = paging_parameters()
        if descriptor.parent_name is not None:
            operation.parameter(parent_uuid_parameter())
        operation.parameter(representation_parameter())
        operation.parameter(q)
        self._add_subclass_type(descriptor, operation)
        operation.response(200, Response(
            description=f"{descriptor.name} response", response_schema=ref_property("FetchAll")
        ))
        operation.response(401, Response(description="User not logged in"))
        return operation

    def ensure_definitions(self, descriptor: ResourceDescriptor, family: DefinitionFamily) -> None:
        """Add the definitions of ``family`` for a resource unless already present."""
        base = definition_name(descriptor.name, descriptor.parent_name, family)
        if base in self.document.definitions:
            return
        for definition, model in self.definitions.create_definitions(descriptor, family).items():
            self.document.add_definition(definition, model)

    @staticmethod
    def _add_subclass_type(descriptor: ResourceDescriptor, operation: Operation) -> None:
        if descriptor.has_types_defined:
            operation.parameter(subclass_type_parameter())

    @staticmethod
    def _not_found() -> Response:
        return Response(description="Resource with given uuid doesn't exist")
