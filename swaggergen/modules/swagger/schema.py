"""Data models for Swagger 2.0 specification documents."""

from enum import Enum
from typing import Dict, List, Optional, Any, Iterator, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator


HTTP_VERBS = ("get", "put", "post", "delete", "options", "head", "patch")


class Scheme(str, Enum):
    """Transport schemes a document can advertise."""
    HTTP = "http"
    HTTPS = "https"


class SwaggerModel(BaseModel):
    """Common configuration for all document objects.

    Wire names are carried as aliases. Unknown keys are kept so that documents
    loaded from disk survive a load/dump cycle untouched.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation of this object."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SchemaProperty(SwaggerModel):
    """A typed property, an array item or an inline object schema."""
    type: Optional[str] = None
    format: Optional[str] = None
    description: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    items: Optional["SchemaProperty"] = None
    properties: Optional[Dict[str, "SchemaProperty"]] = None
    enum: Optional[List[Any]] = None
    example: Optional[Any] = None

    def iter_refs(self) -> Iterator[str]:
        """Yield every ``$ref`` reachable from this property."""
        if self.ref:
            yield self.ref
        if self.items is not None:
            yield from self.items.iter_refs()
        for prop in (self.properties or {}).values():
            yield from prop.iter_refs()


SchemaProperty.model_rebuild()


class SchemaModel(SchemaProperty):
    """A named definition.

    Generated definitions are flat object schemas (see ``object_model``).
    Definitions loaded from module documents may be any schema, including a
    bare ``$ref``, and keep exactly the keys they were read with.
    """

    def property(self, name: str, prop: SchemaProperty) -> "SchemaModel":
        if self.properties is None:
            self.properties = {}
        self.properties[name] = prop
        return self


def object_model() -> SchemaModel:
    return SchemaModel(type="object", properties={})


class Parameter(SwaggerModel):
    """Path, query or body parameter of an operation, or a ``$ref`` to a shared one."""
    name: Optional[str] = None
    in_location: Optional[str] = Field(None, alias="in")
    ref: Optional[str] = Field(None, alias="$ref")
    description: Optional[str] = None
    required: Optional[bool] = None
    type: Optional[str] = None
    format: Optional[str] = None
    enum: Optional[List[Any]] = None
    default: Optional[Any] = None
    param_schema: Optional[SchemaProperty] = Field(None, alias="schema")

    @model_validator(mode="after")
    def check_identity(self) -> "Parameter":
        if self.ref is None and (self.name is None or self.in_location is None):
            raise ValueError("a parameter needs 'name' and 'in' unless it is a $ref")
        return self


class Response(SwaggerModel):
    """A declared response of an operation, or a ``$ref`` to a shared one."""
    description: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    response_schema: Optional[SchemaProperty] = Field(None, alias="schema")


class Operation(SwaggerModel):
    """One HTTP operation on a path.

    List and map fields stay unset until something is added, so an operation
    read from a document dumps back with the keys it had.
    """
    tags: Optional[List[str]] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = Field(None, alias="operationId")
    consumes: Optional[List[str]] = None
    produces: Optional[List[str]] = None
    parameters: Optional[List[Parameter]] = None
    responses: Optional[Dict[str, Response]] = None

    def parameter(self, param: Parameter) -> "Operation":
        if self.parameters is None:
            self.parameters = []
        self.parameters.append(param)
        return self

    def response(self, status: int, response: Response) -> "Operation":
        if self.responses is None:
            self.responses = {}
        self.responses[str(status)] = response
        return self

    def find_parameter(self, name: str) -> Optional[Parameter]:
        for param in self.parameters or []:
            if param.name == name:
                return param
        return None


class PathItem(SwaggerModel):
    """Operations available on a single path template, keyed by verb."""
    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None

    def operations(self) -> List[Tuple[str, Operation]]:
        """Return the (verb, operation) pairs that are set, in verb order."""
        return [
            (verb, getattr(self, verb))
            for verb in HTTP_VERBS
            if getattr(self, verb) is not None
        ]

    def is_empty(self) -> bool:
        return not self.operations()


class Contact(SwaggerModel):
    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None


class License(SwaggerModel):
    name: str
    url: Optional[str] = None


class Info(SwaggerModel):
    title: str
    version: str
    description: Optional[str] = None
    contact: Optional[Contact] = None
    license: Optional[License] = None


class ExternalDocs(SwaggerModel):
    description: Optional[str] = None
    url: str


class SwaggerSpec(SwaggerModel):
    """A Swagger 2.0 document."""
    swagger: str = "2.0"
    info: Info
    host: Optional[str] = None
    base_path: Optional[str] = Field(None, alias="basePath")
    schemes: Optional[List[Scheme]] = None
    consumes: Optional[List[str]] = None
    produces: Optional[List[str]] = None
    security_definitions: Optional[Dict[str, Dict[str, Any]]] = Field(None, alias="securityDefinitions")
    security: Optional[List[Dict[str, List[str]]]] = None
    paths: Dict[str, PathItem] = {}
    definitions: Dict[str, SchemaModel] = {}
    parameters: Optional[Dict[str, Parameter]] = None
    responses: Optional[Dict[str, Response]] = None
    external_docs: Optional[ExternalDocs] = Field(None, alias="externalDocs")

    def path(self, template: str, path_item: PathItem) -> "SwaggerSpec":
        self.paths[template] = path_item
        return self

    def add_definition(self, name: str, model: SchemaModel) -> "SwaggerSpec":
        self.definitions[name] = model
        return self

    def iter_refs(self) -> Iterator[str]:
        """Yield every ``$ref`` used by operations, shared sections and definitions."""
        parameters = list((self.parameters or {}).values())
        responses = list((self.responses or {}).values())
        for path_item in self.paths.values():
            for _, operation in path_item.operations():
                parameters.extend(operation.parameters or [])
                responses.extend((operation.responses or {}).values())
        for param in parameters:
            if param.ref:
                yield param.ref
            if param.param_schema is not None:
                yield from param.param_schema.iter_refs()
        for response in responses:
            if response.ref:
                yield response.ref
            if response.response_schema is not None:
                yield from response.response_schema.iter_refs()
        for model in self.definitions.values():
            yield from model.iter_refs()

    def to_json(self) -> str:
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)
