import pytest
from swaggergen.modules.generator.definitions import DefinitionFactory
from swaggergen.modules.generator.descriptor import ResourceDescriptor
from swaggergen.modules.generator.index import ResourceIndex
from swaggergen.modules.generator.operation_builder import (
    OperationBuilder,
    OperationKind,
    search_query_parameter,
)
from swaggergen.modules.generator.property_resolver import PropertyResolver
from swaggergen.modules.swagger.schema import Info, SwaggerSpec
from tests.fixtures.handlers.concept import ConceptNameResource1_8, ConceptResource1_8
from tests.fixtures.handlers.location import LocationResource


@pytest.fixture
def descriptors(logger):
    handlers = [ConceptResource1_8(), ConceptNameResource1_8(), LocationResource()]
    return [ResourceDescriptor.from_handler(handler, logger) for handler in handlers]


@pytest.fixture
def document():
    return SwaggerSpec(info=Info(title="test", version="1"))


@pytest.fixture
def builder(descriptors, document, logger):
    factory = DefinitionFactory(PropertyResolver(ResourceIndex(descriptors), logger), logger)
    return OperationBuilder(document, factory, logger)


def names(operation):
    return [param.name for param in operation.parameters]


def test_get_all(builder, descriptors, document):
    operation = builder.build_operation(descriptors[0], "get", OperationKind.GET_ALL)

    assert operation.tags == ["concept"]
    assert operation.summary == "Fetch all non-retired"
    assert operation.operation_id == "getAllConcepts"
    assert names(operation) == ["limit", "startIndex", "v"]
    assert operation.find_parameter("v").enum == ["ref", "default", "full", "custom"]
    assert operation.responses["200"].to_dict() == {
        "description": "concept response",
        "schema": {"type": "array", "items": {"$ref": "#/definitions/ConceptGet"}},
    }
    assert operation.responses["401"].description == "User not logged in"
    assert {"ConceptGet", "ConceptGetRef", "ConceptGetFull"} <= set(document.definitions)


def test_get_by_uuid_declares_not_found(builder, descriptors):
    operation = builder.build_operation(descriptors[0], "get", OperationKind.GET_BY_UUID)

    assert operation.operation_id == "getConcept"
    assert names(operation) == ["v", "uuid"]
    uuid = operation.find_parameter("uuid")
    assert uuid.in_location == "path" and uuid.required
    assert operation.responses["200"].response_schema.ref == "#/definitions/ConceptGet"
    assert operation.responses["404"].description == "Resource with given uuid doesn't exist"


def test_subclass_type_parameter_for_typed_resources(builder, descriptors):
    location = descriptors[2]
    assert "t" in names(builder.build_operation(location, "get", OperationKind.GET_ALL))
    assert "t" in names(builder.build_operation(location, "get", OperationKind.GET_BY_UUID))
    assert "t" not in names(builder.build_operation(descriptors[0], "get", OperationKind.GET_ALL))


def test_get_all_sub_resource_wraps_results(builder, descriptors):
    operation = builder.build_operation(descriptors[1], "get", OperationKind.GET_ALL_SUBRESOURCE)

    assert operation.tags == ["concept"]
    assert operation.summary == "Fetch all non-retired name subresources"
    assert operation.operation_id == "getAllConceptNames"
    assert names(operation) == ["limit", "startIndex", "parent-uuid", "v"]
    schema = operation.responses["200"].response_schema
    assert schema.type == "object"
    assert schema.properties["results"].items.ref == "#/definitions/ConceptNameGet"


def test_create_adds_body_and_definitions(builder, descriptors, document):
    operation = builder.build_operation(descriptors[0], "post", OperationKind.CREATE)

    assert operation.summary == "Create with properties in request"
    assert operation.operation_id == "createConcept"
    body = operation.find_parameter("resource")
    assert body.to_dict() == {
        "name": "resource",
        "in": "body",
        "description": "Resource to create",
        "required": True,
        "schema": {"$ref": "#/definitions/ConceptCreate"},
    }
    assert set(operation.responses) == {"201", "401"}
    assert {"ConceptCreate", "ConceptCreateFull"} <= set(document.definitions)


def test_update_sub_resource(builder, descriptors, document):
    operation = builder.build_operation(descriptors[1], "post", OperationKind.UPDATE_SUBRESOURCE)

    assert operation.summary == "edit name subresource with given uuid, only modifying properties in request"
    assert names(operation) == ["parent-uuid", "uuid", "resource"]
    assert operation.find_parameter("uuid").description == "uuid of resource to update"
    assert operation.find_parameter("resource").param_schema.ref == "#/definitions/ConceptNameUpdate"
    assert "ConceptNameUpdate" in document.definitions


def test_delete_and_purge(builder, descriptors, document):
    delete = builder.build_operation(descriptors[0], "delete", OperationKind.DELETE)
    purge = builder.build_operation(descriptors[0], "delete", OperationKind.PURGE_SUBRESOURCE)

    assert delete.operation_id == "deleteConcept"
    assert set(delete.responses) == {"204", "404", "401"}
    assert delete.find_parameter("uuid").description == "uuid to delete"
    assert purge.summary == "Purge concept subresource by uuid"
    assert set(purge.responses) == {"204", "401"}
    assert document.definitions == {}


def test_search_operation(builder, descriptors):
    operation = builder.build_search_operation(descriptors[2], search_query_parameter(required=True))

    assert operation.summary == "Search for location"
    assert operation.description == "At least one search parameter must be specified"
    assert operation.produces == ["application/json", "application/xml"]
    assert names(operation) == ["limit", "startIndex", "v", "q", "t"]
    assert operation.find_parameter("q").required
    assert operation.responses["200"].response_schema.ref == "#/definitions/FetchAll"


def test_for_resource_selects_sub_resource_variant(descriptors):
    assert OperationKind.for_resource(OperationKind.CREATE, descriptors[0]) == OperationKind.CREATE
    assert OperationKind.for_resource(OperationKind.CREATE, descriptors[1]) == OperationKind.CREATE_SUBRESOURCE
