import pytest
from swaggergen.modules.generator.definitions import DefinitionFactory
from swaggergen.modules.generator.descriptor import ResourceDescriptor
from swaggergen.modules.generator.index import ResourceIndex
from swaggergen.modules.generator.operation_builder import OperationBuilder, OperationKind
from swaggergen.modules.generator.property_resolver import PropertyResolver
from swaggergen.modules.generator.search import (
    SearchAugmenter,
    dependency_description,
    search_resource_key,
)
from swaggergen.modules.resource import SearchConfig, SearchParameter, SearchQuery
from swaggergen.modules.swagger.schema import Info, PathItem, SwaggerSpec
from tests.fixtures.handlers.concept import ConceptNameResource1_8, ConceptResource1_8
from tests.fixtures.handlers.location import LocationResource
from tests.fixtures.handlers.search import ConceptSearchHandler


class BrokenSearchHandler(ConceptSearchHandler):

    def get_search_config(self):
        raise RuntimeError("no config")


@pytest.fixture
def concept(logger):
    return ResourceDescriptor.from_handler(ConceptResource1_8(), logger)


@pytest.fixture
def location(logger):
    return ResourceDescriptor.from_handler(LocationResource(), logger)


@pytest.fixture
def operations(concept, location, logger):
    document = SwaggerSpec(info=Info(title="test", version="1"))
    factory = DefinitionFactory(PropertyResolver(ResourceIndex([concept, location]), logger), logger)
    return OperationBuilder(document, factory, logger)


@pytest.fixture
def augmenter(operations, logger):
    return SearchAugmenter([ConceptSearchHandler()], operations, logger)


def test_dependency_description():
    params = [SearchParameter("term"), SearchParameter("class"), SearchParameter("locale")]

    assert dependency_description(params) == "Must be used with term, class and locale"
    assert dependency_description(params[:1]) == "Must be used with term"


def test_search_resource_key(concept, logger):
    name = ResourceDescriptor.from_handler(ConceptNameResource1_8(), logger)

    assert search_resource_key(concept) == "v1/concept"
    assert search_resource_key(name) == "v1/concept/name"


def test_configs_are_scoped_by_resource(augmenter, concept, location):
    assert augmenter.has_search_handler(concept)
    assert not augmenter.has_search_handler(location)


def test_augments_existing_fetch_all(augmenter, operations, concept):
    path_item = PathItem(get=operations.build_operation(concept, "get", OperationKind.GET_ALL))

    assert augmenter.augment(concept, path_item, supports_search=False)

    operation = path_item.get
    assert operation.summary == "Fetch all non-retired concept resources or perform search"
    assert operation.description == "All search parameters are optional"
    assert operation.operation_id == "getAllConcepts"
    names = [param.name for param in operation.parameters]
    assert names == ["limit", "startIndex", "v", "q", "source", "code", "term", "class", "locale", "exact"]
    assert not operation.find_parameter("q").required
    assert operation.find_parameter("source").description is None
    assert operation.find_parameter("code").description == "Must be used with source"
    assert operation.find_parameter("exact").description == "Must be used with term, class and locale"


def test_search_only_resource_requires_free_text(augmenter, location):
    path_item = PathItem()

    assert augmenter.augment(location, path_item, supports_search=True)

    operation = path_item.get
    assert operation.summary == "Search for location"
    assert operation.find_parameter("q").required
    assert operation.responses["200"].response_schema.ref == "#/definitions/FetchAll"
    assert operation.operation_id == "getAllLocations"


def test_search_config_makes_free_text_optional(augmenter, concept):
    path_item = PathItem()

    augmenter.augment(concept, path_item, supports_search=False)

    assert not path_item.get.find_parameter("q").required
    assert path_item.get.find_parameter("term") is not None


def test_no_search_leaves_path_untouched(augmenter, location):
    path_item = PathItem()

    assert not augmenter.augment(location, path_item, supports_search=False)
    assert path_item.is_empty()


def test_broken_search_handler_is_logged(operations, concept, logger):
    augmenter = SearchAugmenter([BrokenSearchHandler(), ConceptSearchHandler()], operations, logger)

    assert len(augmenter.configs_for(concept)) == 1
    assert "WARNING: Error reading search config of BrokenSearchHandler: no config" in logger.get_logs()


class OverlappingSearchHandler(ConceptSearchHandler):

    def get_search_config(self):
        return SearchConfig(
            id="overlapping",
            supported_resource="v1/concept",
            search_queries=[
                SearchQuery(
                    required_parameters=[SearchParameter("q")],
                    optional_parameters=[SearchParameter("v"), SearchParameter("answerTo")],
                ),
            ],
            supported_versions=["1.8.*"],
        )


def test_parameters_already_on_operation_are_not_repeated(operations, concept, logger):
    augmenter = SearchAugmenter([OverlappingSearchHandler()], operations, logger)
    path_item = PathItem(get=operations.build_operation(concept, "get", OperationKind.GET_ALL))

    augmenter.augment(concept, path_item, supports_search=True)

    names = [param.name for param in path_item.get.parameters]
    assert names == ["limit", "startIndex", "v", "q", "answerTo"]
    assert path_item.get.find_parameter("v").enum == ["ref", "default", "full", "custom"]


def test_generated_query_parameters_state_required(augmenter, operations, concept):
    path_item = PathItem(get=operations.build_operation(concept, "get", OperationKind.GET_ALL))

    augmenter.augment(concept, path_item, supports_search=False)

    dumped = path_item.get.to_dict()["parameters"]
    assert all(param["required"] is False for param in dumped)
