import pytest
from swaggergen.modules.resource import (
    DelegatingCrudResource,
    RequestContext,
    ResourceDescription,
    ResourceDoesNotSupportOperationError,
    get_resource_metadata,
    get_sub_resource_metadata,
    resource,
    sub_resource,
)
from swaggergen.modules.resource.metadata import strip_version
from tests.fixtures.domain import Concept, ConceptName


@resource(name="v1/concept", supported_class=Concept)
class ConceptHandler(DelegatingCrudResource[Concept]):
    pass


@sub_resource(parent=ConceptHandler, path="name", supported_class=ConceptName)
class ConceptNameHandler(DelegatingCrudResource[ConceptName]):
    pass


class ExtendedConceptHandler(ConceptHandler):
    pass


def test_resource_decorator():
    metadata = get_resource_metadata(ConceptHandler)

    assert metadata.name == "v1/concept"
    assert metadata.supported_class is Concept
    assert get_sub_resource_metadata(ConceptHandler) is None


def test_resource_decorator_takes_identity_only():
    with pytest.raises(TypeError):
        resource(name="v1/concept", supported_class=Concept, order=2)


def test_sub_resource_decorator():
    metadata = get_sub_resource_metadata(ConceptNameHandler)

    assert metadata.parent is ConceptHandler
    assert metadata.path == "name"
    assert metadata.supported_class is ConceptName
    assert get_resource_metadata(ConceptNameHandler) is None


def test_metadata_is_not_inherited():
    assert get_resource_metadata(ExtendedConceptHandler) is None


@pytest.mark.parametrize("name, expected", [
    ("v1/concept", "concept"),
    ("v1/concept/name", "concept/name"),
    ("concept", "concept"),
])
def test_strip_version(name, expected):
    assert strip_version(name) == expected


def test_delegating_base_supports_nothing():
    handler = ConceptHandler()

    with pytest.raises(ResourceDoesNotSupportOperationError):
        handler.get_all(RequestContext())
    with pytest.raises(ResourceDoesNotSupportOperationError):
        handler.purge("uuid", RequestContext())
    assert handler.get_representation_description(None) is None
    assert not handler.has_types_defined()
    assert handler.declared_capability(None) is None


def test_resource_description_keeps_order():
    description = ResourceDescription("display", "uuid").add_property("names")

    assert description.property_names() == ["display", "uuid", "names"]
