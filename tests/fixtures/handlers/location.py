from swaggergen.modules.resource import (
    DelegatingCrudResource,
    DelegatingSubclassHandler,
    ResourceDescription,
    resource,
)
from tests.fixtures.domain import Drug, Location


@resource(name="v1/location", supported_class=Location)
class LocationResource(DelegatingCrudResource[Location]):
    """Fails for reasons unrelated to support, so probing counts it as implemented."""

    def get_representation_description(self, representation):
        return ResourceDescription("name", "parent_location")

    def get_all(self, context):
        raise RuntimeError("database unavailable")

    def has_types_defined(self):
        return True


@resource(name="v1/drugorder", supported_class=Drug)
class DrugOrderSubclassHandler(DelegatingSubclassHandler[Drug]):

    def get_all(self, context):
        return []


@resource(name="v1/ward", supported_class=Location)
class WardResource(DelegatingCrudResource[Location]):

    def __init__(self, service):
        self.service = service
