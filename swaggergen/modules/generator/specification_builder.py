"""Builds a complete Swagger 2.0 document from resource and search handlers."""

from typing import Any, Callable, List, Sequence, Set

from ...models.config import GeneratorConfig, InfoDefaults
from ..logging import BaseLogger
from ..resource import SearchHandler
from ..swagger.schema import (
    Contact, ExternalDocs, Info, License, SchemaModel, SchemaProperty, SwaggerSpec, object_model,
)
from ..swagger.properties import (
    array_property,
    definition_name_from_ref,
    object_property,
    string_property,
)
from .definitions import DefinitionFactory
from .descriptor import ResourceDescriptor
from .index import ResourceIndex
from .operation_builder import JSON, OperationBuilder
from .path_assembler import PathAssembler
from .probe import CapabilityProber
from .property_resolver import PropertyResolver
from .search import SearchAugmenter

FETCH_ALL_DEFINITION = "FetchAll"
BASIC_AUTH = "basic_auth"


def fetch_all_definition() -> SchemaModel:
    """Shape of the default fetch-all and search response."""
    link = object_property(
        rel=SchemaProperty(type="string", example="self"),
        uri=string_property(format="uri"),
    )
    result = object_property(
        uuid=string_property(),
        display=string_property(),
        links=array_property(link),
    )
    return object_model().property("results", array_property(result))


class SpecificationBuilder:
    """
    Orchestrates one generation run.

    Handlers are described and indexed up front, then assembled one at a
    time, top-level resources before sub-resources. A failing resource is
    logged and skipped. Definitions still referenced but missing at the end
    are generated from their owning resource, or degraded to generic
    properties when no resource owns them.
    """

    def __init__(self, config: GeneratorConfig, resource_handlers: Sequence[Any],
                 search_handlers: Sequence[SearchHandler], logger: BaseLogger):
        self.config = config
        self.resource_handlers = list(resource_handlers)
        self.search_handlers = list(search_handlers)
        self.logger = logger

    def build(self) -> SwaggerSpec:
        self.logger.log_info("Initiating Swagger specification creation")
        document = self.initial_document()

        descriptors = self.describe_handlers()
        index = ResourceIndex(descriptors)
        resolver = PropertyResolver(index, self.logger, self.config.domain_namespaces)
        operations = OperationBuilder(document, DefinitionFactory(resolver, self.logger), self.logger)
        search = SearchAugmenter(self.search_handlers, operations, self.logger)
        assembler = PathAssembler(document, operations, search, CapabilityProber(self.logger), self.logger)

        for descriptor in descriptors:
            try:
                assembler.assemble(descriptor)
            except Exception as e:
                self.logger.log_warning(f"Skipping resource {descriptor.label}: {str(e)}")

        document.add_definition(FETCH_ALL_DEFINITION, fetch_all_definition())
        self.resolve_references(document, index, operations)

        self.logger.log_summary(len(document.paths), len(document.definitions))
        return document

    def initial_document(self) -> SwaggerSpec:
        return SwaggerSpec(
            info=Info(
                version=self.config.version,
                title=self.config.title,
                description=self.config.description,
                contact=Contact(name=InfoDefaults.CONTACT_NAME, url=InfoDefaults.CONTACT_URL),
                license=License(name=InfoDefaults.LICENSE_NAME, url=InfoDefaults.LICENSE_URL),
            ),
            host=self.config.host,
            base_path=self.config.base_path,
            schemes=list(dict.fromkeys(self.config.schemes)),
            security_definitions={BASIC_AUTH: {"type": "basic"}},
            security=[{BASIC_AUTH: []}],
            consumes=[JSON],
            produces=[JSON],
            external_docs=ExternalDocs(
                description=InfoDefaults.EXTERNAL_DOCS_DESCRIPTION,
                url=InfoDefaults.EXTERNAL_DOCS_URL,
            ),
        )

    def describe_handlers(self) -> List[ResourceDescriptor]:
        """Descriptors of all usable handlers, top-level resources first."""
        descriptors = []
        for handler in self.resource_handlers:
            descriptor = ResourceDescriptor.from_handler(handler, self.logger)
            if descriptor.name is None:
                self.logger.log_warning(f"Skipping {descriptor.handler_class_name}: no resource name")
                continue
            descriptors.append(descriptor)
        # stable: declaration order is kept within each group
        descriptors.sort(key=lambda d: d.is_sub_resource)
        return descriptors

    def resolve_references(self, document: SwaggerSpec, index: ResourceIndex,
                           operations: OperationBuilder) -> None:
        """Make every ``$ref`` in the document point at an existing definition."""
        attempted: Set[str] = set()
        while True:
            missing = sorted(self._missing_definitions(document) - attempted)
            if not missing:
                break
            for name in missing:
                attempted.add(name)
                owner = index.definition_owner(name)
                if owner is None:
                    continue
                descriptor, family = owner
                self.logger.log_debug(f"Generating referenced definition {name}")
                for definition, model in operations.definitions.create_definitions(descriptor, family).items():
                    if definition not in document.definitions:
                        document.add_definition(definition, model)

        dangling = self._missing_definitions(document)
        if not dangling:
            return
        for name in sorted(dangling):
            self.logger.log_warning(f"No definition for referenced schema {name}; using a generic property")

        def is_dangling(ref: str) -> bool:
            return definition_name_from_ref(ref) in dangling

        for model in document.definitions.values():
            for name, prop in list((model.properties or {}).items()):
                model.properties[name] = _degrade(prop, is_dangling, string_property)
            if model.items is not None:
                model.items = _degrade(model.items, is_dangling, string_property)
        for path_item in document.paths.values():
            for _, operation in path_item.operations():
                for param in operation.parameters or []:
                    if param.param_schema is not None:
                        param.param_schema = _degrade(param.param_schema, is_dangling, object_property)
                for response in (operation.responses or {}).values():
                    if response.response_schema is not None:
                        response.response_schema = _degrade(response.response_schema, is_dangling, object_property)

    @staticmethod
    def _missing_definitions(document: SwaggerSpec) -> Set[str]:
        missing: Set[str] = set()
        for ref in document.iter_refs():
            name = definition_name_from_ref(ref)
            if name is not None and name not in document.definitions:
                missing.add(name)
        return missing


def _degrade(prop: SchemaProperty, is_dangling: Callable[[str], bool],
             fallback: Callable[[], SchemaProperty]) -> SchemaProperty:
    if prop.ref and is_dangling(prop.ref):
        return fallback()
    if prop.items is not None:
        prop.items = _degrade(prop.items, is_dangling, fallback)
    if prop.properties:
        prop.properties = {
            name: _degrade(child, is_dangling, fallback)
            for name, child in prop.properties.items()
        }
    return prop
