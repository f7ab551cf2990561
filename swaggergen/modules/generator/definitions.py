"""Schema models for the Get, Create and Update definition families."""

from typing import Any, Dict, Optional

from ..logging import BaseLogger
from ..resource import Representation, ResourceDescription
from ..swagger.schema import SchemaModel, object_model
from ..swagger.properties import string_property
from .descriptor import ResourceDescriptor
from .naming import DefinitionFamily, DefinitionVariant, FAMILY_VARIANTS, definition_name
from .property_resolver import OperationContext, PropertyResolver

_GET_CONTEXTS = {
    Representation.DEFAULT: OperationContext.GET,
    Representation.REF: OperationContext.GET_REF,
    Representation.FULL: OperationContext.GET_FULL,
}

_GET_VARIANTS = {
    DefinitionVariant.DEFAULT: Representation.DEFAULT,
    DefinitionVariant.REF: Representation.REF,
    DefinitionVariant.FULL: Representation.FULL,
}


class DefinitionFactory:
    """Builds the definitions of one resource from its declared property sets."""

    def __init__(self, resolver: PropertyResolver, logger: BaseLogger):
        self.resolver = resolver
        self.logger = logger

    def get_model(self, descriptor: ResourceDescriptor, representation: Representation) -> SchemaModel:
        model = object_model()
        if representation in (Representation.DEFAULT, Representation.REF):
            model.property("uuid", string_property(description="Unique identifier of the resource"))
            model.property("display", string_property(description="Display name of the resource"))

        description = self._describe(
            descriptor, f"{representation.value} properties", "get_representation_description", representation
        )
        return self._fill(model, descriptor, description, _GET_CONTEXTS[representation])

    def create_model(self, descriptor: ResourceDescriptor, full: bool = False) -> SchemaModel:
        description = self._describe(descriptor, "creatable properties", "get_creatable_properties")
        context = OperationContext.CREATE_FULL if full else OperationContext.CREATE
        return self._fill(object_model(), descriptor, description, context)

    def update_model(self, descriptor: ResourceDescriptor) -> SchemaModel:
        description = self._describe(descriptor, "updatable properties", "get_updatable_properties")
        return self._fill(object_model(), descriptor, description, OperationContext.UPDATE)

    def create_definitions(self, descriptor: ResourceDescriptor,
                           family: DefinitionFamily) -> Dict[str, SchemaModel]:
        """All definitions of ``family`` for a resource, keyed by definition name."""
        definitions: Dict[str, SchemaModel] = {}
        for variant in FAMILY_VARIANTS[family]:
            name = definition_name(descriptor.name, descriptor.parent_name, family, variant)
            if family == DefinitionFamily.GET:
                definitions[name] = self.get_model(descriptor, _GET_VARIANTS[variant])
            elif family == DefinitionFamily.CREATE:
                definitions[name] = self.create_model(descriptor, full=variant == DefinitionVariant.FULL)
            else:
                definitions[name] = self.update_model(descriptor)
        return definitions

    def _describe(self, descriptor: ResourceDescriptor, what: str, method: str,
                  *args: Any) -> Optional[ResourceDescription]:
        """Call a description method of the handler; missing methods describe nothing."""
        query = getattr(descriptor.handler, method, None)
        if query is None:
            return None
        try:
            description = query(*args)
        except Exception as e:
            self.logger.log_warning(
                f"Could not get {what} for {descriptor.handler_class_name}: {str(e)}"
            )
            return None
        if description is not None and not isinstance(description, ResourceDescription):
            self.logger.log_warning(
                f"Could not get {what} for {descriptor.handler_class_name}: "
                f"expected a ResourceDescription, got {type(description).__name__}"
            )
            return None
        return description

    def _fill(self, model: SchemaModel, descriptor: ResourceDescriptor,
              description: Optional[ResourceDescription], context: OperationContext) -> SchemaModel:
        if description is None:
            return model
        for name in description.property_names():
            model.property(name, self.resolver.resolve_property(descriptor, name, context))
        return model
