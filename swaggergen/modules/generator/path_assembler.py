"""Composes the operations of one resource into its collection and item paths."""

from typing import Optional

from ..logging import BaseLogger
from ..resource import Capability
from ..swagger.schema import Parameter, PathItem, SwaggerSpec
from .descriptor import ResourceDescriptor
from .operation_builder import OperationBuilder, OperationKind
from .probe import CapabilityProber
from .search import SearchAugmenter


def collection_path(descriptor: ResourceDescriptor) -> str:
    if descriptor.parent_name is None:
        return f"/{descriptor.name}"
    return f"/{descriptor.parent_name}/{{parent-uuid}}/{descriptor.name}"


def item_path(descriptor: ResourceDescriptor) -> str:
    return collection_path(descriptor) + "/{uuid}"


class PathAssembler:
    """
    Builds up to two path entries per resource.

    Collection path: fetch-all, then search, then create. Item path:
    fetch-by-id, update, delete, then purge. A path without operations is
    never registered, and a resource whose operations fail to build
    registers neither path.
    """

    def __init__(self, document: SwaggerSpec, operations: OperationBuilder, search: SearchAugmenter,
                 prober: CapabilityProber, logger: BaseLogger):
        self.document = document
        self.operations = operations
        self.search = search
        self.prober = prober
        self.logger = logger

    def assemble(self, descriptor: ResourceDescriptor) -> None:
        if descriptor.is_delegating_subclass_handler:
            self.logger.log_debug(f"Skipping subclass handler {descriptor.handler_class_name}")
            return

        self.logger.log_resource(descriptor.name, descriptor.parent_name)

        root = PathItem()
        if self._implements(descriptor, Capability.FETCH_ALL):
            root.get = self._build(descriptor, "get", OperationKind.GET_ALL)
        self.search.augment(descriptor, root, self._implements(descriptor, Capability.SEARCH))
        if self._implements(descriptor, Capability.CREATE):
            root.post = self._build(descriptor, "post", OperationKind.CREATE)

        item = PathItem()
        if self._implements(descriptor, Capability.FETCH_BY_ID):
            item.get = self._build(descriptor, "get", OperationKind.GET_BY_UUID)
        if self._implements(descriptor, Capability.UPDATE):
            item.post = self._build(descriptor, "post", OperationKind.UPDATE)
        if self._implements(descriptor, Capability.DELETE):
            item.delete = self._build(descriptor, "delete", OperationKind.DELETE)
        if self._implements(descriptor, Capability.PURGE):
            self._add_purge(descriptor, item)

        # both paths are built before either is registered
        self._register(collection_path(descriptor), root)
        self._register(item_path(descriptor), item)

    def _add_purge(self, descriptor: ResourceDescriptor, item: PathItem) -> None:
        delete = item.delete
        if delete is None:
            item.delete = self._build(descriptor, "delete", OperationKind.PURGE)
            return

        delete.summary = "Delete or purge resource by uuid"
        delete.description = "The resource will be voided/retired unless purge = 'true'"
        delete.parameter(Parameter(name="purge", in_location="query", type="boolean", required=False))

    def _build(self, descriptor: ResourceDescriptor, verb: str, plain: OperationKind):
        return self.operations.build_operation(descriptor, verb, OperationKind.for_resource(plain, descriptor))

    def _implements(self, descriptor: ResourceDescriptor, capability: Capability) -> bool:
        return self.prober.is_implemented(descriptor.handler, capability)

    def _register(self, template: str, path_item: PathItem) -> Optional[PathItem]:
        if path_item.is_empty():
            return None
        self.document.path(template, path_item)
        self.logger.log_path(template, [verb.upper() for verb, _ in path_item.operations()])
        return path_item
