"""Search parameters merged into the fetch-all path of a resource."""

from typing import Dict, List, Optional, Sequence

from ..logging import BaseLogger
from ..resource import SearchConfig, SearchHandler, SearchParameter
from ..swagger.schema import Parameter, PathItem
from .descriptor import ResourceDescriptor
from .naming import operation_title
from .operation_builder import OperationBuilder, search_query_parameter

SEARCH_RESOURCE_PREFIX = "v1/"


def search_resource_key(descriptor: ResourceDescriptor) -> str:
    """``v1/concept`` or ``v1/concept/name``: the key search configs are scoped by."""
    if descriptor.parent_name is not None:
        return f"{SEARCH_RESOURCE_PREFIX}{descriptor.parent_name}/{descriptor.name}"
    return f"{SEARCH_RESOURCE_PREFIX}{descriptor.name}"


def dependency_description(dependencies: Sequence[SearchParameter]) -> str:
    """``Must be used with a, b and c``."""
    description = "Must be used with " + ", ".join(p.name for p in dependencies)
    head, sep, tail = description.rpartition(", ")
    if sep:
        return f"{head} and {tail}"
    return description


class SearchAugmenter:
    """Adds search to the GET operation of a resource's collection path."""

    def __init__(self, search_handlers: Sequence[SearchHandler], operations: OperationBuilder,
                 logger: BaseLogger):
        self.operations = operations
        self.logger = logger
        self._configs = self._load_configs(search_handlers)

    def has_search_handler(self, descriptor: ResourceDescriptor) -> bool:
        return bool(self.configs_for(descriptor))

    def configs_for(self, descriptor: ResourceDescriptor) -> List[SearchConfig]:
        key = search_resource_key(descriptor)
        return [config for config in self._configs if config.supported_resource == key]

    def augment(self, descriptor: ResourceDescriptor, path_item: PathItem, supports_search: bool) -> bool:
        """
        Merge search into ``path_item``.

        Args:
            descriptor: The resource being assembled
            path_item: Its collection path
            supports_search: Result of the search capability probe

        Returns:
            True if the path's GET operation was created or changed
        """
        configs = self.configs_for(descriptor)
        if not configs and not supports_search:
            return False

        operation = path_item.get
        if operation is None:
            # free text is the only mechanism without a search config
            q = search_query_parameter(required=not configs)
            operation = self.operations.build_search_operation(descriptor, q)
            path_item.get = operation
        else:
            operation.summary = f"Fetch all non-retired {descriptor.name} resources or perform search"
            operation.description = "All search parameters are optional"
            operation.parameter(search_query_parameter())

        for name, parameter in self.search_parameters(configs).items():
            # a query may name a parameter the operation already carries, such as q or v
            if operation.find_parameter(name) is None:
                operation.parameter(parameter)
        operation.operation_id = "getAll" + operation_title(descriptor.handler_class_name, pluralize=True)
        return True

    def search_parameters(self, configs: Sequence[SearchConfig]) -> Dict[str, Parameter]:
        """Query parameters of all search queries, keyed by name; later queries win."""
        parameters: Dict[str, Parameter] = {}
        for config in configs:
            for query in config.search_queries:
                for required in query.required_parameters:
                    parameters[required.name] = Parameter(
                        name=required.name, in_location="query", type="string", required=False
                    )
                for optional in query.optional_parameters:
                    parameters[optional.name] = Parameter(
                        name=optional.name,
                        in_location="query",
                        type="string",
                        required=False,
                        description=dependency_description(query.required_parameters)
                    )
        return parameters

    def _load_configs(self, search_handlers: Sequence[SearchHandler]) -> List[SearchConfig]:
        configs: List[SearchConfig] = []
        for handler in search_handlers:
            config: Optional[SearchConfig] = None
            try:
                config = handler.get_search_config()
            except Exception as e:
                self.logger.log_warning(
                    f"Error reading search config of {type(handler).__name__}: {str(e)}"
                )
            if config is not None:
                configs.append(config)
        return configs
