from typing import Dict, Iterable, List, Optional, Tuple

from .descriptor import ResourceDescriptor
from .naming import FAMILY_VARIANTS, DefinitionFamily, schema_base_name


class ResourceIndex:
    """
    Lookup tables over all resource descriptors of a run.

    Built once, before any property is resolved, so references between
    resources do not depend on processing order.
    """

    def __init__(self, descriptors: Iterable[ResourceDescriptor]):
        self._resources: Dict[type, ResourceDescriptor] = {}
        self._sub_resources: Dict[type, ResourceDescriptor] = {}
        self._definitions: Dict[str, Tuple[ResourceDescriptor, DefinitionFamily]] = {}

        for descriptor in descriptors:
            if descriptor.name is None:
                continue
            if descriptor.supported_class is not None:
                table = self._sub_resources if descriptor.is_sub_resource else self._resources
                # first declaration of a type wins
                table.setdefault(descriptor.supported_class, descriptor)
            base = schema_base_name(descriptor.name, descriptor.parent_name)
            for family, variants in FAMILY_VARIANTS.items():
                for variant in variants:
                    self._definitions.setdefault(base + family.value + variant.value, (descriptor, family))

    def resource_for(self, supported_class: type) -> Optional[ResourceDescriptor]:
        """Descriptor declaring ``supported_class``, top-level resources first."""
        return self._resources.get(supported_class) or self._sub_resources.get(supported_class)

    def sub_resource_for(self, supported_class: type) -> Optional[ResourceDescriptor]:
        """Descriptor declaring ``supported_class``, sub-resources first."""
        return self._sub_resources.get(supported_class) or self._resources.get(supported_class)

    def resource_title_for(self, supported_class: type) -> Optional[str]:
        return _title(self.resource_for(supported_class))

    def sub_resource_title_for(self, supported_class: type) -> Optional[str]:
        return _title(self.sub_resource_for(supported_class))

    def definition_owner(self, definition_name: str) -> Optional[Tuple[ResourceDescriptor, DefinitionFamily]]:
        """Resource and family a definition name belongs to."""
        return self._definitions.get(definition_name)

    def domain_namespaces(self) -> List[str]:
        """Top-level packages of every indexed domain type."""
        namespaces: List[str] = []
        for supported_class in list(self._resources) + list(self._sub_resources):
            root = supported_class.__module__.split('.')[0]
            if root not in namespaces:
                namespaces.append(root)
        return namespaces


def _title(descriptor: Optional[ResourceDescriptor]) -> Optional[str]:
    if descriptor is None or descriptor.name is None:
        return None
    return schema_base_name(descriptor.name, descriptor.parent_name)
