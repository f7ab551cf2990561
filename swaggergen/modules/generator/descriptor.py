from dataclasses import dataclass
from typing import Any, Optional, get_args

from ..logging import BaseLogger
from ..resource import DelegatingSubclassHandler, get_resource_metadata, get_sub_resource_metadata
from ..resource.metadata import strip_version


@dataclass
class ResourceDescriptor:
    """Everything the generator needs to know about one resource handler."""
    handler: Any
    name: Optional[str] = None
    parent_name: Optional[str] = None
    supported_class: Optional[type] = None
    modeled_type: Optional[type] = None
    is_sub_resource: bool = False
    has_types_defined: bool = False
    is_delegating_subclass_handler: bool = False

    @property
    def handler_class_name(self) -> str:
        return type(self.handler).__name__

    @property
    def tag(self) -> Optional[str]:
        return self.parent_name if self.parent_name is not None else self.name

    @property
    def label(self) -> str:
        if self.parent_name:
            return f"{self.parent_name}/{self.name}"
        return self.name or self.handler_class_name

    @classmethod
    def from_handler(cls, handler: Any, logger: BaseLogger) -> "ResourceDescriptor":
        """
        Derive a descriptor from a handler instance.

        Missing or broken metadata is logged and leaves ``name`` unset.
        """
        handler_class = type(handler)
        descriptor = cls(
            handler=handler,
            is_delegating_subclass_handler=isinstance(handler, DelegatingSubclassHandler)
        )

        metadata = get_resource_metadata(handler_class)
        sub_metadata = get_sub_resource_metadata(handler_class)

        if metadata is not None:
            descriptor.name = strip_version(metadata.name)
            descriptor.supported_class = metadata.supported_class
        elif sub_metadata is not None:
            descriptor.is_sub_resource = True
            descriptor.supported_class = sub_metadata.supported_class
            parent_metadata = get_resource_metadata(sub_metadata.parent)
            if parent_metadata is None:
                logger.log_warning(
                    f"Could not get subresource information for {handler_class.__name__}: "
                    f"parent {sub_metadata.parent.__name__} declares no resource"
                )
            else:
                descriptor.name = sub_metadata.path
                descriptor.parent_name = strip_version(parent_metadata.name)
        else:
            logger.log_warning(f"Could not get resource name for {handler_class.__name__}")

        descriptor.modeled_type = find_modeled_type(handler_class) or descriptor.supported_class
        if descriptor.supported_class is None:
            descriptor.supported_class = descriptor.modeled_type

        has_types_defined = getattr(handler, "has_types_defined", None)
        if callable(has_types_defined):
            try:
                descriptor.has_types_defined = bool(has_types_defined())
            except Exception as e:
                logger.log_warning(f"has_types_defined failed for {handler_class.__name__}: {str(e)}")
                descriptor.has_types_defined = False

        return descriptor


def find_modeled_type(handler_class: type) -> Optional[type]:
    """
    Find the domain type a handler class is parameterised with.

    Walks the class hierarchy; at each level the parameterised bases are
    checked in declaration order and the first concrete class argument wins.
    """
    for klass in handler_class.__mro__:
        for base in klass.__dict__.get("__orig_bases__", ()):
            args = get_args(base)
            if args and isinstance(args[0], type):
                return args[0]
    return None
